"""Errors raised by the follow graph and its loader.

Each error also derives from the builtin exception callers would expect
(``ValueError`` for bad input, ``KeyError`` for missing lookups), so code
written against the builtins keeps working.
"""

from __future__ import annotations


class FollowGraphError(Exception):
    """Base class for all follow graph errors."""


class InvalidArgumentError(FollowGraphError, ValueError):
    """An operation was given a missing or unusable vertex identifier.

    Raised for ``None`` or non-integer ids, and by ``add_edge`` when either
    endpoint has not been registered with ``add_vertex``.
    """


class VertexNotFoundError(FollowGraphError, KeyError):
    """A lookup referenced a vertex that was never registered or observed.

    Attributes:
        key: The id that could not be resolved.
    """

    def __init__(self, message: str, key: object = None) -> None:
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class EdgeListFormatError(FollowGraphError, ValueError):
    """A line of an edge-list file could not be parsed.

    Attributes:
        source: Name of the input (file path or ``"<lines>"``).
        line_number: 1-based line number of the bad line.
        line: The raw line content.
    """

    def __init__(self, source: str, line_number: int, line: str, reason: str) -> None:
        self.source = source
        self.line_number = line_number
        self.line = line
        super().__init__(f"{source}:{line_number}: {reason}: {line.strip()!r}")


__all__ = [
    "FollowGraphError",
    "InvalidArgumentError",
    "VertexNotFoundError",
    "EdgeListFormatError",
]
