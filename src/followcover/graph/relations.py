"""Relations - Directed follow edges between vertices.

An Edge links a source vertex (the follower) to a target vertex (the
account being followed). Edges are immutable once created and never hand
out the vertices they hold: ``start()`` and ``end()`` return fresh copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from followcover.graph.vertex import Vertex


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed edge ``start -> end``.

    The end vertex is the one whose in-degree the edge counts toward.
    Multi-edges are represented as separate, equal Edge instances.

    Attributes:
        start_id: Id of the source vertex.
        end_id: Id of the target vertex.
    """

    _start: Vertex = field(repr=False)
    _end: Vertex = field(repr=False)

    @property
    def start_id(self) -> int:
        return self._start.id

    @property
    def end_id(self) -> int:
        return self._end.id

    def start(self) -> Vertex:
        """Return an independent copy of the source vertex."""
        return self._start.copy()

    def end(self) -> Vertex:
        """Return an independent copy of the target vertex."""
        return self._end.copy()

    def __eq__(self, other: object) -> bool:
        """Check equality based on endpoint ids."""
        if not isinstance(other, Edge):
            return NotImplemented
        return self.start_id == other.start_id and self.end_id == other.end_id

    def __hash__(self) -> int:
        """Hash based on endpoint ids."""
        return hash((self.start_id, self.end_id))

    def __repr__(self) -> str:
        return f"Edge({self.start_id} -> {self.end_id})"


__all__ = ["Edge"]
