"""Stable ordering of mappings by value."""

from __future__ import annotations

from typing import Hashable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def sort_by_value(mapping: Mapping[K, V], descending: bool = False) -> dict[K, V]:
    """Return a new dict with the entries of ``mapping`` ordered by value.

    The sort is stable in both directions: entries with equal values keep
    the relative order they had in ``mapping``.

    Args:
        mapping: Any mapping whose values are mutually comparable.
        descending: Largest values first when True.

    Returns:
        An insertion-ordered dict; ``mapping`` is left untouched.

    Example:
        >>> sort_by_value({"a": 1, "b": 3, "c": 1}, descending=True)
        {'b': 3, 'a': 1, 'c': 1}
    """
    # sorted() with reverse=True still preserves the order of equal items.
    ordered = sorted(mapping.items(), key=lambda item: item[1], reverse=descending)
    return dict(ordered)


__all__ = ["sort_by_value"]
