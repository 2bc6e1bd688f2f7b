"""Vertex - A user in the follow network.

A Vertex only records what points *into* it: the incoming edges, the
distinct source vertices, and how many edges each source contributed.
All accessors hand out copies so the owning graph's state cannot be
changed from outside.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from followcover.graph.errors import VertexNotFoundError
from followcover.graph.relations import Edge

VertexRef = Union["Vertex", int]


def vertex_key(ref: VertexRef) -> int:
    """Resolve a Vertex or a bare id to the id used as a map key."""
    if isinstance(ref, Vertex):
        return ref.id
    return ref


@dataclass(eq=False)
class Vertex:
    """A vertex identified by an externally assigned integer id.

    Two Vertex instances with the same id compare equal and hash alike, so
    a snapshot can stand in for the graph-owned original as a dict or set
    key.

    Attributes:
        id: Unique id within the owning graph.
    """

    id: int

    # Internal storage (prefixed)
    _incoming_edges: list[Edge] = field(default_factory=list, repr=False)
    _sources: set[int] = field(default_factory=set, repr=False)
    _source_counts: dict[int, int] = field(default_factory=dict, repr=False)

    def add_incoming_edge(self, source: Vertex) -> Edge:
        """Record a directed edge from ``source`` into this vertex.

        ``source`` itself is not modified.

        Args:
            source: The vertex the edge starts from.

        Returns:
            The created Edge.
        """
        edge = Edge(source, self)
        self._incoming_edges.append(edge)
        self._sources.add(source.id)
        self._source_counts[source.id] = self._source_counts.get(source.id, 0) + 1
        return edge

    def edge_count_from(self, other: VertexRef) -> int:
        """Return how many edges ``other`` has into this vertex.

        Args:
            other: The source vertex, or its id.

        Raises:
            VertexNotFoundError: If ``other`` never pointed to this vertex.
        """
        key = vertex_key(other)
        if key not in self._source_counts:
            raise VertexNotFoundError(
                f"Vertex {key} has no edges into vertex {self.id}", key=key
            )
        return self._source_counts[key]

    @property
    def in_degree(self) -> int:
        """Number of incoming edges, counting multi-edges."""
        return len(self._incoming_edges)

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over incoming edges in insertion order."""
        yield from self._incoming_edges

    def edges(self) -> list[Edge]:
        """Return a copy of the incoming edge list."""
        return list(self._incoming_edges)

    def sources(self) -> set[int]:
        """Return a copy of the set of distinct source ids."""
        return set(self._sources)

    def source_counts(self) -> dict[int, int]:
        """Return a copy of the per-source edge multiplicities."""
        return dict(self._source_counts)

    def copy(self) -> Vertex:
        """Return an independent snapshot of this vertex.

        Edges are immutable, so the snapshot shares Edge instances but owns
        its own list, set, and dict.
        """
        return Vertex(
            id=self.id,
            _incoming_edges=self.edges(),
            _sources=self.sources(),
            _source_counts=self.source_counts(),
        )

    def __eq__(self, other: object) -> bool:
        """Check equality based on id."""
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on id."""
        return hash(self.id)


__all__ = ["Vertex", "VertexRef", "vertex_key"]
