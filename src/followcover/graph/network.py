"""FollowGraph - The follow network and its greedy cover.

This module provides the container that owns every Vertex, keeps the
in-degree index current as edges arrive, and computes a greedy
approximation of a minimum dominating set over the network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from followcover.graph.errors import InvalidArgumentError, VertexNotFoundError
from followcover.graph.vertex import Vertex, VertexRef, vertex_key
from followcover.utilities.sorting import sort_by_value

logger = logging.getLogger(__name__)


def _require_id(vertex_id: object) -> int:
    """Validate that ``vertex_id`` is usable as a vertex id."""
    if vertex_id is None:
        raise InvalidArgumentError("Vertex id cannot be None")
    # bool is an int subclass but never a meaningful vertex id
    if isinstance(vertex_id, bool) or not isinstance(vertex_id, int):
        raise InvalidArgumentError(
            f"Vertex id must be an integer, got {type(vertex_id).__name__}"
        )
    return vertex_id


@dataclass
class FollowGraph:
    """A directed "follows" network.

    Vertices are registered by id with ``add_vertex`` and connected with
    ``add_edge``. The graph is append-only: vertices and edges are never
    removed. Every Vertex returned to a caller is a snapshot.

    The in-degree index only holds vertices that have received at least one
    edge. Its insertion order (first edge received) is the tie-break order
    used by ``find_minimum_cover``.
    """

    # Internal storage (prefixed) - excluded from constructor
    _vertices: dict[int, Vertex] = field(default_factory=dict, init=False, repr=False)
    _in_degree: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    def add_vertex(self, vertex_id: int) -> None:
        """Register a vertex. Registering an existing id is a no-op.

        Raises:
            InvalidArgumentError: If ``vertex_id`` is None or not an int.
        """
        vertex_id = _require_id(vertex_id)
        if vertex_id not in self._vertices:
            self._vertices[vertex_id] = Vertex(vertex_id)

    def add_edge(self, source_id: int, target_id: int) -> None:
        """Add a directed edge ``source_id -> target_id``.

        Duplicate edges and self-edges are accepted and counted.

        Args:
            source_id: Id of the follower.
            target_id: Id of the followed vertex.

        Raises:
            InvalidArgumentError: If either id is None, not an int, or not
                registered.
        """
        source_id = _require_id(source_id)
        target_id = _require_id(target_id)
        if source_id not in self._vertices or target_id not in self._vertices:
            raise InvalidArgumentError(
                f"Both vertices must exist in the graph before adding an edge "
                f"({source_id} -> {target_id})"
            )

        source = self._vertices[source_id]
        target = self._vertices[target_id]
        target.add_incoming_edge(source)
        self._in_degree[target_id] = self._in_degree.get(target_id, 0) + 1

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def vertex(self, vertex_id: int) -> Vertex:
        """Return a snapshot of the vertex with ``vertex_id``.

        Raises:
            InvalidArgumentError: If ``vertex_id`` is None or not an int.
            VertexNotFoundError: If no such vertex is registered.
        """
        vertex_id = _require_id(vertex_id)
        if vertex_id not in self._vertices:
            raise VertexNotFoundError(f"Vertex {vertex_id} not found", key=vertex_id)
        return self._vertices[vertex_id].copy()

    def has_vertex(self, vertex_id: int) -> bool:
        """Check if a vertex id is registered."""
        return vertex_id in self._vertices

    def iter_vertex_ids(self) -> Iterator[int]:
        """Iterate registered vertex ids in registration order."""
        yield from self._vertices

    def vertex_count(self) -> int:
        """Return the number of registered vertices."""
        return len(self._vertices)

    def edge_count(self) -> int:
        """Return the number of edges, counting multi-edges."""
        return sum(self._in_degree.values())

    def in_degree(self, vertex: VertexRef) -> int:
        """Return the in-degree of ``vertex``.

        Args:
            vertex: A Vertex or a vertex id.

        Raises:
            InvalidArgumentError: If ``vertex`` is None.
            VertexNotFoundError: If ``vertex`` never received an edge. There
                is no default of zero; an unobserved vertex is an error.
        """
        if vertex is None:
            raise InvalidArgumentError("Vertex cannot be None")
        key = vertex_key(vertex)
        if key not in self._in_degree:
            raise VertexNotFoundError(f"No in-degree recorded for vertex {key}", key=key)
        return self._in_degree[key]

    def in_degrees(self) -> dict[int, int]:
        """Return a copy of the in-degree index (observed vertices only)."""
        return dict(self._in_degree)

    def sorted_in_degrees(
        self, limit: int | None = None, descending: bool = True
    ) -> list[tuple[int, int]]:
        """Return ``(vertex_id, in_degree)`` pairs ordered by in-degree.

        Args:
            limit: Keep only the first ``limit`` pairs when given.
            descending: Highest in-degree first when True.
        """
        ordered = list(sort_by_value(self._in_degree, descending=descending).items())
        if limit is not None:
            ordered = ordered[: max(limit, 0)]
        return ordered

    # ─────────────────────────────────────────────────────────────────────────
    # Export
    # ─────────────────────────────────────────────────────────────────────────

    def export(self) -> dict[int, set[int]]:
        """Flatten the graph into an adjacency mapping.

        Each vertex maps to the set of end ids of its own stored edges.
        Stored edges are the vertex's incoming edges, so a vertex with any
        incoming edge maps to ``{its own id}`` and every other vertex maps
        to an empty set.
        """
        graph: dict[int, set[int]] = {}
        for vertex_id, vertex in self._vertices.items():
            graph[vertex_id] = {edge.end_id for edge in vertex.iter_edges()}
        return graph

    # ─────────────────────────────────────────────────────────────────────────
    # Greedy cover
    # ─────────────────────────────────────────────────────────────────────────

    def find_minimum_cover(self) -> set[int]:
        """Find a small set of vertices that covers the graph.

        Walks the vertices in descending in-degree order (ties in in-degree
        index order). Each vertex not already chosen joins the cover and is
        marked visited together with every vertex that points into it. The
        walk stops once every registered vertex has been visited.

        Vertices that never received an edge are not part of the walk, so
        they are never chosen and are only visited as sources of a chosen
        vertex. The result is a heuristic cover, not a minimum one.

        Returns:
            Ids of the vertices in the cover.
        """
        total = self.vertex_count()
        visited: set[int] = set()
        cover: set[int] = set()

        for vertex_id in sort_by_value(self._in_degree, descending=True):
            if len(visited) == total:
                break
            if vertex_id not in cover:
                self._mark_covered(vertex_id, visited, cover)

        logger.debug(
            "Cover of %d vertices; %d of %d vertices visited",
            len(cover),
            len(visited),
            total,
        )
        return cover

    def _mark_covered(self, vertex_id: int, visited: set[int], cover: set[int]) -> None:
        """Add a vertex to the cover and mark it and its sources visited."""
        visited.add(vertex_id)
        cover.add(vertex_id)
        visited.update(self._vertices[vertex_id].sources())


__all__ = ["FollowGraph"]
