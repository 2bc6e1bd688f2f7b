"""Graph Serialization - Export FollowGraph data for reporting.

This module provides functions to turn a FollowGraph, its in-degree
index, and a computed cover into JSON-compatible dicts, CSV, and the
plain-text tables printed by the CLI.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from followcover.graph.network import FollowGraph


def serialize_export(graph: FollowGraph) -> dict[str, list[int]]:
    """Serialize ``graph.export()`` to a JSON-compatible dict.

    Keys become strings (JSON object keys) and neighbor sets become sorted
    lists so the output is deterministic.
    """
    return {
        str(vertex_id): sorted(neighbors)
        for vertex_id, neighbors in sorted(graph.export().items())
    }


def serialize_in_degrees(
    graph: FollowGraph, limit: int | None = None, descending: bool = True
) -> list[dict[str, int]]:
    """Serialize the sorted in-degree index.

    Args:
        graph: The graph to report on.
        limit: Keep only the first ``limit`` entries when given.
        descending: Highest in-degree first when True.

    Returns:
        List of ``{"id": ..., "in_degree": ...}`` dicts in sorted order.
    """
    return [
        {"id": vertex_id, "in_degree": degree}
        for vertex_id, degree in graph.sorted_in_degrees(limit=limit, descending=descending)
    ]


def serialize_cover(graph: FollowGraph, cover: Iterable[int]) -> dict[str, Any]:
    """Serialize a cover result with summary metadata.

    ``untracked_vertices`` counts registered vertices that never received
    an edge; the greedy walk never considers those.
    """
    cover_ids = sorted(cover)
    observed = graph.in_degrees()
    untracked = sum(1 for vertex_id in graph.iter_vertex_ids() if vertex_id not in observed)
    return {
        "cover": cover_ids,
        "cover_size": len(cover_ids),
        "vertex_count": graph.vertex_count(),
        "untracked_vertices": untracked,
    }


def to_csv(graph: FollowGraph) -> str:
    """Generate a CSV export of the adjacency mapping.

    One ``vertex,neighbor`` row per adjacency entry. Vertices with an empty
    adjacency set get a single row with an empty neighbor column, so every
    vertex appears at least once.
    """
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL)
    writer.writerow(["vertex", "neighbor"])

    for vertex_id, neighbors in sorted(graph.export().items()):
        if not neighbors:
            writer.writerow([vertex_id, ""])
            continue
        for neighbor in sorted(neighbors):
            writer.writerow([vertex_id, neighbor])

    return output.getvalue()


def format_in_degree_table(pairs: Iterable[tuple[int, int]]) -> str:
    """Render ``(vertex_id, in_degree)`` pairs as ``"<id> (<degree>)"`` lines."""
    return "\n".join(f"{vertex_id} ({degree})" for vertex_id, degree in pairs)


def format_degree_listing(graph: FollowGraph) -> str:
    """Render every registered vertex with its in-degree, ``-`` if unobserved."""
    observed = graph.in_degrees()
    lines = []
    for vertex_id in sorted(graph.iter_vertex_ids()):
        degree = observed.get(vertex_id)
        lines.append(f"{vertex_id} {degree if degree is not None else '-'}")
    return "\n".join(lines)


__all__ = [
    "serialize_export",
    "serialize_in_degrees",
    "serialize_cover",
    "to_csv",
    "format_in_degree_table",
    "format_degree_listing",
]
