"""Edge-list loader.

Reads a line-oriented edge list into a FollowGraph. Each line names one
follow relation as ``<source> <target>``; further columns (timestamps,
weights in some public datasets) are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from followcover.graph.errors import EdgeListFormatError
from followcover.graph.network import FollowGraph

logger = logging.getLogger(__name__)


@dataclass
class LoadStats:
    """Counters collected while loading an edge list.

    Attributes:
        lines_read: Every line seen, including blanks and comments.
        edges_added: Edges passed to ``FollowGraph.add_edge``.
        lines_skipped: Malformed lines skipped under ``skip_malformed``.
    """

    lines_read: int = 0
    edges_added: int = 0
    lines_skipped: int = 0


def _parse_line(line: str, delimiter: str | None) -> tuple[int, int]:
    """Split a line into ``(source, target)`` ids.

    Raises:
        ValueError: With a short reason if the line is not an edge.
    """
    parts = [p.strip() for p in line.split(delimiter or None)]
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError("expected two vertex ids")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError("vertex ids must be integers") from None


def load_edges(
    graph: FollowGraph,
    lines: Iterable[str],
    *,
    delimiter: str | None = None,
    comment_prefix: str = "#",
    skip_malformed: bool = False,
    source_name: str = "<lines>",
) -> LoadStats:
    """Add every edge in ``lines`` to ``graph``.

    Both endpoints of an edge are registered before the edge is added.

    Args:
        graph: The graph to populate.
        lines: Edge-list lines, with or without trailing newlines.
        delimiter: Column separator; any whitespace when None or empty.
        comment_prefix: Lines starting with this are ignored. Empty disables.
        skip_malformed: Log and skip bad lines instead of raising.
        source_name: Name used in error messages and log records.

    Returns:
        LoadStats for the run.

    Raises:
        EdgeListFormatError: On a malformed line, unless ``skip_malformed``.
    """
    stats = LoadStats()
    for line_number, line in enumerate(lines, start=1):
        stats.lines_read += 1
        stripped = line.strip()
        if not stripped or (comment_prefix and stripped.startswith(comment_prefix)):
            continue

        try:
            source, target = _parse_line(stripped, delimiter)
        except ValueError as e:
            if not skip_malformed:
                raise EdgeListFormatError(source_name, line_number, line, str(e)) from None
            logger.warning("Skipping %s:%d: %s", source_name, line_number, e)
            stats.lines_skipped += 1
            continue

        graph.add_vertex(source)
        graph.add_vertex(target)
        graph.add_edge(source, target)
        stats.edges_added += 1

    return stats


def load_graph(
    graph: FollowGraph,
    path: str | Path,
    *,
    delimiter: str | None = None,
    comment_prefix: str = "#",
    skip_malformed: bool = False,
) -> LoadStats:
    """Load an edge-list file into ``graph``.

    Args:
        graph: The graph to populate.
        path: Path to the edge-list file.
        delimiter: Column separator; any whitespace when None or empty.
        comment_prefix: Lines starting with this are ignored.
        skip_malformed: Log and skip bad lines instead of raising.

    Returns:
        LoadStats for the file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        EdgeListFormatError: On a malformed line, unless ``skip_malformed``.
    """
    path = Path(path)
    # Undecodable bytes decode to U+FFFD and fail parsing as a malformed line
    with path.open("r", encoding="utf-8", errors="replace") as f:
        stats = load_edges(
            graph,
            f,
            delimiter=delimiter,
            comment_prefix=comment_prefix,
            skip_malformed=skip_malformed,
            source_name=str(path),
        )

    logger.info(
        "Loaded %s: %d edges, %d vertices, %d lines skipped",
        path,
        stats.edges_added,
        graph.vertex_count(),
        stats.lines_skipped,
    )
    return stats


__all__ = ["LoadStats", "load_edges", "load_graph"]
