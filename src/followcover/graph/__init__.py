"""Graph module - Follow network data structures and algorithms.

Exports:
- Vertex: A user, with its incoming edges and per-source counts
- Edge: Immutable directed edge between two vertices
- FollowGraph: Vertex registry, in-degree index, export, and greedy cover
- FollowGraphError, InvalidArgumentError, VertexNotFoundError,
  EdgeListFormatError: Error hierarchy
- LoadStats, load_edges, load_graph: Edge-list ingestion
"""

from followcover.graph.errors import (
    EdgeListFormatError,
    FollowGraphError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from followcover.graph.loader import LoadStats, load_edges, load_graph
from followcover.graph.network import FollowGraph
from followcover.graph.relations import Edge
from followcover.graph.vertex import Vertex

__all__ = [
    "Vertex",
    "Edge",
    "FollowGraph",
    "FollowGraphError",
    "InvalidArgumentError",
    "VertexNotFoundError",
    "EdgeListFormatError",
    "LoadStats",
    "load_edges",
    "load_graph",
]
