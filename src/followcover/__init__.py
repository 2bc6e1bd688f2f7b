"""
followcover - Greedy covering sets for directed follow networks

followcover loads a "who follows whom" edge list, keeps per-account
in-degree bookkeeping, and picks a compact set of accounts such that every
account is either picked or follows a picked one.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("followcover")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from followcover.graph import (
    Edge,
    FollowGraph,
    InvalidArgumentError,
    Vertex,
    VertexNotFoundError,
    load_graph,
)
from followcover.utilities.sorting import sort_by_value

__all__ = [
    "__version__",
    "Edge",
    "FollowGraph",
    "InvalidArgumentError",
    "Vertex",
    "VertexNotFoundError",
    "load_graph",
    "sort_by_value",
]
