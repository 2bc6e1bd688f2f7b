"""
followcover.commands.common - Helpers shared by the CLI commands.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from tomlkit.exceptions import ParseError

from followcover.config import get_config
from followcover.graph import FollowGraph, FollowGraphError, load_graph

logger = logging.getLogger(__name__)


def load_configuration(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """Resolve configuration for a command, or None after reporting an error."""
    try:
        return get_config(getattr(args, "config", None))
    except (OSError, ParseError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return None


def load_graph_for_args(
    args: argparse.Namespace, config: Dict[str, Any]
) -> Optional[FollowGraph]:
    """Build a FollowGraph from ``args.edge_file`` using the loader config.

    Returns:
        The populated graph, or None after reporting the error on stderr.
    """
    loader_config = config.get("loader", {})
    graph = FollowGraph()
    try:
        load_graph(
            graph,
            args.edge_file,
            delimiter=loader_config.get("delimiter") or None,
            comment_prefix=loader_config.get("comment_prefix", "#"),
            skip_malformed=bool(loader_config.get("skip_malformed", False)),
        )
    except OSError as e:
        print(f"Error reading edge list: {e}", file=sys.stderr)
        return None
    except FollowGraphError as e:
        print(f"Error loading graph: {e}", file=sys.stderr)
        return None

    logger.debug("Graph ready: %d vertices", graph.vertex_count())
    return graph
