"""
followcover.commands.stats - Summarise a follow network.
"""

import argparse
import json

from followcover.commands.common import load_configuration, load_graph_for_args


def run(args: argparse.Namespace) -> int:
    """Run the stats command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph_for_args(args, config)
    if graph is None:
        return 1

    summary = {
        "vertices": graph.vertex_count(),
        "edges": graph.edge_count(),
        "followed_vertices": len(graph.in_degrees()),
    }

    if args.json:
        print(json.dumps(summary, indent=2))
        return 0

    print(f"Vertices:           {summary['vertices']}")
    print(f"Edges:              {summary['edges']}")
    print(f"Followed vertices:  {summary['followed_vertices']}")
    return 0
