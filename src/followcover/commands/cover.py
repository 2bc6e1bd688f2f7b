"""
followcover.commands.cover - Compute the greedy cover of a follow network.
"""

import argparse
import json

from followcover.commands.common import load_configuration, load_graph_for_args
from followcover.graph.serialize import serialize_cover


def run(args: argparse.Namespace) -> int:
    """Run the cover command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph_for_args(args, config)
    if graph is None:
        return 1

    report = serialize_cover(graph, graph.find_minimum_cover())

    if args.json:
        print(json.dumps(report, indent=2))
        return 0

    print("Vertices in a min set:")
    for vertex_id in report["cover"]:
        print(vertex_id)
    print(
        f"Minimum number of vertices: {report['cover_size']} of {report['vertex_count']}"
    )
    if report["untracked_vertices"] and not args.quiet:
        print(
            f"Note: {report['untracked_vertices']} vertices have no followers "
            "and were not considered"
        )
    return 0
