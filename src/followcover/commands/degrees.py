"""
followcover.commands.degrees - In-degree listings.

``degrees`` prints every vertex with its in-degree; ``top`` prints the
vertices with the highest (or lowest) in-degrees.
"""

import argparse
import json
import sys

from followcover.commands.common import load_configuration, load_graph_for_args
from followcover.graph.serialize import (
    format_degree_listing,
    format_in_degree_table,
    serialize_in_degrees,
)


def run(args: argparse.Namespace) -> int:
    """Run the degrees command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph_for_args(args, config)
    if graph is None:
        return 1

    listing = format_degree_listing(graph)
    if listing:
        print(listing)
    return 0


def run_top(args: argparse.Namespace) -> int:
    """Run the top command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph_for_args(args, config)
    if graph is None:
        return 1

    report_config = config.get("report", {})
    limit = args.count if args.count is not None else int(report_config.get("top", 10))
    if limit < 0:
        print(f"Error: report.top must be zero or more, got {limit}", file=sys.stderr)
        return 1
    if args.ascending:
        descending = False
    else:
        descending = bool(report_config.get("descending", True))

    if args.json:
        print(json.dumps(serialize_in_degrees(graph, limit, descending), indent=2))
        return 0

    order = "highest" if descending else "lowest"
    print(f"Top {limit} vertices sorted by the {order} in-degrees:")
    table = format_in_degree_table(graph.sorted_in_degrees(limit=limit, descending=descending))
    if table:
        print(table)
    return 0
