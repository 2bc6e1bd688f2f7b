"""
followcover.commands.export - Export the adjacency mapping as JSON or CSV.
"""

import argparse
import json
import sys

from followcover.commands.common import load_configuration, load_graph_for_args
from followcover.graph.serialize import serialize_export, to_csv


def run(args: argparse.Namespace) -> int:
    """Run the export command."""
    config = load_configuration(args)
    if config is None:
        return 1
    graph = load_graph_for_args(args, config)
    if graph is None:
        return 1

    if args.format == "csv":
        content = to_csv(graph)
    else:
        content = json.dumps(serialize_export(graph), indent=2) + "\n"

    if args.output:
        try:
            args.output.write_text(content, encoding="utf-8")
        except OSError as e:
            print(f"Error writing {args.output}: {e}", file=sys.stderr)
            return 1
        if not args.quiet:
            print(f"Wrote {graph.vertex_count()} vertices to {args.output}")
    else:
        sys.stdout.write(content)
    return 0
