"""
followcover.commands.config_cmd - Inspect the effective configuration.
"""

import argparse
from pathlib import Path

import tomlkit

from followcover.commands.common import load_configuration
from followcover.config import find_config_file


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    if args.config_action == "path":
        return run_path(args)
    if args.config_action == "show":
        return run_show(args)

    print("Usage: followcover config {show|path}")
    return 1


def run_path(args: argparse.Namespace) -> int:
    """Print the config file in effect."""
    config_path = args.config or find_config_file(Path.cwd())
    if config_path is None:
        print("(no config file, using defaults)")
    else:
        print(config_path)
    return 0


def run_show(args: argparse.Namespace) -> int:
    """Print the effective configuration as TOML."""
    config = load_configuration(args)
    if config is None:
        return 1
    print(tomlkit.dumps(config), end="")
    return 0
