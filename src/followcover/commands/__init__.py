"""
followcover.commands - CLI command implementations
"""

__all__ = [
    "common",
    "config_cmd",
    "cover",
    "degrees",
    "export",
    "stats",
]
