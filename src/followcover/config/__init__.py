"""
followcover.config - Configuration loading and defaults
"""

from followcover.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from followcover.config.loader import (
    apply_env_overrides,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
    parse_toml_document,
)

__all__ = [
    "load_config",
    "find_config_file",
    "merge_configs",
    "get_config",
    "apply_env_overrides",
    "parse_toml_document",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
]
