"""
followcover.config.loader - Find, parse, and merge configuration.

Configuration is resolved in three layers, later layers winning:
built-in defaults, the nearest ``.followcover.toml``, and environment
variables named ``FOLLOWCOVER_<SECTION>_<KEY>``.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import tomlkit

from followcover.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX


def find_config_file(start: Path) -> Optional[Path]:
    """Find the nearest config file, walking up from ``start``.

    Args:
        start: Directory to begin the search in.

    Returns:
        Path to the config file, or None if there is none up to the root.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def parse_toml_document(text: str) -> Dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    return tomlkit.parse(text).unwrap()


def merge_configs(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``.

    Nested tables are merged key by key; any other value in ``override``
    replaces the value in ``base``.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(raw: str) -> Any:
    """Convert an environment variable string to a typed value.

    JSON arrays and objects, booleans, and integers are recognised; anything
    else (including malformed JSON) is returned unchanged.
    """
    stripped = raw.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        return raw


def apply_env_overrides(
    config: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Apply ``FOLLOWCOVER_<SECTION>_<KEY>`` overrides to ``config``.

    Only sections that already exist in ``config`` are considered, so the
    first underscore after the section name separates section from key.
    """
    environ = os.environ if environ is None else environ
    result = copy.deepcopy(dict(config))
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        rest = name[len(ENV_PREFIX):].lower()
        for section in result:
            prefix = f"{section}_"
            if isinstance(result[section], dict) and rest.startswith(prefix):
                key = rest[len(prefix):]
                if key:
                    result[section][key] = _try_parse_env_value(raw)
                break
    return result


def load_config(path: Path) -> Dict[str, Any]:
    """Load a config file and merge it over the defaults.

    Environment overrides are not applied here; see ``get_config``.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    user_config = parse_toml_document(path.read_text(encoding="utf-8"))
    return merge_configs(DEFAULT_CONFIG, user_config)


def get_config(config_path: Optional[Path] = None, start: Optional[Path] = None) -> Dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit config file; searched for from ``start`` when None.
        start: Directory to search from; defaults to the working directory.

    Returns:
        Defaults, merged with the config file if one was found, with
        environment overrides applied last.
    """
    if config_path is None:
        config_path = find_config_file(start or Path.cwd())

    if config_path is not None:
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)
    return apply_env_overrides(config)
