"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import TallyConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per process
_config_cache: TallyConfig | None = None

_FALSE_VALUES = ("false", "0", "no", "")


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """Get path to ~/.config/tally/config.json (or XDG equivalent)."""
    return get_xdg_config_home() / "tally" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .tally.json in the given directory
    """
    return (cwd or Path.cwd()) / ".tally.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Recursively merge ``override`` into a copy of ``base``.

    Nested dicts are merged key by key; any other value in ``override``
    replaces the one in ``base``.

    Example:
        >>> deep_merge({"cli": {"steps": 1, "strict": False}}, {"cli": {"steps": 5}})
        {'cli': {'steps': 5, 'strict': False}}
    """
    result = dict(base)
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON object from a file.

    Returns:
        Parsed object, or None if the file is missing, unreadable, invalid
        JSON, or not a JSON object
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config at %s: top level must be a JSON object", path)
        return None
    return data


def _env_flag(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        TALLY_DEBUG - overrides debug
        TALLY_STEPS - overrides cli.steps
        TALLY_STRICT - overrides cli.strict

    Invalid values are logged and ignored.

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        New configuration dictionary with env var overrides applied
    """
    result = copy.deepcopy(config_dict)

    if (debug_str := os.environ.get("TALLY_DEBUG")) is not None:
        result["debug"] = _env_flag(debug_str)

    if steps_str := os.environ.get("TALLY_STEPS"):
        try:
            steps = int(steps_str)
        except ValueError:
            logger.warning("Invalid TALLY_STEPS value '%s', ignoring", steps_str)
        else:
            if steps < 1:
                logger.warning("TALLY_STEPS must be >= 1, got %d, ignoring", steps)
            else:
                result.setdefault("cli", {})["steps"] = steps

    if (strict_str := os.environ.get("TALLY_STRICT")) is not None:
        result.setdefault("cli", {})["strict"] = _env_flag(strict_str)

    return result


def get_default_config() -> dict[str, Any]:
    """Get hardcoded default configuration."""
    return {
        "debug": False,
        "cli": {"steps": 1, "strict": False},
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> TallyConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (TALLY_*)
        2. Project config (.tally.json)
        3. User config (~/.config/tally/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .tally.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated TallyConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation

    Example:
        >>> config = load_config()
        >>> config.cli.steps
        1
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    config = TallyConfig(**merged)
    _config_cache = config
    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
