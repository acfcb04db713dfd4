"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import WtreeConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per process
_config_cache: WtreeConfig | None = None

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "WTREE_BASE_BRANCH": ("worktree", "base_branch"),
    "WTREE_BRANCH_PREFIX": ("worktree", "branch_prefix"),
    "WTREE_DIR_NAME": ("worktree", "dir_name"),
}


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
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/wtree/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "wtree" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .wtree.json in the working directory
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".wtree.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"worktree": {"base_branch": "main"}}, {"worktree": {"dir_name": "wt"}})
        {'worktree': {'base_branch': 'main', 'dir_name': 'wt'}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            logger.warning("Ignoring config at %s: top level is not an object", path)
            return None
    except (json.JSONDecodeError, OSError) as e:
        # Config system should be resilient to a broken file
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        WTREE_BASE_BRANCH - overrides worktree.base_branch
        WTREE_BRANCH_PREFIX - overrides worktree.branch_prefix
        WTREE_DIR_NAME - overrides worktree.dir_name

    Empty values are ignored.
    """
    result = config_dict.copy()

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        section_dict = dict(result.get(section) or {})
        section_dict[key] = value
        result[section] = section_dict

    return result


def get_default_config() -> dict[str, Any]:
    """Get hardcoded default configuration."""
    return {
        "worktree": {
            "base_branch": "main",
            "branch_prefix": "feature/",
            "dir_name": "worktrees",
        },
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> WtreeConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (WTREE_*)
        2. Project config (.wtree.json)
        3. User config (~/.config/wtree/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Directory to load .wtree.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated WtreeConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    user_config_path = get_user_config_path()
    if user_config := load_json_file(user_config_path):
        logger.debug("Merging user config from %s", user_config_path)
        merged = deep_merge(merged, user_config)

    project_config_path = get_project_config_path(project_dir)
    if project_config := load_json_file(project_config_path):
        logger.debug("Merging project config from %s", project_config_path)
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    config = WtreeConfig(**merged)
    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
