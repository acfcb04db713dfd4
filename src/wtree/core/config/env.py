"""
Layered .env support for wtree settings.

`.env` files may set the `WTREE_*` variables that override configuration.
Other keys in those files are left alone: wtree runs git, and a project's
.env must not leak GIT_DIR or similar into those processes.

Precedence:
    exported environment > project .env / .env.local > user .env
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dotenv import dotenv_values

from .loader import ENV_OVERRIDES, get_xdg_config_home

logger = logging.getLogger(__name__)

ENV_PREFIX = "WTREE_"


def get_user_env_path() -> Path:
    """Path to the user .env file ($XDG_CONFIG_HOME/wtree/.env)."""
    return get_xdg_config_home() / "wtree" / ".env"


def get_project_env_paths(project_dir: Path | None = None) -> list[Path]:
    """Project .env files in increasing precedence."""
    if project_dir is None:
        project_dir = Path.cwd()
    return [project_dir / ".env", project_dir / ".env.local"]


def read_wtree_env(path: Path) -> dict[str, str]:
    """
    Read the wtree settings from one .env file.

    Args:
        path: .env file (missing files yield nothing)

    Returns:
        `WTREE_*` keys with a value, in file order
    """
    if not path.is_file():
        return {}

    settings = {
        key: value
        for key, value in dotenv_values(path).items()
        if key.startswith(ENV_PREFIX) and value is not None
    }
    unknown = sorted(set(settings) - set(ENV_OVERRIDES))
    if unknown:
        logger.warning("Unknown wtree settings in %s: %s", path, ", ".join(unknown))
    return settings


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, str]:
    """
    Export wtree settings from user and project .env files.

    A value from the user file may be replaced by a project file; a variable
    that was already exported is never replaced.

    Args:
        project_dir: Directory holding the project .env files (defaults to cwd)
        user_env_paths: Explicit user .env files
        project_env_paths: Explicit project .env files

    Returns:
        The variables that were set, with their final values
    """
    if user_env_paths is None:
        user_env_paths = [get_user_env_path()]
    if project_env_paths is None:
        project_env_paths = get_project_env_paths(project_dir)

    exported = set(os.environ)
    applied: dict[str, str] = {}

    for path in [*user_env_paths, *project_env_paths]:
        for key, value in read_wtree_env(Path(path)).items():
            if key in exported:
                continue
            os.environ[key] = value
            applied[key] = value
            logger.debug("%s set from %s", key, path)

    return applied
