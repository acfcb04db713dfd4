"""
Setup shared by all wtree commands.
"""

from pathlib import Path

from wtree.core.config import WtreeConfig, load_config, load_layered_env
from wtree.utils.logging import setup_logging


def prepare(debug: bool = False, project_dir: Path | None = None) -> WtreeConfig:
    """
    Configure logging, load .env files and return the effective config.

    Args:
        debug: Enable debug logging
        project_dir: Directory holding .env and .wtree.json (defaults to cwd)
    """
    setup_logging(debug)
    load_layered_env(project_dir=project_dir)
    return load_config(project_dir)
