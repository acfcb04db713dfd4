"""
Logging setup for wtree commands.

Diagnostics go through the standard logging module to stderr; user-facing
output is printed by the CLI with rich.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for wtree commands.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # basicConfig is a no-op once handlers exist; keep the level in sync
    logging.getLogger().setLevel(level)
