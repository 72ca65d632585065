"""Logging for the installer.

Every module logs through a child of the ``obsidian_skill`` logger. Only that
package logger carries a handler; it writes to stderr so log lines never mix
with the prompts and rich output on stdout.
"""

import logging
import os
import sys

PACKAGE_LOGGER = "obsidian_skill"
LOG_LEVEL_ENV = "OBSIDIAN_SKILL_LOG_LEVEL"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "WARNING").upper())
    package_logger.setLevel(level if isinstance(level, int) else logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, which should live under the obsidian_skill package."""
    _configure_package_logger()
    return logging.getLogger(name)
