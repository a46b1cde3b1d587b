"""Diagnostics logger utilities.

The facility reports its own problems (failed writes, malformed templates,
unreachable destinations) on a standard library logger rather than on the
sink it manages. This module configures that logger once with colored
console output.
"""

import functools
import logging
import os

import coloredlogs  # type: ignore[import-untyped]

from .constants import (
    _DIAGNOSTICS_COLOR_STYLES,
    _DIAGNOSTICS_LOG_FORMAT,
    _DIAGNOSTICS_LOGGER_NAME,
    ENV_DIAGNOSTICS_LEVEL,
)


def _resolve_diagnostics_level() -> int:
    level_name = os.environ.get(ENV_DIAGNOSTICS_LEVEL, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logging.warning(
            "Invalid %s '%s' specified. Defaulting to WARNING.",
            ENV_DIAGNOSTICS_LEVEL,
            level_name,
        )
        return logging.WARNING
    return level


@functools.cache
def get_diagnostics_logger() -> logging.Logger:
    """Return the facility's own diagnostics logger, configuring it once.

    The level comes from ``SVCLOG_DIAGNOSTICS_LEVEL``; records are rendered
    by a coloredlogs console handler so they stand apart from the log lines
    the facility itself writes to standard error.

    Returns:
        logging.Logger: The ``svclog`` logger.
    """
    logger = logging.getLogger(_DIAGNOSTICS_LOGGER_NAME)
    coloredlogs.install(
        level=_resolve_diagnostics_level(),
        logger=logger,
        fmt=_DIAGNOSTICS_LOG_FORMAT,
        level_styles=_DIAGNOSTICS_COLOR_STYLES,
    )
    return logger


def _reset_diagnostics_logger() -> None:
    """Undo `get_diagnostics_logger` so the next call reconfigures it."""
    if get_diagnostics_logger.cache_info().currsize:
        logger = get_diagnostics_logger()
        while logger.handlers:
            handler = logger.handlers.pop()
            handler.close()
        logger.setLevel(logging.NOTSET)
    get_diagnostics_logger.cache_clear()
