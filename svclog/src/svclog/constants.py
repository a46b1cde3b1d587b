"""Constants for the service logging facility.

This module defines the tables and fixed values shared by the severity type,
the formatter and the log core. The name and priority tables are indexed by
the ordinal of `Severity` and must stay in lockstep with it.

Attributes:
    SEVERITY_NAMES (tuple[str, ...]): Upper-case display name per severity.
    SYSLOG_PRIORITIES (tuple[str, ...]): Syslog priority name per severity.
    DEFAULT_APP_NAME (str): Application tag used before `init` runs.
    DEFAULT_FACILITY (str): Syslog facility used when none is given.
    DEFAULT_SYSLOG_PRIORITY (str): Priority the syslog client is built with.
    FATAL_EXIT_CODE (int): Exit status after a fatal record is written.
    DESTINATION_FAILURE_EXIT_CODE (int): Exit status when no destination
        can be established.
    LINE_FORMAT (str): The file and stderr line layout.
"""

from typing import Any, Final

SEVERITY_NAMES: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "NOTICE",
    "WARNING",
    "ERROR",
    "CRITICAL",
    "FATAL",
)
SYSLOG_PRIORITIES: Final[tuple[str, ...]] = (
    "debug",
    "info",
    "notice",
    "warning",
    "err",
    "crit",
    "alert",
)

DEFAULT_APP_NAME: Final[str] = "-"
DEFAULT_FACILITY: Final[str] = "DAEMON"
DEFAULT_SYSLOG_PRIORITY: Final[str] = "info"

FATAL_EXIT_CODE: Final[int] = 255
DESTINATION_FAILURE_EXIT_CODE: Final[int] = 2

LINE_FORMAT: Final[str] = "[%04d-%02d-%02d %02d:%02d:%02d] [%s] [%s] %s\n"

# environment
ENV_SYSLOG: Final[str] = "SVCLOG_SYSLOG"
ENV_LOG_FILE: Final[str] = "SVCLOG_LOG_FILE"
ENV_LOG_LEVEL: Final[str] = "SVCLOG_LOG_LEVEL"
ENV_DIAGNOSTICS_LEVEL: Final[str] = "SVCLOG_DIAGNOSTICS_LEVEL"

# the facility's own diagnostics
_DIAGNOSTICS_LOGGER_NAME: Final[str] = "svclog"
_DIAGNOSTICS_LOG_FORMAT: Final[str] = (
    "[%(asctime)s][%(name)s][%(levelname)s] %(message)s"
)
_DIAGNOSTICS_COLOR_STYLES: Final[dict[str, dict[str, Any]]] = {
    "critical": {"bold": True, "color": "red"},
    "debug": {"color": "green"},
    "error": {"color": "red"},
    "info": {"color": "cyan"},
    "warning": {"color": "yellow"},
}
