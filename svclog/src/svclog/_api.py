"""Public API for svclog.

This module exposes the process-wide logging entry points. Every function
forwards to the default `ServiceLogger`:

- `init` and `apply_options` configure it.
- ``debugf`` ... ``fatalf`` log a printf-style template with arguments.
- ``debug`` ... ``fatal`` log the string form of a single value.

Nothing is logged until `init` sets a threshold.
"""

import argparse
from typing import Any

from ._options import LogOptions
from .root import get_default_logger

__all__ = [
    "init",
    "apply_options",
    "debugf",
    "infof",
    "noticef",
    "warnf",
    "errorf",
    "criticalf",
    "fatalf",
    "debug",
    "info",
    "notice",
    "warn",
    "error",
    "critical",
    "fatal",
]


def init(
    app_name: str,
    level: int,
    facility: str = "",
    parser: argparse.ArgumentParser | None = None,
) -> None:
    """Configure the process-wide logger.

    Args:
        app_name: Application tag written with every record.
        level: Initial severity threshold (e.g. `Severity.INFO`).
        facility: Syslog facility name; ``"DAEMON"`` when empty.
        parser: Optional argument parser to register ``--syslog``,
            ``--logfile`` and ``--loglevel`` on.
    """
    get_default_logger().init(app_name, level, facility, parser)


def apply_options(options: LogOptions) -> None:
    """Apply externally loaded options to the process-wide logger.

    Args:
        options: Options, e.g. from `LogOptions.from_env`.
    """
    get_default_logger().apply_options(options)


def debugf(template: str, *args: Any) -> None:
    get_default_logger().debugf(template, *args)


def infof(template: str, *args: Any) -> None:
    get_default_logger().infof(template, *args)


def noticef(template: str, *args: Any) -> None:
    get_default_logger().noticef(template, *args)


def warnf(template: str, *args: Any) -> None:
    get_default_logger().warnf(template, *args)


def errorf(template: str, *args: Any) -> None:
    get_default_logger().errorf(template, *args)


def criticalf(template: str, *args: Any) -> None:
    get_default_logger().criticalf(template, *args)


def fatalf(template: str, *args: Any) -> None:
    get_default_logger().fatalf(template, *args)


def debug(value: Any) -> None:
    get_default_logger().debug(value)


def info(value: Any) -> None:
    get_default_logger().info(value)


def notice(value: Any) -> None:
    get_default_logger().notice(value)


def warn(value: Any) -> None:
    get_default_logger().warn(value)


def error(value: Any) -> None:
    get_default_logger().error(value)


def critical(value: Any) -> None:
    get_default_logger().critical(value)


def fatal(value: Any) -> None:
    get_default_logger().fatal(value)
