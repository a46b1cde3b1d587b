"""Command line entry point.

Usage::

    svclog emit "disk at 91%" --level warning --app-name myapp
    svclog emit "started" --log-file /var/log/myapp.log --threshold 1
    svclog levels

Options from ``SVCLOG_*`` environment variables are applied first; flags
given on the command line override them.
"""

import fire  # type: ignore[import-untyped]

from ._options import LogOptions
from ._severity import Severity, Threshold
from .constants import SEVERITY_NAMES
from .root import get_default_logger


def _parse_severity(level: str | int) -> Severity:
    if isinstance(level, str) and level.upper() in SEVERITY_NAMES:
        return Severity[level.upper()]
    value = Threshold.parse(level)
    return Severity(min(max(value, Severity.DEBUG), Severity.FATAL))


def emit(
    message: str,
    level: str | int = "info",
    app_name: str = "svclog",
    facility: str = "",
    log_file: str | None = None,
    syslog: bool | None = None,
    threshold: str | int | None = None,
) -> None:
    """Write one log record.

    Args:
        message: Text to log. Empty text is dropped.
        level: Severity name (``warning``) or number (``3``).
        app_name: Application tag.
        facility: Syslog facility, ``DAEMON`` when empty.
        log_file: Append to this file instead of standard error.
        syslog: Send to the system logger.
        threshold: Minimum accepted severity. Defaults to ``SVCLOG_LOG_LEVEL``
            or, when unset, to accepting everything.
    """
    options = LogOptions.from_env().model_dump()
    if log_file is not None:
        options["log_file"] = log_file
    if syslog is not None:
        options["use_syslog"] = syslog
    if threshold is not None:
        options["log_level"] = threshold
    elif options["log_level"] == Severity.LAST:
        options["log_level"] = Severity.DEBUG

    logger = get_default_logger()
    logger.init(app_name, Severity.DEBUG, facility)
    logger.apply_options(LogOptions(**options))
    logger.log(_parse_severity(level), message)


def levels() -> str:
    """List the severity levels as ``<number> <NAME>``."""
    return "\n".join(
        f"{int(severity)} {severity.display_name}"
        for severity in Severity
        if severity is not Severity.LAST
    )


def main(argv: list[str] | None = None) -> None:
    fire.Fire({"emit": emit, "levels": levels}, command=argv, name="svclog")


if __name__ == "__main__":
    main()
