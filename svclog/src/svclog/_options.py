"""Configuration surface of the logging facility.

Three values configure the facility from outside: whether to use the system
logger, an optional log file path and the severity threshold. They can be
bound to an `argparse.ArgumentParser` (the hooks write straight into the
shared log state when the host parses its arguments), loaded from the
environment, or passed around as a `LogOptions` model.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._severity import Severity, Threshold
from .constants import ENV_LOG_FILE, ENV_LOG_LEVEL, ENV_SYSLOG

if TYPE_CHECKING:
    from .root import LogState

_TRUTHY = {"1", "true", "yes", "on"}


class LogOptions(BaseModel):
    """
    Externally supplied logging options.

    Attributes:
        use_syslog (bool): Send records to the system logger.
        log_file (str): Append records to this file. Empty means unset.
        log_level (int): Severity threshold. Malformed values become 0.
    """

    model_config = ConfigDict(frozen=True)

    use_syslog: bool = Field(default=False)
    log_file: str = Field(default="")
    log_level: int = Field(default=int(Severity.LAST))

    @field_validator("log_level", mode="before")
    @classmethod
    def coerce_log_level(cls, value: Any) -> int:
        return Threshold.parse(value)

    @field_validator("use_syslog", mode="before")
    @classmethod
    def coerce_use_syslog(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LogOptions:
        """Build options from ``SVCLOG_*`` environment variables.

        Args:
            environ: Mapping to read instead of `os.environ`.

        Returns:
            LogOptions: Options with unset variables left at their defaults.
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if ENV_SYSLOG in environ:
            values["use_syslog"] = environ[ENV_SYSLOG]
        if ENV_LOG_FILE in environ:
            values["log_file"] = environ[ENV_LOG_FILE]
        if ENV_LOG_LEVEL in environ:
            values["log_level"] = environ[ENV_LOG_LEVEL]
        return cls(**values)


class _StateAction(argparse.Action):
    def __init__(self, *args: Any, state: LogState, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.state = state


class _SyslogAction(_StateAction):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        self.state.use_syslog = True
        setattr(namespace, self.dest, True)


class _LogFileAction(_StateAction):
    def __call__(self, parser, namespace, values, option_string=None):
        self.state.file_name = values
        setattr(namespace, self.dest, values)


class _LogLevelAction(_StateAction):
    def __call__(self, parser, namespace, values, option_string=None):
        self.state.threshold.set_from_string(values)
        setattr(namespace, self.dest, self.state.threshold.get())


def add_arguments(parser: argparse.ArgumentParser, state: LogState) -> None:
    """Register ``--syslog``, ``--logfile`` and ``--loglevel`` on `parser`.

    Args:
        parser: The host's argument parser.
        state: Shared log state the parsed values are written into.
    """
    parser.add_argument(
        "--syslog",
        action=_SyslogAction,
        default=False,
        state=state,
        help="Send logs to the local system logger",
    )
    parser.add_argument(
        "--logfile",
        action=_LogFileAction,
        default="",
        state=state,
        help="Write logs to file",
    )
    parser.add_argument(
        "--loglevel",
        action=_LogLevelAction,
        default=state.threshold.get(),
        state=state,
        help=f"Log level ({int(Severity.DEBUG)}-{int(Severity.FATAL)})",
    )
