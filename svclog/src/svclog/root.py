"""Log core of the svclog facility.

This module defines the shared log state and `ServiceLogger`, the
synchronized entry point every log call goes through:

- filtering by the severity threshold before any lock is taken,
- rendering and trimming the message,
- lazily resolving exactly one destination under the shared lock,
- writing, and terminating the process after fatal records.

A module-level default instance backs the public functions in `svclog`.
Tests construct their own instances with injected collaborators.
"""

import argparse
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TextIO

from ._destinations import (
    Destination,
    FileDestination,
    StreamDestination,
    SyslogClient,
    open_log_file,
)
from ._exceptions import LogDestinationError
from ._formatter import Record, render_message, render_value, trim_message
from ._options import LogOptions, add_arguments
from ._severity import Severity, Threshold
from ._utilities import get_diagnostics_logger
from .constants import (
    DEFAULT_APP_NAME,
    DEFAULT_FACILITY,
    DEFAULT_SYSLOG_PRIORITY,
    DESTINATION_FAILURE_EXIT_CODE,
    FATAL_EXIT_CODE,
)


def _clamp(severity: int) -> Severity:
    # out-of-range severities are written as the nearest real level
    return Severity(min(max(int(severity), Severity.DEBUG), Severity.FATAL))


@dataclass
class LogState:
    """
    Process-wide log configuration and resolved destination handles.

    Only `threshold` is read outside the logger's lock. The resolved handles
    are owned here and never closed; they are released at process exit.

    Attributes:
        threshold (Threshold): Minimum accepted severity.
        app_name (str): Application tag.
        facility (str): Syslog facility name.
        use_syslog (bool): Whether the system logger is requested.
        file_name (str): Log file path, empty when unset.
        syslogger (SyslogClient | None): Resolved system logger client.
        out_file (FileDestination | None): Resolved log file.
    """

    threshold: Threshold = field(default_factory=Threshold)
    app_name: str = DEFAULT_APP_NAME
    facility: str = DEFAULT_FACILITY
    use_syslog: bool = False
    file_name: str = ""
    syslogger: Destination | None = None
    out_file: FileDestination | None = None


class ServiceLogger:
    """
    Process-wide leveled logger writing to a single sticky destination.

    Records below the threshold cost one integer comparison. Accepted records
    are written synchronously under one lock shared by all callers, so lines
    from concurrent threads never interleave. A non-empty record at
    `Severity.FATAL` terminates the process with exit code 255 once written.

    Attributes:
        state (LogState): The shared log state.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        terminate: Callable[[int], Any] = os._exit,
        syslog_factory: Callable[[str, str, str], Destination] = SyslogClient,
        file_opener: Callable[[str], TextIO] = open_log_file,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the logger with nothing accepted and nothing resolved.

        Args:
            stream: Fallback stream; the current `sys.stderr` when None.
            terminate: Called with the exit code to end the process.
            syslog_factory: Builds the system logger client from
                ``(default_priority, facility, app_name)``.
            file_opener: Opens the log file for appending.
            clock: Returns the local wall-clock time.
        """
        self.state = LogState()
        self._lock = threading.Lock()
        self._stream = StreamDestination(stream)
        self._terminate = terminate
        self._syslog_factory = syslog_factory
        self._file_opener = file_opener
        self._clock = clock

    @property
    def threshold(self) -> Threshold:
        return self.state.threshold

    def init(
        self,
        app_name: str,
        level: int,
        facility: str = "",
        parser: argparse.ArgumentParser | None = None,
    ) -> None:
        """Configure the logger.

        Must complete before other threads start logging.

        Args:
            app_name: Application tag written with every record.
            level: Initial severity threshold, effective immediately.
            facility: Syslog facility name; ``"DAEMON"`` when empty.
            parser: If given, ``--syslog``, ``--logfile`` and ``--loglevel``
                are registered on it and write into this logger when parsed.
        """
        self.state.threshold.set(level)
        self.state.app_name = app_name
        self.state.facility = facility or DEFAULT_FACILITY
        self.state.use_syslog = False
        self.state.file_name = ""
        if parser is not None:
            add_arguments(parser, self.state)

    def apply_options(self, options: LogOptions) -> None:
        self.state.use_syslog = options.use_syslog
        self.state.file_name = options.log_file
        self.state.threshold.set(options.log_level)

    def options(self) -> LogOptions:
        return LogOptions(
            use_syslog=self.state.use_syslog,
            log_file=self.state.file_name,
            log_level=self.state.threshold.get(),
        )

    def logf(self, severity: int, template: str, *args: Any) -> None:
        """Log a printf-style message at `severity`."""
        if severity < self.state.threshold.get():
            return
        timestamp = self._clock()
        self._emit(severity, timestamp, trim_message(render_message(template, args)))

    def log(self, severity: int, value: Any) -> None:
        """Log the string form of `value` at `severity`."""
        if severity < self.state.threshold.get():
            return
        timestamp = self._clock()
        self._emit(severity, timestamp, trim_message(render_value(value)))

    def _emit(self, severity: int, timestamp: datetime, message: str) -> None:
        if not message:
            return
        record = Record(
            severity=_clamp(severity),
            timestamp=timestamp,
            app_name=self.state.app_name,
            message=message,
        )
        with self._lock:
            try:
                destination = self._resolve_destination()
            except (LogDestinationError, OSError) as e:
                get_diagnostics_logger().critical("%s", e)
                self._terminate(DESTINATION_FAILURE_EXIT_CODE)
                return
            try:
                destination.write(record)
            except (OSError, ValueError) as e:
                get_diagnostics_logger().warning(
                    "Failed to write log record to %r: %s", destination, e
                )
        if record.severity >= Severity.FATAL:
            self._terminate(FATAL_EXIT_CODE)

    def _resolve_destination(self) -> Destination:
        # caller holds self._lock
        state = self.state
        if state.syslogger is None and state.out_file is None:
            if state.use_syslog:
                state.syslogger = self._syslog_factory(
                    DEFAULT_SYSLOG_PRIORITY, state.facility, state.app_name
                )
                get_diagnostics_logger().debug(
                    "Logging to syslog facility %s", state.facility
                )
            elif state.file_name:
                state.out_file = FileDestination(self._file_opener(state.file_name))
                get_diagnostics_logger().debug("Logging to file %s", state.file_name)
        if state.syslogger is not None:
            return state.syslogger
        if state.out_file is not None:
            return state.out_file
        return self._stream

    def debugf(self, template: str, *args: Any) -> None:
        self.logf(Severity.DEBUG, template, *args)

    def infof(self, template: str, *args: Any) -> None:
        self.logf(Severity.INFO, template, *args)

    def noticef(self, template: str, *args: Any) -> None:
        self.logf(Severity.NOTICE, template, *args)

    def warnf(self, template: str, *args: Any) -> None:
        self.logf(Severity.WARNING, template, *args)

    def errorf(self, template: str, *args: Any) -> None:
        self.logf(Severity.ERROR, template, *args)

    def criticalf(self, template: str, *args: Any) -> None:
        self.logf(Severity.CRITICAL, template, *args)

    def fatalf(self, template: str, *args: Any) -> None:
        """Log at FATAL and terminate the process with exit code 255.

        A message that is empty after trimming is dropped and the process
        keeps running.
        """
        self.logf(Severity.FATAL, template, *args)

    def debug(self, value: Any) -> None:
        self.log(Severity.DEBUG, value)

    def info(self, value: Any) -> None:
        self.log(Severity.INFO, value)

    def notice(self, value: Any) -> None:
        self.log(Severity.NOTICE, value)

    def warn(self, value: Any) -> None:
        self.log(Severity.WARNING, value)

    def error(self, value: Any) -> None:
        self.log(Severity.ERROR, value)

    def critical(self, value: Any) -> None:
        self.log(Severity.CRITICAL, value)

    def fatal(self, value: Any) -> None:
        """Log `value` at FATAL and terminate the process with exit code 255.

        A value whose string form is empty after trimming is dropped and the
        process keeps running.
        """
        self.log(Severity.FATAL, value)


# Module-level default instance
_default_logger: ServiceLogger = ServiceLogger()


def get_default_logger() -> ServiceLogger:
    """Return the process-wide default logger.

    Returns:
        ServiceLogger: The instance behind the module-level functions.
    """
    return _default_logger


def reset_default_logger() -> ServiceLogger:
    """Replace the default logger with a fresh, unconfigured instance.

    Useful in tests. Handles resolved by the previous instance are left open.

    Returns:
        ServiceLogger: The new default instance.
    """
    global _default_logger
    _default_logger = ServiceLogger()
    return _default_logger
