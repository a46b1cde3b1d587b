"""Log destinations.

Exactly one destination is active at a time: the system logger, an
append-only file, or standard error. Destinations only write; choosing and
resolving them is the job of the log core.
"""

import logging
import os
import socket
import sys
from logging.handlers import SysLogHandler
from typing import Protocol, TextIO

from coloredlogs.syslog import find_syslog_address  # type: ignore[import-untyped]

from ._exceptions import LogDestinationError
from ._formatter import Record
from .constants import SYSLOG_PRIORITIES


class Destination(Protocol):
    """Something a formatted record can be written to."""

    def write(self, record: Record) -> None:
        """Write one record. May raise `OSError` on I/O failure."""


class _SyslogHandler(SysLogHandler):
    """A `SysLogHandler` that reports send failures to its caller."""

    def __init__(self, default_priority: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.default_priority = default_priority
        self.priority_map = {name: name for name in SYSLOG_PRIORITIES}

    def mapPriority(self, levelName: str) -> str:  # noqa: N802
        return self.priority_map.get(levelName, self.default_priority)

    def handleError(self, record: logging.LogRecord) -> None:  # noqa: N802
        raise


def _check_unix_socket(path: str) -> None:
    # SysLogHandler retries a failed unix socket connect on every emit
    # instead of raising, so reachability is checked up front.
    error: OSError | None = None
    for sock_type in (socket.SOCK_DGRAM, socket.SOCK_STREAM):
        sock = socket.socket(socket.AF_UNIX, sock_type)
        try:
            sock.connect(path)
            return
        except OSError as e:
            error = e
        finally:
            sock.close()
    raise LogDestinationError(f"syslog at {path!r}", str(error)) from error


class SyslogClient:
    """
    Client for the local system logger.

    The system logger applies its own timestamp and host fields, so only the
    message text is sent, tagged with the application name and process id.

    Attributes:
        facility (str): Upper-case facility name the client was built with.
        app_name (str): Tag sent with every message.
    """

    def __init__(
        self,
        default_priority: str,
        facility: str,
        app_name: str,
        address: str | tuple[str, int] | None = None,
    ) -> None:
        """
        Connect to the system logger.

        Args:
            default_priority (str): Priority used for unknown priority names.
            facility (str): Syslog facility name, case-insensitive.
            app_name (str): Application tag.
            address: Unix socket path or ``(host, port)``. Defaults to the
                platform's syslog socket.

        Raises:
            LogDestinationError: If the facility is unknown or the system
                logger cannot be reached.
        """
        facility_code = SysLogHandler.facility_names.get(facility.lower())
        if facility_code is None:
            raise LogDestinationError(
                "syslog", f"unknown syslog facility '{facility}'"
            )
        if address is None:
            address = find_syslog_address()
            if not isinstance(address, str):
                raise LogDestinationError("syslog", "no local syslog socket")
        if isinstance(address, str):
            _check_unix_socket(address)
        try:
            self._handler = _SyslogHandler(
                default_priority, address=address, facility=facility_code
            )
        except OSError as e:
            raise LogDestinationError(f"syslog at {address!r}", str(e)) from e
        self._handler.ident = f"{app_name}[{os.getpid()}]: "
        self.facility = facility.upper()
        self.app_name = app_name

    def write_level(self, priority: str, message: str | bytes) -> None:
        """Send a message at the given syslog priority name (e.g. ``"err"``)."""
        if isinstance(message, bytes):
            message = message.decode("utf-8", errors="replace")
        record = logging.makeLogRecord({"msg": message, "levelname": priority})
        self._handler.emit(record)

    def write(self, record: Record) -> None:
        self.write_level(record.severity.syslog_priority, record.message)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(facility={self.facility!r}, "
            f"app_name={self.app_name!r})"
        )


def open_log_file(path: str) -> TextIO:
    """Open `path` for appending, creating it if absent.

    Raises:
        LogDestinationError: If the file cannot be opened.
    """
    try:
        return open(path, "a", encoding="utf-8")
    except OSError as e:
        raise LogDestinationError(f"file '{path}'", str(e)) from e


class FileDestination:
    """Append-only file destination, synced to disk after every line."""

    def __init__(self, handle: TextIO) -> None:
        self._handle = handle

    @property
    def name(self) -> str:
        return getattr(self._handle, "name", "<file>")

    def write(self, record: Record) -> None:
        self._handle.write(record.line())
        self._handle.flush()
        os.fsync(self._handle.fileno())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class StreamDestination:
    """Text stream destination; the current `sys.stderr` when unbound."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, record: Record) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(record.line())
        stream.flush()
