"""Severity levels and the global filtering threshold."""

import enum
import re

from .constants import SEVERITY_NAMES, SYSLOG_PRIORITIES

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class Severity(enum.IntEnum):
    """Ordered log severity.

    `LAST` is not a real level: it sits above every real level and is the
    default threshold, so nothing is accepted until a threshold is configured.
    """

    DEBUG = 0
    INFO = 1
    NOTICE = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    FATAL = 6
    LAST = 7

    @property
    def display_name(self) -> str:
        """str: Upper-case name used in rendered lines."""
        if self is Severity.LAST:
            raise ValueError("Severity.LAST has no display name")
        return SEVERITY_NAMES[self]

    @property
    def syslog_priority(self) -> str:
        """str: Syslog priority name this severity is sent with."""
        if self is Severity.LAST:
            raise ValueError("Severity.LAST has no syslog priority")
        return SYSLOG_PRIORITIES[self]


class Threshold:
    """The minimum severity accepted for output.

    The value is a plain integer so that out-of-range configuration values
    (e.g. ``"42"``) are kept as given. Reads and writes are single reference
    operations and need no lock; the log core checks `get()` before taking
    its own lock.
    """

    def __init__(self, value: int = Severity.LAST) -> None:
        self._value = int(value)

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = int(value)

    def set_from_string(self, text: str) -> None:
        """Set the threshold from a base-10 string.

        Malformed input sets the threshold to 0 instead of raising.
        """
        self.set(self.parse(text))

    @staticmethod
    def parse(text: str | int) -> int:
        """Leniently parse a base-10 severity value.

        Args:
            text: The value to parse.

        Returns:
            The parsed integer, or 0 when `text` is not a base-10 integer.
        """
        if isinstance(text, bool):
            return 0
        if isinstance(text, int):
            return text
        text = str(text)
        if _DECIMAL.fullmatch(text) is None:
            return 0
        return int(text, 10)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value})"
