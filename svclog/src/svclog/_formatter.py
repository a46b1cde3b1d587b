"""Message and line rendering.

Log records are rendered in two steps: the caller's template (or value) is
turned into message text and trimmed, then the log core decides whether the
text is written raw (syslog) or as a timestamped line (file, stderr).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ._severity import Severity
from ._utilities import get_diagnostics_logger
from .constants import LINE_FORMAT


@dataclass(frozen=True)
class Record:
    """A formatted record on its way to a destination. Never stored."""

    severity: Severity
    timestamp: datetime
    app_name: str
    message: str

    def line(self) -> str:
        return render_line(self.timestamp, self.app_name, self.severity, self.message)


def render_message(template: str, args: tuple[Any, ...]) -> str:
    """Render a printf-style template.

    Args:
        template: The ``%``-style template. ``%%`` renders as ``%`` even when
            there are no arguments.
        args: Positional substitution values. A single non-empty mapping is
            used for named substitution, as the standard library does.

    Returns:
        The rendered text. Rendering never raises: a template that does not
        match its arguments, or an argument that cannot be converted, yields
        the template followed by the arguments.
    """
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values: Any = args[0]
    else:
        values = args
    try:
        return str(template) % values
    except Exception as e:
        get_diagnostics_logger().warning(
            "Malformed log template %r for arguments %s: %r",
            template,
            _render_args(args),
            e,
        )
        if not args:
            return str(template)
        return f"{template} {_render_args(args)}"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception as e:
        return f"<{type(value).__name__} object: repr() raised {type(e).__name__}>"


def _render_args(args: tuple[Any, ...]) -> str:
    if len(args) == 1:
        return f"({_safe_repr(args[0])},)"
    return "(" + ", ".join(_safe_repr(arg) for arg in args) + ")"


def render_value(value: Any) -> str:
    try:
        return str(value)
    except Exception as e:
        get_diagnostics_logger().warning(
            "Cannot convert %s to text: %r", type(value).__name__, e
        )
        return f"<{type(value).__name__} object: str() raised {e!r}>"


def trim_message(text: str) -> str:
    """Drop one trailing newline, then surrounding whitespace."""
    return text.removesuffix("\n").strip()


def render_line(
    timestamp: datetime, app_name: str, severity: Severity, message: str
) -> str:
    """Render the file/stderr line for a record.

    Args:
        timestamp: Local wall-clock time captured when the record was made.
        app_name: Application tag.
        severity: Record severity.
        message: Trimmed message text.

    Returns:
        ``[YYYY-MM-DD HH:MM:SS] [app] [SEVERITY] message`` with a newline.
    """
    return LINE_FORMAT % (
        timestamp.year,
        timestamp.month,
        timestamp.day,
        timestamp.hour,
        timestamp.minute,
        timestamp.second,
        app_name,
        severity.display_name,
        message,
    )
