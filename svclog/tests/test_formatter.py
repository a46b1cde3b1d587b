import logging
from datetime import datetime

import pytest

from svclog import Severity
from svclog._formatter import (
    Record,
    render_line,
    render_message,
    render_value,
    trim_message,
)


# ----------------------------
# Test: printf-style rendering
# ----------------------------
def test_render_message_substitutes_arguments() -> None:
    assert render_message("disk at %d%%", (91,)) == "disk at 91%"
    assert render_message("%s=%r", ("key", "value")) == "key='value'"


def test_render_message_without_arguments_collapses_percent() -> None:
    assert render_message("disk at 100%%", ()) == "disk at 100%"
    assert render_message("no directives", ()) == "no directives"


def test_render_message_without_arguments_keeps_bad_template() -> None:
    assert render_message("100% done", ()) == "100% done"


def test_render_message_with_mapping() -> None:
    assert render_message("%(host)s:%(port)d", ({"host": "db", "port": 5432},)) == "db:5432"


def test_render_message_mismatch_does_not_raise() -> None:
    assert render_message("%d items", ("many",)) == "%d items ('many',)"


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no str")

    def __repr__(self) -> str:
        return "Unprintable()"


def test_render_message_unprintable_argument(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="svclog"):
        text = render_message("got %s", (_Unprintable(),))
    assert text == "got %s (Unprintable(),)"
    assert any(r.name == "svclog" for r in caplog.records)


def test_render_value_unprintable(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="svclog"):
        text = render_value(_Unprintable())
    assert text == "<_Unprintable object: str() raised RuntimeError('no str')>"
    assert any("Cannot convert" in r.getMessage() for r in caplog.records)


def test_render_value() -> None:
    assert render_value(RuntimeError("boom")) == "boom"
    assert render_value(None) == "None"
    assert render_value(42) == "42"


# ----------------------------
# Test: trimming
# ----------------------------
@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello\n", "hello"),
        ("  padded  \n", "padded"),
        ("two\n\n", "two"),
        ("\tinner  space\t", "inner  space"),
        ("\n", ""),
        ("   ", ""),
        ("", ""),
    ],
)
def test_trim_message(text: str, expected: str) -> None:
    assert trim_message(text) == expected


# ----------------------------
# Test: line layout
# ----------------------------
def test_render_line() -> None:
    line = render_line(
        datetime(2024, 3, 5, 7, 8, 9), "myapp", Severity.WARNING, "disk at 91%"
    )
    assert line == "[2024-03-05 07:08:09] [myapp] [WARNING] disk at 91%\n"


def test_render_line_pads_year() -> None:
    line = render_line(datetime(999, 1, 2, 3, 4, 5), "-", Severity.DEBUG, "x")
    assert line == "[0999-01-02 03:04:05] [-] [DEBUG] x\n"


def test_record_line() -> None:
    record = Record(
        severity=Severity.FATAL,
        timestamp=datetime(2024, 12, 31, 23, 59, 59),
        app_name="svc",
        message="boom",
    )
    assert record.line() == "[2024-12-31 23:59:59] [svc] [FATAL] boom\n"
