import argparse
import io

import pytest
from pydantic import ValidationError

from svclog import LogOptions, ServiceLogger, Severity


def _logger_with_parser() -> tuple[ServiceLogger, argparse.ArgumentParser]:
    logger = ServiceLogger(stream=io.StringIO(), terminate=lambda code: None)
    parser = argparse.ArgumentParser()
    logger.init("myapp", Severity.LAST, parser=parser)
    return logger, parser


# ----------------------------
# Test: argument parser hooks
# ----------------------------
def test_hooks_write_into_state() -> None:
    logger, parser = _logger_with_parser()
    namespace = parser.parse_args(
        ["--syslog", "--logfile", "/var/log/myapp.log", "--loglevel", "2"]
    )
    assert logger.state.use_syslog is True
    assert logger.state.file_name == "/var/log/myapp.log"
    assert logger.threshold.get() == Severity.NOTICE
    assert namespace.syslog is True
    assert namespace.logfile == "/var/log/myapp.log"
    assert namespace.loglevel == 2


def test_hook_defaults_leave_state_alone() -> None:
    logger, parser = _logger_with_parser()
    namespace = parser.parse_args([])
    assert logger.state.use_syslog is False
    assert logger.state.file_name == ""
    assert logger.threshold.get() == Severity.LAST
    assert namespace.syslog is False
    assert namespace.logfile == ""
    assert namespace.loglevel == Severity.LAST


def test_malformed_loglevel_becomes_zero() -> None:
    logger, parser = _logger_with_parser()
    parser.parse_args(["--loglevel", "verbose"])
    assert logger.threshold.get() == 0


def test_loglevel_help_text() -> None:
    _, parser = _logger_with_parser()
    assert "Log level (0-6)" in parser.format_help()


# ----------------------------
# Test: LogOptions
# ----------------------------
def test_options_defaults() -> None:
    options = LogOptions()
    assert options.use_syslog is False
    assert options.log_file == ""
    assert options.log_level == Severity.LAST


def test_options_lenient_level() -> None:
    assert LogOptions(log_level="4").log_level == 4
    assert LogOptions(log_level="not-a-number").log_level == 0
    assert LogOptions(log_level=None).log_level == 0


def test_options_are_frozen() -> None:
    with pytest.raises(ValidationError):
        LogOptions().log_file = "x"  # type: ignore[misc]


def test_options_from_env() -> None:
    options = LogOptions.from_env(
        {
            "SVCLOG_SYSLOG": "yes",
            "SVCLOG_LOG_FILE": "/tmp/app.log",
            "SVCLOG_LOG_LEVEL": "bogus",
        }
    )
    assert options == LogOptions(use_syslog=True, log_file="/tmp/app.log", log_level=0)


def test_options_from_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SVCLOG_LOG_LEVEL", "3")
    monkeypatch.setenv("SVCLOG_SYSLOG", "0")
    options = LogOptions.from_env()
    assert options.log_level == Severity.WARNING
    assert options.use_syslog is False


def test_apply_and_read_options() -> None:
    logger = ServiceLogger(stream=io.StringIO(), terminate=lambda code: None)
    logger.init("myapp", Severity.INFO)
    logger.apply_options(LogOptions(use_syslog=True, log_file="a.log", log_level=5))
    assert logger.options() == LogOptions(
        use_syslog=True, log_file="a.log", log_level=Severity.CRITICAL
    )


def test_init_resets_hooks() -> None:
    logger = ServiceLogger(stream=io.StringIO(), terminate=lambda code: None)
    logger.apply_options(LogOptions(use_syslog=True, log_file="a.log", log_level=1))
    logger.init("other", Severity.ERROR, "local1")
    assert logger.options() == LogOptions(log_level=Severity.ERROR)
    assert logger.state.app_name == "other"
    assert logger.state.facility == "local1"
