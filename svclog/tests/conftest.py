# ----------------------------
# Helpers to reset env vars and the shared logger
# ----------------------------
from datetime import datetime

import pytest

from svclog import reset_default_logger
from svclog._utilities import _reset_diagnostics_logger

FIXED_TIME = datetime(2024, 3, 5, 7, 8, 9)


@pytest.fixture(autouse=True)
def reset_env(monkeypatch: pytest.MonkeyPatch) -> None:  # type: ignore
    monkeypatch.delenv("SVCLOG_SYSLOG", raising=False)
    monkeypatch.delenv("SVCLOG_LOG_FILE", raising=False)
    monkeypatch.delenv("SVCLOG_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SVCLOG_DIAGNOSTICS_LEVEL", raising=False)
    reset_default_logger()
    yield
    _reset_diagnostics_logger()


class RecordingTerminator:
    """Stands in for process exit; records the exit codes it was given."""

    def __init__(self) -> None:
        self.codes: list[int] = []
        self.on_call = None

    def __call__(self, code: int) -> None:
        if self.on_call is not None:
            self.on_call()
        self.codes.append(code)


class FakeSyslog:
    """Sentinel syslog client recording every write."""

    def __init__(self, default_priority: str, facility: str, app_name: str) -> None:
        self.default_priority = default_priority
        self.facility = facility
        self.app_name = app_name
        self.writes: list[tuple[str, str]] = []

    def write(self, record) -> None:
        self.writes.append((record.severity.syslog_priority, record.message))


class SyslogFactory:
    def __init__(self) -> None:
        self.clients: list[FakeSyslog] = []

    def __call__(self, default_priority: str, facility: str, app_name: str):
        client = FakeSyslog(default_priority, facility, app_name)
        self.clients.append(client)
        return client


class CountingOpener:
    """Opens real files and counts how often each path was opened."""

    def __init__(self) -> None:
        self.opened: list[str] = []
        self.handles = []

    def __call__(self, path: str):
        from svclog._destinations import open_log_file

        self.opened.append(path)
        handle = open_log_file(path)
        self.handles.append(handle)
        return handle


@pytest.fixture
def terminator() -> RecordingTerminator:
    return RecordingTerminator()


@pytest.fixture
def syslog_factory() -> SyslogFactory:
    return SyslogFactory()


@pytest.fixture
def opener() -> CountingOpener:
    yield (counting := CountingOpener())
    for handle in counting.handles:
        handle.close()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME
