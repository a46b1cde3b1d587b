from ._api import (
    apply_options,
    critical,
    criticalf,
    debug,
    debugf,
    error,
    errorf,
    fatal,
    fatalf,
    info,
    infof,
    init,
    notice,
    noticef,
    warn,
    warnf,
)
from ._destinations import SyslogClient
from ._exceptions import LogDestinationError
from ._options import LogOptions
from ._severity import Severity, Threshold
from .root import ServiceLogger, get_default_logger, reset_default_logger

__all__ = [
    "Severity",
    "Threshold",
    "LogOptions",
    "LogDestinationError",
    "ServiceLogger",
    "SyslogClient",
    "get_default_logger",
    "reset_default_logger",
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
