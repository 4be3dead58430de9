"""launchlog — leveled, colored console logging.

Filters records by a three-valued level (critical, normal, debug),
styles them by severity, and writes them to stdout. Stdlib ``logging``
records are routed through the same policy once a logger is installed.

Public API:
    init / try_init   — one-time installation, returns the handle
    get_logger        — the installed ConsoleLogger (or None)
    ConsoleLogger     — the logger handle
    LoggingLevel      — critical / normal / debug
    Severity          — error / warn / info / debug / trace
    Channel           — plain / continuation / launch
    LogRecord         — renderer input
    error, warn, info, debug, trace, launch_info — module-level emitters
    trace_calls       — function tracing decorator
"""

from launchlog._version import __version__, __app_name__
from launchlog.channels import Channel
from launchlog.levels import LevelParseError, LoggingLevel, Severity
from launchlog.logger import (
    ConsoleLogger, LoggerInstallError,
    init, try_init, get_logger, set_logger,
    error, warn, info, debug, trace, launch_info,
)
from launchlog.record import LogRecord
from launchlog.tracing import trace_calls

__all__ = [
    "__version__", "__app_name__",
    "Channel", "LevelParseError", "LoggingLevel", "Severity",
    "ConsoleLogger", "LoggerInstallError",
    "init", "try_init", "get_logger", "set_logger",
    "error", "warn", "info", "debug", "trace", "launch_info",
    "LogRecord", "trace_calls",
]
