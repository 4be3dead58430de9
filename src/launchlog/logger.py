"""
ConsoleLogger — the process-wide console logger handle.

The handle owns one LoggingLevel and an output stream (stdout). It is
created once at startup by init()/try_init(), installed into stdlib
``logging`` through a ConsoleHandler, and never mutated afterwards.
Call sites either keep the returned handle or use the module-level
error/warn/info/debug/trace/launch_info functions, which forward to the
installed handle and do nothing before installation.

Gate:
    The root logger level is pinned to the level's ceiling at install
    time, so stdlib records above it are dropped at the call site. The
    handle's own emitters check the level before formatting.

Install contract:
    At most one handle per process. A second install raises
    LoggerInstallError from set_logger(); init()/try_init() absorb it
    and report it only when asked to be verbose.
"""

import logging
import sys
from typing import Any, Optional, TextIO

from . import console, style
from .channels import Channel
from .handler import ConsoleHandler
from .levels import LoggingLevel, Severity
from .record import LogRecord
from .render import render


class LoggerInstallError(RuntimeError):
    """A console logger has already been installed in this process."""


class ConsoleLogger:
    """Level-filtered, styled console logger.

    Usage::

        log = ConsoleLogger(LoggingLevel.NORMAL)
        log.launch_info("Launching from {}", address)
        log.info("Mounting {}", "/")
        log.warn("Route collision on {}", path)
    """

    def __init__(self, level: LoggingLevel = LoggingLevel.NORMAL,
                 file: TextIO = None):
        self._level = level
        self.file = file if file is not None else sys.stdout

    @property
    def level(self) -> LoggingLevel:
        return self._level

    def enabled(self, severity: Severity) -> bool:
        """Check the level gate for ``severity``."""
        return self._level.enabled(severity)

    def render(self, record: LogRecord) -> str:
        return render(record, self._level)

    def log(self, record: LogRecord) -> None:
        """Render ``record`` and write it in a single call.

        Multi-line records (debug) are written with one print, but
        concurrent writers may still interleave with each other.
        """
        text = self.render(record)
        if text:
            print(text, end='', file=self.file, flush=True)

    def emit(self, severity: Severity, fmt: str, *args: Any,
             channel: Channel = Channel.CONTINUATION,
             stacklevel: int = 1) -> None:
        """Format and log a record from the calling frame.

        The message is only formatted once the level gate passes.

        Args:
            severity: Record severity
            fmt: str.format template
            *args: Positional values for the template
            channel: Layout channel (continuation unless told otherwise)
            stacklevel: Which caller frame to attribute the record to
                (1 = the direct caller of emit)
        """
        if not self.enabled(severity):
            return
        frame = sys._getframe(stacklevel)
        message = fmt.format(*args) if args else fmt
        self.log(LogRecord(
            severity=severity,
            message=message,
            channel=channel,
            module_path=frame.f_globals.get('__name__', ''),
            file=frame.f_code.co_filename,
            line=frame.f_lineno,
        ))

    def error(self, fmt: str, *args: Any) -> None:
        self.emit(Severity.ERROR, fmt, *args, stacklevel=2)

    def warn(self, fmt: str, *args: Any) -> None:
        self.emit(Severity.WARN, fmt, *args, stacklevel=2)

    def info(self, fmt: str, *args: Any) -> None:
        self.emit(Severity.INFO, fmt, *args, stacklevel=2)

    def debug(self, fmt: str, *args: Any) -> None:
        self.emit(Severity.DEBUG, fmt, *args, stacklevel=2)

    def trace(self, fmt: str, *args: Any) -> None:
        self.emit(Severity.TRACE, fmt, *args, stacklevel=2)

    def launch_info(self, fmt: str, *args: Any) -> None:
        """Startup announcement: error severity (always passes), info style."""
        self.emit(Severity.ERROR, fmt, *args, channel=Channel.LAUNCH,
                  stacklevel=2)

    def __repr__(self):
        return f"ConsoleLogger(level={self._level.value!r})"


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[ConsoleLogger] = None


def set_logger(logger: ConsoleLogger) -> ConsoleLogger:
    """Install ``logger`` as the process-wide console logger.

    Attaches a ConsoleHandler to the root logger and pins the root level
    to the logger's ceiling.

    Raises:
        LoggerInstallError: if a logger is already installed
    """
    global _logger
    if _logger is not None:
        raise LoggerInstallError(
            f"a logger has already been installed ({_logger!r})"
        )
    root = logging.getLogger()
    root.addHandler(ConsoleHandler(logger))
    root.setLevel(logger.level.stdlib_level())
    _logger = logger
    return logger


def try_init(level: LoggingLevel = LoggingLevel.NORMAL,
             verbose: bool = False) -> ConsoleLogger:
    """Set up the terminal and install a ConsoleLogger.

    Call once at program startup, before any logging happens. Never
    raises on double installation.

    Args:
        level: Logging level for the new logger
        verbose: Print a notice to stdout if installation fails

    Returns:
        The installed logger (the earlier one if this call lost)
    """
    if not console.stdout_isatty():
        style.disable()
    elif console.NEEDS_ANSI_UPGRADE:
        # Colors stay on even if this fails
        console.enable_ansi_colors()

    try:
        set_logger(ConsoleLogger(level))
    except LoggerInstallError as err:
        if verbose:
            print(f"Logger failed to initialize: {err}")
    return _logger


def init(level: LoggingLevel = LoggingLevel.NORMAL) -> ConsoleLogger:
    """try_init() that reports a failed installation."""
    return try_init(level, verbose=True)


def get_logger() -> Optional[ConsoleLogger]:
    """Get the installed ConsoleLogger, or None before init()."""
    return _logger


# =============================================================================
# Module-level emitters (continuation channel, forward to installed logger)
# =============================================================================

def error(fmt: str, *args: Any) -> None:
    if _logger is not None:
        _logger.emit(Severity.ERROR, fmt, *args, stacklevel=2)


def warn(fmt: str, *args: Any) -> None:
    if _logger is not None:
        _logger.emit(Severity.WARN, fmt, *args, stacklevel=2)


def info(fmt: str, *args: Any) -> None:
    if _logger is not None:
        _logger.emit(Severity.INFO, fmt, *args, stacklevel=2)


def debug(fmt: str, *args: Any) -> None:
    if _logger is not None:
        _logger.emit(Severity.DEBUG, fmt, *args, stacklevel=2)


def trace(fmt: str, *args: Any) -> None:
    if _logger is not None:
        _logger.emit(Severity.TRACE, fmt, *args, stacklevel=2)


def launch_info(fmt: str, *args: Any) -> None:
    if _logger is not None:
        _logger.emit(Severity.ERROR, fmt, *args, channel=Channel.LAUNCH,
                     stacklevel=2)
