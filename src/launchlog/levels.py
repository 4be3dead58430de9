"""
Severity scale and the three-valued logging level.

Records carry a Severity; the user configures a LoggingLevel. Each level
maps to a severity ceiling and the emit rule is simple:

    record.severity <= level.max_severity()  →  record is shown

Severity ranks (lower = more urgent):
    ←── urgent ─────────────────────── chatty ──→
    1       2      3      4       5
    error   warn   info   debug   trace

Level ceilings:
    critical → warn     (errors and warnings only)
    normal   → info     (everything except debug and trace)
    debug    → trace    (everything)
"""

import logging
from enum import Enum, IntEnum


# Stdlib has no TRACE; register it below DEBUG so logging.getLevelName works
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

EXPECTED_LEVELS = "a log level (debug, normal, critical)"


class LevelParseError(ValueError):
    """Raised when a level token is not one of debug/normal/critical."""

    def __init__(self, token):
        self.token = token
        self.expected = EXPECTED_LEVELS
        super().__init__(f"invalid log level {token!r}: expected {EXPECTED_LEVELS}")


class Severity(IntEnum):
    """Five-valued urgency of a single record."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    def stdlib_level(self) -> int:
        """Return the matching ``logging`` level number."""
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Severity":
        """Bucket a ``logging`` level number onto the severity scale.

        CRITICAL (50) has no counterpart and lands on ERROR.
        """
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


_STDLIB_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARN: logging.WARNING,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
    Severity.TRACE: TRACE_LEVEL,
}


class LoggingLevel(Enum):
    """User-facing verbosity knob."""

    CRITICAL = "critical"   # Only errors and warnings
    NORMAL = "normal"       # Everything except debug and trace
    DEBUG = "debug"         # Everything

    def max_severity(self) -> Severity:
        """Return the most verbose severity this level lets through."""
        return _CEILINGS[self]

    def enabled(self, severity: Severity) -> bool:
        """True when a record of ``severity`` passes this level."""
        return severity <= self.max_severity()

    def stdlib_level(self) -> int:
        """The ``logging`` number used as the root logger gate."""
        return self.max_severity().stdlib_level()

    @classmethod
    def parse(cls, token) -> "LoggingLevel":
        """Parse a case-sensitive level token.

        Args:
            token: One of "critical", "normal", "debug"

        Returns:
            The matching LoggingLevel

        Raises:
            LevelParseError: for any other value
        """
        for level in cls:
            if level.value == token:
                return level
        raise LevelParseError(token)

    def __str__(self):
        return self.value


_CEILINGS = {
    LoggingLevel.CRITICAL: Severity.WARN,
    LoggingLevel.NORMAL: Severity.INFO,
    LoggingLevel.DEBUG: Severity.TRACE,
}
