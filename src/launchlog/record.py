"""
LogRecord — the immutable input to the renderer.
"""

import logging
from dataclasses import dataclass

from .channels import CHANNEL_ATTR, Channel, coerce_channel
from .levels import Severity


@dataclass(frozen=True)
class LogRecord:
    """A single formatted record and where it came from.

    Attributes:
        severity: Urgency assigned by the emitting call site
        message: Fully formatted message text
        channel: Layout tag (plain, continuation, launch)
        module_path: Dotted module/logger name (e.g., 'hyper.client')
        file: Source file of the call site
        line: Source line of the call site
    """
    severity: Severity
    message: str
    channel: Channel = Channel.PLAIN
    module_path: str = ''
    file: str = ''
    line: int = 0

    @property
    def effective_severity(self) -> Severity:
        """Severity used for styling; launch records always render as info."""
        if self.channel is Channel.LAUNCH:
            return Severity.INFO
        return self.severity

    @classmethod
    def from_stdlib(cls, record: logging.LogRecord) -> "LogRecord":
        """Build a LogRecord from a ``logging.LogRecord``.

        The logger name stands in for the module path, since loggers are
        conventionally named after ``__name__``.
        """
        return cls(
            severity=Severity.from_stdlib(record.levelno),
            message=record.getMessage(),
            channel=coerce_channel(getattr(record, CHANNEL_ATTR, None)),
            module_path=record.name,
            file=record.pathname,
            line=record.lineno,
        )
