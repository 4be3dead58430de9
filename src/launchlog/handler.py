"""
Bridge from stdlib ``logging`` into the console renderer.

Any library that logs through ``logging.getLogger(__name__)`` reaches
the same level policy, noise filter and styling as the handle's own
emitters. The logger name is used as the record's module path.
Tracebacks (``exc_info``) and ``stack_info`` are appended to the message
the way ``logging.Formatter.format`` does it.
"""

import dataclasses
import logging

from .record import LogRecord


_default_formatter = logging.Formatter()


class ConsoleHandler(logging.Handler):
    """``logging.Handler`` that hands records to a ConsoleLogger."""

    def __init__(self, console_logger):
        super().__init__()
        self.console_logger = console_logger

    def _message(self, record: logging.LogRecord) -> str:
        fmt = self.formatter or _default_formatter
        message = record.getMessage()
        if record.exc_info and not record.exc_text:
            record.exc_text = fmt.formatException(record.exc_info)
        if record.exc_text:
            message = f"{message}\n{record.exc_text}"
        if record.stack_info:
            message = f"{message}\n{fmt.formatStack(record.stack_info)}"
        return message

    def emit(self, record: logging.LogRecord) -> None:
        try:
            converted = dataclasses.replace(
                LogRecord.from_stdlib(record), message=self._message(record))
            self.console_logger.log(converted)
        except Exception:
            self.handleError(record)
