"""
Tests for launchlog.logger — the handle, one-time install, and emitters.

Complements test_render.py, which covers the layout rules directly.
"""

import logging
import sys

import pytest

import launchlog
from launchlog import console, style
from launchlog.channels import Channel
from launchlog.handler import ConsoleHandler
from launchlog.levels import LoggingLevel, Severity, TRACE_LEVEL
from launchlog.logger import (
    ConsoleLogger, LoggerInstallError,
    get_logger, init, set_logger, try_init,
)
from launchlog.record import LogRecord


class _Exploding:
    """Formatting this object fails; used to prove formatting is skipped."""

    def __format__(self, spec):
        raise AssertionError("message was formatted")


class _RecordingStream:
    """Stream that remembers every write and flush."""

    def __init__(self):
        self.writes = []
        self.flushes = 0

    def write(self, text):
        self.writes.append(text)
        return len(text)

    def flush(self):
        self.flushes += 1


def _root_console_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, ConsoleHandler)]


# =============================================================================
# ConsoleLogger handle
# =============================================================================

@pytest.mark.usefixtures("colors_off")
class TestConsoleLogger:
    """Emission through an explicit handle writing to a buffer."""

    def test_info_uses_continuation_indent(self, buf):
        log = ConsoleLogger(LoggingLevel.NORMAL, file=buf)
        log.info("Mounting {}:", "/")
        assert buf.getvalue() == "    => Mounting /:\n"

    def test_error_and_warn(self, buf):
        log = ConsoleLogger(LoggingLevel.NORMAL, file=buf)
        log.error("bad {}", 1)
        log.warn("odd {}", 2)
        assert buf.getvalue() == "    => Error: bad 1\n    => Warning: odd 2\n"

    def test_critical_level_drops_indent(self, buf):
        log = ConsoleLogger(LoggingLevel.CRITICAL, file=buf)
        log.warn("disk low")
        log.info("hidden")
        assert buf.getvalue() == "Warning: disk low\n"

    def test_launch_info_plain_info_style(self, buf):
        log = ConsoleLogger(LoggingLevel.CRITICAL, file=buf)
        log.launch_info("Launching from {}", "http://localhost:8000")
        assert buf.getvalue() == "Launching from http://localhost:8000\n"

    def test_no_args_leaves_braces_alone(self, buf):
        log = ConsoleLogger(LoggingLevel.NORMAL, file=buf)
        log.info("literal {braces}")
        assert buf.getvalue() == "    => literal {braces}\n"

    def test_disabled_record_is_never_formatted(self, buf):
        log = ConsoleLogger(LoggingLevel.NORMAL, file=buf)
        log.trace("{}", _Exploding())
        log.debug("{}", _Exploding())
        assert buf.getvalue() == ""

    def test_debug_reports_caller_location(self, buf):
        log = ConsoleLogger(LoggingLevel.DEBUG, file=buf)
        line = sys._getframe().f_lineno + 1
        log.debug("state={}", 3)
        assert buf.getvalue() == f"    => \n--> {__file__}:{line}\nstate=3\n"

    def test_record_metadata(self, buf, monkeypatch):
        log = ConsoleLogger(LoggingLevel.NORMAL, file=buf)
        seen = []
        monkeypatch.setattr(log, "log", seen.append)
        log.warn("x")
        record = seen[0]
        assert record.severity is Severity.WARN
        assert record.channel is Channel.CONTINUATION
        assert record.module_path == __name__
        assert record.file == __file__

    def test_emit_with_explicit_channel(self, buf):
        log = ConsoleLogger(LoggingLevel.NORMAL, file=buf)
        log.emit(Severity.INFO, "plain {}", "text", channel=Channel.PLAIN)
        assert buf.getvalue() == "plain text\n"

    def test_level_is_read_only(self):
        log = ConsoleLogger(LoggingLevel.DEBUG)
        with pytest.raises(AttributeError):
            log.level = LoggingLevel.NORMAL

    def test_defaults_to_stdout(self, capsys):
        log = ConsoleLogger()
        log.info("to stdout")
        captured = capsys.readouterr()
        assert captured.out == "    => to stdout\n"
        assert captured.err == ""

    def test_debug_record_written_in_one_call(self):
        """The two-line debug form goes out in a single write, then a flush."""
        stream = _RecordingStream()
        log = ConsoleLogger(LoggingLevel.DEBUG, file=stream)
        log.debug("x")
        content = [w for w in stream.writes if w]
        assert len(content) == 1
        assert content[0].startswith("    => \n--> ")
        assert content[0].endswith("\nx\n")
        assert stream.flushes == 1


# =============================================================================
# Installation
# =============================================================================

class TestInstall:
    """One-time installation and the non-fatal double install."""

    def test_get_logger_before_init(self):
        assert get_logger() is None

    def test_try_init_installs(self):
        log = try_init(LoggingLevel.NORMAL)
        assert isinstance(log, ConsoleLogger)
        assert get_logger() is log
        assert log.level is LoggingLevel.NORMAL
        assert len(_root_console_handlers()) == 1

    @pytest.mark.parametrize("level,gate", [
        (LoggingLevel.CRITICAL, logging.WARNING),
        (LoggingLevel.NORMAL, logging.INFO),
        (LoggingLevel.DEBUG, TRACE_LEVEL),
    ])
    def test_root_gate_set_to_ceiling(self, level, gate):
        try_init(level)
        assert logging.getLogger().level == gate

    def test_second_init_verbose_reports(self, capsys):
        first = init(LoggingLevel.DEBUG)
        second = init(LoggingLevel.CRITICAL)
        captured = capsys.readouterr()
        assert "Logger failed to initialize:" in captured.out
        assert "already been installed" in captured.out
        assert second is first
        assert get_logger().level is LoggingLevel.DEBUG
        assert len(_root_console_handlers()) == 1

    def test_second_try_init_quiet_is_silent(self, capsys):
        first = try_init(LoggingLevel.NORMAL)
        second = try_init(LoggingLevel.DEBUG)
        assert capsys.readouterr().out == ""
        assert second is first
        assert logging.getLogger().level == logging.INFO

    def test_set_logger_raises_on_second_install(self):
        set_logger(ConsoleLogger(LoggingLevel.NORMAL))
        with pytest.raises(LoggerInstallError):
            set_logger(ConsoleLogger(LoggingLevel.DEBUG))

    def test_non_tty_disables_colors(self):
        assert style.is_enabled()
        try_init(LoggingLevel.NORMAL)  # capsys/pytest stdout is not a tty
        assert not style.is_enabled()

    def test_tty_keeps_colors_even_if_upgrade_fails(self, monkeypatch):
        calls = []
        monkeypatch.setattr(console, "stdout_isatty", lambda stream=None: True)
        monkeypatch.setattr(console, "NEEDS_ANSI_UPGRADE", True)
        monkeypatch.setattr(console, "enable_ansi_colors",
                            lambda: calls.append(1) or False)
        try_init(LoggingLevel.NORMAL)
        assert calls == [1]
        assert style.is_enabled()

    def test_tty_without_upgrade_skips_console_call(self, monkeypatch):
        monkeypatch.setattr(console, "stdout_isatty", lambda stream=None: True)
        monkeypatch.setattr(console, "NEEDS_ANSI_UPGRADE", False)
        monkeypatch.setattr(console, "enable_ansi_colors",
                            lambda: pytest.fail("console mode touched"))
        try_init(LoggingLevel.NORMAL)
        assert style.is_enabled()


# =============================================================================
# Module-level emitters
# =============================================================================

class TestModuleEmitters:
    """launchlog.error/warn/info/debug/trace/launch_info."""

    def test_noop_before_init(self, capsys):
        launchlog.error("nobody listening")
        launchlog.launch_info("nobody listening")
        assert capsys.readouterr().out == ""

    def test_forward_to_installed_logger(self, capsys):
        try_init(LoggingLevel.NORMAL)
        launchlog.info("Mounting {}", "/hello")
        launchlog.warn("Overriding {}", "GET /")
        launchlog.trace("hidden")
        launchlog.launch_info("Launched on {}", 8000)
        assert capsys.readouterr().out == (
            "    => Mounting /hello\n"
            "    => Warning: Overriding GET /\n"
            "Launched on 8000\n"
        )

    def test_debug_location_is_call_site(self, capsys):
        try_init(LoggingLevel.DEBUG)
        line = sys._getframe().f_lineno + 1
        launchlog.debug("here")
        assert f"--> {__file__}:{line}\n" in capsys.readouterr().out

    def test_error_at_critical(self, capsys):
        try_init(LoggingLevel.CRITICAL)
        launchlog.error("fatal {}", "thing")
        assert capsys.readouterr().out == "Error: fatal thing\n"


# =============================================================================
# Stdlib logging bridge
# =============================================================================

class TestStdlibBridge:
    """Records from logging.getLogger(...) flow through the same policy."""

    def test_plain_channel_by_default(self, capsys):
        try_init(LoggingLevel.NORMAL)
        logging.getLogger("myapp").info("hello %s", "world")
        assert capsys.readouterr().out == "hello world\n"

    def test_root_gate_filters_before_handler(self, capsys):
        try_init(LoggingLevel.NORMAL)
        app = logging.getLogger("myapp")
        assert not app.isEnabledFor(logging.DEBUG)
        app.debug("dropped")
        assert capsys.readouterr().out == ""

    def test_channel_from_extra(self, capsys):
        try_init(LoggingLevel.NORMAL)
        logging.getLogger("myapp").warning(
            "slow route", extra={"channel": Channel.CONTINUATION})
        assert capsys.readouterr().out == "    => Warning: slow route\n"

    def test_launch_channel_from_string_extra(self, capsys):
        try_init(LoggingLevel.CRITICAL)
        logging.getLogger("myapp").error("Launching", extra={"channel": "launch"})
        assert capsys.readouterr().out == "Launching\n"

    def test_noisy_library_suppressed_at_normal(self, capsys):
        try_init(LoggingLevel.NORMAL)
        logging.getLogger("hyper.client").error("connection reset")
        assert capsys.readouterr().out == ""

    def test_noisy_library_shown_at_debug(self, capsys):
        try_init(LoggingLevel.DEBUG)
        logging.getLogger("hyper.client").error("connection reset")
        assert capsys.readouterr().out == "Error: connection reset\n"

    def test_stdlib_critical_renders_as_error(self, capsys):
        try_init(LoggingLevel.CRITICAL)
        logging.getLogger("myapp").critical("meltdown")
        assert capsys.readouterr().out == "Error: meltdown\n"

    def test_trace_level_through_stdlib(self, capsys):
        try_init(LoggingLevel.DEBUG)
        logging.getLogger("myapp").log(TRACE_LEVEL, "fine detail")
        assert capsys.readouterr().out == "fine detail\n"

    def test_exception_traceback_rendered(self, capsys):
        try_init(LoggingLevel.NORMAL)
        try:
            1 / 0
        except ZeroDivisionError:
            logging.getLogger("myapp").exception("request failed")
        out = capsys.readouterr().out
        assert out.startswith("Error: request failed\nTraceback (most recent call last):\n")
        assert "ZeroDivisionError: division by zero" in out
        assert out.endswith("\n")

    def test_stack_info_rendered(self, capsys):
        try_init(LoggingLevel.NORMAL)
        logging.getLogger("myapp").error("where", stack_info=True)
        out = capsys.readouterr().out
        assert out.startswith("Error: where\nStack (most recent call last):\n")
        assert "test_stack_info_rendered" in out

    def test_custom_formatter_formats_exception(self, capsys):
        class ShortFormatter(logging.Formatter):
            def formatException(self, ei):
                return f"[{ei[0].__name__}]"

        log = try_init(LoggingLevel.NORMAL)
        handler = ConsoleHandler(log)
        handler.setFormatter(ShortFormatter())
        try:
            raise KeyError("k")
        except KeyError:
            record = logging.getLogger("myapp").makeRecord(
                "myapp", logging.ERROR, __file__, 1, "lookup", None, sys.exc_info())
        handler.emit(record)
        assert capsys.readouterr().out == "Error: lookup\n[KeyError]\n"

    def test_handler_errors_do_not_propagate(self, monkeypatch):
        class Broken:
            def log(self, record):
                raise RuntimeError("stream gone")

        monkeypatch.setattr(logging, "raiseExceptions", False)
        handler = ConsoleHandler(Broken())
        record = logging.LogRecord("myapp", logging.ERROR, __file__, 1,
                                   "boom", None, None)
        handler.emit(record)  # must not raise

    def test_from_stdlib_conversion(self):
        record = logging.LogRecord("hyper.client", logging.WARNING, "/src/x.py", 7,
                                   "n=%d", (5,), None)
        converted = LogRecord.from_stdlib(record)
        assert converted == LogRecord(
            severity=Severity.WARN, message="n=5", channel=Channel.PLAIN,
            module_path="hyper.client", file="/src/x.py", line=7,
        )
