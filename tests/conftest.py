"""Shared test fixtures for the launchlog test suite."""

import io
import logging
import os
from unittest.mock import patch

import pytest

from launchlog import logger as _logger_mod
from launchlog import style as _style_mod
from launchlog.handler import ConsoleHandler


# ---------------------------------------------------------------------------
# Process-wide state
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_logger_state():
    """Give every test a fresh, uninstalled logger and colors enabled.

    The installed handle, the root logger's handlers/level and the color
    switch are all process globals; restore them after each test.
    """
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = list(root.handlers)

    _logger_mod._logger = None
    _style_mod._enabled = True
    yield
    for handler in list(root.handlers):
        if isinstance(handler, ConsoleHandler) and handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_level)
    _logger_mod._logger = None
    _style_mod._enabled = True


@pytest.fixture
def colors_off():
    """Disable styling for the test (restored by _reset_logger_state)."""
    _style_mod.disable()


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.launchlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def isolated_config(tmp_config_home, tmp_path, monkeypatch):
    """No env level, no project file, empty home: resolution hits the default."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("LAUNCHLOG_LEVEL", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return workdir
