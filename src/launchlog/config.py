"""Configuration resolution for launchlog.

Layered level resolution (highest priority wins):
  1. CLI flag — --log-level on the command line
  2. Environment — LAUNCHLOG_LEVEL
  3. Project config — "log_level" in .launchlog.json, walking up from cwd
  4. Global config — "log_level" in ~/.launchlog/config.json
  5. Default — "normal"

A bad value from any layer is reported with the layer it came from.
"""

import json
import os
from pathlib import Path

from launchlog.levels import LevelParseError, LoggingLevel


ENV_LEVEL = "LAUNCHLOG_LEVEL"
ENV_NO_COLOR = "NO_COLOR"
PROJECT_CONFIG_NAME = ".launchlog.json"
CONFIG_KEY = "log_level"
DEFAULT_LEVEL = LoggingLevel.NORMAL


class ConfigError(ValueError):
    """A configuration source supplied an unusable value."""

    def __init__(self, source, cause):
        self.source = source
        self.cause = cause
        super().__init__(f"{source}: {cause}")


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_path():
    """Return path to the global config file (~/.launchlog/config.json)."""
    return Path.home() / ".launchlog" / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .launchlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
def _candidates(cli_value, start_dir, environ):
    """Yield (source, raw_value) pairs in priority order."""
    yield "--log-level", cli_value
    yield ENV_LEVEL, environ.get(ENV_LEVEL)

    project_path = find_project_config(start_dir)
    if project_path:
        yield str(project_path), load_json(project_path).get(CONFIG_KEY)

    global_path = get_global_config_path()
    yield str(global_path), load_json(global_path).get(CONFIG_KEY)


def resolve_level(cli_value=None, start_dir=None, environ=None):
    """Resolve the logging level using layered precedence.

    Args:
        cli_value: Raw --log-level value, or None if not given
        start_dir: Where to start the .launchlog.json walk (default: cwd)
        environ: Environment mapping (default: os.environ)

    Returns:
        The resolved LoggingLevel.

    Raises:
        ConfigError: if the winning source holds an invalid token.
    """
    if environ is None:
        environ = os.environ
    for source, raw in _candidates(cli_value, start_dir, environ):
        if raw is None or raw == "":
            continue
        try:
            return LoggingLevel.parse(raw)
        except LevelParseError as e:
            raise ConfigError(source, e) from e
    return DEFAULT_LEVEL


def colors_requested(no_color_flag=False, environ=None):
    """Return False when --no-color is set or NO_COLOR is non-empty."""
    if environ is None:
        environ = os.environ
    if no_color_flag:
        return False
    return not environ.get(ENV_NO_COLOR)
