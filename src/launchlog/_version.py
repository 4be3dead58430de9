"""
Version information for launchlog.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 0.1.0-alpha_main_7-20261019-4e1c2a9f

The build suffix is stamped by the release hook; edit only the
components below when bumping.
"""

MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", ...

__version__ = "0.1.0-alpha_main_7-20261019-4e1c2a9f"
__app_name__ = "launchlog"

# PEP 440 pre-release segments
_PHASE_SEGMENTS = {"alpha": "a0", "beta": "b0"}


def _build_parts():
    """Split the stamped suffix into (branch, build_number) or (None, None)."""
    if "_" not in __version__:
        return None, None
    _, branch, build = (__version__.split("_", 2) + ["", ""])[:3]
    return branch or None, build.split("-", 1)[0] or "0"


def get_base_version():
    """Return MAJOR.MINOR.PATCH[-PHASE]."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    return f"{base}-{PHASE}" if PHASE else base


def get_pip_version():
    """Return a PEP 440 version (0.1.0a0 on main, 0.1.0a0.devN elsewhere)."""
    version = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        version += _PHASE_SEGMENTS.get(PHASE, PHASE)
    branch, build = _build_parts()
    if branch is not None and branch != "main":
        version += f".dev{build}"
    return version


VERSION = __version__
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
