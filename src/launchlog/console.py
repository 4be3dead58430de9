"""
Terminal capability detection.

Two questions are answered here: is stdout an interactive terminal, and
(on Windows only) can the legacy console be switched into ANSI mode.
Non-Windows platforms never import the colorama console bindings.
"""

import sys


# Only the Windows console needs an explicit opt-in to ANSI sequences
NEEDS_ANSI_UPGRADE = sys.platform == 'win32'


def stdout_isatty(stream=None) -> bool:
    """Check whether ``stream`` (default: sys.stdout) is a terminal.

    Streams without ``isatty`` (or closed ones) count as not a terminal.
    """
    stream = stream if stream is not None else sys.stdout
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


if NEEDS_ANSI_UPGRADE:
    from colorama import winterm

    def enable_ansi_colors(stream=None) -> bool:
        """Turn on VT processing for the console behind ``stream``.

        Returns:
            True if the console now interprets ANSI sequences.
        """
        stream = stream if stream is not None else sys.stdout
        try:
            return bool(winterm.enable_vt_processing(stream.fileno()))
        except (OSError, ValueError, AttributeError):
            return False

else:
    def enable_ansi_colors(stream=None) -> bool:
        """ANSI is native here; nothing to switch on."""
        return True
