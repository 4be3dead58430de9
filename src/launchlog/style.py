"""
Terminal styling built on colorama's ANSI codes.

Styling can be switched off process-wide with disable(). Once disabled,
every helper returns its text unchanged, so rendered output is
byte-identical to plain text. The switch is one-way: nothing re-enables
colors within the process.
"""

from colorama import Fore, Style


_enabled = True


def disable() -> None:
    """Turn off all styling for the rest of the process (idempotent)."""
    global _enabled
    _enabled = False


def is_enabled() -> bool:
    return _enabled


def paint(text, *codes: str) -> str:
    """Wrap ``text`` in the given ANSI codes plus a reset.

    Returns ``str(text)`` untouched when styling is disabled or no
    codes are given.
    """
    text = str(text)
    if not _enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{Style.RESET_ALL}"


def _bright(bold):
    return (Style.BRIGHT,) if bold else ()


def blue(text, bold=False) -> str:
    return paint(text, Fore.BLUE, *_bright(bold))


def purple(text, bold=False) -> str:
    return paint(text, Fore.MAGENTA, *_bright(bold))


def red(text, bold=False) -> str:
    return paint(text, Fore.RED, *_bright(bold))


def yellow(text, bold=False) -> str:
    return paint(text, Fore.YELLOW, *_bright(bold))


def white(text, bold=False) -> str:
    return paint(text, Fore.WHITE, *_bright(bold))
