"""
Renderer: turns an accepted LogRecord into the exact console text.

Precedence, first match wins where it short-circuits:

    1. disabled by the level         → nothing
    2. launch channel                → style as info
    3. noisy module, level != debug  → nothing
    4. continuation, level != crit.  → "    => " prefix
    5. body by effective severity

Body layouts (colors off)::

    info     message
    trace    message
    error    Error: message
    warn     Warning: message
    debug    <blank line>
             --> file:line
             message
"""

from . import style
from .channels import Channel
from .levels import LoggingLevel, Severity
from .record import LogRecord


# Chatty transport libraries, shown only at debug level: hyper for HTTP and
# urllib3 for the pooled TLS connection layer
NOISY_MODULE_PREFIXES = ('hyper.', 'urllib3.')

CONTINUATION_INDENT = '    '
CONTINUATION_GLYPH = '=>'


def is_noisy(module_path: str) -> bool:
    return module_path.startswith(NOISY_MODULE_PREFIXES)


def render(record: LogRecord, level: LoggingLevel) -> str:
    """Render ``record`` for ``level``.

    Args:
        record: The record to render
        level: Active logging level

    Returns:
        The text to write, newline-terminated, or "" when the record
        produces no output.
    """
    if not level.enabled(record.severity):
        return ''

    severity = record.effective_severity

    if level is not LoggingLevel.DEBUG and is_noisy(record.module_path):
        return ''

    prefix = ''
    if record.channel is Channel.CONTINUATION and level is not LoggingLevel.CRITICAL:
        prefix = f"{CONTINUATION_INDENT}{style.white(CONTINUATION_GLYPH)} "

    return prefix + _render_body(record, severity)


def _render_body(record: LogRecord, severity: Severity) -> str:
    msg = record.message
    if severity is Severity.INFO:
        return f"{style.blue(msg)}\n"
    if severity is Severity.TRACE:
        return f"{style.purple(msg)}\n"
    if severity is Severity.ERROR:
        return f"{style.red('Error:', bold=True)} {style.red(msg)}\n"
    if severity is Severity.WARN:
        return f"{style.yellow('Warning:', bold=True)} {style.yellow(msg)}\n"
    # Debug: location line, then the unstyled message
    location = f"{style.blue(record.file)}:{style.blue(record.line)}"
    return f"\n{style.blue('-->', bold=True)} {location}\n{msg}\n"
