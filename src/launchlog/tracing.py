"""
Function tracing decorator.

Routes entry/exit records through the installed ConsoleLogger at trace
severity on the continuation channel. Nothing is formatted unless the
logger's level lets trace records through.
"""

import functools
import inspect
from pathlib import Path

from .levels import Severity


def _short_repr(value, key=None):
    if isinstance(value, Path):
        text = f"Path('{value}')"
    elif isinstance(value, str) and len(value) > 50:
        text = f"'{value[:47]}...'"
    elif isinstance(value, (list, tuple)) and len(value) > 3:
        text = f"[...{len(value)} items...]"
    else:
        text = repr(value)
    return f"{key}={text}" if key is not None else text


def trace_calls(func):
    """Decorator to trace function calls via the installed logger.

    Shows function entry/exit with arguments and return values when the
    installed logger runs at debug level.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .logger import get_logger

        log = get_logger()
        if log is None or not log.enabled(Severity.TRACE):
            return func(*args, **kwargs)

        module = inspect.getmodule(func)
        module_name = module.__name__ if module else "unknown"
        name = f"{module_name}.{func.__qualname__}"

        args_repr = [_short_repr(a) for a in args]
        args_repr.extend(_short_repr(v, key=k) for k, v in kwargs.items())

        log.emit(Severity.TRACE, ">> {}({})", name, ', '.join(args_repr),
                 stacklevel=2)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            log.emit(Severity.TRACE, "!! {} raised: {}: {}",
                     name, type(e).__name__, e, stacklevel=2)
            raise

        log.emit(Severity.TRACE, "<< {} returned: {}", name,
                 _short_repr(result), stacklevel=2)
        return result

    return wrapper
