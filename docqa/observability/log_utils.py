"""
Helpers for logging user-supplied text.

Questions, documents and model answers can be arbitrarily long. These
helpers keep log records bounded and make every extra= value a plain string.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from collections.abc import Mapping
from typing import Any

DEFAULT_MAX_LENGTH = 200


def safe_log_value(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Render a value for a log record.

    Collections are summarised by size instead of dumped; long strings are cut
    to max_length with the original length noted.

    Args:
        value: Any value
        max_length: Longest rendering kept verbatim

    Returns:
        str: Bounded string rendering
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        text = value
    elif isinstance(value, Mapping):
        text = f"dict({len(value)} keys)"
    elif isinstance(value, (list, tuple, set, frozenset)):
        text = f"{type(value).__name__}({len(value)} items)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}... (truncated, {len(text)} total)"


def _safe_context(context: Mapping[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """Log message with every context value passed through safe_log_value."""
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception at ERROR level with its traceback.

    The exception type and (truncated) message are added to the context as
    error_type and error_msg.
    """
    extra = _safe_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
