"""
Helpers for logging user-supplied values.

Questions, transcripts and uploaded text can be long and may contain
customer details; they are shortened before they reach a log line.

Dependencies: logging (stdlib)
System role: Log hygiene for conversation data
"""

import logging
from typing import Any

DEFAULT_MAX_LOG_LENGTH = 500


def safe_log_value(value: Any, max_length: int = DEFAULT_MAX_LOG_LENGTH) -> str:
    """
    Render a value for a log line, shortened to max_length characters.

    Containers are summarised by size instead of dumped.

    Args:
        value: Anything to log
        max_length: Truncation limit for the rendered text

    Returns:
        str: Printable, bounded representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}... (truncated, {len(text)} total)"


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """Log exc with traceback, its type and text, and bounded context values."""
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
