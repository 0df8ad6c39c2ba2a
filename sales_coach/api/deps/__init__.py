"""API-specific dependencies."""

from .dependencies import (
    get_agent,
    get_coaching_service,
    get_minutes_service,
)

__all__ = [
    "get_agent",
    "get_coaching_service",
    "get_minutes_service",
]
