"""API routers."""

from .ask import router as ask_router
from .coaching import router as coaching_router
from .health import router as health_router
from .knowledge import router as knowledge_router
from .minutes import router as minutes_router

__all__ = [
    "ask_router",
    "coaching_router",
    "health_router",
    "knowledge_router",
    "minutes_router",
]
