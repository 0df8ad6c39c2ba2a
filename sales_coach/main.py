"""
Sales-Coach HTTP server.

create_app() assembles routers, middleware and error handlers around a
single SalesCoachAgent handle. ``python -m sales_coach.main`` serves the
app with uvicorn on the configured host and port.

Dependencies: fastapi, uvicorn, python-dotenv, sales_coach.api
System role: Process entry point
"""

from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sales_coach import __version__
from sales_coach.api.error_handling import register_exception_handlers
from sales_coach.api.routers import (
    ask_router,
    coaching_router,
    health_router,
    knowledge_router,
    minutes_router,
)
from sales_coach.configs import Settings, get_settings
from sales_coach.core.agent import SalesCoachAgent
from sales_coach.observability.logger import configure_logging
from sales_coach.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

load_dotenv()

logger = logging.getLogger(__name__)

ENDPOINTS = (
    "POST /ask",
    "POST /coaching",
    "POST /knowledge/add",
    "POST /knowledge/upload",
    "POST /minutes/summary",
    "POST /minutes/extract",
    "GET  /health",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create the shared agent handle (no provider calls yet)."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info(f"{__name__}:lifespan - Startup (environment={settings.environment})")

    if getattr(app.state, "agent", None) is None:
        app.state.agent = SalesCoachAgent(settings)
        logger.info(
            "Sales-coach agent created",
            extra={"vector_store": settings.vector_store.store_type, "model": settings.llm.model},
        )

    yield

    logger.info(f"{__name__}:lifespan - Shutdown")


def create_app(settings: Settings | None = None, agent: SalesCoachAgent | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: Settings to serve with (defaults to get_settings())
        agent: Agent handle to use; when None the lifespan creates one
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Sales Coach API",
        description="Sales-conversation assistant with grounded Q&A and coaching suggestions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.agent = agent

    # last added runs first: correlation wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=settings.debug)

    app.include_router(ask_router)
    app.include_router(coaching_router)
    app.include_router(knowledge_router)
    app.include_router(minutes_router)
    app.include_router(health_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Server listening on http://{settings.server.host}:{settings.server.port}")
    for endpoint in ENDPOINTS:
        logger.info(f"  {endpoint}")

    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
    )
