"""FastAPI application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.api.routes import health
from app.api.routes.router import api_router
from app.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.database import close_database, create_engine, create_session_maker, create_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Environment: %s (debug=%s)", settings.environment, settings.debug)
    if settings.create_tables_on_startup:
        await create_tables(app.state.engine)
    yield
    logger.info("Shutting down...")
    await close_database(app.state.engine)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to run with. Read from the environment when omitted.

    Returns:
        FastAPI: Configured application instance.
    """
    settings = settings or get_settings()
    setup_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="A REST API for managing a bookstore catalogue.",
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings)
    app.state.session_maker = create_session_maker(app.state.engine)

    # Register exception handlers
    register_exception_handlers(app)

    # Add middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, tags=["System"])
    app.include_router(api_router, prefix="/api")

    return app


# Application instance
app = create_app()
