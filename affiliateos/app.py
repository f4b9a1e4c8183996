"""
FastAPI application instance with lifespan management.

This module creates the FastAPI application with proper configuration,
middleware, and lifespan management for the agent, Telegram client and
logging setup.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from affiliateos.controller.agent import router as agent_router
from affiliateos.controller.telegram import router as telegram_router
from affiliateos.controller.tools import router as tools_router
from affiliateos.exceptions.handler import register_exception_handlers
from affiliateos.lifespan import lifespan
from affiliateos.middleware import ContextMiddleware, LoggingMiddleware, RequestIDMiddleware
from affiliateos.models.errors import HTTPException
from affiliateos.settings import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with; the global settings when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        responses={
            500: {"model": HTTPException, "description": "Internal Server Error"},
            404: {"model": HTTPException, "description": "Resource Not Found"},
            403: {"model": HTTPException, "description": "Forbidden"},
            422: {"model": HTTPException, "description": "Unprocessable Entity"},
        },
    )
    app.state.settings = settings
    register_exception_handlers(app)
    if settings.SERVER.CORS_ENABLED:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.SERVER.CORS_ORIGINS,
            allow_methods=settings.SERVER.CORS_ALLOW_METHODS,
            allow_headers=["*"],
        )
    app.add_middleware(LoggingMiddleware, slow_request_threshold_ms=settings.SERVER.SLOW_REQUEST_THRESHOLD_MS)
    app.add_middleware(ContextMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(agent_router)
    app.include_router(telegram_router)
    app.include_router(tools_router)

    @app.get("/")
    async def root():
        """Application info."""
        return {
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create the application instance
app: FastAPI = create_app()
