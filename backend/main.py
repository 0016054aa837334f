"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.deps import get_settings as deps_get_settings
from backend.errors import register_exception_handlers
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    app = FastAPI(
        title="FitTrack Pro API",
        description="Workout logging, social feed and profile API",
        version="1.0.0",
    )

    # Dependencies resolve the same settings the app was built with
    app.dependency_overrides[deps_get_settings] = lambda: settings

    _configure_cors(app, settings)
    register_exception_handlers(app)
    _include_routers(app, settings)
    _log_configuration(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
        )
        logger.info("Sentry initialized for fittrack-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI, settings: Settings) -> None:
    """Include all API routers under the configured prefix."""
    from api.routers import (
        health_router,
        auth_router,
        profile_router,
        exercises_router,
        logs_router,
        food_router,
        workouts_router,
    )

    prefix = settings.api_prefix
    app.include_router(health_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(profile_router, prefix=prefix)
    app.include_router(exercises_router, prefix=prefix)
    app.include_router(logs_router, prefix=prefix)
    app.include_router(food_router, prefix=prefix)
    app.include_router(workouts_router, prefix=prefix)


def _log_configuration(settings: Settings) -> None:
    """Log which integrations are configured at startup."""
    if settings.supabase_configured:
        logger.info("Supabase configured")
    else:
        logger.warning("Supabase credentials not configured; database routes will return 503")

    if not settings.ninjas_api_key:
        logger.warning("NINJAS_API_KEY not set; /foodinfo will fail")

    if not settings.admin_email:
        logger.info("ADMIN_EMAIL not set; no account will receive the admin role")


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
