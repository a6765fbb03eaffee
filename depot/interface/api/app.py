"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from depot.config import Settings
from depot.interface.api.routes import auth, feed, follows, health, users
from depot.interface.error import install_error_handlers
from depot.util.di.container import create_container, setup_di
from depot.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this; scripts/start_app.py
    does so in production.

    Args:
        container: DI container to use; defaults to the production container

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Depot API",
        description=(
            "Account identity, API tokens, follows and update feed"
            " for the Depot package registry"
        ),
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    install_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(feed.router)
    app_instance.include_router(users.router)
    app_instance.include_router(follows.router)

    return app_instance
