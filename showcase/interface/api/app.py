"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.config import Settings
from showcase.interface.api.middleware import SessionGateMiddleware
from showcase.interface.api.routes import (
    categories,
    dashboard,
    health,
    projects,
    users,
)
from showcase.util.di.container import create_container, setup_di
from showcase.util.observability import instrument_fastapi, instrument_httpx


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Showcase API",
        description="Backend API for a community project directory",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Added first so CORS wraps it and redirects still carry CORS headers
    app_instance.add_middleware(SessionGateMiddleware)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(projects.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(dashboard.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
