"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gallery.config import Settings
from gallery.interface.api.routes import (
    artists,
    artworks,
    display_orders,
    health,
    invitations,
)
from gallery.interface.error import register_error_handlers
from gallery.util.di.container import create_container, setup_di
from gallery.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Gallery API",
        description="Administration API for the gallery: artist invitations, artwork review and display ordering",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            "X-Stack-Access-Token",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(display_orders.router)
    app_instance.include_router(artworks.router)
    app_instance.include_router(artists.router)
    app_instance.include_router(invitations.admin_router)
    app_instance.include_router(invitations.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
