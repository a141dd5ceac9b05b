"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rsvp.config import Settings
from rsvp.interface.api.errors import register_exception_handlers
from rsvp.interface.api.routes import health, links
from rsvp.util.di.container import create_container, setup_di
from rsvp.util.observability import (
    instrument_fastapi,
    instrument_httpx,
    log_email_configuration,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container, the production container when omitted
    """
    settings = Settings()

    # Outbound calls to the email API
    instrument_httpx()

    app_instance = FastAPI(
        title="RSVP Links API",
        description="Single-use invitation links with yes/no responses and email notifications",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(links.router)

    log_email_configuration(settings)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
