"""Observability configuration using Logfire.

Usage:
    import logfire

    # Structured logging
    logfire.info("Link created", link_id=link.id)

    # Manual spans for critical operations
    with logfire.span("send_notification", link_id=link_id):
        ...
"""

import logfire
from fastapi import FastAPI

from rsvp.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "rsvp-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def log_email_configuration(settings: Settings) -> None:
    """Report at startup whether email credentials are present.

    Never fails; a missing configuration only surfaces when a notification
    is attempted.
    """
    email = settings.email
    if email.has_api_key:
        transport = "sendgrid"
    elif email.has_smtp_credentials:
        transport = "smtp"
    else:
        transport = None

    if transport:
        logfire.info(
            "Email credentials found",
            transport=transport,
            sender=email.sender_address,
        )
        if not email.sender_address:
            logfire.warn(
                "Email sender address missing, notifications will be rejected "
                "until EMAIL__FROM_EMAIL or EMAIL__USER is set",
                transport=transport,
            )
    else:
        logfire.warn(
            "Email credentials missing, notifications will fail until "
            "EMAIL__API_KEY or EMAIL__USER/EMAIL__PASSWORD are set"
        )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Map request attributes, handling both HTTP and WebSocket requests."""
        result = {**attributes}

        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_httpx() -> None:
    """Instrument httpx client with Logfire.

    Traces calls made to the email API.
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
