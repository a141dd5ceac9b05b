"""Exception handlers rendering every error as ``{"error": ..., "details": ...}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_body(error: str, details: object | None = None) -> dict:
    """Build the JSON error payload."""
    body: dict = {"error": error}
    if details is not None:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI app.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render HTTPException detail as an error payload.

        A dict detail is passed through so routes can attach ``details``.
        """
        if isinstance(exc.detail, dict):
            content = exc.detail
        else:
            content = error_body(str(exc.detail))
        return JSONResponse(
            status_code=exc.status_code, content=content, headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed request bodies with 400 instead of 422."""
        field_errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"] if loc != "body")
                or "body",
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Request validation failed: {request.method} {request.url.path}"
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Invalid request", field_errors),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all so no request error escapes as an unstructured response."""
        logger.exception(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )
