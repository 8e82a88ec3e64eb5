"""Global exception handlers rendering failures into the envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hive.adapter.error import ProviderError
from hive.config import Settings
from hive.interface.api.envelope import ErrorEnvelope

# Location prefixes FastAPI adds in front of the field path
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _render(status_code: int, body: ErrorEnvelope, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install envelope-rendering exception handlers on the app.

    Args:
        app: FastAPI application
        settings: Application settings (production hides internal messages)
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        details = getattr(exc, "details", None) or None
        return _render(
            exc.status_code,
            ErrorEnvelope(error=str(exc.detail), details=details),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {
                "field": ".".join(
                    str(part)
                    for i, part in enumerate(error.get("loc", ()))
                    if not (i == 0 and part in _LOCATIONS)
                ),
                "message": error.get("msg", ""),
                "value": jsonable_encoder(error.get("input")),
            }
            for error in exc.errors()
        ]
        logfire.warn(
            "Request validation failed", path=request.url.path, errors=len(details)
        )
        return _render(
            status.HTTP_400_BAD_REQUEST,
            ErrorEnvelope(
                error="Validation failed",
                details=details,
                message="Validation failed: "
                + ", ".join(d["message"] for d in details),
            ),
        )

    @app.exception_handler(ProviderError)
    async def handle_provider_error(
        request: Request, exc: ProviderError
    ) -> JSONResponse:
        logfire.error(
            "Provider unavailable",
            path=request.url.path,
            provider=exc.provider,
            error=str(exc),
        )
        return _render(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            ErrorEnvelope(error=f"{exc.provider.capitalize()} provider unavailable"),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logfire.error(
            "Unhandled error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        message = None if settings.is_production else str(exc)
        return _render(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorEnvelope(error="Internal server error", message=message),
        )
