"""Logfire configuration and instrumentation.

Application code traces and logs through `logfire` directly:

    with logfire.span("task_service.update_task", task_id=str(task_id)):
        logfire.info("Task updated", status=task.status.value)

This module configures the SDK once per process and attaches its
integrations to the web app, the database engine and the HTTP client.
"""

from typing import Any

import httpx
import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hive.config import Settings

SERVICE_NAME = "hive-api"

# Request parameters that must never reach a span
_SECRET_PARAMS = frozenset({"token"})


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Telemetry is exported when `OBSERVABILITY__LOGFIRE_TOKEN` is set, unless
    `OBSERVABILITY__SEND_TO_LOGFIRE` says otherwise; the console always
    receives it.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=observability.exports,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        exports=observability.exports,
    )


def redact_request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Hide credentials passed as request parameters.

    The WebSocket endpoint takes its identity token from the query string,
    which the FastAPI integration would otherwise record verbatim.
    """
    values = attributes.get("values")
    if not isinstance(values, dict) or not _SECRET_PARAMS & values.keys():
        return attributes
    redacted = {
        key: "[redacted]" if key in _SECRET_PARAMS else value
        for key, value in values.items()
    }
    return {**attributes, "values": redacted}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests and WebSocket sessions of the app."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization carries the bearer token
        request_attributes_mapper=redact_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx(client: httpx.AsyncClient) -> None:
    """Trace outbound requests of one client (signing-key fetches)."""
    logfire.instrument_httpx(client)
