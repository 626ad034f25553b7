"""Logfire setup and instrumentation.

Services log and trace through logfire directly:

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.delete_comment", comment_id=str(cid)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from penpixel.config import Settings

SERVICE_NAME = "penpixel-backend"


def _sends_to_cloud(settings: Settings) -> bool:
    """An explicit send_to_logfire wins, otherwise a token enables sending."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Without a token everything stays on the local console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _sends_to_cloud(settings)
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
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
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    mapped = dict(attributes)
    method = getattr(request, "method", None)
    if method:
        mapped["method"] = method
    url = getattr(request, "url", None)
    if url is not None:
        mapped["path"] = url.path
    client = getattr(request, "client", None)
    if client:
        mapped["client_host"] = client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its method, path and client host."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization carries the bearer token
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
