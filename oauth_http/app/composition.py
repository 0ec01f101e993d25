"""Composition root: read settings once and wire the dispatcher to its backend."""
from __future__ import annotations

from typing import Any

from loguru import logger

from oauth_http.app.application.dispatcher import TransportDispatcher
from oauth_http.app.config.settings import Settings
from oauth_http.app.core import SERVICE_NAME
from oauth_http.app.infrastructure.http.factory import create_transport


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def create_dispatcher(settings: Settings | None = None) -> TransportDispatcher:
    settings = settings or Settings()
    transport = create_transport(settings)
    _log("dispatcher_created", backend=settings.transport_backend, transport=type(transport).__name__)
    return TransportDispatcher(transport)
