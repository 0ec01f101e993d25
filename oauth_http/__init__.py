"""Blocking HTTP GET/POST for OAuth clients, over httpx or a command-line HTTP client.

The module-level functions read configuration from the environment on every
call; build a TransportDispatcher with create_dispatcher() to fix it once.
"""
from __future__ import annotations

from oauth_http.app.application.dispatcher import TransportDispatcher
from oauth_http.app.composition import create_dispatcher
from oauth_http.app.config.settings import Settings
from oauth_http.app.constants import USER_AGENT, VERSION
from oauth_http.app.ports.http_transport import (
    ConfigurationError,
    HttpTransportError,
    InvalidTemplateError,
    PostFileNotFoundError,
    SubprocessError,
    TransportError,
    TransportTimeoutError,
    UnsupportedOperationError,
)

__version__ = VERSION

__all__ = [
    "ConfigurationError",
    "HttpTransportError",
    "InvalidTemplateError",
    "PostFileNotFoundError",
    "Settings",
    "SubprocessError",
    "TransportDispatcher",
    "TransportError",
    "TransportTimeoutError",
    "USER_AGENT",
    "UnsupportedOperationError",
    "create_dispatcher",
    "http_get",
    "http_post",
    "post_file",
]


def http_get(url: str, query: str | None = None) -> bytes:
    return create_dispatcher().http_get(url, query)


def http_post(url: str, body: str) -> bytes:
    return create_dispatcher().http_post(url, body)


def post_file(url: str, file_path: str, length: int = 0, content_type: str | None = None) -> bytes:
    return create_dispatcher().post_file(url, file_path, length, content_type)
