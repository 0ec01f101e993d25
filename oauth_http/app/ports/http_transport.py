"""HTTP transport port: contract for performing blocking GET/POST requests.

Application code depends on this port; infrastructure (httpx or a command-line
HTTP client run through the shell) implements it. Every operation returns the
complete reply body as bytes or raises an HttpTransportError subclass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class HttpTransportError(Exception):
    """Base for all transport failures."""


class ConfigurationError(HttpTransportError):
    """Raised for invalid configuration, before any I/O happens."""


class InvalidTemplateError(ConfigurationError):
    """Raised when a command template lacks a required placeholder."""

    def __init__(self, env_var: str, missing: str) -> None:
        super().__init__(
            f"invalid HTTP command: placeholder '{missing}' missing. "
            f"set the '{env_var}' environment variable."
        )
        self.env_var = env_var
        self.missing = missing


class TransportError(HttpTransportError):
    """Raised when the HTTP client fails (connection, protocol, client setup)."""


class TransportTimeoutError(TransportError):
    """Raised when the request times out."""


class SubprocessError(HttpTransportError):
    """Raised when the command interpreter cannot be spawned."""


class PostFileNotFoundError(HttpTransportError, FileNotFoundError):
    """Raised when the file to post cannot be stat'd or opened."""


class UnsupportedOperationError(HttpTransportError, NotImplementedError):
    """Raised when the active backend does not support an operation."""


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds."""

    connect_seconds: float
    read_seconds: float


@runtime_checkable
class HttpTransport(Protocol):
    """Port: perform one blocking request and return the reply body."""

    def get(self, url: str, query: str | None = None) -> bytes:
        """GET url, with query appended after a single '?' when non-empty."""
        ...

    def post(self, url: str, body: str) -> bytes:
        """POST body as the literal payload."""
        ...

    def post_file(
        self,
        url: str,
        file_path: str,
        length: int = 0,
        content_type: str | None = None,
    ) -> bytes:
        """POST raw file content; length 0 means use the size on disk."""
        ...
