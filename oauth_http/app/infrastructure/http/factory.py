"""Transport factory: selects and assembles the active backend from settings."""
from __future__ import annotations

from oauth_http.app.config.settings import Settings
from oauth_http.app.constants import TRANSPORT_BACKEND
from oauth_http.app.infrastructure.command.command_line_transport import CommandLineTransport
from oauth_http.app.infrastructure.command.subprocess_executor import SubprocessExecutor
from oauth_http.app.infrastructure.http.httpx_transport import HttpxTransport
from oauth_http.app.ports.http_transport import HttpTransport


def create_transport(settings: Settings) -> HttpTransport:
    """Select transport adapter from configuration and return port type."""
    backend = settings.transport_backend.strip().lower()
    options = settings.to_options()

    if backend == TRANSPORT_BACKEND.LIBRARY:
        return HttpxTransport(options)
    if backend == TRANSPORT_BACKEND.COMMAND:
        return CommandLineTransport(SubprocessExecutor(options.read_chunk_size), options)
    raise ValueError(f"Unsupported transport backend: {backend}")
