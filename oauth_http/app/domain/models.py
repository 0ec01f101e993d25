"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass

from oauth_http.app.constants import (
    DEFAULT_FILE_HEADER,
    READ_CHUNK_SIZE,
    USER_AGENT,
)
from oauth_http.app.ports.http_transport import RequestTimeout


def build_request_url(url: str, query: str | None = None) -> str:
    """url alone, or url + '?' + query when query is non-empty."""
    if query:
        return f"{url}?{query}"
    return url


@dataclass(frozen=True)
class RequestTarget:
    """Where a request goes. For GET body_or_query is the query string, for POST the payload."""

    url: str
    body_or_query: str | None = None

    @property
    def get_url(self) -> str:
        return build_request_url(self.url, self.body_or_query)


@dataclass(frozen=True)
class FilePostSpec:
    """Raw file upload: length 0 means autodetect from the file size on disk."""

    url: str
    file_path: str
    length: int = 0
    content_type: str | None = None

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError("file length must be >= 0")

    def header(self) -> tuple[str, str]:
        """The one custom header sent with the upload.

        content_type may be a bare type (``image/png``) or a full header line
        (``Content-Type: image/png``).
        """
        value = (self.content_type or "").strip() or DEFAULT_FILE_HEADER
        if ":" in value:
            name, _, header_value = value.partition(":")
            return name.strip(), header_value.strip()
        return "Content-Type", value


@dataclass(frozen=True)
class TransportOptions:
    """Explicit transport configuration, built once at the boundary."""

    # None selects the built-in curl command lines.
    get_command: str | None = None
    post_command: str | None = None
    user_agent: str = USER_AGENT
    timeout: RequestTimeout | None = None
    read_chunk_size: int = READ_CHUNK_SIZE
