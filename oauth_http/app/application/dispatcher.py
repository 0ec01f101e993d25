"""Public request entry points, forwarded to the active transport."""
from __future__ import annotations

from oauth_http.app.ports.http_transport import HttpTransport


class TransportDispatcher:
    """
    Exposes http_get, http_post and post_file over one HttpTransport.

    The backend is chosen once, when the dispatcher is built, and every call is
    forwarded to it unchanged. Each call blocks until the reply is complete and
    returns the whole body as bytes; failures raise HttpTransportError subclasses.
    Nothing is retried here.
    """

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    def http_get(self, url: str, query: str | None = None) -> bytes:
        """GET url; a non-empty query is appended after a single '?'."""
        return self._transport.get(url, query)

    def http_post(self, url: str, body: str) -> bytes:
        return self._transport.post(url, body)

    def post_file(
        self,
        url: str,
        file_path: str,
        length: int = 0,
        content_type: str | None = None,
    ) -> bytes:
        """POST raw file content. length 0 autodetects; content_type defaults to image/jpeg."""
        return self._transport.post_file(url, file_path, length, content_type)
