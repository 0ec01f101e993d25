"""Concrete HTTP transport using httpx (the library-backed backend)."""
from __future__ import annotations

import os
from typing import Any, BinaryIO, Callable, Iterator

import httpx
from loguru import logger

from oauth_http.app.constants import FILE_READ_CHUNK_SIZE, FORM_CONTENT_TYPE
from oauth_http.app.core import SERVICE_NAME
from oauth_http.app.domain.buffer import GrowableBuffer
from oauth_http.app.domain.models import FilePostSpec, RequestTarget, TransportOptions
from oauth_http.app.ports.http_transport import (
    HttpTransport,
    PostFileNotFoundError,
    TransportError,
    TransportTimeoutError,
)


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _iter_file(handle: BinaryIO, length: int) -> Iterator[bytes]:
    """Yield at most length bytes from handle."""
    remaining = length
    while remaining > 0:
        chunk = handle.read(min(FILE_READ_CHUNK_SIZE, remaining))
        if not chunk:
            return
        remaining -= len(chunk)
        yield chunk


class HttpxTransport(HttpTransport):
    """HttpTransport implementation using a fresh httpx.Client per request.

    The response body is streamed chunk by chunk into a GrowableBuffer. Any HTTP
    status is a successful reply; only client-level failures raise.
    """

    def __init__(
        self,
        options: TransportOptions | None = None,
        *,
        client_factory: Callable[[], httpx.Client] = httpx.Client,
    ) -> None:
        self._options = options or TransportOptions()
        self._client_factory = client_factory

    def get(self, url: str, query: str | None = None) -> bytes:
        if not url:
            raise ValueError("url is required")
        return self._perform("GET", RequestTarget(url, query).get_url)

    def post(self, url: str, body: str) -> bytes:
        if not url:
            raise ValueError("url is required")
        return self._perform(
            "POST",
            url,
            content=(body or "").encode("utf-8"),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def post_file(
        self,
        url: str,
        file_path: str,
        length: int = 0,
        content_type: str | None = None,
    ) -> bytes:
        spec = FilePostSpec(url=url, file_path=file_path, length=length, content_type=content_type)
        size = spec.length or self._file_size(spec.file_path)
        header_name, header_value = spec.header()

        try:
            handle = open(spec.file_path, "rb")
        except OSError as exc:
            logger.warning("cannot open file to post {}: {}", spec.file_path, exc)
            raise PostFileNotFoundError(f"cannot open {spec.file_path}: {exc}") from exc

        _log("file_post_started", url=url, file_path=spec.file_path, size=size, header=header_name)
        with handle:
            return self._perform(
                "POST",
                spec.url,
                content=_iter_file(handle, size),
                headers={header_name: header_value, "Content-Length": str(size)},
            )

    def _file_size(self, file_path: str) -> int:
        try:
            return os.stat(file_path).st_size
        except OSError as exc:
            logger.warning("cannot stat file to post {}: {}", file_path, exc)
            raise PostFileNotFoundError(f"cannot stat {file_path}: {exc}") from exc

    def _timeout(self) -> httpx.Timeout | None:
        timeout = self._options.timeout
        if timeout is None:
            return None
        return httpx.Timeout(
            connect=timeout.connect_seconds,
            read=timeout.read_seconds,
            write=timeout.read_seconds,
            pool=timeout.connect_seconds,
        )

    def _perform(
        self,
        method: str,
        url: str,
        *,
        content: bytes | Iterator[bytes] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        request_headers = {"User-Agent": self._options.user_agent}
        request_headers.update(headers or {})

        try:
            client = self._client_factory()
        except (httpx.HTTPError, OSError, ValueError) as exc:
            logger.warning("http client initialisation failed: {}", exc)
            raise TransportError(f"cannot initialise http client: {exc}") from exc

        buffer = GrowableBuffer()
        _log("http_request_started", method=method, url=url)
        try:
            with client:
                with client.stream(
                    method,
                    url,
                    content=content,
                    headers=request_headers,
                    timeout=self._timeout(),
                ) as response:
                    for chunk in response.iter_bytes():
                        buffer.append(chunk)
        except httpx.TimeoutException as exc:
            logger.warning("http {} timed out for {}", method, url)
            raise TransportTimeoutError(f"timeout while requesting {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("http {} failed for {}: {}", method, url, exc)
            raise TransportError(f"http request failed for {url}: {exc}") from exc
        except UnicodeEncodeError as exc:
            # header values must be ASCII
            logger.warning("http {} headers not encodable for {}: {}", method, url, exc)
            raise TransportError(f"cannot encode request headers for {url}: {exc}") from exc

        _log(
            "http_request_completed",
            method=method,
            url=url,
            status_code=response.status_code,
            size=len(buffer),
        )
        return buffer.getvalue()
