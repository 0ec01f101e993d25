from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from oauth_http.app.ports.http_transport import HttpTransportError

_ENV_VARS = (
    "OAUTH_HTTP_CMD",
    "OAUTH_HTTP_GET_CMD",
    "OAUTH_HTTP_BACKEND",
    "OAUTH_HTTP_USER_AGENT",
    "OAUTH_HTTP_TIMEOUT_SECONDS",
    "OAUTH_HTTP_READ_CHUNK_SIZE",
)


class RecordingExecutor:
    """Implements CommandExecutor for tests; records commands instead of spawning them."""

    def __init__(
        self,
        reply: bytes = b"",
        *,
        raise_on_run: HttpTransportError | None = None,
    ) -> None:
        self.reply = reply
        self.commands: list[str] = []
        self._raise_on_run = raise_on_run

    def run(self, command: str) -> bytes:
        self.commands.append(command)
        if self._raise_on_run is not None:
            raise self._raise_on_run
        return self.reply


class FakeTransport:
    """Implements HttpTransport for tests; records calls as (operation, args)."""

    def __init__(self, reply: bytes = b"ok") -> None:
        self.reply = reply
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def get(self, url: str, query: str | None = None) -> bytes:
        self.calls.append(("get", (url, query)))
        return self.reply

    def post(self, url: str, body: str) -> bytes:
        self.calls.append(("post", (url, body)))
        return self.reply

    def post_file(
        self,
        url: str,
        file_path: str,
        length: int = 0,
        content_type: str | None = None,
    ) -> bytes:
        self.calls.append(("post_file", (url, file_path, length, content_type)))
        return self.reply


class CapturingHandler:
    """httpx.MockTransport handler that keeps every request it sees."""

    def __init__(
        self,
        response: httpx.Response | None = None,
        *,
        raise_on_request: type[httpx.RequestError] | None = None,
    ) -> None:
        self.response = response or httpx.Response(200, content=b"ok")
        self.requests: list[httpx.Request] = []
        self._raise_on_request = raise_on_request

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._raise_on_request is not None:
            raise self._raise_on_request("simulated failure", request=request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def mock_client_factory(handler: Callable[[httpx.Request], httpx.Response]) -> Callable[[], httpx.Client]:
    def factory() -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
