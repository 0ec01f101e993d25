"""
Integration tests for both transports using real HTTP and curated echo URLs.

Uses URLs from tests.test_data. Requires network (and curl for the command
backend). Run with:
  pytest tests/integration -m integration -v
"""
from __future__ import annotations

import json
import shutil

import pytest

from oauth_http.app.application.dispatcher import TransportDispatcher
from oauth_http.app.constants import USER_AGENT
from oauth_http.app.infrastructure.command.command_line_transport import CommandLineTransport
from oauth_http.app.infrastructure.command.subprocess_executor import SubprocessExecutor
from oauth_http.app.infrastructure.http.httpx_transport import HttpxTransport
from tests.test_data import ECHO_GET_URL, ECHO_POST_URL, TEST_URLS_ERROR_STATUS


@pytest.fixture
def library_dispatcher() -> TransportDispatcher:
    return TransportDispatcher(HttpxTransport())


@pytest.fixture
def command_dispatcher() -> TransportDispatcher:
    if shutil.which("curl") is None:
        pytest.skip("curl not installed")
    return TransportDispatcher(CommandLineTransport(SubprocessExecutor()))


@pytest.mark.integration
def test_library_get_sends_query_and_user_agent(library_dispatcher):
    reply = json.loads(library_dispatcher.http_get(ECHO_GET_URL, "oauth_token=abc&x=1"))

    assert reply["args"] == {"oauth_token": "abc", "x": "1"}
    assert reply["headers"]["User-Agent"] == USER_AGENT


@pytest.mark.integration
def test_library_post_sends_form_body(library_dispatcher):
    reply = json.loads(library_dispatcher.http_post(ECHO_POST_URL, "oauth_verifier=v&a=b"))

    assert reply["form"] == {"oauth_verifier": "v", "a": "b"}


@pytest.mark.integration
def test_library_post_file(library_dispatcher, tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")

    reply = json.loads(library_dispatcher.post_file(ECHO_POST_URL, str(path)))

    assert reply["headers"]["Content-Type"] == "image/jpeg"
    assert reply["headers"]["Content-Length"] == str(path.stat().st_size)


@pytest.mark.integration
@pytest.mark.parametrize("url,status", TEST_URLS_ERROR_STATUS)
def test_library_error_status_is_not_raised(library_dispatcher, url, status):
    assert isinstance(library_dispatcher.http_get(url), bytes)


@pytest.mark.integration
def test_command_get_and_post(command_dispatcher):
    got = json.loads(command_dispatcher.http_get(ECHO_GET_URL, "a=1"))
    posted = json.loads(command_dispatcher.http_post(ECHO_POST_URL, "b=2"))

    assert got["args"] == {"a": "1"}
    assert got["headers"]["User-Agent"] == USER_AGENT
    assert posted["form"] == {"b": "2"}
