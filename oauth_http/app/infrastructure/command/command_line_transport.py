"""HttpTransport that shells out to a command-line HTTP client (curl, wget, ...).

Command lines come from user-configurable templates. Values are substituted
verbatim; quoting is the template's job.
"""
from __future__ import annotations

from typing import Iterable

from loguru import logger

from oauth_http.app.constants import (
    DEFAULT_HTTP_CMD_FORMAT,
    DEFAULT_HTTP_GET_CMD_FORMAT,
    ENV_HTTP_CMD,
    ENV_HTTP_GET_CMD,
)
from oauth_http.app.domain.command_template import (
    GET_PLACEHOLDERS,
    POST_PLACEHOLDERS,
    CommandTemplate,
    Placeholder,
    resolve_command_template,
)
from oauth_http.app.domain.models import TransportOptions, build_request_url
from oauth_http.app.ports.command_executor import CommandExecutor
from oauth_http.app.ports.http_transport import (
    HttpTransport,
    InvalidTemplateError,
    UnsupportedOperationError,
)


class CommandLineTransport(HttpTransport):
    def __init__(self, executor: CommandExecutor, options: TransportOptions | None = None) -> None:
        self._executor = executor
        self._options = options or TransportOptions()

    def get(self, url: str, query: str | None = None) -> bytes:
        if not url:
            raise ValueError("url is required")
        template = self._resolve(
            self._options.get_command, DEFAULT_HTTP_GET_CMD_FORMAT, GET_PLACEHOLDERS, ENV_HTTP_GET_CMD
        )
        return self._executor.run(template.render(build_request_url(url, query)))

    def post(self, url: str, body: str) -> bytes:
        template = self._resolve(
            self._options.post_command, DEFAULT_HTTP_CMD_FORMAT, POST_PLACEHOLDERS, ENV_HTTP_CMD
        )
        return self._executor.run(template.render(url, body))

    def post_file(
        self,
        url: str,
        file_path: str,
        length: int = 0,
        content_type: str | None = None,
    ) -> bytes:
        logger.warning("post_file requires the library transport, which is not active")
        raise UnsupportedOperationError(
            "post_file requires the library-backed transport; the command-line transport cannot upload files"
        )

    def _resolve(
        self,
        configured: str | None,
        default_format: str,
        required: Iterable[Placeholder],
        env_var: str,
    ) -> CommandTemplate:
        default = default_format.format(user_agent=self._options.user_agent)
        try:
            return resolve_command_template(configured, default, required, env_var=env_var)
        except InvalidTemplateError as exc:
            logger.warning("{}", exc)
            raise
