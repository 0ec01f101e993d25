from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from oauth_http.app.constants import (
    READ_CHUNK_SIZE,
    TRANSPORT_BACKEND,
    USER_AGENT,
)
from oauth_http.app.domain.models import TransportOptions
from oauth_http.app.ports.http_transport import RequestTimeout


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Command templates for the command-line backend; %u is the URL, %p the POST body.
    # Unset selects the built-in curl command lines.
    http_cmd: str | None = Field(None, validation_alias="OAUTH_HTTP_CMD")
    http_get_cmd: str | None = Field(None, validation_alias="OAUTH_HTTP_GET_CMD")

    transport_backend: str = Field(TRANSPORT_BACKEND.LIBRARY, validation_alias="OAUTH_HTTP_BACKEND")
    user_agent: str = Field(USER_AGENT, validation_alias="OAUTH_HTTP_USER_AGENT")

    # None blocks until the server answers.
    request_timeout_seconds: float | None = Field(None, validation_alias="OAUTH_HTTP_TIMEOUT_SECONDS")
    read_chunk_size: int = Field(READ_CHUNK_SIZE, validation_alias="OAUTH_HTTP_READ_CHUNK_SIZE", gt=0)

    def to_options(self) -> TransportOptions:
        timeout = None
        if self.request_timeout_seconds is not None:
            timeout = RequestTimeout(
                connect_seconds=self.request_timeout_seconds,
                read_seconds=self.request_timeout_seconds,
            )
        return TransportOptions(
            get_command=self.http_get_cmd,
            post_command=self.http_cmd,
            user_agent=self.user_agent,
            timeout=timeout,
            read_chunk_size=self.read_chunk_size,
        )
