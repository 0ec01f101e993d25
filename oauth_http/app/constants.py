"""Library-level constants shared across modules."""
from __future__ import annotations

VERSION = "0.1.0"

USER_AGENT = f"oauth-http-agent/{VERSION}"

ENV_HTTP_CMD = "OAUTH_HTTP_CMD"
ENV_HTTP_GET_CMD = "OAUTH_HTTP_GET_CMD"

# {user_agent} is filled from the configured agent before %u/%p are parsed.
DEFAULT_HTTP_CMD_FORMAT = "curl -sA '{user_agent}' -d '%p' '%u' "
DEFAULT_HTTP_GET_CMD_FORMAT = "curl -sA '{user_agent}' '%u' "
# alternatives: "wget -q -U '{user_agent}' --post-data='%p' '%u' " and "wget -q -U '{user_agent}' '%u' "

DEFAULT_HTTP_CMD = DEFAULT_HTTP_CMD_FORMAT.format(user_agent=USER_AGENT)
DEFAULT_HTTP_GET_CMD = DEFAULT_HTTP_GET_CMD_FORMAT.format(user_agent=USER_AGENT)

DEFAULT_FILE_HEADER = "Content-Type: image/jpeg"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

READ_CHUNK_SIZE = 1024
FILE_READ_CHUNK_SIZE = 64 * 1024


class TRANSPORT_BACKEND:
    LIBRARY = "library"
    COMMAND = "command"
