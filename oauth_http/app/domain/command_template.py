"""Command template parsing and rendering for the command-line transport.

A template is a shell command line such as ``curl -s -d '%p' '%u'``. Parsing
locates the first occurrence of each required placeholder and records their
left-to-right order; rendering is a separate, side-effect-free step that turns
the template into a positional ``%s`` format string and fills it in.

Parsing is permissive: only the first ``%u``/``%p`` are placeholders. Any other
``%`` in the template, including repeated tokens, is kept verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from oauth_http.app.ports.http_transport import InvalidTemplateError


class Placeholder(str, Enum):
    URL = "%u"
    BODY = "%p"


GET_PLACEHOLDERS = (Placeholder.URL,)
POST_PLACEHOLDERS = (Placeholder.URL, Placeholder.BODY)

Segment = Union[str, Placeholder]


@dataclass(frozen=True)
class CommandTemplate:
    """Parsed template: literal text segments interleaved with placeholders."""

    raw: str
    segments: tuple[Segment, ...]

    @property
    def order(self) -> tuple[Placeholder, ...]:
        return tuple(s for s in self.segments if isinstance(s, Placeholder))

    def position(self, placeholder: Placeholder) -> int:
        """Index of the placeholder in the raw text, -1 when not part of this template."""
        if placeholder not in self.order:
            return -1
        return self.raw.find(placeholder.value)

    def format_string(self) -> str:
        parts = []
        for segment in self.segments:
            if isinstance(segment, Placeholder):
                parts.append("%s")
            else:
                parts.append(segment.replace("%", "%%"))
        return "".join(parts)

    def arguments(self, url: str, body: str | None = None) -> tuple[str, ...]:
        """Positional arguments for format_string(), in placeholder order."""
        values = {Placeholder.URL: url, Placeholder.BODY: body or ""}
        return tuple(values[p] for p in self.order)

    def render(self, url: str, body: str | None = None) -> str:
        return self.format_string() % self.arguments(url, body)


def parse_command_template(
    text: str,
    required: Iterable[Placeholder],
    *,
    env_var: str,
) -> CommandTemplate:
    """Parse text, raising InvalidTemplateError if a required placeholder is absent.

    env_var names the configuration source and is only used in the error message.
    """
    positions: dict[Placeholder, int] = {}
    for placeholder in required:
        index = text.find(placeholder.value)
        if index < 0:
            raise InvalidTemplateError(env_var, placeholder.value)
        positions[placeholder] = index

    segments: list[Segment] = []
    cursor = 0
    for placeholder, index in sorted(positions.items(), key=lambda item: item[1]):
        if index > cursor:
            segments.append(text[cursor:index])
        segments.append(placeholder)
        cursor = index + len(placeholder.value)
    if cursor < len(text):
        segments.append(text[cursor:])
    return CommandTemplate(raw=text, segments=tuple(segments))


def resolve_command_template(
    configured: str | None,
    default: str,
    required: Iterable[Placeholder],
    *,
    env_var: str,
) -> CommandTemplate:
    """Use the configured template, or default when none is configured, and parse it."""
    text = default if configured is None else configured
    return parse_command_template(text, required, env_var=env_var)
