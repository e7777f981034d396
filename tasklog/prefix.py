"""
Prefix templates and display truncation.

A prefix template is either a single token such as ``index`` (rendered in
square brackets, e.g. ``[2]``) or free text containing ``{token}``
placeholders (rendered without brackets, e.g. ``{name}-{index}`` gives
``web-2``). Unknown placeholders are left untouched.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .command import Command
from .constants import LogDefaults

Clock = Callable[[], datetime]


class PrefixToken(enum.Enum):
    """Values that can be substituted into a prefix."""

    NONE = "none"
    PID = "pid"
    INDEX = "index"
    NAME = "name"
    COMMAND = "command"
    TIME = "time"

    @property
    def placeholder(self) -> str:
        return "{" + self.value + "}"


@dataclass(frozen=True)
class PrefixTemplate:
    """Free-text template with zero or more {token} placeholders."""

    text: str


_TOKENS = {token.value: token for token in PrefixToken}


def shorten_text(text: str | None, max_length: int) -> str | None:
    """
    Shorten text for display, keeping both its beginning and its end.

    The middle is replaced by a two-character ellipsis so the result is
    exactly max_length characters long. When max_length leaves no room
    around the ellipsis (2 or less) the result is just the ellipsis.

    Args:
        text: Text to shorten (None and "" are returned unchanged)
        max_length: Maximum display length

    Returns:
        Shortened text, or the input when it already fits

    Examples:
        >>> shorten_text("npm run watch-js", 10)
        'npm ..h-js'
        >>> shorten_text("ls", 10)
        'ls'
    """
    if not text or len(text) <= max_length:
        return text

    ellipsis = LogDefaults.ELLIPSIS
    budget = max_length - len(ellipsis)
    end_length = max(budget // 2, 0)
    beginning_length = max(budget - budget // 2, 0)

    beginning = text[:beginning_length]
    end = text[len(text) - end_length :] if end_length else ""
    return beginning + ellipsis + end


def default_template(command: Command) -> str:
    """Template used when none is configured: name if the task has one, else index."""
    return PrefixToken.NAME.value if command.name else PrefixToken.INDEX.value


def parse_template(template: str) -> PrefixToken | PrefixTemplate:
    """
    Classify a template as a single token or as free text.

    Args:
        template: Configured prefix template

    Returns:
        The matching PrefixToken, or a PrefixTemplate for anything else
    """
    token = _TOKENS.get(template)
    if token is not None:
        return token
    return PrefixTemplate(template)


def _render(value: Any) -> str:
    return "" if value is None else str(value)


class PrefixResolver:
    """
    Resolves the prefix text for a task.

    Holds the configured template and the settings of the value-producing
    tokens ({command} width and {time} pattern).
    """

    def __init__(
        self,
        prefix_format: str | None = None,
        prefix_length: int = LogDefaults.PREFIX_LENGTH,
        timestamp_format: str = LogDefaults.TIMESTAMP_FORMAT,
        clock: Clock | None = None,
    ) -> None:
        self._prefix_format = prefix_format
        self._prefix_length = prefix_length
        self._timestamp_format = timestamp_format
        self._clock = clock or datetime.now

    def values_for(self, command: Command) -> dict[PrefixToken, str]:
        """
        Build the substitution values for a task.

        Args:
            command: Task descriptor

        Returns:
            Mapping of every PrefixToken to its rendered value
        """
        return {
            PrefixToken.NONE: "",
            PrefixToken.PID: _render(command.pid),
            PrefixToken.INDEX: _render(command.index),
            PrefixToken.NAME: _render(command.name),
            PrefixToken.COMMAND: _render(
                shorten_text(command.command, self._prefix_length)
            ),
            PrefixToken.TIME: self._clock().strftime(self._timestamp_format),
        }

    def resolve(self, command: Command) -> str:
        """
        Resolve the uncolored prefix for a task.

        Args:
            command: Task descriptor

        Returns:
            Prefix text, or "" when the template is ``none``
        """
        parsed = parse_template(self._prefix_format or default_template(command))
        if parsed is PrefixToken.NONE:
            return ""

        values = self.values_for(command)
        if isinstance(parsed, PrefixToken):
            return f"[{values[parsed]}]"

        text = parsed.text
        for token, value in values.items():
            text = text.replace(token.placeholder, value)
        return text
