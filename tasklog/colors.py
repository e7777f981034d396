"""
Color management for task prefixes.

Task colors are style specifiers: either a rich style definition such as
"red" or "bold cyan", or a "#RRGGBB" hex value. Resolution is delegated to
StyleResolver implementations so the rest of the package never deals with
rich directly.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Any, Protocol

from rich.color import Color, ColorParseError, ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from .constants import LogDefaults

_HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")

# Name of the no-op style
RESET = "reset"


class StyleResolver(Protocol):
    """Maps a color specifier to a rich Style, or None when it is unknown."""

    def resolve(self, spec: str) -> Style | None: ...


class NamedStyleResolver:
    """Resolves rich style definitions ("red", "bold blue on white")."""

    def resolve(self, spec: str) -> Style | None:
        if not spec or not spec.strip():
            return None
        name = spec.strip()
        if name.lower() == RESET:
            return Style.null()
        try:
            return Style.parse(name)
        except StyleSyntaxError:
            return None


class HexStyleResolver:
    """Resolves "#RRGGBB" foreground colors."""

    def resolve(self, spec: str) -> Style | None:
        if not spec or not _HEX_PATTERN.match(spec):
            return None
        try:
            return Style(color=Color.parse(spec))
        except ColorParseError:
            return None


def should_use_color(stream: Any = None) -> bool:
    """
    Determine if color output should be used for a stream.

    Args:
        stream: Output stream (default: sys.stdout)

    Returns:
        True if NO_COLOR is unset and FORCE_COLOR is set or the stream is a TTY
    """
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    if os.environ.get("FORCE_COLOR"):
        return True

    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Colorizer:
    """
    Applies task colors to text.

    Hex specifiers ("#RRGGBB") go to the hex resolver, everything else to the
    named resolver. Unknown specifiers fall back to the default style and
    then to the reset (no-op) style.
    """

    def __init__(
        self,
        enabled: bool = True,
        default_color: str = LogDefaults.PREFIX_COLOR,
        named_resolver: StyleResolver | None = None,
        hex_resolver: StyleResolver | None = None,
    ) -> None:
        """
        Initialize the colorizer.

        Args:
            enabled: When False every style is the no-op style
            default_color: Style used for missing or unknown task colors
            named_resolver: Resolver for style names (default: NamedStyleResolver)
            hex_resolver: Resolver for hex values (default: HexStyleResolver)
        """
        self._enabled = enabled
        self._default_color = default_color
        self._named = named_resolver or NamedStyleResolver()
        self._hex = hex_resolver or HexStyleResolver()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def style_for(self, color: str | None) -> Style:
        """
        Resolve the style for a task color.

        Args:
            color: Style specifier from the task, or None

        Returns:
            Resolved style (the null style when colors are disabled)
        """
        if not self._enabled:
            return Style.null()

        style = None
        if color:
            resolver = self._hex if color.startswith("#") else self._named
            style = resolver.resolve(color)

        if style is None:
            if color:
                logging.getLogger(__name__).debug(
                    "unknown color, using default",
                    extra={"color": color, "default": self._default_color},
                )
            style = self._named.resolve(self._default_color)

        return style if style is not None else Style.null()

    def colorize(self, color: str | None, text: str) -> str:
        """Wrap text in the escape codes of the task color."""
        return self.style_for(color).render(text, color_system=ColorSystem.TRUECOLOR)

    def reset(self, text: str) -> str:
        """Apply the reset style."""
        return self.colorize(RESET, text)
