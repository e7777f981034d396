"""
Test data builders for task descriptors and output configuration.
"""

from typing import Any

from tasklog import Command


def make_command(
    index: int = 0,
    name: str | None = None,
    command: str = "echo hello",
    pid: int | None = 1000,
    prefix_color: str | None = None,
) -> Command:
    """Build a Command with test defaults."""
    return Command(
        index=index,
        name=name,
        command=command,
        pid=pid,
        prefix_color=prefix_color,
    )


class OutputConfigBuilder:
    """Builder for configuration dictionaries with an output section."""

    def __init__(self, section: str = "output"):
        self._section = section
        self._data: dict[str, Any] = {}

    def with_hide(self, *tokens: str | int) -> "OutputConfigBuilder":
        self._data["hide"] = list(tokens)
        return self

    def with_raw(self, raw: bool = True) -> "OutputConfigBuilder":
        self._data["raw"] = raw
        return self

    def with_prefix(self, prefix: str) -> "OutputConfigBuilder":
        self._data["prefix"] = prefix
        return self

    def with_prefix_length(self, length: Any) -> "OutputConfigBuilder":
        self._data["prefix_length"] = length
        return self

    def with_colors(
        self, enabled: bool | None = None, default: str | None = None
    ) -> "OutputConfigBuilder":
        colors: dict[str, Any] = {}
        if enabled is not None:
            colors["enabled"] = enabled
        if default is not None:
            colors["default"] = default
        self._data["colors"] = colors
        return self

    def build(self) -> dict[str, Any]:
        """Build the nested configuration dictionary."""
        result: dict[str, Any] = dict(self._data)
        for part in reversed(self._section.split(".")):
            result = {part: result}
        return result
