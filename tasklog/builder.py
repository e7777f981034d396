"""
Fluent builder for task loggers.

Example:
    import sys

    logger = (
        TaskLoggerBuilder(sys.stdout)
        .with_hide(["1", "db"])
        .with_prefix_format("{time} {name}")
        .with_timestamp_format("%H:%M:%S")
        .build()
    )
"""

from typing import Any, Self

from .config import HideSpec, LoggerConfig, navigate_to_section
from .constants import LogDefaults
from .logger import TaskLogger
from .prefix import Clock
from .writer import Sink


class TaskLoggerBuilder:
    """Chainable configuration of a TaskLogger."""

    def __init__(self, output_stream: Sink):
        """
        Initialize the builder.

        Args:
            output_stream: Sink receiving all output
        """
        self._output_stream = output_stream
        self._hide: list[str | int] = []
        self._raw = False
        self._prefix_format: str | None = None
        self._prefix_length: int | None = None
        self._timestamp_format: str | None = None
        self._default_color: str | None = None
        self._colors: bool | None = None
        self._clock: Clock | None = None

    def with_hide(self, hide: HideSpec) -> Self:
        """
        Add tasks whose text output is suppressed.

        Args:
            hide: Task name/index or an iterable of them

        Returns:
            Self for method chaining
        """
        if hide is None:
            return self
        if isinstance(hide, (str, int)):
            self._hide.append(hide)
        else:
            self._hide.extend(hide)
        return self

    def with_raw(self, raw: bool = True) -> Self:
        """Enable or disable raw output."""
        self._raw = raw
        return self

    def with_prefix_format(self, prefix_format: str | None) -> Self:
        """
        Set the prefix token or template.

        Args:
            prefix_format: One of none, pid, index, name, command, time, or
                free text with {token} placeholders

        Returns:
            Self for method chaining
        """
        self._prefix_format = prefix_format
        return self

    def with_prefix_length(self, prefix_length: int) -> Self:
        """Set the display width of the {command} token."""
        self._prefix_length = prefix_length
        return self

    def with_timestamp_format(self, timestamp_format: str) -> Self:
        """Set the strftime pattern of the {time} token."""
        self._timestamp_format = timestamp_format
        return self

    def with_default_color(self, color: str) -> Self:
        """Set the style of tasks without a known color."""
        self._default_color = color
        return self

    def with_colors(self, enabled: bool | None = True) -> Self:
        """
        Force colored output on or off.

        Args:
            enabled: True/False, or None to auto-detect

        Returns:
            Self for method chaining
        """
        self._colors = enabled
        return self

    def with_clock(self, clock: Clock) -> Self:
        """Set the time source of the {time} token."""
        self._clock = clock
        return self

    def with_config(
        self, config: dict[str, Any], section: str = LogDefaults.CONFIG_SECTION
    ) -> Self:
        """
        Set multiple options from a configuration dictionary.

        Only options present in the section are changed.

        Args:
            config: Configuration dictionary
            section: Dotted path of the section to read (default: "output")

        Returns:
            Self for method chaining
        """
        parsed = LoggerConfig.from_config(config, section)
        current = navigate_to_section(config, section)

        if "hide" in current:
            self.with_hide(parsed.hide)
        if "raw" in current:
            self._raw = parsed.raw
        if "prefix" in current or "prefix_format" in current:
            self._prefix_format = parsed.prefix_format
        if "prefix_length" in current:
            self._prefix_length = parsed.prefix_length
        if "timestamp_format" in current:
            self._timestamp_format = parsed.timestamp_format
        if "colors" in current or "default_color" in current:
            self._colors = parsed.colors
            self._default_color = parsed.default_color
        return self

    def build_config(self) -> LoggerConfig:
        """Build the LoggerConfig without creating a logger."""
        return LoggerConfig.from_params(
            hide=self._hide,
            raw=self._raw,
            prefix_format=self._prefix_format,
            prefix_length=self._prefix_length,
            timestamp_format=self._timestamp_format,
            default_color=self._default_color,
            colors=self._colors,
        )

    def build(self) -> TaskLogger:
        """
        Build the configured TaskLogger.

        Returns:
            TaskLogger instance
        """
        return TaskLogger.from_config(
            self._output_stream, self.build_config(), clock=self._clock
        )
