"""
Task logger: formats the output of concurrently running tasks.

TaskLogger is the entry point used by an orchestrator. It filters hidden
tasks, resolves and colors each task's prefix, and hands the text to a
LineWriter shared by all tasks writing to the same sink.

Example:
    import sys

    from tasklog import Command, TaskLogger

    logger = TaskLogger(sys.stdout, prefix_format="{index}-{name}")
    web = Command(index=0, name="web", command="npm start", pid=4242)

    logger.log_command_event("npm start started", web)
    logger.log_command_text("listening on :8080\n", web)
    logger.log_global_event("sending SIGTERM to other processes")
"""

from __future__ import annotations

import logging

from .colors import Colorizer, should_use_color
from .command import Command
from .config import HideSpec, LoggerConfig
from .constants import LogDefaults
from .exceptions import ConfigError
from .prefix import Clock, PrefixResolver
from .writer import LineWriter, Sink


class TaskLogger:
    """
    Writes per-task output to a shared sink with a prefix on every line.

    Hidden tasks (by name or index) produce no output at all. In raw mode
    task text is written unmodified and lifecycle/global events are dropped.
    """

    def __init__(
        self,
        output_stream: Sink,
        *,
        hide: HideSpec = None,
        raw: bool = False,
        prefix_format: str | None = None,
        prefix_length: int | None = None,
        timestamp_format: str | None = None,
        default_color: str | None = None,
        colors: bool | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Initialize the task logger.

        Args:
            output_stream: Sink receiving all output
            hide: Task names or indices whose text output is suppressed
            raw: Disable prefixes, colors and event messages
            prefix_format: Prefix token or template (default: name, else index)
            prefix_length: Display width of the {command} token
            timestamp_format: strftime pattern of the {time} token
            default_color: Style for tasks without a known color
            colors: Force colors on/off, or None to auto-detect
            clock: Returns the current time for {time} (default: datetime.now)
        """
        config = LoggerConfig.from_params(
            hide=hide,
            raw=raw,
            prefix_format=prefix_format,
            prefix_length=prefix_length,
            timestamp_format=timestamp_format,
            default_color=default_color,
            colors=colors,
        )
        self._setup(output_stream, config, clock)

    @classmethod
    def from_config(
        cls, output_stream: Sink, config: LoggerConfig, clock: Clock | None = None
    ) -> TaskLogger:
        """
        Create a TaskLogger from an existing LoggerConfig.

        Args:
            output_stream: Sink receiving all output
            config: Logger configuration
            clock: Returns the current time for {time}

        Returns:
            TaskLogger instance
        """
        logger = cls.__new__(cls)
        logger._setup(output_stream, config, clock)
        return logger

    def _setup(
        self, output_stream: Sink, config: LoggerConfig, clock: Clock | None
    ) -> None:
        if output_stream is None:
            raise ConfigError("output stream is required")

        colors = config.colors
        if colors is None:
            colors = should_use_color(output_stream)

        self._output_stream = output_stream
        self._config = config
        self._colorizer = Colorizer(enabled=colors, default_color=config.default_color)
        self._resolver = PrefixResolver(
            prefix_format=config.prefix_format,
            prefix_length=config.prefix_length,
            timestamp_format=config.timestamp_format,
            clock=clock,
        )
        self._writer = LineWriter(output_stream, raw=config.raw)

        logging.getLogger(__name__).debug(
            "task logger created",
            extra={
                "raw": config.raw,
                "hide": list(config.hide),
                "prefix": config.prefix_format,
                "colors": colors,
            },
        )

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def output_stream(self) -> Sink:
        return self._output_stream

    def is_hidden(self, command: Command) -> bool:
        """Check whether a task's text output is suppressed."""
        hide = self._config.hide
        return str(command.index) in hide or (
            command.name is not None and command.name in hide
        )

    def get_prefix(self, command: Command) -> str:
        """
        Resolve the colored prefix for a task.

        Args:
            command: Task descriptor

        Returns:
            Prefix text without the separating space, or "" for ``none``
        """
        prefix = self._resolver.resolve(command)
        if not prefix:
            return ""
        return self._colorizer.colorize(command.prefix_color, prefix)

    def log_command_event(self, text: str, command: Command) -> None:
        """
        Log a lifecycle event of a task, such as it starting or exiting.

        Args:
            text: Event message, without trailing newline
            command: Task the event belongs to
        """
        if self._config.raw:
            return

        self.log_command_text(self._colorizer.reset(text) + "\n", command)

    def log_command_text(self, text: str, command: Command) -> None:
        """
        Log a chunk of a task's output.

        Args:
            text: Raw output chunk; may span lines or end mid-line
            command: Task that produced the output
        """
        if self.is_hidden(command):
            return

        prefix = self.get_prefix(command)
        self.log(prefix + (" " if prefix else ""), text)

    def log_global_event(self, text: str) -> None:
        """
        Log an event not tied to any task.

        Args:
            text: Event message, without trailing newline
        """
        if self._config.raw:
            return

        marker = self._colorizer.reset(LogDefaults.GLOBAL_EVENT_MARKER)
        self.log(marker + " ", self._colorizer.reset(text) + "\n")

    def log(self, prefix: str, text: str) -> None:
        """Write text through the line writer, prefixing each new line."""
        self._writer.write(prefix, text)
