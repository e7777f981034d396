"""
Exception hierarchy for tasklog.

Formatting problems degrade gracefully and never raise; the exceptions here
cover invalid configuration handed to the logger or its builder.
"""

from typing import Any


class TaskLogError(Exception):
    """
    Base exception for all tasklog errors.

    Example:
        try:
            config = LoggerConfig.from_yaml("etc/output.yaml")
        except TaskLogError as e:
            print(f"bad output config: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(TaskLogError):
    """
    Configuration-related errors.

    Examples:
        - Missing output stream
        - Negative or non-numeric prefix length
        - Non-boolean raw flag
        - Config section is not a mapping
        - Config file missing or too large
    """

    pass
