"""
Default values shared by the logger, its configuration and its builder.
"""


class LogDefaults:
    """Defaults applied when an option is unset or falsy."""

    # Display width for the shortened {command} token
    PREFIX_LENGTH: int = 10

    # strftime pattern for the {time} token; %f renders six-digit microseconds
    TIMESTAMP_FORMAT: str = "%Y-%m-%d %H:%M:%S.%f"

    # Style used when a task has no (known) color
    PREFIX_COLOR: str = "reset"

    # Marker written before global events
    GLOBAL_EVENT_MARKER: str = "-->"

    # Two-character marker placed in the middle of shortened text
    ELLIPSIS: str = ".."

    # Default config section for LoggerConfig.from_config()
    CONFIG_SECTION: str = "output"


# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024
