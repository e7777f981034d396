"""
Prefixed, colored output for concurrently running tasks.

tasklog writes the output of many tasks to one shared stream, prefixing
every line with the task's name, index, pid, shortened command, a
timestamp, or a custom template such as "{time} {name}".
"""

from importlib.metadata import PackageNotFoundError, version

from .builder import TaskLoggerBuilder
from .colors import Colorizer, HexStyleResolver, NamedStyleResolver, StyleResolver
from .command import Command
from .config import LoggerConfig, normalize_hide
from .constants import LogDefaults
from .exceptions import ConfigError, TaskLogError
from .logger import TaskLogger
from .prefix import PrefixResolver, PrefixTemplate, PrefixToken, shorten_text
from .writer import LineWriter, Sink

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("tasklog")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

__all__ = [
    "__version__",
    # Logger
    "TaskLogger",
    "TaskLoggerBuilder",
    "Command",
    # Configuration
    "LoggerConfig",
    "LogDefaults",
    "normalize_hide",
    # Formatting
    "PrefixResolver",
    "PrefixTemplate",
    "PrefixToken",
    "shorten_text",
    "Colorizer",
    "StyleResolver",
    "NamedStyleResolver",
    "HexStyleResolver",
    "LineWriter",
    "Sink",
    # Exceptions
    "TaskLogError",
    "ConfigError",
]
