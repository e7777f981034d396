"""
Configuration for task loggers.

LoggerConfig is immutable and fixed for the lifetime of a TaskLogger. It can
be built from keyword parameters, from a configuration dictionary section, or
from a YAML file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .constants import MAX_CONFIG_SIZE_BYTES, LogDefaults
from .exceptions import ConfigError

HideSpec = str | int | Iterable[str | int] | None


def _is_hide_token(value: Any) -> bool:
    """Keep non-empty entries plus the integer index 0."""
    if isinstance(value, bool):
        return False
    return bool(value) or value == 0


def normalize_hide(hide: HideSpec) -> tuple[str, ...]:
    """
    Normalize a hide specification into a tuple of string tokens.

    Empty entries are dropped so that tasks without a name are never hidden
    by an unset option, while an index of 0 stays a valid token.

    Args:
        hide: None, a single name/index, or an iterable of names/indices

    Returns:
        Tuple of stringified hide tokens

    Examples:
        >>> normalize_hide(["web", 0, "", None])
        ('web', '0')
        >>> normalize_hide("db")
        ('db',)
    """
    if hide is None:
        return ()
    items = [hide] if isinstance(hide, (str, int)) else list(hide)
    return tuple(str(item) for item in items if _is_hide_token(item))


def _resolve_prefix_length(prefix_length: Any) -> int:
    if not prefix_length:
        return LogDefaults.PREFIX_LENGTH
    try:
        length = int(prefix_length)
    except (TypeError, ValueError) as e:
        raise ConfigError(
            "prefix length must be an integer", prefix_length=prefix_length
        ) from e
    if length < 0:
        raise ConfigError("prefix length must not be negative", prefix_length=length)
    return length


def _resolve_raw(raw: Any) -> bool:
    # YAML strings like "false" would otherwise be truthy
    if raw is None:
        return False
    if not isinstance(raw, bool):
        raise ConfigError("raw must be a boolean", raw=raw)
    return raw


def navigate_to_section(config_dict: Mapping[str, Any], section: str) -> Any:
    """Navigate to a dotted section, returning {} when it does not exist."""
    current: Any = config_dict
    for part in section.split("."):
        if isinstance(current, Mapping) and part in current:
            current = current[part]
        else:
            return {}
    return current


def _check_file_size(path: Path) -> None:
    file_size = os.path.getsize(path)
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise ConfigError(
            "configuration file too large",
            path=str(path),
            size=file_size,
            limit=MAX_CONFIG_SIZE_BYTES,
        )


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable configuration for a TaskLogger.

    Use from_params() rather than the constructor when values come from user
    input: it normalizes the hide list and applies defaults.
    """

    hide: tuple[str, ...] = ()
    raw: bool = False
    prefix_format: str | None = None
    prefix_length: int = LogDefaults.PREFIX_LENGTH
    timestamp_format: str = LogDefaults.TIMESTAMP_FORMAT
    default_color: str = LogDefaults.PREFIX_COLOR
    colors: bool | None = None  # None auto-detects from env and sink

    @classmethod
    def from_params(
        cls,
        hide: HideSpec = None,
        raw: bool = False,
        prefix_format: str | None = None,
        prefix_length: int | None = None,
        timestamp_format: str | None = None,
        default_color: str | None = None,
        colors: bool | None = None,
    ) -> LoggerConfig:
        """
        Create LoggerConfig from individual parameters.

        Args:
            hide: Task names or indices whose text output is suppressed
            raw: Pass task output through without any formatting
            prefix_format: Single token (none, pid, index, name, command, time)
                or free text with {token} placeholders
            prefix_length: Display width for the {command} token (falsy means default)
            timestamp_format: strftime pattern for the {time} token (falsy: default)
            default_color: Style for tasks without a known color
            colors: Force colors on/off, or None to auto-detect

        Returns:
            LoggerConfig instance
        """
        return cls(
            hide=normalize_hide(hide),
            raw=_resolve_raw(raw),
            prefix_format=prefix_format or None,
            prefix_length=_resolve_prefix_length(prefix_length),
            timestamp_format=timestamp_format or LogDefaults.TIMESTAMP_FORMAT,
            default_color=default_color or LogDefaults.PREFIX_COLOR,
            colors=colors,
        )

    @classmethod
    def from_config(
        cls, config_dict: Mapping[str, Any], section: str = LogDefaults.CONFIG_SECTION
    ) -> LoggerConfig:
        """
        Create LoggerConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary (e.g., parsed YAML)
            section: Dotted path of the section to read (default: "output")

        Returns:
            LoggerConfig instance

        Example:
            config = LoggerConfig.from_config(
                {"output": {"prefix": "{index}-{name}", "hide": [1]}}
            )
        """
        current = navigate_to_section(config_dict, section)
        if not isinstance(current, Mapping):
            raise ConfigError("config section is not a mapping", section=section)

        colors = current.get("colors")
        default_color = current.get("default_color")
        if isinstance(colors, Mapping):
            default_color = colors.get("default", default_color)
            colors = colors.get("enabled")

        return cls.from_params(
            hide=current.get("hide"),
            raw=current.get("raw", False),
            prefix_format=current.get("prefix", current.get("prefix_format")),
            prefix_length=current.get("prefix_length"),
            timestamp_format=current.get("timestamp_format"),
            default_color=default_color,
            colors=colors,
        )

    @classmethod
    def from_yaml(
        cls, path: str | Path, section: str = LogDefaults.CONFIG_SECTION
    ) -> LoggerConfig:
        """
        Load LoggerConfig from a YAML file.

        Args:
            path: Path to the YAML file
            section: Dotted path of the section to read (default: "output")

        Returns:
            LoggerConfig instance
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigError("configuration file not found", path=str(path))
        _check_file_size(path)

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        logging.getLogger(__name__).debug(
            "loaded output config", extra={"path": str(path), "section": section}
        )
        return cls.from_config(data, section)
