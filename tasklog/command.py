"""Task descriptor passed to the logger on every call."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Metadata of one running task.

    The orchestrator owns these records; the logger only reads them to build
    prefixes and apply the hide list.
    """

    index: int
    command: str = ""
    name: str | None = None
    pid: int | None = None
    prefix_color: str | None = None  # rich style definition or "#RRGGBB"
