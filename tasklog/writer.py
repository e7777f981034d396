"""
Line-oriented writer that prefixes every new line of output.

Task output arrives in arbitrary chunks: a chunk may hold several lines, or
end in the middle of one. LineWriter remembers the last character it wrote
so a chunk continuing a partial line is not prefixed again. A partial line
that ends a multi-line chunk is written without a prefix.
"""

from __future__ import annotations

from typing import Protocol

# Replaced before writing, it breaks terminal line clearing
_UNICODE_ELLIPSIS = "…"


class Sink(Protocol):
    """Anything accepting text writes (file, terminal, io.StringIO)."""

    def write(self, text: str, /) -> object: ...


class LineWriter:
    """
    Writes prefixed text to a sink, tracking partial lines across calls.

    Not safe for concurrent use: callers must serialize writes, or give each
    task its own writer over a sink that tolerates interleaved writes.
    """

    def __init__(self, sink: Sink, raw: bool = False) -> None:
        """
        Initialize the writer.

        Args:
            sink: Destination for all writes
            raw: Write text verbatim, without prefixes or state tracking
        """
        self._sink = sink
        self._raw = raw
        self._last_char: str | None = None

    @property
    def last_char(self) -> str | None:
        """Last character written, or None before the first write."""
        return self._last_char

    @property
    def at_line_start(self) -> bool:
        """Whether the next write starts a new line (and gets a prefix)."""
        return self._last_char is None or self._last_char == "\n"

    def write(self, prefix: str, text: str) -> None:
        """
        Write text, inserting prefix at the start of every new line.

        Args:
            prefix: Text placed before each line
            text: Chunk of output, possibly spanning or ending mid-line
        """
        if self._raw:
            self._sink.write(text)
            return

        # An empty chunk writes nothing and keeps the state, so it never
        # leaves a dangling prefix for the next write to double.
        if not text:
            return

        text = text.replace(_UNICODE_ELLIPSIS, "...")

        # The first segment continues the previous write. The last segment is
        # left bare: empty, it is prefixed by the next call; partial, it stays
        # unprefixed, so output only splits cleanly at newline boundaries.
        segments = text.split("\n")
        last = len(segments) - 1
        lines = [
            segment if i in (0, last) else prefix + segment
            for i, segment in enumerate(segments)
        ]

        if self.at_line_start:
            self._sink.write(prefix)

        self._last_char = text[-1]
        self._sink.write("\n".join(lines))
