"""Buffered line-by-line reading of a stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read lines from *stream*, *buffer_size* units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Works with binary and text streams alike.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        if not pending:
            pending = self._stream.read(self._buffer_size)
            if not pending:
                self._pending = None
                return None
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        while newline not in pending:  # type: ignore[operator]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending += chunk
        line, found, rest = pending.partition(newline)  # type: ignore[arg-type]
        self._pending = rest if rest else None
        return line + found

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line