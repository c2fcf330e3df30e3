"""Line-by-line reading from a stream using fixed-size reads."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline. The last line of a stream that
    does not end in a newline is returned without one. Once the stream is
    exhausted, :meth:`read_line` returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self) -> None:
        pending = self._pending
        while pending is None or self._newline is None or self._newline not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, bytes) else "\n"  # type: ignore[assignment]
            pending = chunk if pending is None else pending + chunk
        self._pending = pending

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None at the end of the stream."""
        self._fill()
        pending = self._pending
        if not pending or self._newline is None:
            self._pending = None
            return None
        index = pending.find(self._newline)
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line