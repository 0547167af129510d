"""Lazy, line-by-line file reading."""

from __future__ import annotations

import logging
from typing import IO, Iterator, Optional

DEFAULT_MAX_LINE_SIZE = 64 * 1024


class LineTooLongError(ValueError):
    """Raised when a line does not fit in the reader's buffer."""


class LineStream:
    """Iterates over the lines of an open binary handle, closing it once drained.

    Only ``\\n`` ends a line; a single ``\\r`` right before it (or at the end
    of the data) is dropped. Bytes are decoded with ``surrogateescape`` so
    undecodable input round-trips instead of failing. The handle is released
    when the stream is exhausted, on :meth:`close`, when leaving a ``with``
    block, or when reading raises.
    """

    def __init__(
        self,
        handle: IO[bytes],
        name: str,
        max_line_size: int = DEFAULT_MAX_LINE_SIZE,
        close_handle: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        if max_line_size < 1:
            raise ValueError(f"max_line_size must be positive, got {max_line_size}")
        self.name = name
        self.max_line_size = max_line_size
        self.encoding = encoding
        self._handle: Optional[IO[bytes]] = handle
        self._close_handle = close_handle

    @classmethod
    def open(
        cls,
        filename: str,
        max_line_size: int = DEFAULT_MAX_LINE_SIZE,
        buffering: int = -1,
        encoding: str = "utf-8",
    ) -> "LineStream":
        handle = open(filename, "rb", buffering=buffering)
        return cls(handle, filename, max_line_size=max_line_size, encoding=encoding)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._handle is None:
            raise StopIteration
        try:
            line = self._read_line()
        except BaseException:
            self.close()
            raise
        if line is None:
            self.close()
            raise StopIteration
        return line.decode(self.encoding, errors="surrogateescape")

    def _read_line(self) -> Optional[bytes]:
        # Two extra bytes leave room for the "\r\n" of a full-length line.
        raw = self._handle.readline(self.max_line_size + 2)
        if not raw:
            return None
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        if len(raw) > self.max_line_size:
            raise LineTooLongError(f"line in {self.name} exceeds {self.max_line_size} bytes")
        return raw

    def close(self) -> None:
        if self._handle is None:
            return
        if self._close_handle:
            self._handle.close()
        self._handle = None
        logging.debug("Closed line stream for %s", self.name)

    def __enter__(self) -> "LineStream":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def read_file(filename: str) -> LineStream:
    """Opens ``filename`` and returns a lazy stream over its lines."""

    return LineStream.open(filename)


def read_file_with_buffer_size(filename: str, max_capacity: int) -> LineStream:
    """Like :func:`read_file` but with a caller-chosen buffer and line limit in bytes."""

    if max_capacity < 1:
        raise ValueError(f"max_capacity must be positive, got {max_capacity}")
    buffering = max_capacity if max_capacity > 1 else -1
    return LineStream.open(filename, max_line_size=max_capacity, buffering=buffering)
