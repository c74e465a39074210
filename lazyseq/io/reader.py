"""
Delimited reader
================

Buffered reader whose delimited reads are sequences.

A clean end of input is never an error: leftover bytes without a trailing
delimiter come through as the last element. A real failure ends the
sequence without delivering the partial chunk; instead it is kept, together
with the failure, in ``Reader.err`` for the caller to inspect after the loop.

Read sequences resume: running one again continues from wherever the
reader currently is, and its index starts again at 0.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from ..seq import Seq2
from .._types import Yield2
from .errors import BufferFullError, ResidualError

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE: typing.Final = 4096
MIN_BUFFER_SIZE: typing.Final = 16


class Readable(typing.Protocol):
    def read(self, size: int = -1, /) -> bytes | None: ...


@dataclass(frozen=True, slots=True)
class PartialRead:
    """
    Why a delimited read came back without its delimiter.

    cause is None for a clean end of input.
    """

    data: bytes
    cause: Exception | None = None


class Reader:
    """Buffered reader over any binary stream with a ``read(n)`` method."""

    __slots__ = ("_stream", "_size", "_buf", "_err")

    def __init__(self, stream: Readable, size: int = DEFAULT_BUFFER_SIZE) -> None:
        self._stream = stream
        self._size = max(size, MIN_BUFFER_SIZE)
        self._buf = bytearray()
        self._err: ResidualError | None = None

    @property
    def size(self) -> int:
        return self._size

    @property
    def buffered(self) -> int:
        """Bytes read from the stream and not yet returned."""
        return len(self._buf)

    @property
    def err(self) -> ResidualError | None:
        """
        Last read failure, or None if no read has failed.

        End of input is never recorded here. Each failing read overwrites it.
        """
        return self._err

    def result(self) -> Result[None, ResidualError]:
        """The last-error slot as a Result."""
        if self._err is None:
            return Ok(None)
        return Error(self._err)

    # ------------------------------------------------------------------------
    # Read primitive
    # ------------------------------------------------------------------------

    def _fill(self) -> Result[int, Exception]:
        try:
            data = self._stream.read(self._size)
        except Exception as exc:
            return Error(exc)
        if data:
            self._buf += data
            return Ok(len(data))
        return Ok(0)

    def _drain(self) -> bytes:
        data = bytes(self._buf)
        self._buf.clear()
        return data

    def read_until(self, delim: bytes | int, *, limit: int | None = None) -> Result[bytes, PartialRead]:
        """
        Read through the next delim byte.

        Ok(chunk) ends with delim. Error(PartialRead) carries whatever was
        read before the end of input (cause None) or a failure (cause set).
        With a limit, a chunk never exceeds limit bytes: if none of the next
        limit bytes is delim, those bytes come back with a BufferFullError.
        """
        target = _delimiter(delim)
        start = 0
        while True:
            i = self._buf.find(target, start, limit)
            if i >= 0:
                chunk = bytes(self._buf[: i + 1])
                del self._buf[: i + 1]
                return Ok(chunk)
            if limit is not None and len(self._buf) >= limit:
                full = bytes(self._buf[:limit])
                del self._buf[:limit]
                return Error(PartialRead(full, BufferFullError(limit)))
            start = len(self._buf)
            match self._fill():
                case Ok(0):
                    return Error(PartialRead(self._drain()))
                case Ok(_):
                    continue
                case Error(exc):
                    return Error(PartialRead(self._drain(), exc))

    # ------------------------------------------------------------------------
    # Sequences
    # ------------------------------------------------------------------------

    def read_bytes(self, delim: bytes | int) -> Seq2[int, bytes]:
        """(index, chunk) for every delimited chunk, delimiter included."""
        _delimiter(delim)
        return self._chunks(lambda: self.read_until(delim), bytes)

    def read_slice(self, delim: bytes | int) -> Seq2[int, bytes]:
        """
        read_bytes() bounded by the buffer size.

        A chunk longer than ``size`` ends the sequence: its first ``size``
        bytes are kept in ``err`` with a BufferFullError, and the next run
        continues right after them.
        """
        _delimiter(delim)
        return self._chunks(lambda: self.read_until(delim, limit=self._size), bytes)

    def read_string(
        self,
        delim: str | bytes | int,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> Seq2[int, str]:
        """read_bytes() decoded as text."""
        if isinstance(delim, str):
            delim = delim.encode(encoding)
        _delimiter(delim)
        target = delim
        return self._chunks(lambda: self.read_until(target), lambda b: b.decode(encoding, errors))

    def _chunks[T](
        self,
        read: Callable[[], Result[bytes, PartialRead]],
        convert: Callable[[bytes], T],
    ) -> Seq2[int, T]:
        def body(yield_: Yield2[int, T]) -> None:
            index = 0
            while True:
                match read():
                    case Ok(chunk):
                        if not yield_(index, convert(chunk)):
                            return
                        index += 1
                    case Error(PartialRead(data, None)):
                        if data:
                            yield_(index, convert(data))
                        return
                    case Error(PartialRead(data, cause)):
                        self._err = ResidualError(cause, data)
                        logger.debug("read failed with %d residual bytes: %r", len(data), cause)
                        return

        return Seq2(body)

    def __repr__(self) -> str:
        return f"Reader({self._stream!r}, size={self._size}, buffered={len(self._buf)})"


def _delimiter(delim: bytes | int) -> int:
    if isinstance(delim, int):
        if not 0 <= delim <= 0xFF:
            raise ValueError(f"delimiter must be a single byte, got {delim!r}")
        return delim
    if len(delim) != 1:
        raise ValueError(f"delimiter must be a single byte, got {delim!r}")
    return delim[0]


__all__ = ("DEFAULT_BUFFER_SIZE", "MIN_BUFFER_SIZE", "PartialRead", "Readable", "Reader")
