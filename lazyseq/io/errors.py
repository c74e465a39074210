"""
Residual errors
===============

A read failure together with the bytes that had been read but not yet
handed to any consumer when it happened.
"""

from __future__ import annotations

import typing


@typing.runtime_checkable
class HasBuffer(typing.Protocol):
    """Any error that carries leftover bytes."""

    @property
    def buffer(self) -> bytes: ...


class BufferFullError(Exception):
    """A bounded read filled the whole buffer without finding its delimiter."""

    size: int

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"buffer full: no delimiter within {size} bytes")


class ResidualError(Exception):
    """
    Failure plus residual bytes.

    The wrapped failure is both ``err`` and ``__cause__``, so tracebacks
    show it and ``error_buffer`` finds the residual through any chain.
    """

    err: BaseException
    _buffer: bytes

    def __init__(self, err: BaseException, buffer: bytes = b"") -> None:
        super().__init__(err)
        self.err = err
        self._buffer = bytes(buffer)
        self.__cause__ = err

    @property
    def buffer(self) -> bytes:
        return self._buffer

    def buffer_string(self, encoding: str = "utf-8", errors: str = "replace") -> str:
        return self._buffer.decode(encoding, errors)

    def __str__(self) -> str:
        return str(self.err)

    def __repr__(self) -> str:
        return f"ResidualError({self.err!r}, buffer={self._buffer!r})"


def _chain(err: BaseException | None) -> typing.Iterator[BaseException]:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = err.__cause__ or err.__context__


def error_buffer(err: BaseException | None) -> bytes | None:
    """
    Residual bytes carried by err or anything in its cause chain.

    None when nothing in the chain carries a buffer.
    """
    for e in _chain(err):
        if isinstance(e, HasBuffer):
            return e.buffer
    return None


def error_buffer_string(err: BaseException | None, encoding: str = "utf-8") -> str:
    """error_buffer() decoded as text; "" when there is no buffer."""
    buf = error_buffer(err)
    if buf is None:
        return ""
    return buf.decode(encoding, "replace")


__all__ = ("BufferFullError", "HasBuffer", "ResidualError", "error_buffer", "error_buffer_string")
