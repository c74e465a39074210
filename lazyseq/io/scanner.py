"""Line scanner

Lines of a text or binary stream as a sequence, without line terminators.
Like Reader, a scanner resumes: each run continues with the next line."""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable, Iterable

from ..seq import Seq2
from .._types import Yield2

logger = logging.getLogger(__name__)

class Scanner:
    """
    Wraps any iterable of lines (open files included).

    A failure while reading ends the sequence and is kept in ``err``.
    """

    __slots__ = ("_lines", "_err")

    def __init__(self, stream: Iterable[str | bytes]) -> None:
        self._lines = iter(stream)
        self._err: Exception | None = None

    @property
    def err(self) -> Exception | None:
        """Failure that ended the last scan, or None."""
        return self._err

    def lines(self, encoding: str = "utf-8") -> Seq2[int, str]:
        """(index, line) as text."""

        def text(line: str | bytes) -> str:
            if isinstance(line, bytes):
                line = line.decode(encoding)
            return _chomp(line)

        return self._scan(text)

    def bytes_lines(self, encoding: str = "utf-8") -> Seq2[int, bytes]:
        """(index, line) as bytes; text lines are encoded."""

        def raw(line: str | bytes) -> bytes:
            if isinstance(line, str):
                line = line.encode(encoding)
            return _chomp(line)

        return self._scan(raw)

    def _scan[T](self, convert: Callable[[str | bytes], T]) -> Seq2[int, T]:
        def body(yield_: Yield2[int, T]) -> None:
            index = 0
            while True:
                try:
                    line = next(self._lines)
                except StopIteration:
                    return
                except Exception as exc:
                    self._err = exc
                    logger.debug("scan failed after %d lines: %r", index, exc)
                    return
                if not yield_(index, convert(line)):
                    return
                index += 1

        return Seq2(body)

def _chomp[L: (str, bytes)](line: L) -> L:
    nl, cr = ("\n", "\r") if isinstance(line, str) else (b"\n", b"\r")
    if line.endswith(nl):  # type: ignore[arg-type]
        line = line[:-1]
    if line.endswith(cr):  # type: ignore[arg-type]
        line = line[:-1]
    return line

__all__ = ("Scanner",)
