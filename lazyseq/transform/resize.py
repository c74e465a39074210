"""
Resize combinators
==================

Force a sequence to an exact length: truncate, or pad with a fill value.
"""

from __future__ import annotations

from ..cursor import pull, pull2
from ..seq import Seq, Seq2
from .._types import Yield, Yield2


def resize[T](seq: Seq[T], size: int, *, default: T) -> Seq[T]:
    """
    Exactly max(size, 0) elements: the source's first ones, then default.

    For size <= 0 the source is opened and closed without being advanced.
    """

    def body(yield_: Yield[T]) -> None:
        with pull(seq) as cursor:
            for i in range(size):
                value, ok = cursor.advance()
                if not ok:
                    for _ in range(size - i):
                        if not yield_(default):
                            return
                    return
                if not yield_(value):  # type: ignore[arg-type]
                    return

    return Seq(body)


def resize2[S, T](seq: Seq2[S, T], size: int, *, defaults: tuple[S, T]) -> Seq2[S, T]:
    """Pair version of resize(); defaults is the (s, t) fill pair."""
    fill_s, fill_t = defaults

    def body(yield_: Yield2[S, T]) -> None:
        with pull2(seq) as cursor:
            for i in range(size):
                s, t, ok = cursor.advance()
                if not ok:
                    for _ in range(size - i):
                        if not yield_(fill_s, fill_t):
                            return
                    return
                if not yield_(s, t):  # type: ignore[arg-type]
                    return

    return Seq2(body)


__all__ = ("resize", "resize2")
