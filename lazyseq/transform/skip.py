"""
Skip combinators
================

Signed skip: a positive count drops leading elements, a negative count
left-pads with a fill value.
"""

from __future__ import annotations

from ..cursor import pull, pull2
from .._helpers import MISSING, Maybe, require_default
from ..seq import Seq, Seq2
from .._types import Yield, Yield2


def skip[T](seq: Seq[T], n: int, *, default: Maybe[T] = MISSING) -> Seq[T]:
    """
    Drop the first n elements (n > 0), or emit |n| copies of default and then
    the whole sequence (n < 0). n == 0 returns seq itself.

    default is only needed, and then required, for negative n.
    """
    if n == 0:
        return seq

    if n > 0:
        def drop(yield_: Yield[T]) -> None:
            with pull(seq) as cursor:
                for _ in range(n):
                    _, ok = cursor.advance()
                    if not ok:
                        return
                while True:
                    value, ok = cursor.advance()
                    if not ok or not yield_(value):  # type: ignore[arg-type]
                        return

        return Seq(drop)

    fill = require_default(default, combinator="skip")

    def pad(yield_: Yield[T]) -> None:
        for _ in range(-n):
            if not yield_(fill):
                return
        seq.run(yield_)

    return Seq(pad)


def skip2[S, T](seq: Seq2[S, T], n: int, *, defaults: Maybe[tuple[S, T]] = MISSING) -> Seq2[S, T]:
    """Pair version of skip(); defaults is the (s, t) fill pair."""
    if n == 0:
        return seq

    if n > 0:
        def drop(yield_: Yield2[S, T]) -> None:
            with pull2(seq) as cursor:
                for _ in range(n):
                    *_, ok = cursor.advance()
                    if not ok:
                        return
                while True:
                    s, t, ok = cursor.advance()
                    if not ok or not yield_(s, t):  # type: ignore[arg-type]
                        return

        return Seq2(drop)

    fill_s, fill_t = require_default(defaults, combinator="skip2", parameter="defaults")

    def pad(yield_: Yield2[S, T]) -> None:
        for _ in range(-n):
            if not yield_(fill_s, fill_t):
                return
        seq.run(yield_)

    return Seq2(pad)


__all__ = ("skip", "skip2")
