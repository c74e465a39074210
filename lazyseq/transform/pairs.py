"""Pair-shape combinators

Swap the halves of a Seq2, or keep only one of them. Order is unchanged."""

from __future__ import annotations

from ..seq import Seq, Seq2
from .._types import Yield, Yield2

def swap[S, T](seq: Seq2[S, T]) -> Seq2[T, S]:
    """Seq2[S, T] -> Seq2[T, S]."""

    def body(yield_: Yield2[T, S]) -> None:
        seq.run(lambda s, t: yield_(t, s))

    return Seq2(body)

def keys[K, V](seq: Seq2[K, V]) -> Seq[K]:
    """First half of every pair."""

    def body(yield_: Yield[K]) -> None:
        seq.run(lambda k, _: yield_(k))

    return Seq(body)

def values[K, V](seq: Seq2[K, V]) -> Seq[V]:
    """Second half of every pair."""

    def body(yield_: Yield[V]) -> None:
        seq.run(lambda _, v: yield_(v))

    return Seq(body)

__all__ = ("swap", "keys", "values")
