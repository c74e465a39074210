"""Map combinators

Per-element transforms between Seq and Seq2 shapes."""

from __future__ import annotations

from collections.abc import Callable

from ..seq import Seq, Seq2
from .._types import Yield, Yield2

def fmap[S, T](seq: Seq[S], f: Callable[[S], T]) -> Seq[T]:
    """Seq[S] -> Seq[T]."""

    def body(yield_: Yield[T]) -> None:
        seq.run(lambda v: yield_(f(v)))

    return Seq(body)

def fmap2[S, T, U, V](seq: Seq2[S, T], f: Callable[[S, T], tuple[U, V]]) -> Seq2[U, V]:
    """Seq2[S, T] -> Seq2[U, V]."""

    def body(yield_: Yield2[U, V]) -> None:
        seq.run(lambda s, t: yield_(*f(s, t)))

    return Seq2(body)

def fmap_in[S, T, U](seq: Seq2[S, T], f: Callable[[S, T], U]) -> Seq[U]:
    """Seq2[S, T] -> Seq[U]: fold each pair into one value."""

    def body(yield_: Yield[U]) -> None:
        seq.run(lambda s, t: yield_(f(s, t)))

    return Seq(body)

def fmap_out[S, T, U](seq: Seq[S], f: Callable[[S], tuple[T, U]]) -> Seq2[T, U]:
    """Seq[S] -> Seq2[T, U]: split each value into a pair."""

    def body(yield_: Yield2[T, U]) -> None:
        seq.run(lambda v: yield_(*f(v)))

    return Seq2(body)

__all__ = ("fmap", "fmap2", "fmap_in", "fmap_out")
