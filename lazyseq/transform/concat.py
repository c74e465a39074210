"""Concat combinators

Run several sequences back to back, as one."""

from __future__ import annotations

from ..seq import Seq, Seq2
from .._types import Yield, Yield2

def concat[T](*seqs: Seq[T]) -> Seq[T]:
    """
    Every element of every seq, in argument order.

    Stops everything the moment the consumer returns False; later
    sequences are never started.
    """

    def body(yield_: Yield[T]) -> None:
        for seq in seqs:
            if not seq.run(yield_):
                return

    return Seq(body)

def concat2[S, T](*seqs: Seq2[S, T]) -> Seq2[S, T]:
    """Every pair of every seq, in argument order."""

    def body(yield_: Yield2[S, T]) -> None:
        for seq in seqs:
            if not seq.run(yield_):
                return

    return Seq2(body)

__all__ = ("concat", "concat2")
