"""Zip with index

Pairs each element with its 0-based position."""

from __future__ import annotations

from ..seq import Seq, Seq2
from .._types import Yield2

def zip_index[T](seq: Seq[T]) -> Seq2[int, T]:
    """Seq[T] -> Seq2[int, T]; exactly one pair per element."""

    def body(yield_: Yield2[int, T]) -> None:
        i = 0

        def forward(value: T) -> bool:
            nonlocal i
            keep = yield_(i, value)
            i += 1
            return keep

        seq.run(forward)

    return Seq2(body)

__all__ = ("zip_index",)
