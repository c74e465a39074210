"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the elements passing through."""

from __future__ import annotations

from collections.abc import Callable

from ..seq import Seq, Seq2
from .._types import Yield, Yield2

def tap[T](seq: Seq[T], effect: Callable[[T], None]) -> Seq[T]:
    """Run effect on each element before handing it on."""

    def body(yield_: Yield[T]) -> None:
        def forward(value: T) -> bool:
            effect(value)
            return yield_(value)

        seq.run(forward)

    return Seq(body)

def tap2[S, T](seq: Seq2[S, T], effect: Callable[[S, T], None]) -> Seq2[S, T]:
    """Run effect on each pair before handing it on."""

    def body(yield_: Yield2[S, T]) -> None:
        def forward(s: S, t: T) -> bool:
            effect(s, t)
            return yield_(s, t)

        seq.run(forward)

    return Seq2(body)

__all__ = ("tap", "tap2")
