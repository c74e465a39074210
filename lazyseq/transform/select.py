"""Select combinators

Filtering, optionally fused with a transform. Filtered-out elements never
reach the consumer and are not counted by anything downstream."""

from __future__ import annotations

from collections.abc import Callable

from ..seq import Seq, Seq2
from .._types import Predicate, Predicate2, Yield, Yield2

# ============================================================================
# Plain filters
# ============================================================================

def select[T](seq: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Only the elements for which predicate holds."""

    def body(yield_: Yield[T]) -> None:
        seq.run(lambda v: not predicate(v) or yield_(v))

    return Seq(body)

def select2[S, T](seq: Seq2[S, T], predicate: Predicate2[S, T]) -> Seq2[S, T]:
    """Only the pairs for which predicate holds."""

    def body(yield_: Yield2[S, T]) -> None:
        seq.run(lambda s, t: not predicate(s, t) or yield_(s, t))

    return Seq2(body)

# ============================================================================
# Filter + transform
# ============================================================================
# f returns its outputs followed by a keep flag; only kept outputs go on.

def select_map[S, T](seq: Seq[S], f: Callable[[S], tuple[T, bool]]) -> Seq[T]:
    """Seq[S] -> Seq[T], dropping values f marks as not kept."""

    def body(yield_: Yield[T]) -> None:
        def forward(value: S) -> bool:
            out, keep = f(value)
            return not keep or yield_(out)

        seq.run(forward)

    return Seq(body)

def select_map2[S, T, U, V](seq: Seq2[S, T], f: Callable[[S, T], tuple[U, V, bool]]) -> Seq2[U, V]:
    """Seq2[S, T] -> Seq2[U, V], dropping pairs f marks as not kept."""

    def body(yield_: Yield2[U, V]) -> None:
        def forward(s: S, t: T) -> bool:
            u, v, keep = f(s, t)
            return not keep or yield_(u, v)

        seq.run(forward)

    return Seq2(body)

def select_map_in[S, T, U](seq: Seq2[S, T], f: Callable[[S, T], tuple[U, bool]]) -> Seq[U]:
    """Seq2[S, T] -> Seq[U], dropping pairs f marks as not kept."""

    def body(yield_: Yield[U]) -> None:
        def forward(s: S, t: T) -> bool:
            out, keep = f(s, t)
            return not keep or yield_(out)

        seq.run(forward)

    return Seq(body)

def select_map_out[S, T, U](seq: Seq[S], f: Callable[[S], tuple[T, U, bool]]) -> Seq2[T, U]:
    """Seq[S] -> Seq2[T, U], dropping values f marks as not kept."""

    def body(yield_: Yield2[T, U]) -> None:
        def forward(value: S) -> bool:
            t, u, keep = f(value)
            return not keep or yield_(t, u)

        seq.run(forward)

    return Seq2(body)

__all__ = (
    "select",
    "select2",
    "select_map",
    "select_map2",
    "select_map_in",
    "select_map_out",
)
