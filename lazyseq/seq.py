"""
Seq / Seq2
==========

Push-style lazy sequences with cooperative stop.

A Seq wraps a *body*: a procedure that, given a consumer callback, calls it
once per element, in order, and returns as soon as the callback returns
False or its own data runs out. Seq2 is the same contract for pairs.

Sources built from fixed collections restart on every run; sources built
from one-shot iterators (or from stateful readers) resume where the previous
run stopped.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator, Mapping

from ._helpers import MISSING, Maybe
from ._types import Body, Body2, Predicate, Predicate2, Yield, Yield2

if typing.TYPE_CHECKING:
    from .cursor import Cursor, Cursor2


# ============================================================================
# Seq
# ============================================================================


class Seq[T]:
    """
    Lazy sequence of single values.

    Calling the Seq (or .run) pushes every element into the consumer;
    iterating it pulls elements one at a time through a Cursor.
    """

    __slots__ = ("_body", "_source")

    def __init__(self, body: Body[T], /, *, source: Iterable[T] | None = None) -> None:
        self._body = body
        self._source = source

    @property
    def source(self) -> Iterable[T] | None:
        """Native iterable behind this Seq, if it was built from one."""
        return self._source

    def run(self, yield_: Yield[T], /) -> bool:
        """
        Push every element into yield_.

        Returns False if yield_ stopped the run, True if the data ran out.
        A body that keeps calling after a stop gets False without reaching yield_.
        """
        stopped = False

        def consumer(value: T) -> bool:
            nonlocal stopped
            if stopped:
                return False
            if yield_(value):
                return True
            stopped = True
            return False

        self._body(consumer)
        return not stopped

    __call__ = run

    def __iter__(self) -> Iterator[T]:
        from .cursor import pull
        with pull(self) as cursor:
            yield from cursor

    def __repr__(self) -> str:
        if self._source is not None:
            return f"Seq(source={self._source!r})"
        return f"Seq({self._body!r})"

    # ------------------------------------------------------------------------
    # Fluent chaining
    # ------------------------------------------------------------------------

    def pull(self) -> Cursor[T]:
        from .cursor import pull
        return pull(self)

    def map[U](self, f: Callable[[T], U]) -> Seq[U]:
        from .transform.map import fmap
        return fmap(self, f)

    def map_out[U, V](self, f: Callable[[T], tuple[U, V]]) -> Seq2[U, V]:
        from .transform.map import fmap_out
        return fmap_out(self, f)

    def select(self, predicate: Predicate[T]) -> Seq[T]:
        from .transform.select import select
        return select(self, predicate)

    def select_map[U](self, f: Callable[[T], tuple[U, bool]]) -> Seq[U]:
        from .transform.select import select_map
        return select_map(self, f)

    def select_map_out[U, V](self, f: Callable[[T], tuple[U, V, bool]]) -> Seq2[U, V]:
        from .transform.select import select_map_out
        return select_map_out(self, f)

    def skip(self, n: int, *, default: Maybe[T] = MISSING) -> Seq[T]:
        from .transform.skip import skip
        return skip(self, n, default=default)

    def resize(self, size: int, *, default: T) -> Seq[T]:
        from .transform.resize import resize
        return resize(self, size, default=default)

    def concat(self, *others: Seq[T]) -> Seq[T]:
        from .transform.concat import concat
        return concat(self, *others)

    def tap(self, effect: Callable[[T], None]) -> Seq[T]:
        from .transform.effects import tap
        return tap(self, effect)

    def zip_index(self) -> Seq2[int, T]:
        from .align.index import zip_index
        return zip_index(self)

    def collect(self) -> list[T]:
        return collect(self)

    def count(self) -> int:
        return count(self)


# ============================================================================
# Seq2
# ============================================================================


class Seq2[S, T]:
    """
    Lazy sequence of pairs.

    Same contract as Seq, with a two-argument consumer. Iterating a Seq2
    yields (s, t) tuples.
    """

    __slots__ = ("_body", "_source")

    def __init__(self, body: Body2[S, T], /, *, source: Iterable[tuple[S, T]] | None = None) -> None:
        self._body = body
        self._source = source

    @property
    def source(self) -> Iterable[tuple[S, T]] | None:
        """Native iterable of pairs behind this Seq2, if it was built from one."""
        return self._source

    def run(self, yield_: Yield2[S, T], /) -> bool:
        """
        Push every pair into yield_.

        Returns False if yield_ stopped the run, True if the data ran out.
        """
        stopped = False

        def consumer(s: S, t: T) -> bool:
            nonlocal stopped
            if stopped:
                return False
            if yield_(s, t):
                return True
            stopped = True
            return False

        self._body(consumer)
        return not stopped

    __call__ = run

    def __iter__(self) -> Iterator[tuple[S, T]]:
        from .cursor import pull2
        with pull2(self) as cursor:
            yield from cursor

    def __repr__(self) -> str:
        if self._source is not None:
            return f"Seq2(source={self._source!r})"
        return f"Seq2({self._body!r})"

    # ------------------------------------------------------------------------
    # Fluent chaining
    # ------------------------------------------------------------------------

    def pull(self) -> Cursor2[S, T]:
        from .cursor import pull2
        return pull2(self)

    def map[U, V](self, f: Callable[[S, T], tuple[U, V]]) -> Seq2[U, V]:
        from .transform.map import fmap2
        return fmap2(self, f)

    def map_in[U](self, f: Callable[[S, T], U]) -> Seq[U]:
        from .transform.map import fmap_in
        return fmap_in(self, f)

    def select(self, predicate: Predicate2[S, T]) -> Seq2[S, T]:
        from .transform.select import select2
        return select2(self, predicate)

    def select_map[U, V](self, f: Callable[[S, T], tuple[U, V, bool]]) -> Seq2[U, V]:
        from .transform.select import select_map2
        return select_map2(self, f)

    def select_map_in[U](self, f: Callable[[S, T], tuple[U, bool]]) -> Seq[U]:
        from .transform.select import select_map_in
        return select_map_in(self, f)

    def swap(self) -> Seq2[T, S]:
        from .transform.pairs import swap
        return swap(self)

    def keys(self) -> Seq[S]:
        from .transform.pairs import keys
        return keys(self)

    def values(self) -> Seq[T]:
        from .transform.pairs import values
        return values(self)

    def skip(self, n: int, *, defaults: Maybe[tuple[S, T]] = MISSING) -> Seq2[S, T]:
        from .transform.skip import skip2
        return skip2(self, n, defaults=defaults)

    def resize(self, size: int, *, defaults: tuple[S, T]) -> Seq2[S, T]:
        from .transform.resize import resize2
        return resize2(self, size, defaults=defaults)

    def concat(self, *others: Seq2[S, T]) -> Seq2[S, T]:
        from .transform.concat import concat2
        return concat2(self, *others)

    def tap(self, effect: Callable[[S, T], None]) -> Seq2[S, T]:
        from .transform.effects import tap2
        return tap2(self, effect)

    def collect(self) -> list[tuple[S, T]]:
        return collect2(self)

    def to_dict(self) -> dict[S, T]:
        return collect_dict(self)


# ============================================================================
# Constructors
# ============================================================================


def from_iterable[T](iterable: Iterable[T], /) -> Seq[T]:
    """
    Seq over any Python iterable.

    Collections restart on every run; iterators and generators resume.
    """

    def body(yield_: Yield[T]) -> None:
        for value in iterable:
            if not yield_(value):
                return

    return Seq(body, source=iterable)


def of[T](*items: T) -> Seq[T]:
    """Seq over the given items."""
    return from_iterable(items)


def empty() -> Seq[typing.Any]:
    """Seq that delivers nothing."""
    return from_iterable(())


def from_pairs[S, T](pairs: Iterable[tuple[S, T]], /) -> Seq2[S, T]:
    """Seq2 over an iterable of 2-tuples."""

    def body(yield_: Yield2[S, T]) -> None:
        for s, t in pairs:
            if not yield_(s, t):
                return

    return Seq2(body, source=pairs)


def from_mapping[K, V](mapping: Mapping[K, V], /) -> Seq2[K, V]:
    """Seq2 over a mapping's items, in the mapping's iteration order."""
    return from_pairs(mapping.items())


def enumerated[T](iterable: Iterable[T], /) -> Seq2[int, T]:
    """Seq2 of (index, value) over a Python iterable."""

    def body(yield_: Yield2[int, T]) -> None:
        for i, value in enumerate(iterable):
            if not yield_(i, value):
                return

    return Seq2(body)


# ============================================================================
# Collectors (push-driven, no cursor involved)
# ============================================================================


def collect[T](seq: Seq[T], /) -> list[T]:
    """Run seq to exhaustion and return its elements."""
    out: list[T] = []

    def push(value: T) -> bool:
        out.append(value)
        return True

    seq.run(push)
    return out


def collect2[S, T](seq: Seq2[S, T], /) -> list[tuple[S, T]]:
    """Run seq to exhaustion and return its pairs."""
    out: list[tuple[S, T]] = []

    def push(s: S, t: T) -> bool:
        out.append((s, t))
        return True

    seq.run(push)
    return out


def collect_dict[S, T](seq: Seq2[S, T], /) -> dict[S, T]:
    """Run seq to exhaustion into a dict. Later keys overwrite earlier ones."""
    out: dict[S, T] = {}

    def push(s: S, t: T) -> bool:
        out[s] = t
        return True

    seq.run(push)
    return out


def count(seq: Seq[typing.Any], /) -> int:
    """Number of elements seq delivers."""
    n = 0

    def push(_: typing.Any) -> bool:
        nonlocal n
        n += 1
        return True

    seq.run(push)
    return n


__all__ = (
    "Seq",
    "Seq2",
    "from_iterable",
    "of",
    "empty",
    "from_pairs",
    "from_mapping",
    "enumerated",
    "collect",
    "collect2",
    "collect_dict",
    "count",
)
