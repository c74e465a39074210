"""
Pull adapter
============

Turns a push-driven Seq into a demand-driven Cursor.

Адаптер "push -> pull": курсор приостанавливает производителя между запросами.

A push body cannot be suspended mid-call, so a Cursor over an arbitrary body
runs it on a worker thread and hands control back and forth through a
rendezvous of two semaphores: the caller posts one demand token, the body
answers with exactly one element (or with its exit). Only one side runs at
any instant, so from the caller's point of view advance() is an ordinary
synchronous call.

Seqs built from native Python iterables skip the worker and drive the
iterator directly.

Cleanup is never optional: close() (explicit, via ``with``, or when the
cursor is garbage-collected) makes the body's pending consumer call return
False and waits for the body to return.
"""

from __future__ import annotations

import contextvars
import itertools
import logging
import threading
import typing
import weakref
from collections.abc import Callable, Iterable, Iterator

from ._errors import ClosedCursorError, ConcurrentAdvanceError

if typing.TYPE_CHECKING:
    from .seq import Seq, Seq2

logger = logging.getLogger(__name__)

# One delivered element as the tuple of arguments the body passed to its consumer
type _Item = tuple[typing.Any, ...]

_worker_ids = itertools.count(1)


# ============================================================================
# Drivers
# ============================================================================


class _Driver(typing.Protocol):
    def next(self) -> _Item | None: ...

    def stop(self) -> None: ...


class _IteratorDriver:
    """Pulls straight from a native iterable; no worker thread."""

    __slots__ = ("_source", "_iterator", "_pack", "_finished")

    def __init__(self, source: Iterable[typing.Any], pack: Callable[[typing.Any], _Item]) -> None:
        self._source = source
        self._iterator: Iterator[typing.Any] | None = None
        self._pack = pack
        self._finished = False

    def next(self) -> _Item | None:
        if self._finished:
            return None
        if self._iterator is None:
            self._iterator = iter(self._source)
        try:
            value = next(self._iterator)
        except StopIteration:
            self.stop()
            return None
        except BaseException:
            self.stop()
            raise
        return self._pack(value)

    def stop(self) -> None:
        if self._finished:
            return
        self._finished = True
        iterator, self._iterator = self._iterator, None
        # A one-shot source is its own iterator and must survive for the next run
        if iterator is None or iterator is self._source:
            return
        close = getattr(iterator, "close", None)
        if close is not None:
            close()


class _Rendezvous:
    """
    Runs a push body on a worker thread, one element per demand token.

    _demand: caller -> worker ("produce the next element" / "stop now")
    _supply: worker -> caller ("here is an element" / "body returned")
    """

    __slots__ = (
        "_body",
        "_demand",
        "_supply",
        "_item",
        "_stopping",
        "_finished",
        "_error",
        "_thread",
    )

    def __init__(self, body: Callable[[Callable[..., bool]], typing.Any]) -> None:
        self._body = body
        self._demand = threading.Semaphore(0)
        self._supply = threading.Semaphore(0)
        self._item: _Item | None = None
        self._stopping = False
        self._finished = False
        self._error: BaseException | None = None
        self._thread: threading.Thread | None = None

    def _start(self) -> None:
        context = contextvars.copy_context()
        name = f"lazyseq-cursor-{next(_worker_ids)}"
        self._thread = threading.Thread(target=context.run, args=(self._work,), name=name, daemon=True)
        logger.debug("starting worker %s", name)
        self._thread.start()

    def _work(self) -> None:
        self._demand.acquire()
        try:
            if not self._stopping:
                self._body(self._deliver)
        except BaseException as exc:
            self._error = exc
        finally:
            self._item = None
            self._finished = True
            self._supply.release()

    def _deliver(self, *values: typing.Any) -> bool:
        if self._stopping:
            return False
        self._item = values
        self._supply.release()
        self._demand.acquire()
        return not self._stopping

    def _join(self) -> None:
        if self._thread is not None:
            self._thread.join()
        error, self._error = self._error, None
        if error is not None:
            raise error

    def next(self) -> _Item | None:
        if self._finished:
            return None
        if self._thread is None:
            self._start()
        self._demand.release()
        self._supply.acquire()
        if self._finished:
            self._join()
            return None
        return self._item

    def stop(self) -> None:
        if self._thread is None:
            # Body never ran, nothing to release
            self._finished = True
            return
        if self._finished:
            return
        if threading.current_thread() is self._thread:
            # Finalised from inside the body: it sees the stop on its next delivery
            self._stopping = True
            return
        self._stopping = True
        self._demand.release()
        self._supply.acquire()
        self._join()


def _single(value: typing.Any) -> _Item:
    return (value,)


def _pair(value: typing.Any) -> _Item:
    s, t = value
    return (s, t)


def _release(driver: _Driver) -> None:
    logger.debug("releasing abandoned cursor")
    driver.stop()


# ============================================================================
# Cursors
# ============================================================================


class _CursorBase:
    __slots__ = ("_driver", "_closed", "_busy", "_finalizer", "__weakref__")

    def __init__(self, driver: _Driver) -> None:
        self._driver = driver
        self._closed = False
        self._busy = threading.Lock()
        self._finalizer = weakref.finalize(self, _release, driver)

    @property
    def closed(self) -> bool:
        return self._closed

    def _pull(self) -> _Item | None:
        if self._closed:
            raise ClosedCursorError()
        if not self._busy.acquire(blocking=False):
            raise ConcurrentAdvanceError("advance")
        try:
            return self._driver.next()
        finally:
            self._busy.release()

    def close(self) -> None:
        """
        Stop the source and wait for its cleanup to finish.

        Safe to call more than once; a no-op after exhaustion. Exceptions
        raised by the source while unwinding propagate from here.
        """
        if not self._busy.acquire(blocking=False):
            raise ConcurrentAdvanceError("close")
        try:
            if self._closed:
                return
            self._closed = True
            self._finalizer.detach()
            self._driver.stop()
        finally:
            self._busy.release()

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Cursor[T](_CursorBase):
    """
    Demand-driven view of one Seq run.

    advance() returns (value, True) for each element, then (None, False)
    forever once the source is exhausted.
    """

    __slots__ = ()

    def advance(self) -> tuple[T | None, bool]:
        item = self._pull()
        if item is None:
            return None, False
        return item[0], True

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        item = self._pull()
        if item is None:
            raise StopIteration
        return item[0]


class Cursor2[S, T](_CursorBase):
    """Demand-driven view of one Seq2 run."""

    __slots__ = ()

    def advance(self) -> tuple[S | None, T | None, bool]:
        item = self._pull()
        if item is None:
            return None, None, False
        return item[0], item[1], True

    def __iter__(self) -> Iterator[tuple[S, T]]:
        return self

    def __next__(self) -> tuple[S, T]:
        item = self._pull()
        if item is None:
            raise StopIteration
        return item[0], item[1]


# ============================================================================
# Opening
# ============================================================================


def pull[T](seq: Seq[T], /) -> Cursor[T]:
    """
    Open a cursor on seq. Nothing runs until the first advance().

    Use as a context manager, or call close() when done.
    """
    source = seq.source
    if source is not None:
        return Cursor(_IteratorDriver(source, _single))
    return Cursor(_Rendezvous(seq.run))


def pull2[S, T](seq: Seq2[S, T], /) -> Cursor2[S, T]:
    """Open a cursor on a Seq2. See pull()."""
    source = seq.source
    if source is not None:
        return Cursor2(_IteratorDriver(source, _pair))
    return Cursor2(_Rendezvous(seq.run))


__all__ = ("Cursor", "Cursor2", "pull", "pull2")
