"""
Signal sequences
================

OS signals as sequences. Handlers are installed for the duration of one run
and the previous handlers are restored when it ends.

Python only delivers signals to the main thread and only lets the main
thread install handlers. Both sequences are backed by generators, so a
``for`` loop, a Cursor or a cursor-based combinator (zip, skip, resize)
drives them on the calling thread; that thread must be the main one.
"""

from __future__ import annotations

import contextlib
import logging
import queue
import signal
import typing
from collections.abc import Callable, Iterator
from types import FrameType

from ..cancel import Cancellation, CancelToken
from ..seq import Seq2
from .._types import Yield2

logger = logging.getLogger(__name__)

# How often a blocked wait() re-checks its cancellation handle
POLL_INTERVAL: typing.Final = 0.05

type _Handler = Callable[[int, FrameType | None], typing.Any]


@contextlib.contextmanager
def _notify(signums: tuple[int, ...], handler: _Handler) -> Iterator[None]:
    previous: dict[int, typing.Any] = {}
    try:
        for signum in signums:
            previous[signum] = signal.signal(signum, handler)
        logger.debug("installed handlers for %s", [signal.Signals(s).name for s in signums])
        yield
    finally:
        for signum, old in previous.items():
            signal.signal(signum, signal.SIG_DFL if old is None else old)
        logger.debug("restored handlers for %s", [signal.Signals(s).name for s in previous])


class _Generated[S, T]:
    """Re-iterable source: every iter() starts a fresh generator."""

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[tuple[S, T]]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[tuple[S, T]]:
        return self._factory()


def _generated[S, T](factory: Callable[[], Iterator[tuple[S, T]]]) -> Seq2[S, T]:
    def body(yield_: Yield2[S, T]) -> None:
        with contextlib.closing(factory()) as pairs:
            for s, t in pairs:
                if not yield_(s, t):
                    return

    return Seq2(body, source=_Generated(factory))


def wait(cancel: Cancellation, *signums: int) -> Seq2[int, signal.Signals]:
    """
    Deliver (index, signal) each time one of signums arrives.

    Ends when cancel is set or the consumer stops. A signal that arrives
    after cancel is set is dropped.
    """

    def pairs() -> Iterator[tuple[int, signal.Signals]]:
        received: queue.SimpleQueue[int] = queue.SimpleQueue()

        def handler(signum: int, frame: FrameType | None) -> None:
            received.put(signum)

        with _notify(signums, handler):
            index = 0
            while not cancel.is_set():
                try:
                    signum = received.get(timeout=POLL_INTERVAL)
                except queue.Empty:
                    continue
                if cancel.is_set():
                    return
                yield index, signal.Signals(signum)
                index += 1

    return _generated(pairs)


def scopes(parent: CancelToken, *signums: int) -> Seq2[CancelToken, int]:
    """
    Hand the loop body a fresh token on every iteration.

    The token is cancelled, with the signal as its reason, when one of
    signums arrives; received(token) tells which. A signal that arrives
    between iterations is held for the next token. The loop ends once
    parent is cancelled, and every token it handed out is cancelled when
    the loop ends, however it ends.
    """

    def pairs() -> Iterator[tuple[CancelToken, int]]:
        scope = parent.child()
        current: CancelToken | None = None
        pending: list[signal.Signals] = []

        def handler(signum: int, frame: FrameType | None) -> None:
            sig = signal.Signals(signum)
            if current is not None and not current.is_set():
                current.cancel(sig)
            elif not pending:
                pending.append(sig)

        try:
            with _notify(signums, handler):
                index = 0
                while not scope.is_set():
                    current = scope.child()
                    if pending:
                        current.cancel(pending.pop())
                    yield current, index
                    index += 1
        finally:
            scope.cancel()

    return _generated(pairs)


def received(token: CancelToken) -> signal.Signals | None:
    """The signal that cancelled token, if a signal did."""
    reason = token.reason
    if isinstance(reason, signal.Signals):
        return reason
    return None


__all__ = ("POLL_INTERVAL", "received", "scopes", "wait")
