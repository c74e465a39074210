"""
Ticker sequences
================

Timed loops as sequences. Each run owns its schedule; stopping the run (or
cancelling the handle) ends the wait immediately.

Ticks are scheduled on the monotonic clock. A consumer slower than the
interval does not get a burst of catch-up ticks; missed ticks are dropped.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime

from ..cancel import Cancellation
from ..seq import Seq2
from .._types import Yield2


def after(cancel: Cancellation, interval: float) -> Seq2[int, datetime]:
    """
    Wait interval seconds, then deliver (index, now); repeat.

    Ends when cancel is set or the consumer stops.
    """
    return _ticks(cancel, interval, start=0)


def before(cancel: Cancellation, interval: float) -> Seq2[int, datetime]:
    """
    Deliver (0, now) right away, then behave like after() from index 1.

    Nothing is delivered if cancel is already set.
    """
    later = _ticks(cancel, interval, start=1)

    def body(yield_: Yield2[int, datetime]) -> None:
        if cancel.is_set():
            return
        if not yield_(0, datetime.now(UTC)):
            return
        later.run(yield_)

    return Seq2(body)


def _ticks(cancel: Cancellation, interval: float, *, start: int) -> Seq2[int, datetime]:
    if interval <= 0:
        raise ValueError(f"interval must be > 0, got {interval!r}")

    def body(yield_: Yield2[int, datetime]) -> None:
        index = start
        deadline = time.monotonic() + interval
        while True:
            if cancel.wait(max(0.0, deadline - time.monotonic())):
                return
            if not yield_(index, datetime.now(UTC)):
                return
            index += 1
            deadline += interval
            now = time.monotonic()
            if deadline <= now:
                deadline += ((now - deadline) // interval + 1) * interval

    return Seq2(body)


__all__ = ("after", "before")
