"""
Cancellation
============

Cooperative cancellation handles for long-blocking sources (tickers,
signal waits).

Anything with ``is_set()`` and ``wait(timeout)`` counts as a cancellation
handle, so a plain ``threading.Event`` works everywhere a CancelToken does.
CancelToken adds parent/child linking: cancelling a token cancels every
token derived from it.
"""

from __future__ import annotations

import threading
import typing
import weakref


@typing.runtime_checkable
class Cancellation(typing.Protocol):
    """Read side of a cancellation handle."""

    def is_set(self) -> bool: ...

    def wait(self, timeout: float | None = None) -> bool: ...


class CancelToken:
    """
    Event-like cancellation handle with a reason and child tokens.

    The first cancel() wins: its reason sticks, later calls are no-ops.
    Children are held weakly, so short-lived per-iteration tokens do not
    accumulate on a long-lived parent.
    """

    __slots__ = ("_event", "_lock", "_children", "_reason", "__weakref__")

    def __init__(self, parent: CancelToken | None = None) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._children: weakref.WeakSet[CancelToken] = weakref.WeakSet()
        self._reason: object = None
        if parent is not None:
            parent._adopt(self)

    @property
    def reason(self) -> object:
        """What cancel() was called with; None while not cancelled."""
        return self._reason

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def is_set(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or timeout elapses; True if cancelled."""
        return self._event.wait(timeout)

    def cancel(self, reason: object = None) -> None:
        """Cancel this token and all of its children. Children get no reason."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
            children = list(self._children)
            self._children.clear()
        for child in children:
            child.cancel()

    # threading.Event compatibility
    set = cancel

    def child(self) -> CancelToken:
        """New token cancelled together with this one."""
        return CancelToken(self)

    def _adopt(self, child: CancelToken) -> None:
        with self._lock:
            if not self._event.is_set():
                self._children.add(child)
                return
        child.cancel()

    def __repr__(self) -> str:
        state = f"cancelled, reason={self._reason!r}" if self.cancelled else "active"
        return f"CancelToken({state})"


__all__ = ("Cancellation", "CancelToken")
