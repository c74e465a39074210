"""Shared fixtures: instrumented producers and failing streams."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

import pytest

from lazyseq import Seq, Seq2, Yield, Yield2


@dataclass
class Probe:
    """
    Counts what a producer did.

    Its sequences are plain push bodies (no native source), so pulling them
    goes through the worker-thread rendezvous.
    """

    started: int = 0
    produced: int = 0
    cleanups: int = 0
    events: list[str] = field(default_factory=list)

    def seq(self, n: int | None = None, *, label: str = "") -> Seq[int]:
        def body(yield_: Yield[int]) -> None:
            self.started += 1
            try:
                i = 0
                while n is None or i < n:
                    self.produced += 1
                    if label:
                        self.events.append(f"{label}{i}")
                    if not yield_(i):
                        return
                    i += 1
            finally:
                self.cleanups += 1

        return Seq(body)

    def seq2(self, n: int | None = None) -> Seq2[int, str]:
        def body(yield_: Yield2[int, str]) -> None:
            self.started += 1
            try:
                i = 0
                while n is None or i < n:
                    self.produced += 1
                    if not yield_(i, chr(ord("a") + i % 26)):
                        return
                    i += 1
            finally:
                self.cleanups += 1

        return Seq2(body)


class FailingStream:
    """Binary stream that serves data, then raises error on every later read."""

    def __init__(self, data: bytes, error: Exception) -> None:
        self._src = io.BytesIO(data)
        self._error = error
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        chunk = self._src.read(size)
        if chunk:
            return chunk
        raise self._error


@pytest.fixture
def probe() -> Probe:
    return Probe()


@pytest.fixture
def other_probe() -> Probe:
    return Probe()


@pytest.fixture
def failing_stream() -> type[FailingStream]:
    return FailingStream
