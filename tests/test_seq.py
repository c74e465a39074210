"""Tests for Seq / Seq2 construction, push runs and collectors."""

from __future__ import annotations

import pytest

import lazyseq as ls
from lazyseq import Seq, Seq2, identity


# ─────────────────────────────────────────────────────────────────────────────
# Push runs
# ─────────────────────────────────────────────────────────────────────────────


class TestRun:
    def test_delivers_in_order(self) -> None:
        got: list[int] = []
        finished = ls.of(1, 2, 3).run(lambda v: got.append(v) is None)
        assert got == [1, 2, 3]
        assert finished is True

    def test_consumer_false_stops_permanently(self, probe) -> None:
        got: list[int] = []

        def consumer(v: int) -> bool:
            got.append(v)
            return len(got) < 2

        finished = probe.seq(10).run(consumer)
        assert finished is False
        assert got == [0, 1]
        assert probe.produced == 2
        assert probe.cleanups == 1

    def test_call_is_run(self) -> None:
        seq = ls.of("a", "b")
        got: list[str] = []
        assert seq(lambda v: got.append(v) is None) is True
        assert got == ["a", "b"]

    def test_seq2_run_reports_stop(self) -> None:
        seq = ls.from_pairs([(1, "a"), (2, "b"), (3, "c")])
        got: list[tuple[int, str]] = []

        def consumer(k: int, v: str) -> bool:
            got.append((k, v))
            return k < 2

        assert seq.run(consumer) is False
        assert got == [(1, "a"), (2, "b")]


# ─────────────────────────────────────────────────────────────────────────────
# Constructors and re-run semantics
# ─────────────────────────────────────────────────────────────────────────────


class TestConstructors:
    def test_collection_restarts(self) -> None:
        seq = ls.from_iterable([1, 2, 3])
        assert seq.collect() == [1, 2, 3]
        assert seq.collect() == [1, 2, 3]

    def test_iterator_resumes(self) -> None:
        seq = ls.from_iterable(iter([1, 2, 3, 4]))
        assert seq.run(lambda v: v < 2) is False
        assert seq.collect() == [3, 4]
        assert seq.collect() == []

    def test_empty(self) -> None:
        assert ls.empty().collect() == []
        assert ls.count(ls.empty()) == 0

    def test_from_mapping_keeps_order(self) -> None:
        seq = ls.from_mapping({"x": 1, "y": 2})
        assert seq.collect() == [("x", 1), ("y", 2)]
        assert seq.to_dict() == {"x": 1, "y": 2}

    def test_enumerated(self) -> None:
        assert ls.enumerated("abc").collect() == [(0, "a"), (1, "b"), (2, "c")]

    def test_source_exposed_for_native_iterables(self) -> None:
        items = [1, 2]
        assert ls.from_iterable(items).source is items
        assert Seq(lambda y: None).source is None

    def test_repr(self) -> None:
        assert "source=[1]" in repr(ls.from_iterable([1]))
        assert repr(Seq2(print)).startswith("Seq2(")


# ─────────────────────────────────────────────────────────────────────────────
# Collectors and iteration
# ─────────────────────────────────────────────────────────────────────────────


class TestCollect:
    def test_collect_dict_last_key_wins(self) -> None:
        seq = ls.from_pairs([("a", 1), ("a", 2)])
        assert ls.collect_dict(seq) == {"a": 2}

    def test_count(self, probe) -> None:
        assert probe.seq(7).count() == 7

    def test_for_loop_goes_through_cursor(self, probe) -> None:
        assert list(probe.seq(3)) == [0, 1, 2]
        assert probe.cleanups == 1

    def test_for_loop_over_seq2(self, probe) -> None:
        assert list(probe.seq2(2)) == [(0, "a"), (1, "b")]

    def test_abandoned_iteration_cleans_up(self, probe) -> None:
        it = iter(probe.seq())
        assert next(it) == 0
        assert next(it) == 1
        it.close()
        assert probe.cleanups == 1
        assert probe.produced == 2


# ─────────────────────────────────────────────────────────────────────────────
# Fluent chaining
# ─────────────────────────────────────────────────────────────────────────────


class TestFluent:
    def test_identity_map_twice_is_noop(self) -> None:
        src = ls.of(3, 1, 4, 1, 5)
        assert src.map(identity).map(identity).collect() == src.collect()

    def test_chain(self) -> None:
        got = (
            ls.from_iterable(range(10))
            .select(lambda v: v % 2 == 0)
            .map(lambda v: v * 10)
            .skip(1)
            .resize(3, default=-1)
            .zip_index()
            .collect()
        )
        assert got == [(0, 20), (1, 40), (2, 60)]

    def test_seq2_chain(self) -> None:
        got = (
            ls.from_mapping({1: "a", 2: "b", 3: "c"})
            .select(lambda k, v: k != 2)
            .swap()
            .map(lambda v, k: (v.upper(), k * 2))
            .to_dict()
        )
        assert got == {"A": 2, "C": 6}

    def test_concat_and_tap(self) -> None:
        seen: list[int] = []
        got = ls.of(1).concat(ls.of(2), ls.of(3)).tap(seen.append).collect()
        assert got == [1, 2, 3]
        assert seen == [1, 2, 3]

    def test_padding_requires_default(self) -> None:
        with pytest.raises(ls.MissingDefaultError):
            ls.of(1).skip(-1)
