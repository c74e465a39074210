"""
Zip combinators
===============

Pairwise alignment of two sequences with one generic engine (zipM) and
sugar per alignment policy.

Both sides are pulled through cursors, left first on every step. When both
run out on the same step the zip ends without a padded pair.
"""

from __future__ import annotations

import enum

from ..cursor import pull
from .._helpers import MISSING, Maybe, require_default
from ..seq import Seq, Seq2
from .._types import Yield2


class ZipPolicy(enum.StrEnum):
    """How many pairs a zip produces and which side gets padded."""

    SHORTEST = "shortest"  # min(|L|, |R|), no padding
    LEFT = "left"  # |L|, right side padded
    RIGHT = "right"  # |R|, left side padded
    LONGEST = "longest"  # max(|L|, |R|), shorter side padded

    @property
    def pads_left(self) -> bool:
        return self in (ZipPolicy.RIGHT, ZipPolicy.LONGEST)

    @property
    def pads_right(self) -> bool:
        return self in (ZipPolicy.LEFT, ZipPolicy.LONGEST)


# ============================================================================
# Generic engine
# ============================================================================


def zipM[S, T](
    lhs: Seq[S],
    rhs: Seq[T],
    *,
    policy: ZipPolicy | str,
    left_default: Maybe[S] = MISSING,
    right_default: Maybe[T] = MISSING,
) -> Seq2[S, T]:
    """
    Generic zip.

    A default is required for every side the policy may pad; the check runs
    here, not on first iteration.
    """
    policy = ZipPolicy(policy)
    name = f"zipM(policy={policy.value!r})"
    pads_left, pads_right = policy.pads_left, policy.pads_right
    fill_l = require_default(left_default, combinator=name, parameter="left_default") if pads_left else None
    fill_r = require_default(right_default, combinator=name, parameter="right_default") if pads_right else None

    def body(yield_: Yield2[S, T]) -> None:
        with pull(lhs) as left, pull(rhs) as right:
            while True:
                l, ok_l = left.advance()
                r, ok_r = right.advance()
                if not ok_l and not ok_r:
                    return
                if not ok_l:
                    if not pads_left:
                        return
                    while ok_r:
                        if not yield_(fill_l, r):  # type: ignore[arg-type]
                            return
                        r, ok_r = right.advance()
                    return
                if not ok_r:
                    if not pads_right:
                        return
                    while ok_l:
                        if not yield_(l, fill_r):  # type: ignore[arg-type]
                            return
                        l, ok_l = left.advance()
                    return
                if not yield_(l, r):  # type: ignore[arg-type]
                    return

    return Seq2(body)


# ============================================================================
# Sugar per policy
# ============================================================================


def zip_shortest[S, T](lhs: Seq[S], rhs: Seq[T]) -> Seq2[S, T]:
    """Pairs until either side runs out."""
    return zipM(lhs, rhs, policy=ZipPolicy.SHORTEST)


def zip_left[S, T](lhs: Seq[S], rhs: Seq[T], *, default: T) -> Seq2[S, T]:
    """One pair per left element; right slot is default once rhs runs out."""
    return zipM(lhs, rhs, policy=ZipPolicy.LEFT, right_default=default)


def zip_right[S, T](lhs: Seq[S], rhs: Seq[T], *, default: S) -> Seq2[S, T]:
    """One pair per right element; left slot is default once lhs runs out."""
    return zipM(lhs, rhs, policy=ZipPolicy.RIGHT, left_default=default)


def zip_all[S, T](lhs: Seq[S], rhs: Seq[T], *, left_default: S, right_default: T) -> Seq2[S, T]:
    """Pairs until both sides run out, padding whichever ran out first."""
    return zipM(
        lhs,
        rhs,
        policy=ZipPolicy.LONGEST,
        left_default=left_default,
        right_default=right_default,
    )


__all__ = ("ZipPolicy", "zipM", "zip_shortest", "zip_left", "zip_right", "zip_all")
