"""Internal helpers for lazyseq.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for writing custom sources."""

from __future__ import annotations

import enum
import logging
import typing

logger = logging.getLogger("lazyseq")

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Missing-argument sentinel (None is a legitimate fill value)
class _Missing(enum.Enum):
    MISSING = enum.auto()

    def __repr__(self) -> str:
        return "MISSING"

MISSING: typing.Final = _Missing.MISSING

type Maybe[T] = T | typing.Literal[_Missing.MISSING]

def require_default[T](value: Maybe[T], *, combinator: str, parameter: str = "default") -> T:
    """
    Return value, or raise MissingDefaultError if it was never supplied.

    Padding combinators call this when they are built, not on first use.
    """
    if value is MISSING:
        from ._errors import MissingDefaultError
        raise MissingDefaultError(combinator, parameter)
    return value

__all__ = (
    "identity",
    "logger",
    "MISSING",
    "Maybe",
    "require_default",
)
