"""
Core type definitions for lazyseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Consumer side
# ============================================================================

# Yield = consumer callback; returns True to keep going, False to stop
type Yield[T] = Callable[[T], bool]

# Yield2 = consumer callback for paired values
type Yield2[S, T] = Callable[[S, T], bool]

# Consumer verdicts. Plain bools so any truthy/falsy callback works.
CONTINUE: typing.Final = True
STOP: typing.Final = False

# ============================================================================
# Producer side
# ============================================================================

# Body = push procedure behind a Seq: calls yield_ until it returns False
type Body[T] = Callable[[Yield[T]], None]

# Body2 = push procedure behind a Seq2
type Body2[S, T] = Callable[[Yield2[S, T]], None]

# ============================================================================
# Function shapes
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Predicate2 = function that tests a pair
type Predicate2[S, T] = Callable[[S, T], bool]

__all__ = (
    "Yield",
    "Yield2",
    "CONTINUE",
    "STOP",
    "Body",
    "Body2",
    "Predicate",
    "Predicate2",
)
