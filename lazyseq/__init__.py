"""
Lazy sequence combinators.

Push-style sequences with cooperative stop, a pull adapter that suspends a
producer between requests, and combinators built on both.

Architecture:
- Seq / Seq2 wrap a push body; the consumer returns False to stop
- Cursor / Cursor2 turn one run of a Seq into advance() calls
- Combinators that need lock-step access (zip, skip, resize) go through cursors
- Everything else (map, select, concat, ...) is plain push-through
"""

import logging

# Core types
from ._types import CONTINUE, STOP, Body, Body2, Predicate, Predicate2, Yield, Yield2

# Internal helpers (for custom sources)
from . import _helpers
from ._helpers import MISSING, identity

# Sequences
from .seq import (
    Seq,
    Seq2,
    collect,
    collect2,
    collect_dict,
    count,
    empty,
    enumerated,
    from_iterable,
    from_mapping,
    from_pairs,
    of,
)

# Pull adapter
from .cursor import Cursor, Cursor2, pull, pull2

# Structural combinators
from .transform import (
    # Seq
    concat,
    fmap,
    fmap_out,
    resize,
    select,
    select_map,
    select_map_out,
    skip,
    tap,
    # Seq2
    concat2,
    fmap2,
    fmap_in,
    keys,
    resize2,
    select2,
    select_map2,
    select_map_in,
    skip2,
    swap,
    tap2,
    values,
)

# Alignment
from .align import ZipPolicy, zip_all, zip_index, zip_left, zip_right, zip_shortest, zipM

# Cancellation
from .cancel import Cancellation, CancelToken

# Adapters (namespace imports)
from . import io, signals, time
from .io import ResidualError, error_buffer, error_buffer_string

# Errors
from ._errors import ClosedCursorError, ConcurrentAdvanceError, CursorError, MissingDefaultError

_helpers.logger.addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Body",
    "Body2",
    "CONTINUE",
    "Predicate",
    "Predicate2",
    "STOP",
    "Yield",
    "Yield2",
    # Internal helpers
    "_helpers",
    "MISSING",
    "identity",
    # Sequences
    "Seq",
    "Seq2",
    "collect",
    "collect2",
    "collect_dict",
    "count",
    "empty",
    "enumerated",
    "from_iterable",
    "from_mapping",
    "from_pairs",
    "of",
    # Pull adapter
    "Cursor",
    "Cursor2",
    "pull",
    "pull2",
    # Combinators - Seq
    "concat",
    "fmap",
    "fmap_out",
    "resize",
    "select",
    "select_map",
    "select_map_out",
    "skip",
    "tap",
    # Combinators - Seq2
    "concat2",
    "fmap2",
    "fmap_in",
    "keys",
    "resize2",
    "select2",
    "select_map2",
    "select_map_in",
    "skip2",
    "swap",
    "tap2",
    "values",
    # Alignment
    "ZipPolicy",
    "zip_all",
    "zip_index",
    "zip_left",
    "zip_right",
    "zip_shortest",
    "zipM",
    # Cancellation
    "Cancellation",
    "CancelToken",
    # Adapters
    "io",
    "signals",
    "time",
    "ResidualError",
    "error_buffer",
    "error_buffer_string",
    # Errors
    "ClosedCursorError",
    "ConcurrentAdvanceError",
    "CursorError",
    "MissingDefaultError",
)
