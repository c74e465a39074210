from __future__ import annotations

class CursorError(Exception):
    """Cursor used against its contract. Never a data condition."""


class ClosedCursorError(CursorError):
    """advance() called on a cursor that was already closed."""

    def __init__(self) -> None:
        super().__init__("advance() on a closed cursor")


class ConcurrentAdvanceError(CursorError):
    """Two pulls in flight on one cursor (concurrent or re-entrant)."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() while another pull is in flight on the same cursor")


class MissingDefaultError(TypeError):
    """Padding combinator needs a fill value that was not given."""

    combinator: str
    parameter: str

    def __init__(self, combinator: str, parameter: str) -> None:
        self.combinator = combinator
        self.parameter = parameter
        super().__init__(f"{combinator}() pads its output and requires {parameter}=")

__all__ = ("ClosedCursorError", "ConcurrentAdvanceError", "CursorError", "MissingDefaultError")
