from .errors import BufferFullError, HasBuffer, ResidualError, error_buffer, error_buffer_string
from .reader import DEFAULT_BUFFER_SIZE, MIN_BUFFER_SIZE, PartialRead, Readable, Reader
from .scanner import Scanner

__all__ = (
    # Errors
    "BufferFullError",
    "HasBuffer",
    "ResidualError",
    "error_buffer",
    "error_buffer_string",
    # Reader
    "DEFAULT_BUFFER_SIZE",
    "MIN_BUFFER_SIZE",
    "PartialRead",
    "Readable",
    "Reader",
    # Scanner
    "Scanner",
)
