"""
Exceptions raised by dynamic string buffers.
"""


class DynStrError(Exception):
    """Base class for dynstr errors."""


class BufferReleasedError(DynStrError):
    """Raised when a buffer is used after destroy() or release_ownership()."""


class FormatError(DynStrError, ValueError):
    """Raised when a template cannot be rendered with the given arguments."""
