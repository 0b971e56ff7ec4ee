"""
dynstr - growable, null-terminated byte strings.
"""

from .core import (
    DynStr,
    DynStrError,
    BufferReleasedError,
    FormatError,
    alloc_failure_hook,
    default_alloc_failure_hook,
    get_alloc_failure_hook,
    reset_alloc_failure_hook,
    set_alloc_failure_hook
)

__version__ = "0.1.0"

__all__ = [
    'DynStr',
    'DynStrError',
    'BufferReleasedError',
    'FormatError',
    'alloc_failure_hook',
    'default_alloc_failure_hook',
    'get_alloc_failure_hook',
    'reset_alloc_failure_hook',
    'set_alloc_failure_hook'
]
