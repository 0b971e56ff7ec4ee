"""
Core package for the dynamic string buffer.

This package implements the DynStr class, a growable null-terminated byte
string, together with the allocation failure policy that decides what
happens when its storage cannot be obtained.
"""

from .alloc import (
    alloc_failure_hook,
    default_alloc_failure_hook,
    get_alloc_failure_hook,
    reset_alloc_failure_hook,
    set_alloc_failure_hook
)
from .buffer import DynStr
from .errors import BufferReleasedError, DynStrError, FormatError

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
