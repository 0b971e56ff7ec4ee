"""
Storage allocation and the process-wide allocation failure policy.

Every byte of storage owned by a DynStr is obtained through this module so
that running out of memory is handled in a single place: the current
allocation failure hook is invoked, and the default hook reports the
condition and terminates the process.
"""

import sys
from contextlib import contextmanager
from typing import Callable, Final, Iterator, Optional

AllocFailureHook = Callable[[], None]

OUT_OF_MEMORY_MESSAGE: Final[str] = "dynstr: out of memory"


def default_alloc_failure_hook() -> None:
    """Report the allocation failure on stderr and terminate the process."""

    print(OUT_OF_MEMORY_MESSAGE, file=sys.stderr)
    sys.exit(1)


_alloc_failure_hook: AllocFailureHook = default_alloc_failure_hook


def get_alloc_failure_hook() -> AllocFailureHook:
    """Get the currently installed allocation failure hook."""

    return _alloc_failure_hook


def set_alloc_failure_hook(hook: AllocFailureHook) -> AllocFailureHook:
    """
    Install a new allocation failure hook.

    Args:
        hook: Zero-argument callable invoked when storage cannot be obtained.
              It may terminate the process or raise to unwind.

    Returns:
        The previously installed hook
    """

    global _alloc_failure_hook

    if not callable(hook):
        raise TypeError("Allocation failure hook must be callable")

    previous = _alloc_failure_hook
    _alloc_failure_hook = hook
    return previous


def reset_alloc_failure_hook() -> None:
    """Restore the default terminate-on-exhaustion hook."""

    global _alloc_failure_hook
    _alloc_failure_hook = default_alloc_failure_hook


@contextmanager
def alloc_failure_hook(hook: AllocFailureHook) -> Iterator[AllocFailureHook]:
    """Temporarily install ``hook`` for the duration of a with block."""

    previous = set_alloc_failure_hook(hook)
    try:
        yield hook
    finally:
        set_alloc_failure_hook(previous)


def _fail() -> MemoryError:
    _alloc_failure_hook()
    # A hook that returns cannot supply memory either.
    return MemoryError(OUT_OF_MEMORY_MESSAGE)


def _zero_fill(size: int) -> bytearray:
    return bytearray(size)


def allocate(size: int) -> bytearray:
    """Allocate ``size`` zeroed bytes of storage."""

    try:
        return _zero_fill(size)
    except MemoryError as exc:
        raise _fail() from exc


def reallocate(storage: Optional[bytearray], size: int) -> bytearray:
    """
    Resize ``storage`` to ``size`` bytes, keeping its leading content.

    Bytes added at the end are zero. A None storage behaves like a fresh
    allocation.

    Args:
        storage: Storage previously returned by allocate or reallocate, or None
        size: New total size in bytes

    Returns:
        bytearray: The resized storage
    """

    if storage is None:
        return allocate(size)

    current = len(storage)
    if size <= current:
        del storage[size:]
        return storage

    try:
        storage.extend(_zero_fill(size - current))
    except MemoryError as exc:
        raise _fail() from exc

    return storage
