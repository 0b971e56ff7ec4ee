"""
Buffer module implementing a growable, null-terminated byte string.
"""

from typing import Any, Final, Optional, Union

from .alloc import allocate, reallocate
from .errors import BufferReleasedError
from .formatting import Template, render
from ..utils import hex_utils

BytesLike = Union[bytes, bytearray, memoryview, str]

MIN_CAPACITY: Final[int] = 8
GROWTH_FACTOR: Final[int] = 2
TERMINATOR: Final[int] = 0


def _as_bytes(data: BytesLike, size: Optional[int] = None) -> bytes:
    """Copy ``data`` (or its first ``size`` bytes) into an immutable bytes object."""

    if isinstance(data, str):
        raw = data.encode('utf-8')
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"Expected bytes-like or str, not {type(data).__name__}")

    if size is None:
        return raw

    if not 0 <= size <= len(raw):
        raise ValueError(f"Size {size} out of range for {len(raw)} bytes of data")

    return raw[:size]


class DynStr:
    """
    Growable byte string that keeps a zero terminator after its content.

    Storage is a bytearray of ``capacity + 1`` bytes owned exclusively by
    the instance. It grows geometrically, so repeated appends cost
    amortized O(1) per byte, and it is never shrunk by mutation.
    """

    def __init__(self) -> None:
        self._data: Optional[bytearray] = None
        self._size = 0
        self._capacity = 0
        self._released = False

    @classmethod
    def create_empty(cls) -> 'DynStr':
        """Create an empty buffer with no storage allocated."""

        return cls()

    @classmethod
    def adopt(cls, owned: bytearray) -> 'DynStr':
        """
        Create a buffer that takes over ``owned`` as its storage without copying.

        The content ends at the first zero byte, or at the end of ``owned`` if
        it has none, in which case a terminator is appended in place. The
        caller must not touch ``owned`` afterwards.

        Args:
            owned: Storage handed over to the new buffer

        Returns:
            DynStr: Buffer with capacity equal to its size
        """

        if not isinstance(owned, bytearray):
            raise TypeError(f"Only a bytearray can be adopted, not {type(owned).__name__}")

        size = owned.find(TERMINATOR)
        if size < 0:
            size = len(owned)
            owned.append(TERMINATOR)

        del owned[size + 1:]

        buf = cls()
        buf._data = owned
        buf._size = size
        buf._capacity = size
        return buf

    @classmethod
    def copy_from(cls, data: BytesLike, size: Optional[int] = None) -> 'DynStr':
        """Create a buffer holding a copy of ``data`` (or its first ``size`` bytes)."""

        payload = _as_bytes(data, size)

        buf = cls()
        buf._data = allocate(len(payload) + 1)
        buf._data[:len(payload)] = payload
        buf._size = len(payload)
        buf._capacity = len(payload)
        return buf

    @classmethod
    def format(cls, template: Template, *args: Any, **kwargs: Any) -> 'DynStr':
        """Create a buffer from a printf-style template rendered with the given arguments."""

        rendered = render(template, *args, **kwargs)

        buf = cls()
        buf._data = rendered
        buf._size = len(rendered) - 1
        buf._capacity = buf._size
        return buf

    def release_ownership(self) -> bytearray:
        """
        End the buffer's lifetime and hand its storage to the caller.

        Returns:
            bytearray: The storage trimmed in place to the logical content
        """

        self._check_alive()

        data = self._data if self._data is not None else bytearray()
        del data[self._size:]

        self._invalidate()
        return data

    def destroy(self) -> None:
        """End the buffer's lifetime and drop its storage."""

        self._check_alive()
        self._invalidate()

    def __enter__(self) -> 'DynStr':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._released:
            self.destroy()

    @property
    def released(self) -> bool:
        """Whether destroy() or release_ownership() ended this buffer."""

        return self._released

    @property
    def capacity(self) -> int:
        """Allocated content bytes, not counting the terminator slot."""

        self._check_alive()
        return self._capacity

    def content(self) -> bytes:
        """Get a copy of the current content, without the terminator."""

        self._check_alive()

        if self._data is None:
            return b''

        return bytes(self._data[:self._size])

    def terminated(self) -> bytes:
        """Get a copy of the current content followed by its zero terminator."""

        return self.content() + bytes([TERMINATOR])

    def length(self) -> int:
        """Get the content length in bytes."""

        self._check_alive()
        return self._size

    def set(self, data: BytesLike, size: Optional[int] = None) -> None:
        """Replace the whole content with ``data`` (or its first ``size`` bytes)."""

        self._check_alive()
        payload = _as_bytes(data, size)

        self._ensure_capacity(len(payload))

        self._write(0, payload)
        self._size = len(payload)
        self._terminate()

    def insert(self, pos: int, data: BytesLike, size: Optional[int] = None) -> None:
        """
        Insert ``data`` at byte offset ``pos``.

        Args:
            pos: Offset in the range [0, length()]
            data: Bytes (or str, encoded as UTF-8) to insert
            size: Optional number of leading bytes of ``data`` to insert

        Raises:
            IndexError: If ``pos`` lies outside the content
        """

        self._check_alive()
        payload = _as_bytes(data, size)

        if not isinstance(pos, int):
            raise TypeError(f"Insert position must be an int, not {type(pos).__name__}")

        if not 0 <= pos <= self._size:
            raise IndexError(f"Insert position {pos} out of range [0, {self._size}]")

        self._ensure_capacity(self._size + len(payload))

        if pos == 0:
            self._prepend(payload)
            return

        if pos == self._size:
            self._append(payload)
            return

        self._move(pos + len(payload), pos, self._size - pos)
        self._write(pos, payload)

        self._size += len(payload)
        self._terminate()

    def insert_formatted(self, pos: int, template: Template, *args: Any, **kwargs: Any) -> None:
        """Insert a printf-style rendered template at byte offset ``pos``."""

        self._check_alive()
        rendered = render(template, *args, **kwargs)

        try:
            self.insert(pos, rendered, len(rendered) - 1)
        finally:
            rendered.clear()

    def append(self, data: BytesLike, size: Optional[int] = None) -> None:
        """Append ``data`` (or its first ``size`` bytes) to the end of the content."""

        self._check_alive()
        self._append(_as_bytes(data, size))

    def append_formatted(self, template: Template, *args: Any, **kwargs: Any) -> None:
        """Append a printf-style rendered template."""

        self._check_alive()
        rendered = render(template, *args, **kwargs)

        try:
            self._append(bytes(rendered[:-1]))
        finally:
            rendered.clear()

    def prepend(self, data: BytesLike, size: Optional[int] = None) -> None:
        """Prepend ``data`` (or its first ``size`` bytes) to the start of the content."""

        self._check_alive()
        self._prepend(_as_bytes(data, size))

    def prepend_formatted(self, template: Template, *args: Any, **kwargs: Any) -> None:
        """Prepend a printf-style rendered template."""

        self._check_alive()
        rendered = render(template, *args, **kwargs)

        try:
            self._prepend(bytes(rendered[:-1]))
        finally:
            rendered.clear()

    def clear(self) -> None:
        """Empty the content while keeping the allocated capacity."""

        self._check_alive()

        self._size = 0
        self._terminate()

    def erase(self, pos: int, count: int) -> None:
        """
        Remove ``count`` bytes starting at byte offset ``pos``.

        Raises:
            IndexError: If the range [pos, pos + count) is not inside the content
        """

        self._check_alive()

        if not isinstance(pos, int) or not isinstance(count, int):
            raise TypeError("Erase position and count must be ints")

        if pos < 0 or count < 0 or pos + count > self._size:
            raise IndexError(
                f"Erase range [{pos}, {pos + count}) out of range [0, {self._size}]"
            )

        self._move(pos, pos + count, self._size - pos - count)

        self._size -= count
        self._terminate()

    def hexdump(self, highlight: bool = False) -> str:
        """Render the content and its terminator as a hex dump for inspection."""

        self._check_alive()

        data = self.terminated() if self._data is not None else b''
        dump = hex_utils.hexdump(data)

        if highlight:
            return hex_utils.highlight_hexdump(dump)

        return dump

    def __len__(self) -> int:
        return self.length()

    def __bytes__(self) -> bytes:
        return self.content()

    def __eq__(self, other: object) -> bool:
        if self._released:
            return NotImplemented

        if isinstance(other, DynStr):
            if other._released:
                return False
            return self.content() == other.content()

        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.content() == bytes(other)

        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._released:
            return f"<{type(self).__name__} released>"

        return f"{type(self).__name__}({self.content()!r}, capacity={self._capacity})"

    def _append(self, payload: bytes) -> None:
        self._ensure_capacity(self._size + len(payload))

        self._write(self._size, payload)

        self._size += len(payload)
        self._terminate()

    def _prepend(self, payload: bytes) -> None:
        self._ensure_capacity(self._size + len(payload))

        self._move(len(payload), 0, self._size)
        self._write(0, payload)

        self._size += len(payload)
        self._terminate()

    def _ensure_capacity(self, target: int) -> None:
        """Grow storage so at least ``target`` content bytes fit."""

        if self._capacity >= target:
            return

        capacity = max(self._capacity, MIN_CAPACITY)
        grown = capacity * GROWTH_FACTOR
        capacity = grown if grown > target else target

        self._data = reallocate(self._data, capacity + 1)
        self._capacity = capacity

    def _write(self, offset: int, payload: bytes) -> None:
        if payload:
            self._data[offset:offset + len(payload)] = payload

    def _move(self, dst: int, src: int, count: int) -> None:
        # The source slice is copied out before assignment, so overlap is safe.
        if count > 0:
            self._data[dst:dst + count] = self._data[src:src + count]

    def _terminate(self) -> None:
        if self._data is not None:
            self._data[self._size] = TERMINATOR

    def _check_alive(self) -> None:
        if self._released:
            raise BufferReleasedError(f"{type(self).__name__} was already released")

    def _invalidate(self) -> None:
        self._data = None
        self._size = 0
        self._capacity = 0
        self._released = True
