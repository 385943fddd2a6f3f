"""Frame buffer that either borrows or owns its bytes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Buffer:
    """Frame data.

    Built from ``bytes`` (or any iterable of byte values) the buffer owns its
    data. Built from a ``bytearray`` or ``memoryview`` it borrows the memory
    without copying, so later changes to that memory show through.
    """

    __slots__ = ("_data", "_owned")

    def __init__(self, data: bytes | bytearray | memoryview | Iterable[int] = b"") -> None:
        if isinstance(data, bytes):
            self._data: bytes | memoryview = data
            self._owned = True
        elif isinstance(data, (bytearray, memoryview)):
            view = memoryview(data)
            if view.format != "B" or view.ndim != 1:
                view = view.cast("B")
            self._data = view.toreadonly()
            self._owned = False
        else:
            self._data = bytes(data)
            self._owned = True

    def as_bytes(self) -> bytes | memoryview:
        """The raw bytes, without copying."""
        return self._data

    def into_bytes(self) -> Iterator[int]:
        """Iterate over the byte values; borrowed data is copied first."""
        if self._owned:
            return iter(self._data)
        return iter(bytes(self._data))

    def own(self) -> Buffer:
        """Return a buffer that owns its data, copying only if this one borrows."""
        if self._owned:
            return Buffer(self._data)
        return Buffer(bytes(self._data))

    def is_owned(self) -> bool:
        return self._owned

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Buffer):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "owned" if self._owned else "borrowed"
        return f"Buffer({state}, {len(self._data)} bytes)"