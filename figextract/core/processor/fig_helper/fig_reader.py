# figextract/core/processor/fig_helper/fig_reader.py
"""
Bounds-Checked Byte Cursor

Single primitive used by every reader that trusts a length or count field
taken from the wire (chunk lengths, vector network counts, loop sizes).

Every read validates the requested size against the bytes that remain
BEFORE slicing or allocating.

Usage:
    cursor = ByteCursor(data)
    count = cursor.read_u32()
    indices = cursor.read_u32_array(count)   # ShortReadError if truncated
"""
import math
import struct
from typing import List, Optional, Tuple

_U32 = struct.Struct('<I')
_F32 = struct.Struct('<f')


def finite_or_none(value: float) -> Optional[float]:
    """Map NaN and infinities to None (JSON null)."""
    return value if math.isfinite(value) else None


class ShortReadError(Exception):
    """
    Raised when a read asks for more bytes than remain.

    Not a FigError: container readers translate it into a fatal error,
    geometry decoders translate it into "no result".

    Attributes:
        offset: Cursor position where the read was attempted
        expected: Number of bytes requested
        actual: Number of bytes remaining
    """

    def __init__(self, offset: int, expected: int, actual: int):
        self.offset = offset
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Short read at offset {offset}: expected {expected} bytes, found {actual}"
        )


class ByteCursor:
    """
    Little-endian reader over an immutable byte buffer.

    Attributes:
        offset: Current read position
    """

    def __init__(self, data: bytes, offset: int = 0):
        self._data = memoryview(data)
        self.offset = offset

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return max(len(self._data) - self.offset, 0)

    def at_end(self) -> bool:
        return self.offset >= len(self._data)

    def ensure(self, count: int) -> None:
        """
        Check that count bytes can be read without consuming them.

        Raises:
            ShortReadError: If fewer than count bytes remain
        """
        if count < 0 or count > self.remaining:
            raise ShortReadError(self.offset, count, self.remaining)

    def read_bytes(self, count: int) -> bytes:
        self.ensure(count)
        start = self.offset
        self.offset += count
        return self._data[start:self.offset].tobytes()

    def read_u8(self) -> int:
        self.ensure(1)
        value = self._data[self.offset]
        self.offset += 1
        return value

    def read_u32(self) -> int:
        self.ensure(4)
        value = _U32.unpack_from(self._data, self.offset)[0]
        self.offset += 4
        return value

    def read_f32(self) -> float:
        self.ensure(4)
        value = _F32.unpack_from(self._data, self.offset)[0]
        self.offset += 4
        return value

    def read_f32s(self, count: int) -> List[float]:
        self.ensure(count * 4)
        values = struct.unpack_from(f'<{count}f', self._data, self.offset)
        self.offset += count * 4
        return list(values)

    def read_struct(self, layout: struct.Struct) -> Tuple:
        """Unpack one fixed-size record."""
        self.ensure(layout.size)
        values = layout.unpack_from(self._data, self.offset)
        self.offset += layout.size
        return values

    def read_u32_array(self, count: int) -> List[int]:
        """
        Read count little-endian u32 values.

        The full size is validated before anything is unpacked.
        """
        self.ensure(count * 4)
        values = struct.unpack_from(f'<{count}I', self._data, self.offset)
        self.offset += count * 4
        return list(values)

    def __repr__(self) -> str:
        return f"ByteCursor(offset={self.offset}, size={self.size})"


__all__ = ['ByteCursor', 'ShortReadError', 'finite_or_none']
