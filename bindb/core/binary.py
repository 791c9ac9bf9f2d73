from __future__ import annotations

import struct
from typing import Union

from bindb.core.errors import TruncatedInput

BytesLike = Union[bytes, bytearray, memoryview]

_I8 = struct.Struct("<b")
_U16 = struct.Struct("<H")
_I32 = struct.Struct("<i")
_U32 = struct.Struct("<I")
_F32 = struct.Struct("<f")


class Cursor:
    """
    Bounds-checked little-endian reader over an in-memory buffer.

    The offset only moves forward and never passes the end of the buffer:
    every read checks the remaining length first and raises
    ``TruncatedInput`` without advancing when it is short.
    """

    __slots__ = ("_buf", "_pos")

    def __init__(self, data: BytesLike) -> None:
        self._buf = bytes(data)
        self._pos = 0

    @property
    def offset(self) -> int:
        return self._pos

    def __len__(self) -> int:
        return len(self._buf)

    def remaining(self) -> int:
        return len(self._buf) - self._pos

    def at_end(self) -> bool:
        return self._pos == len(self._buf)

    def require(self, n: int, what: str = "data") -> None:
        available = self.remaining()
        if n > available:
            raise TruncatedInput(n, available, self._pos, what)

    def take(self, n: int, what: str = "data") -> bytes:
        self.require(n, what)
        out = self._buf[self._pos:self._pos + n]
        self._pos += n
        return out

    def _unpack(self, fmt: struct.Struct, what: str):
        self.require(fmt.size, what)
        (value,) = fmt.unpack_from(self._buf, self._pos)
        self._pos += fmt.size
        return value

    def u8(self, what: str = "u8") -> int:
        self.require(1, what)
        value = self._buf[self._pos]
        self._pos += 1
        return value

    def i8(self, what: str = "i8") -> int:
        return self._unpack(_I8, what)

    def u16(self, what: str = "u16") -> int:
        return self._unpack(_U16, what)

    def i32(self, what: str = "i32") -> int:
        return self._unpack(_I32, what)

    def u32(self, what: str = "u32") -> int:
        return self._unpack(_U32, what)

    def f32(self, what: str = "f32") -> float:
        return self._unpack(_F32, what)

    def cstring(self, what: str = "string") -> bytes:
        """Read up to a zero byte. The terminator is consumed and not returned."""
        start = self._pos
        end = self._buf.find(b"\x00", start)
        if end < 0:
            available = len(self._buf) - start
            # one more byte would have been the terminator
            raise TruncatedInput(available + 1, available, start, f"{what} (missing NUL terminator)")
        out = self._buf[start:end]
        self._pos = end + 1
        return out
