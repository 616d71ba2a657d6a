from __future__ import annotations
import struct

import numpy as np

from inibincore.errors import InvalidStringError, TruncatedError

_LE = "<"  # little-endian


class ByteReader:
    """Forward-only cursor over an in-memory buffer.

    Every read checks the remaining length first and raises `TruncatedError`
    instead of returning short data.
    """

    def __init__(self, data: bytes | bytearray | memoryview):
        self._buf = bytes(data)
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._buf) - self._pos

    def _need(self, n: int, what: str) -> None:
        if n > self.remaining:
            raise TruncatedError(
                f"{what}: need {n} bytes at offset {self._pos}, only {self.remaining} left"
            )

    def skip(self, n: int, what: str = "reserved") -> None:
        self._need(n, what)
        self._pos += n

    def _unpack(self, fmt: str, what: str) -> int:
        size = struct.calcsize(fmt)
        self._need(size, what)
        (v,) = struct.unpack_from(_LE + fmt, self._buf, self._pos)
        self._pos += size
        return v

    def u8(self, what: str = "u8") -> int: return self._unpack("B", what)
    def u16(self, what: str = "u16") -> int: return self._unpack("H", what)
    def u32(self, what: str = "u32") -> int: return self._unpack("I", what)

    def take(self, n: int, what: str = "bytes") -> bytes:
        self._need(n, what)
        out = self._buf[self._pos:self._pos + n]
        self._pos += n
        return out

    def rest(self) -> bytes:
        out = self._buf[self._pos:]
        self._pos = len(self._buf)
        return out

    def array(self, dtype: str, count: int, what: str = "array") -> np.ndarray:
        """`count` items of `dtype` (numpy dtype string, e.g. "<u4") as a read-only array."""
        dt = np.dtype(dtype)
        self._need(dt.itemsize * count, what)
        if count == 0:
            return np.empty(0, dtype=dt)
        arr = np.frombuffer(self._buf, dtype=dt, count=count, offset=self._pos)
        self._pos += dt.itemsize * count
        return arr


def read_cstring(buf: bytes, offset: int, key: int, strict: bool = True) -> str:
    """String starting at `offset`, up to the first NUL or the end of `buf`."""
    if offset > len(buf):
        raise TruncatedError(
            f"key 0x{key:08x}: string offset {offset} past end of {len(buf)}-byte buffer"
        )
    end = buf.find(b"\x00", offset)
    if end < 0:
        end = len(buf)
    raw = buf[offset:end]
    if not strict:
        return raw.decode("utf-8", errors="replace")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidStringError(key, exc.reason) from exc


__all__ = ["ByteReader", "read_cstring"]
