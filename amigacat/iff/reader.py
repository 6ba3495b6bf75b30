"""Bounds-checked big-endian reader over an in-memory buffer."""

from __future__ import annotations

import struct

from ..errors import Truncated


class BinaryReader:
    """Wraps a byte buffer with big-endian read methods.

    Every read checks the remaining length first and raises
    :class:`~amigacat.errors.Truncated` instead of returning short data.
    """

    def __init__(self, data: bytes, what: str = "stream"):
        self.data = memoryview(data)
        self.what = what
        self._pos = 0

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self.data) - self._pos

    def _take(self, n: int) -> memoryview:
        if n < 0 or n > self.remaining:
            raise Truncated(
                f"{self.what}: need {n} bytes at offset {self._pos}, "
                f"only {self.remaining} left"
            )
        view = self.data[self._pos : self._pos + n]
        self._pos += n
        return view

    def read_bytes(self, n: int) -> bytes:
        return self._take(n).tobytes()

    def read_uint32(self) -> int:
        return struct.unpack(">I", self._take(4))[0]

    def read_fourcc(self) -> str:
        """Read a 4-byte FourCC string."""
        return self._take(4).tobytes().decode("latin-1")
