"""Identifier → string tables that decoded catalogs are committed into."""

from __future__ import annotations

import struct
import zlib
from typing import Protocol

from ..errors import Status


class StringTable(Protocol):
    """What a catalog needs from the table that owns its strings."""

    def set_string(self, id: int, text: str) -> None: ...

    def get_string(self, id: int) -> str | None: ...

    def compute_fingerprint(self) -> int: ...

    def init_check(self) -> Status: ...

    def __len__(self) -> int: ...


class HashMapStringTable:
    """Dict-backed string table.  Last ``set_string`` for an id wins."""

    def __init__(self) -> None:
        self._strings: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._strings)

    def __contains__(self, id: int) -> bool:
        return id in self._strings

    def set_string(self, id: int, text: str) -> None:
        self._strings[id] = text

    def get_string(self, id: int) -> str | None:
        return self._strings.get(id)

    def items(self) -> list[tuple[int, str]]:
        return sorted(self._strings.items())

    def init_check(self) -> Status:
        return Status.OK

    def compute_fingerprint(self) -> int:
        """CRC-32 over all entries in ascending id order (0 when empty)."""
        crc = 0
        for id, text in self.items():
            encoded = text.encode("utf-8", errors="surrogateescape")
            crc = zlib.crc32(struct.pack(">II", id & 0xFFFFFFFF, len(encoded)), crc)
            crc = zlib.crc32(encoded, crc)
        return crc & 0xFFFFFFFF
