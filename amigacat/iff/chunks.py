"""Chunk type definitions for Amiga IFF locale catalogs."""

from __future__ import annotations

from enum import Enum


class ChunkType(str, Enum):
    """Known catalog FourCC types."""

    # Container
    FORM = "FORM"
    CTLG = "CTLG"  # Form type of a locale catalog

    # Catalog chunks
    FVER = "FVER"  # Version string ("$VER: app.catalog 1.2 (01.02.93)")
    LANG = "LANG"  # Language name
    STRS = "STRS"  # String entries (id, length, text)
    CSET = "CSET"  # Character set info, unused


# Tag (4) + big-endian u32 size
CHUNK_HEADER_SIZE = 8

# Tag (4) + size (4) + form type (4)
FORM_HEADER_SIZE = 12

# id (4) + length (4) in front of every STRS entry
STRING_ENTRY_HEADER_SIZE = 8


def pad_even(size: int) -> int:
    """Round a chunk size up to the IFF word boundary."""
    return size + (size & 1)


def pad_long(size: int) -> int:
    """Round a string entry length up to a multiple of 4."""
    if size & 3:
        return (size & ~3) + 4
    return size
