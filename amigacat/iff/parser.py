"""FORM / CTLG container parser for Amiga locale catalogs.

Layout
------
  "FORM" <u32 total size> "CTLG" <chunk> <chunk> ...

  chunk:  <tag: 4 bytes> <u32 size> <size bytes> [pad byte if size is odd]

  STRS payload, repeated:
          <u32 id> <u32 length> <length bytes, padded to a multiple of 4>

All integers are big-endian.  The total size counts the form type and
every chunk (headers and pad bytes included) but not the FORM header
itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from ..errors import MalformedContainer, Truncated, UnsupportedFormType
from .chunks import (
    CHUNK_HEADER_SIZE,
    STRING_ENTRY_HEADER_SIZE,
    ChunkType,
    pad_even,
    pad_long,
)
from .reader import BinaryReader
from .text import decode_c_string, decode_entry_text

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class Chunk:
    """A top-level chunk inside the FORM."""

    tag: str
    declared_size: int
    payload: bytes  # logical payload, pad byte excluded
    offset: int = 0

    @property
    def padded_size(self) -> int:
        return pad_even(self.declared_size)


@dataclass
class CatalogEntry:
    """A single string of the STRS table."""

    id: int
    text: str


@dataclass
class CatalogRecord:
    """Everything decoded from one catalog file."""

    signature: str = ""
    language_name: str = ""
    entries: list[CatalogEntry] = field(default_factory=list)

    def as_dict(self) -> dict[int, str]:
        """Identifier → text, later duplicates overwriting earlier ones."""
        return {e.id: e.text for e in self.entries}


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def iter_chunks(data: bytes) -> Iterator[Chunk]:
    """Validate the FORM header and yield each top-level chunk.

    Raises
    ------
    MalformedContainer
        The stream does not start with ``FORM`` or a chunk runs past the
        declared container size.
    UnsupportedFormType
        The form type is not ``CTLG``.
    Truncated
        Any declared size reaches past the end of *data*.
    """
    r = BinaryReader(data, "FORM")

    header = r.read_fourcc()
    if header != ChunkType.FORM.value:
        raise MalformedContainer(f"Not an IFF file: header={header!r}")

    total_size = r.read_uint32()
    if total_size > r.remaining:
        raise Truncated(f"FORM declares {total_size} bytes, only {r.remaining} present")

    form_type = r.read_fourcc()
    if form_type != ChunkType.CTLG.value:
        raise UnsupportedFormType(f"Not a catalog: form type={form_type!r}")

    budget = total_size - 4
    if budget < 0:
        raise MalformedContainer(f"FORM size {total_size} too small for form type")

    log.debug("FORM size=%d type=%s", total_size, form_type)

    while budget > 0:
        offset = r.pos
        tag = r.read_fourcc()
        declared_size = r.read_uint32()
        padded_size = pad_even(declared_size)
        raw = r.read_bytes(padded_size)

        budget -= padded_size + CHUNK_HEADER_SIZE
        if budget < 0:
            raise MalformedContainer(
                f"Chunk {tag!r} at offset {offset} overruns FORM by {-budget} bytes"
            )

        log.debug("Chunk %s at %d: size=%d padded=%d", tag, offset, declared_size, padded_size)
        yield Chunk(
            tag=tag,
            declared_size=declared_size,
            payload=raw[:declared_size],
            offset=offset,
        )


def parse_strs(payload: bytes) -> list[CatalogEntry]:
    """Parse the entry stream of a STRS chunk."""
    r = BinaryReader(payload, "STRS")
    entries: list[CatalogEntry] = []

    while r.remaining > 0:
        if r.remaining < STRING_ENTRY_HEADER_SIZE:
            raise Truncated(f"STRS: {r.remaining} stray bytes at offset {r.pos}")
        str_id = r.read_uint32()
        str_len = r.read_uint32()
        raw = r.read_bytes(pad_long(str_len))
        entries.append(CatalogEntry(id=str_id, text=decode_entry_text(raw[:str_len])))

    return entries


def decode(data: bytes) -> CatalogRecord:
    """Decode a complete catalog file.

    Returns a fresh :class:`CatalogRecord`; on any error the exception
    propagates and nothing is returned.
    """
    record = CatalogRecord()

    for chunk in iter_chunks(data):
        if chunk.tag == ChunkType.FVER:
            record.signature = decode_c_string(chunk.payload)
        elif chunk.tag == ChunkType.LANG:
            record.language_name = decode_c_string(chunk.payload)
        elif chunk.tag == ChunkType.STRS:
            strings = parse_strs(chunk.payload)
            log.debug("STRS: %d entries", len(strings))
            record.entries.extend(strings)
        else:
            # CSET and anything unknown
            log.debug("Skipping chunk %s (%d bytes)", chunk.tag, chunk.declared_size)

    log.info(
        "Decoded catalog: signature=%r language=%r entries=%d",
        record.signature,
        record.language_name,
        len(record.entries),
    )
    return record
