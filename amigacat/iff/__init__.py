"""Amiga IFF FORM/CTLG catalog file parser."""

from .chunks import ChunkType
from .parser import CatalogEntry, CatalogRecord, Chunk, decode, iter_chunks, parse_strs
from .text import decode_c_string, decode_entry_text, decode_legacy_text

__all__ = [
    "ChunkType",
    "Chunk",
    "CatalogEntry",
    "CatalogRecord",
    "decode",
    "iter_chunks",
    "parse_strs",
    "decode_c_string",
    "decode_entry_text",
    "decode_legacy_text",
]
