"""Text decoding for catalog chunks.

Catalog strings are stored in the Amiga's 8-bit charset, which for the
catalogs in circulation is ISO-8859-1.  Two conventions apply on top of
that:

* ``FVER`` and ``LANG`` hold C strings, so everything after the first NUL
  is ignored.
* ``STRS`` entries may start with a two byte menu marker (a shortcut key
  followed by NUL, as in ``"Q\\0Quit"``).  The marker is not part of the
  visible text.
"""

from __future__ import annotations

MENU_MARKER_SIZE = 2

LEGACY_ENCODING = "latin-1"


def decode_c_string(data: bytes) -> str:
    """Decode a NUL-terminated (or unterminated) legacy string."""
    end = data.find(b"\x00")
    if end >= 0:
        data = data[:end]
    return decode_legacy_text(data)


def strip_menu_marker(data: bytes) -> bytes:
    """Drop the leading shortcut marker when byte 1 is NUL."""
    if len(data) >= MENU_MARKER_SIZE and data[1] == 0:
        return data[MENU_MARKER_SIZE:]
    return data


def decode_legacy_text(data: bytes) -> str:
    """Convert legacy 8-bit text to ``str``.

    When the UTF-8 form of the converted text is not longer than the
    input, the conversion is treated as a no-op and the raw bytes are
    taken as they are.  Bytes that are not valid UTF-8 survive as
    surrogate escapes.
    """
    text = data.decode(LEGACY_ENCODING)
    if len(text.encode("utf-8")) <= len(data):
        return data.decode("utf-8", errors="surrogateescape")
    return text


def decode_entry_text(payload: bytes) -> str:
    """Decode the logical bytes of one STRS entry."""
    return decode_legacy_text(strip_menu_marker(payload))
