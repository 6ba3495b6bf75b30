import struct
from pathlib import Path

import pytest


def chunk(tag: bytes, payload: bytes) -> bytes:
    data = tag + struct.pack(">I", len(payload)) + payload
    if len(payload) & 1:
        data += b"\x00"
    return data


def entry(str_id: int, text: bytes) -> bytes:
    data = struct.pack(">II", str_id, len(text)) + text
    if len(text) & 3:
        data += b"\x00" * (4 - (len(text) & 3))
    return data


def form(*chunks: bytes, form_type: bytes = b"CTLG") -> bytes:
    body = form_type + b"".join(chunks)
    return b"FORM" + struct.pack(">I", len(body)) + body


def catalog_bytes(
    strings: list[tuple[int, bytes]],
    version: bytes = b"$VER: demo.catalog 1.0\x00",
    language: bytes = b"deutsch\x00",
) -> bytes:
    strs = b"".join(entry(i, t) for i, t in strings)
    return form(
        chunk(b"FVER", version),
        chunk(b"LANG", language),
        chunk(b"CSET", b"\x00" * 32),
        chunk(b"STRS", strs),
    )


def write_catalog(root: Path, signature: str, language: str, data: bytes) -> Path:
    path = root / "Catalogs" / language / f"{signature}.catalog"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture
def sample_catalog() -> bytes:
    return catalog_bytes(
        [
            (0, b"Hello"),
            (1, b"Gr\xfc\xdfe"),
            (2, b"Q\x00Quit"),
        ]
    )
