import struct

import pytest

from amigacat.errors import MalformedContainer, Status, Truncated, UnsupportedFormType
from amigacat.iff import decode, iter_chunks, parse_strs
from amigacat.iff.chunks import pad_even, pad_long

from conftest import catalog_bytes, chunk, entry, form


def test_decode_sample(sample_catalog):
    record = decode(sample_catalog)

    assert record.signature == "$VER: demo.catalog 1.0"
    assert record.language_name == "deutsch"
    assert [(e.id, e.text) for e in record.entries] == [
        (0, "Hello"),
        (1, "Grüße"),
        (2, "Quit"),
    ]


def test_entry_count_matches_strs_records():
    strings = [(i, b"x" * i) for i in range(1, 12)]
    record = decode(catalog_bytes(strings))
    assert len(record.entries) == len(strings)


def test_duplicate_ids_last_write_wins():
    record = decode(catalog_bytes([(5, b"first"), (6, b"other"), (5, b"second")]))
    assert len(record.entries) == 3
    assert record.as_dict() == {5: "second", 6: "other"}


def test_multiple_strs_chunks_are_concatenated():
    data = form(
        chunk(b"STRS", entry(1, b"one")),
        chunk(b"STRS", entry(2, b"two")),
    )
    record = decode(data)
    assert record.as_dict() == {1: "one", 2: "two"}


def test_odd_chunk_consumes_pad_byte():
    data = form(chunk(b"LANG", b"fran\xe7ais"[:5]), chunk(b"STRS", entry(1, b"ok")))
    chunks = list(iter_chunks(data))

    assert [c.tag for c in chunks] == ["LANG", "STRS"]
    assert chunks[0].declared_size == 5
    assert chunks[0].padded_size == 6
    assert chunks[0].payload == b"fran\xe7"
    # 12 byte FORM header, 8 byte chunk header, 6 payload bytes
    assert chunks[1].offset == 12 + 8 + 6


def test_entry_length_padded_to_four():
    payload = entry(1, b"Seven!!") + entry(2, b"next")
    assert len(entry(1, b"Seven!!")) == 8 + 8

    entries = parse_strs(payload)
    assert [(e.id, e.text) for e in entries] == [(1, "Seven!!"), (2, "next")]


def test_padding_helpers():
    assert pad_even(5) == 6
    assert pad_even(6) == 6
    assert pad_long(7) == 8
    assert pad_long(8) == 8
    assert pad_long(0) == 0


def test_menu_marker_stripped():
    entries = parse_strs(entry(9, bytes([0x41, 0x00, 0x42, 0x43])))
    assert entries[0].text == "BC"


def test_trailing_nul_and_control_chars_kept():
    entries = parse_strs(entry(3, b"Tab\there\x00"))
    assert entries[0].text == "Tab\there\x00"


def test_unknown_chunks_ignored():
    data = form(
        chunk(b"XYZW", b"\x01\x02\x03"),
        chunk(b"FVER", b"$VER: x 1.0"),
        chunk(b"ANNO", b""),
    )
    record = decode(data)
    assert record.signature == "$VER: x 1.0"
    assert record.entries == []


def test_fver_without_terminator():
    record = decode(form(chunk(b"FVER", b"abc")))
    assert record.signature == "abc"


def test_empty_catalog_form():
    record = decode(form())
    assert record.signature == ""
    assert record.entries == []


def test_bad_header():
    data = catalog_bytes([(1, b"a")])
    with pytest.raises(MalformedContainer) as exc:
        decode(b"RIFF" + data[4:])
    assert exc.value.status is Status.MALFORMED_CONTAINER


def test_wrong_form_type():
    with pytest.raises(UnsupportedFormType):
        decode(form(chunk(b"BODY", b"xx"), form_type=b"ILBM"))


def test_form_size_larger_than_stream():
    data = catalog_bytes([(1, b"a")])
    with pytest.raises(Truncated):
        decode(data[:-4])


def test_empty_stream():
    with pytest.raises(Truncated):
        decode(b"")


def test_chunk_size_past_end_of_data():
    body = b"CTLG" + b"STRS" + struct.pack(">I", 0xFFFFFFF0) + b"\x00" * 8
    data = b"FORM" + struct.pack(">I", len(body)) + body
    with pytest.raises(Truncated):
        decode(data)


def test_chunk_overrunning_form_is_malformed():
    inner = chunk(b"LANG", b"english\x00")
    body = b"CTLG" + inner
    # FORM claims fewer bytes than the chunk takes; extra bytes are present
    data = b"FORM" + struct.pack(">I", len(body) - 4) + body
    with pytest.raises(MalformedContainer):
        decode(data)


def test_strs_entry_length_past_chunk():
    bad = struct.pack(">II", 1, 100) + b"short"
    with pytest.raises(Truncated):
        decode(form(chunk(b"STRS", bad)))


def test_strs_stray_tail_bytes():
    with pytest.raises(Truncated):
        parse_strs(entry(1, b"abcd") + b"\x00\x00\x00")


def test_trailing_garbage_after_form_ignored(sample_catalog):
    record = decode(sample_catalog + b"garbage")
    assert len(record.entries) == 3
