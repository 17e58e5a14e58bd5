import pytest

from dynmenu.utf8 import (
    UTF_INVALID,
    decode,
    decode_byte,
    iter_codepoints,
    validate,
)


@pytest.mark.parametrize("char", ["A", "é", "€", "😀"])
def test_decode_valid_characters(char):
    encoded = char.encode("utf-8")
    assert decode(encoded) == (ord(char), len(encoded))


def test_decode_reads_only_first_character():
    encoded = "€x".encode("utf-8")
    assert decode(encoded) == (ord("€"), 3)


def test_decode_empty():
    assert decode(b"") == (UTF_INVALID, 0)


def test_decode_lone_continuation_byte():
    assert decode(b"\x80abc") == (UTF_INVALID, 1)


def test_decode_impossible_byte():
    assert decode(b"\xffabc") == (UTF_INVALID, 1)


def test_decode_overlong_is_invalid():
    assert decode(b"\xc0\x80") == (UTF_INVALID, 2)


def test_decode_surrogate_is_invalid():
    assert decode(b"\xed\xa0\x80") == (UTF_INVALID, 3)


def test_decode_broken_sequence_stops_at_bad_byte():
    assert decode(b"\xe2\x82A") == (UTF_INVALID, 2)


def test_decode_truncated_sequence_consumes_nothing():
    assert decode(b"\xe2\x82") == (UTF_INVALID, 0)


def test_decode_byte_kinds():
    assert decode_byte(ord("A"))[1] == 1
    assert decode_byte(0x80)[1] == 0
    assert decode_byte("é".encode("utf-8")[0])[1] == 2
    assert decode_byte("€".encode("utf-8")[0])[1] == 3
    assert decode_byte("😀".encode("utf-8")[0])[1] == 4
    assert decode_byte(0xFF) == (0, 5)


def test_validate_keeps_valid_and_reports_length():
    assert validate(ord("€"), 3) == (ord("€"), 3)


def test_validate_rejects_overlong():
    assert validate(ord("A"), 2) == (UTF_INVALID, 3)


def test_iter_codepoints_round_trip():
    text = "grüße, € and 😀!"
    assert list(iter_codepoints(text.encode("utf-8"))) == [ord(c) for c in text]


def test_iter_codepoints_replaces_invalid_bytes():
    data = b"a\xffb"
    assert list(iter_codepoints(data)) == [ord("a"), UTF_INVALID, ord("b")]


def test_iter_codepoints_truncated_tail():
    data = "ab".encode("utf-8") + b"\xe2\x82"
    assert list(iter_codepoints(data)) == [ord("a"), ord("b"), UTF_INVALID]