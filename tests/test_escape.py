"""Tests for busaddr.escape — percent-escape decoding."""

import pytest

from busaddr.errors import MalformedEscape
from busaddr.escape import unescape


def test_no_escape_returns_input():
    text = "unix:path=/tmp/foo"
    assert unescape(text) is text


def test_empty():
    assert unescape("") == ""
    assert unescape(b"") == ""


def test_ascii_escapes():
    assert unescape("a%2Cb%3Dc") == "a,b=c"
    assert unescape("%2f%2F") == "//"


def test_multibyte_utf8():
    assert unescape("%C3%A9t%C3%A9") == "été"
    assert unescape("%E2%82%AC") == "€"


def test_escaped_byte_sequence_roundtrip():
    raw = "bus-Ω/ƒ ü".encode("utf-8")
    escaped = "".join(f"%{b:02X}" for b in raw)
    assert unescape(escaped) == raw.decode("utf-8")


def test_bytes_input():
    assert unescape(b"path=%2Ftmp") == "path=/tmp"
    assert unescape(b"/tmp/foo") == "/tmp/foo"


def test_literal_non_ascii_text_is_kept():
    assert unescape("é%41") == "éA"


def test_escaped_percent():
    assert unescape("100%25") == "100%"


@pytest.mark.parametrize("text", ["%", "abc%", "abc%4", "%zz", "%4g", "%%41"])
def test_malformed_escape(text):
    with pytest.raises(MalformedEscape) as info:
        unescape(text)
    assert info.value.offset == text.index("%")
    assert isinstance(info.value, ValueError)


def test_invalid_utf8():
    with pytest.raises(MalformedEscape) as info:
        unescape("ok%FF")
    assert "UTF-8" in str(info.value)
    assert info.value.offset == 2


def test_truncated_utf8_sequence():
    with pytest.raises(MalformedEscape):
        unescape("%C3")


def test_latin1_literal_is_utf8_but_bytes_literal_is_raw():
    assert unescape("\xe9%41") == "\xe9A"
    with pytest.raises(MalformedEscape):
        unescape(b"\xe9%41")


def test_long_input_with_many_escapes():
    assert unescape("%41" * 500 + "b") == "A" * 500 + "b"
