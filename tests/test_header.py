"""Tests for the header tokenizer."""

import pytest

from netpbmkit.codec.header import Header, TokenStream, read_header
from netpbmkit.codec.types import Magic
from netpbmkit.errors import MalformedHeader, UnsupportedMagic
from tests.conftest import P2_WITH_COMMENTS


def test_read_greymap_header():
    header = read_header(b"P5\n4 3\n255\n" + bytes(12))
    assert header.magic is Magic.P5
    assert (header.width, header.height) == (4, 3)
    assert header.max_value == 255
    assert header.payload_offset == len(b"P5\n4 3\n255\n")


def test_bitmap_header_has_no_max_value():
    header = read_header(b"P4\n8 1\n\xff")
    assert header.max_value is None
    assert header.payload_offset == len(b"P4\n8 1\n")


def test_comments_between_tokens_are_skipped():
    header = read_header(P2_WITH_COMMENTS)
    assert (header.width, header.height, header.max_value) == (3, 1, 255)


def test_dimensions_on_separate_lines():
    header = read_header(b"P1\n2\n\n2\n1 0 0 1")
    assert (header.width, header.height) == (2, 2)


def test_token_stream_stops_at_comment():
    stream = TokenStream(b"12#note\n34")
    assert stream.next_token() == b"12"
    assert stream.next_token() == b"34"
    assert stream.next_token() is None


def test_empty_dimensions_decode_as_empty_image():
    header = read_header(b"P1\n0 0\n")
    assert (header.width, header.height) == (0, 0)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"P2\n",
        b"P2\n3\n",
        b"P2\n3 x\n255\n",
        b"P2\n3 -1\n255\n",
        b"P1\n0 3\n",
        b"P2\n1 1\n0\n0",
        b"P2\n1 1\n65536\n0",
    ],
)
def test_malformed_headers(data):
    with pytest.raises(MalformedHeader):
        read_header(data)


def test_unknown_magic():
    with pytest.raises(UnsupportedMagic) as exc_info:
        read_header(b"P7\n1 1\n")
    assert exc_info.value.magic == "P7"


def test_header_encode():
    header = Header(magic=Magic.P2, width=3, height=2, max_value=15, payload_offset=0)
    assert header.encode() == b"P2\n3 2\n15\n"
    bitmap_header = Header(magic=Magic.P1, width=3, height=2, max_value=None, payload_offset=0)
    assert bitmap_header.encode() == b"P1\n3 2\n"
