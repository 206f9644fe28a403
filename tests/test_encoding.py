"""Tests for bitmap row packing and sample byte layouts."""

from netpbmkit.codec.encoding import (
    bytes_per_sample,
    pack_row,
    pack_samples,
    row_byte_count,
    unpack_row,
    unpack_samples,
)


def test_row_byte_count_pads_to_whole_bytes():
    assert row_byte_count(0) == 0
    assert row_byte_count(1) == 1
    assert row_byte_count(8) == 1
    assert row_byte_count(9) == 2


def test_pack_row_msb_first_with_zero_padding():
    row = [True, False, True, True, False, False, False, False, False, True]
    assert pack_row(row) == bytes([0xB0, 0x40])


def test_unpack_row_ignores_padding_bits():
    assert unpack_row(bytes([0xB0, 0x7F]), 10) == [
        True, False, True, True, False, False, False, False, False, True,
    ]


def test_bytes_per_sample_switches_above_255():
    assert bytes_per_sample(1) == 1
    assert bytes_per_sample(255) == 1
    assert bytes_per_sample(256) == 2
    assert bytes_per_sample(65535) == 2


def test_two_byte_samples_are_big_endian():
    assert pack_samples([1, 1000], 2) == b"\x00\x01\x03\xe8"
    assert unpack_samples(b"\x00\x01\x03\xe8", 2) == [1, 1000]
    assert pack_samples([7, 200], 1) == b"\x07\xc8"
