from __future__ import annotations

from typing import Iterable, List, Sequence


def row_byte_count(width: int) -> int:
    """Bytes per packed bitmap row: one bit per pixel, padded to a whole byte."""
    return (width + 7) // 8


def pack_row(row: Sequence[bool]) -> bytes:
    """Pack a bitmap row MSB-first, zero-padding the last byte."""
    out = bytearray()
    for i in range(0, len(row), 8):
        chunk = row[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def unpack_row(packed: bytes, width: int) -> List[bool]:
    """Inverse of pack_row; padding bits past width are ignored."""
    return [bool((packed[x // 8] >> (7 - (x % 8))) & 1) for x in range(width)]


def bytes_per_sample(max_value: int) -> int:
    """One byte per sample up to 255, two bytes big-endian above."""
    return 1 if max_value < 256 else 2


def pack_samples(values: Iterable[int], sample_width: int) -> bytes:
    if sample_width == 1:
        return bytes(values)
    out = bytearray()
    for value in values:
        out += value.to_bytes(sample_width, "big")
    return bytes(out)


def unpack_samples(payload: bytes, sample_width: int) -> List[int]:
    if sample_width == 1:
        return list(payload)
    return [
        int.from_bytes(payload[i : i + sample_width], "big")
        for i in range(0, len(payload), sample_width)
    ]
