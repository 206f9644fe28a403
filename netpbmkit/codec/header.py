"""Netpbm header parsing.

The header is a run of whitespace-separated tokens: magic, width, height
and (for greymaps and pixmaps) the max value. ``#`` starts a comment that
runs to the end of the line and may appear anywhere between tokens.
Exactly one whitespace byte separates the last token from the payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import MalformedHeader
from .types import MAX_SAMPLE_LIMIT, Kind, Magic

WHITESPACE = b" \t\n\v\f\r"
COMMENT = ord("#")


@dataclass(frozen=True)
class Header:
    magic: Magic
    width: int
    height: int
    max_value: Optional[int]
    payload_offset: int

    def encode(self) -> bytes:
        lines = [self.magic.value, f"{self.width} {self.height}"]
        if self.max_value is not None:
            lines.append(str(self.max_value))
        return ("\n".join(lines) + "\n").encode("ascii")


class TokenStream:
    __slots__ = ("data", "offset")

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    def next_token(self) -> Optional[bytes]:
        """Return the next token, or None at end of input."""
        self._skip_separators()
        start = self.offset
        end = len(self.data)
        while self.offset < end:
            byte = self.data[self.offset]
            if byte in WHITESPACE or byte == COMMENT:
                break
            self.offset += 1
        if self.offset == start:
            return None
        return self.data[start : self.offset]

    def skip_single_whitespace(self) -> None:
        if self.offset < len(self.data) and self.data[self.offset] in WHITESPACE:
            self.offset += 1

    def _skip_separators(self) -> None:
        end = len(self.data)
        while self.offset < end:
            byte = self.data[self.offset]
            if byte in WHITESPACE:
                self.offset += 1
            elif byte == COMMENT:
                newline = self.data.find(b"\n", self.offset)
                self.offset = end if newline < 0 else newline + 1
            else:
                return


def read_header(data: bytes) -> Header:
    stream = TokenStream(data)
    token = stream.next_token()
    if token is None:
        raise MalformedHeader("Missing magic number")
    magic = Magic.parse(token.decode("latin-1"))
    width = _read_int(stream, "width")
    height = _read_int(stream, "height")
    if (width == 0) != (height == 0):
        raise MalformedHeader(f"Degenerate dimensions {width}x{height}")
    max_value = None
    if magic.kind is not Kind.BITMAP:
        max_value = _read_int(stream, "max value")
        if not 1 <= max_value <= MAX_SAMPLE_LIMIT:
            raise MalformedHeader(f"Max value must be within 1..{MAX_SAMPLE_LIMIT}, got {max_value}")
    stream.skip_single_whitespace()
    return Header(
        magic=magic,
        width=width,
        height=height,
        max_value=max_value,
        payload_offset=stream.offset,
    )


def _read_int(stream: TokenStream, name: str) -> int:
    token = stream.next_token()
    if token is None:
        raise MalformedHeader(f"Missing {name}")
    if not token.isdigit():
        raise MalformedHeader(f"Non-numeric {name}: {token.decode('latin-1')!r}")
    return int(token)
