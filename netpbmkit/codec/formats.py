from __future__ import annotations

from typing import ClassVar, Dict, Iterable, List, Sequence, Type, Union

from ..errors import MalformedPayload, TruncatedPayload
from .encoding import (
    bytes_per_sample,
    pack_row,
    pack_samples,
    row_byte_count,
    unpack_row,
    unpack_samples,
)
from .header import Header
from .types import RASTER_TYPES, Bitmap, Magic, Pixel, Raster


class NetpbmFormat:
    """Decode/encode strategy for one of the six Netpbm encodings."""

    magic: ClassVar[Magic]
    channels: ClassVar[int] = 1
    description: ClassVar[str] = ""

    @property
    def raster_type(self) -> Type[Raster]:
        return RASTER_TYPES[self.magic.kind]

    def encode_header(self, raster: Raster) -> bytes:
        header = Header(
            magic=self.magic,
            width=raster.width,
            height=raster.height,
            max_value=raster.max_value,
            payload_offset=0,
        )
        return header.encode()

    def decode_payload(self, header: Header, data: bytes) -> Raster:
        raise NotImplementedError

    def encode_payload(self, raster: Raster) -> bytes:
        raise NotImplementedError

    def _to_sample(self, values: Sequence[int]):
        raise NotImplementedError

    def _from_sample(self, sample) -> Sequence[int]:
        raise NotImplementedError

    def _build_raster(self, header: Header, values: Sequence[int]) -> Raster:
        channels = self.channels
        row_length = header.width * channels
        rows: List[list] = []
        for y in range(header.height):
            start = y * row_length
            rows.append(
                [
                    self._to_sample(values[i : i + channels])
                    for i in range(start, start + row_length, channels)
                ]
            )
        return self.raster_type(
            width=header.width,
            height=header.height,
            data=rows,
            magic=self.magic,
            max_value=header.max_value,
        )

    def _check_range(self, values: Iterable[int], max_value: int) -> None:
        for value in values:
            if value > max_value:
                raise MalformedPayload(f"Sample {value} exceeds max value {max_value}")


class _BitmapSamples(NetpbmFormat):
    def _to_sample(self, values: Sequence[int]) -> bool:
        return bool(values[0])

    def _from_sample(self, sample: bool) -> Sequence[int]:
        return (1 if sample else 0,)


class _GreymapSamples(NetpbmFormat):
    def _to_sample(self, values: Sequence[int]) -> int:
        return values[0]

    def _from_sample(self, sample: int) -> Sequence[int]:
        return (sample,)


class _PixmapSamples(NetpbmFormat):
    channels = 3

    def _to_sample(self, values: Sequence[int]) -> Pixel:
        return Pixel(values[0], values[1], values[2])

    def _from_sample(self, sample: Pixel) -> Sequence[int]:
        return sample.channels()


class _PlainLayout(NetpbmFormat):
    """Whitespace-separated decimal tokens, one row per line."""

    def decode_payload(self, header: Header, data: bytes) -> Raster:
        tokens = data[header.payload_offset :].split()
        expected = header.width * header.height * self.channels
        if len(tokens) < expected:
            raise TruncatedPayload(expected, len(tokens), unit="tokens")
        values = [self._parse_token(token, header) for token in tokens[:expected]]
        return self._build_raster(header, values)

    def encode_payload(self, raster: Raster) -> bytes:
        lines = [
            " ".join(str(value) for sample in row for value in self._from_sample(sample))
            for row in raster.data
        ]
        return "\n".join(lines).encode("ascii")

    def _parse_token(self, token: bytes, header: Header) -> int:
        if not token.isdigit():
            raise MalformedPayload(f"Non-numeric sample {token.decode('latin-1')!r}")
        value = int(token)
        self._check_range((value,), header.max_value)
        return value


class _RawLayout(NetpbmFormat):
    """Raw bytes; the payload is the trailing bytes of the input."""

    def payload_size(self, header: Header) -> int:
        sample_width = bytes_per_sample(header.max_value)
        return header.width * header.height * self.channels * sample_width

    def decode_payload(self, header: Header, data: bytes) -> Raster:
        size = self.payload_size(header)
        available = len(data) - header.payload_offset
        if available < size:
            raise TruncatedPayload(size, max(available, 0))
        payload = data[len(data) - size :]
        return self._decode_bytes(header, payload)

    def encode_payload(self, raster: Raster) -> bytes:
        sample_width = bytes_per_sample(raster.max_value)
        values = (
            value for row in raster.data for sample in row for value in self._from_sample(sample)
        )
        return pack_samples(values, sample_width)

    def _decode_bytes(self, header: Header, payload: bytes) -> Raster:
        values = unpack_samples(payload, bytes_per_sample(header.max_value))
        self._check_range(values, header.max_value)
        return self._build_raster(header, values)


class PlainBitmapFormat(_BitmapSamples, _PlainLayout):
    magic = Magic.P1
    description = "bitmap, ASCII"

    def _parse_token(self, token: bytes, header: Header) -> int:
        if token == b"0":
            return 0
        if token == b"1":
            return 1
        raise MalformedPayload(f"Bitmap sample must be 0 or 1, got {token.decode('latin-1')!r}")


class RawBitmapFormat(_BitmapSamples, _RawLayout):
    magic = Magic.P4
    description = "bitmap, binary (packed MSB-first)"

    def payload_size(self, header: Header) -> int:
        return row_byte_count(header.width) * header.height

    def encode_payload(self, raster: Raster) -> bytes:
        return b"".join(pack_row(row) for row in raster.data)

    def _decode_bytes(self, header: Header, payload: bytes) -> Raster:
        stride = row_byte_count(header.width)
        rows = [
            unpack_row(payload[y * stride : (y + 1) * stride], header.width)
            for y in range(header.height)
        ]
        return Bitmap(width=header.width, height=header.height, data=rows, magic=self.magic)


class PlainGreymapFormat(_GreymapSamples, _PlainLayout):
    magic = Magic.P2
    description = "greymap, ASCII"


class RawGreymapFormat(_GreymapSamples, _RawLayout):
    magic = Magic.P5
    description = "greymap, binary"


class PlainPixmapFormat(_PixmapSamples, _PlainLayout):
    magic = Magic.P3
    description = "pixmap, ASCII"


class RawPixmapFormat(_PixmapSamples, _RawLayout):
    magic = Magic.P6
    description = "pixmap, binary"


FORMATS: Dict[Magic, NetpbmFormat] = {
    fmt.magic: fmt
    for fmt in (
        PlainBitmapFormat(),
        PlainGreymapFormat(),
        PlainPixmapFormat(),
        RawBitmapFormat(),
        RawGreymapFormat(),
        RawPixmapFormat(),
    )
}


def get_format(magic: Union[Magic, str]) -> NetpbmFormat:
    """Return the strategy for a magic, raising UnsupportedMagic for unknown tokens."""
    if not isinstance(magic, Magic):
        magic = Magic.parse(magic)
    return FORMATS[magic]
