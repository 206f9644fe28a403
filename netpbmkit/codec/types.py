from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple

from ..errors import InvalidRaster, UnsupportedMagic

MAX_SAMPLE_LIMIT = 65535


class Kind(Enum):
    BITMAP = "bitmap"
    GREYMAP = "greymap"
    PIXMAP = "pixmap"


class Magic(str, Enum):
    """The six Netpbm encodings."""

    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"
    P5 = "P5"
    P6 = "P6"

    @property
    def kind(self) -> Kind:
        return _MAGIC_KINDS[self]

    @property
    def binary(self) -> bool:
        return self in (Magic.P4, Magic.P5, Magic.P6)

    @classmethod
    def parse(cls, token: str) -> "Magic":
        """Return the magic for a header token, raising UnsupportedMagic."""
        try:
            return cls(token)
        except ValueError:
            raise UnsupportedMagic(token) from None


_MAGIC_KINDS = {
    Magic.P1: Kind.BITMAP,
    Magic.P4: Kind.BITMAP,
    Magic.P2: Kind.GREYMAP,
    Magic.P5: Kind.GREYMAP,
    Magic.P3: Kind.PIXMAP,
    Magic.P6: Kind.PIXMAP,
}


def magics_for_kind(kind: Kind) -> Tuple[Magic, Magic]:
    """Return the (ascii, binary) magics of a kind."""
    ascii_magic, binary_magic = sorted(
        (magic for magic, magic_kind in _MAGIC_KINDS.items() if magic_kind is kind),
        key=lambda magic: magic.binary,
    )
    return ascii_magic, binary_magic


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Pixel:
    r: int
    g: int
    b: int

    def channels(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def mean(self) -> int:
        """Integer-truncated mean of the three channels."""
        return (self.r + self.g + self.b) // 3


BLACK = Pixel(0, 0, 0)


@dataclass
class Raster:
    """Row-major pixel grid shared by the three image kinds."""

    width: int
    height: int
    data: List[List[Any]] = field(repr=False)
    magic: Magic
    max_value: Optional[int] = None

    KIND: ClassVar[Kind]

    @property
    def kind(self) -> Kind:
        return self.KIND

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def at(self, x: int, y: int) -> Any:
        return self.data[y][x]

    def set(self, x: int, y: int, value: Any) -> None:
        self.data[y][x] = value

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int, value: Any) -> None:
        """Set a pixel, silently skipping coordinates outside the canvas."""
        if self.contains(x, y):
            self.data[y][x] = value

    def copy(self) -> "Raster":
        return type(self)(
            width=self.width,
            height=self.height,
            data=[list(row) for row in self.data],
            magic=self.magic,
            max_value=self.max_value,
        )

    def validate(self) -> None:
        """Validate dimensions, format tag and sample depth."""
        if self.width < 0 or self.height < 0:
            raise InvalidRaster(f"Negative dimensions {self.width}x{self.height}")
        if self.magic.kind is not self.KIND:
            raise InvalidRaster(f"Magic {self.magic.value} does not describe a {self.KIND.value}")
        self._validate_max_value()
        if len(self.data) != self.height:
            raise InvalidRaster(f"Expected {self.height} rows, found {len(self.data)}")
        for y, row in enumerate(self.data):
            if len(row) != self.width:
                raise InvalidRaster(f"Row {y} has {len(row)} samples, expected {self.width}")
            for x, value in enumerate(row):
                if not self._sample_ok(value):
                    raise InvalidRaster(f"Invalid sample {value!r} at ({x}, {y})")

    def _validate_max_value(self) -> None:
        if self.max_value is None or not 1 <= self.max_value <= MAX_SAMPLE_LIMIT:
            raise InvalidRaster(f"Max value must be within 1..{MAX_SAMPLE_LIMIT}, got {self.max_value}")

    def _sample_ok(self, value: Any) -> bool:
        raise NotImplementedError


@dataclass
class Bitmap(Raster):
    KIND: ClassVar[Kind] = Kind.BITMAP

    @classmethod
    def blank(cls, width: int, height: int, magic: Magic = Magic.P1) -> "Bitmap":
        data = [[False] * width for _ in range(height)]
        return cls(width=width, height=height, data=data, magic=magic)

    def _validate_max_value(self) -> None:
        if self.max_value is not None:
            raise InvalidRaster("Bitmaps do not carry a max value")

    def _sample_ok(self, value: Any) -> bool:
        return isinstance(value, bool)


@dataclass
class Greymap(Raster):
    KIND: ClassVar[Kind] = Kind.GREYMAP

    @classmethod
    def blank(
        cls, width: int, height: int, max_value: int = 255, magic: Magic = Magic.P2
    ) -> "Greymap":
        data = [[0] * width for _ in range(height)]
        return cls(width=width, height=height, data=data, magic=magic, max_value=max_value)

    def _sample_ok(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= self.max_value


@dataclass
class Pixmap(Raster):
    KIND: ClassVar[Kind] = Kind.PIXMAP

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        max_value: int = 255,
        magic: Magic = Magic.P3,
        fill: Pixel = BLACK,
    ) -> "Pixmap":
        data = [[fill] * width for _ in range(height)]
        return cls(width=width, height=height, data=data, magic=magic, max_value=max_value)

    def _sample_ok(self, value: Any) -> bool:
        if not isinstance(value, Pixel):
            return False
        return all(
            isinstance(channel, int) and 0 <= channel <= self.max_value
            for channel in value.channels()
        )


RASTER_TYPES = {
    Kind.BITMAP: Bitmap,
    Kind.GREYMAP: Greymap,
    Kind.PIXMAP: Pixmap,
}
