"""Pixel-level transforms.

Same-kind transforms (invert, flip, flop, rescale_depth) mutate the raster
in place. Geometry changes and kind conversions return a new raster.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Union

from ..codec.types import (
    MAX_SAMPLE_LIMIT,
    Bitmap,
    Greymap,
    Kind,
    Magic,
    Pixel,
    Pixmap,
    Raster,
    magics_for_kind,
)

logger = logging.getLogger(__name__)

GREYMAP_RESCALE_FACTOR = 5
PROMOTED_MAX_VALUE = 255


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        return low
    if value > high:
        return high
    return value


def _plain_magic(kind: Kind) -> Magic:
    return magics_for_kind(kind)[0]


def invert(raster: Raster) -> None:
    """Invert every sample.

    Greymaps and pixmaps invert every channel against their own max value.
    """
    if isinstance(raster, Bitmap):
        raster.data = [[not pix for pix in row] for row in raster.data]
    elif isinstance(raster, Greymap):
        top = raster.max_value
        raster.data = [[top - value for value in row] for row in raster.data]
    elif isinstance(raster, Pixmap):
        top = raster.max_value
        raster.data = [
            [Pixel(top - pix.r, top - pix.g, top - pix.b) for pix in row]
            for row in raster.data
        ]
    else:
        raise TypeError(f"Unsupported raster type: {type(raster).__name__}")


def flip(raster: Raster) -> None:
    """Mirror horizontally."""
    for row in raster.data:
        row.reverse()


def flop(raster: Raster) -> None:
    """Mirror vertically."""
    raster.data.reverse()


def rotate90_cw(raster: Raster) -> Raster:
    width, height = raster.width, raster.height
    source = raster.data
    rotated = [[source[height - 1 - j][i] for j in range(height)] for i in range(width)]
    return type(raster)(
        width=height,
        height=width,
        data=rotated,
        magic=raster.magic,
        max_value=raster.max_value,
    )


def rotate(raster: Raster, quarter_turns: int) -> Raster:
    """Rotate clockwise by a number of quarter turns (negative turns go counter-clockwise)."""
    result = raster.copy()
    for _ in range(quarter_turns % 4):
        result = rotate90_cw(result)
    return result


def resample(raster: Raster, new_width: int, new_height: int) -> Raster:
    """Nearest-neighbour resize."""
    if new_width < 0 or new_height < 0:
        raise ValueError(f"Target size must not be negative: {new_width}x{new_height}")
    width, height = raster.width, raster.height
    rows: list = []
    if new_width == 0 or new_height == 0:
        rows = [[] for _ in range(new_height)]
    elif width == 0 or height == 0:
        raise ValueError("Cannot resample an empty raster to a non-empty size")
    else:
        source = raster.data
        columns = [_clamp(x * width // new_width, 0, width - 1) for x in range(new_width)]
        for y in range(new_height):
            src_row = source[_clamp(y * height // new_height, 0, height - 1)]
            rows.append([src_row[x] for x in columns])
    return type(raster)(
        width=new_width,
        height=new_height,
        data=rows,
        magic=raster.magic,
        max_value=raster.max_value,
    )


def rescale_depth(raster: Raster, new_max: int) -> None:
    """Change the max value of a greymap or pixmap.

    Pixmaps are rescaled linearly. Greymaps multiply by a fixed factor of 5
    over the old max, whatever the new max is.
    """
    if not 1 <= new_max <= MAX_SAMPLE_LIMIT:
        raise ValueError(f"Max value must be within 1..{MAX_SAMPLE_LIMIT}, got {new_max}")
    old_max = raster.max_value
    if isinstance(raster, Greymap):
        raster.data = [
            [_clamp(value * GREYMAP_RESCALE_FACTOR // old_max, 0, new_max) for value in row]
            for row in raster.data
        ]
    elif isinstance(raster, Pixmap):
        raster.data = [
            [
                Pixel(
                    _clamp(pix.r * new_max // old_max, 0, new_max),
                    _clamp(pix.g * new_max // old_max, 0, new_max),
                    _clamp(pix.b * new_max // old_max, 0, new_max),
                )
                for pix in row
            ]
            for row in raster.data
        ]
    else:
        raise TypeError("Only greymaps and pixmaps carry a max value")
    logger.debug("Rescaled %s depth %d -> %d", raster.kind.value, old_max, new_max)
    raster.max_value = new_max


def to_bitmap(raster: Raster) -> Bitmap:
    """Threshold at half the max value: darker than half is foreground."""
    if isinstance(raster, Bitmap):
        return raster.copy()
    threshold = raster.max_value // 2
    if isinstance(raster, Greymap):
        rows = [[value < threshold for value in row] for row in raster.data]
    elif isinstance(raster, Pixmap):
        rows = [[pix.mean() < threshold for pix in row] for row in raster.data]
    else:
        raise TypeError(f"Unsupported raster type: {type(raster).__name__}")
    return Bitmap(width=raster.width, height=raster.height, data=rows, magic=_plain_magic(Kind.BITMAP))


def to_greymap(raster: Raster) -> Greymap:
    if isinstance(raster, Greymap):
        return raster.copy()
    if isinstance(raster, Pixmap):
        rows = [[pix.mean() for pix in row] for row in raster.data]
        max_value = raster.max_value
    elif isinstance(raster, Bitmap):
        max_value = PROMOTED_MAX_VALUE
        rows = [[0 if pix else max_value for pix in row] for row in raster.data]
    else:
        raise TypeError(f"Unsupported raster type: {type(raster).__name__}")
    return Greymap(
        width=raster.width,
        height=raster.height,
        data=rows,
        magic=_plain_magic(Kind.GREYMAP),
        max_value=max_value,
    )


def to_pixmap(raster: Raster) -> Pixmap:
    if isinstance(raster, Pixmap):
        return raster.copy()
    if isinstance(raster, Bitmap):
        raster = to_greymap(raster)
    if not isinstance(raster, Greymap):
        raise TypeError(f"Unsupported raster type: {type(raster).__name__}")
    rows = [[Pixel(value, value, value) for value in row] for row in raster.data]
    return Pixmap(
        width=raster.width,
        height=raster.height,
        data=rows,
        magic=_plain_magic(Kind.PIXMAP),
        max_value=raster.max_value,
    )


_KIND_CONVERTERS: Dict[Kind, Callable[[Raster], Raster]] = {
    Kind.BITMAP: to_bitmap,
    Kind.GREYMAP: to_greymap,
    Kind.PIXMAP: to_pixmap,
}


def convert_format(raster: Raster, magic: Union[Magic, str]) -> Raster:
    """Return a copy tagged with magic, reducing or promoting the kind as needed."""
    if not isinstance(magic, Magic):
        magic = Magic.parse(magic)
    converted = _KIND_CONVERTERS[magic.kind](raster)
    if converted.kind is not raster.kind:
        logger.debug("Converted %s to %s", raster.kind.value, converted.kind.value)
    converted.magic = magic
    return converted
