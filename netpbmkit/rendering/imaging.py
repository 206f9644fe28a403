"""Raster <-> Pillow image conversion."""

from __future__ import annotations

import io
from typing import Optional, Union

from PIL import Image

from ..codec.types import Bitmap, Greymap, Magic, Pixel, Pixmap, Raster
from .transforms import convert_format


def _scale(value: int, max_value: int) -> int:
    return value * 255 // max_value


def raster_to_image(raster: Raster) -> Image.Image:
    """Convert a raster to a Pillow image in mode "1", "L" or "RGB", scaled to 0..255."""
    size = (raster.width, raster.height)
    if isinstance(raster, Bitmap):
        data = bytes(0 if pix else 255 for row in raster.data for pix in row)
        grey = Image.frombytes("L", size, data)
        return grey.convert("1", dither=Image.Dither.NONE)
    if isinstance(raster, Greymap):
        top = raster.max_value
        data = bytes(_scale(value, top) for row in raster.data for value in row)
        return Image.frombytes("L", size, data)
    if isinstance(raster, Pixmap):
        top = raster.max_value
        data = bytes(
            _scale(channel, top) for row in raster.data for pix in row for channel in pix.channels()
        )
        return Image.frombytes("RGB", size, data)
    raise TypeError(f"Unsupported raster type: {type(raster).__name__}")


def image_to_raster(img: Image.Image, magic: Optional[Union[Magic, str]] = None) -> Raster:
    """Convert a Pillow image to a raster; mode "1" -> bitmap, "L" -> greymap, else pixmap."""
    width, height = img.size
    if img.mode == "1":
        data = img.convert("L").tobytes()
        rows = [[data[y * width + x] == 0 for x in range(width)] for y in range(height)]
        raster: Raster = Bitmap(width=width, height=height, data=rows, magic=Magic.P1)
    elif img.mode == "L":
        data = img.tobytes()
        rows = [list(data[y * width : (y + 1) * width]) for y in range(height)]
        raster = Greymap(width=width, height=height, data=rows, magic=Magic.P2, max_value=255)
    else:
        data = img.convert("RGB").tobytes()
        stride = width * 3
        rows = [
            [
                Pixel(data[i], data[i + 1], data[i + 2])
                for i in range(y * stride, (y + 1) * stride, 3)
            ]
            for y in range(height)
        ]
        raster = Pixmap(width=width, height=height, data=rows, magic=Magic.P3, max_value=255)
    if magic is not None:
        raster = convert_format(raster, magic)
    return raster


def raster_to_png_bytes(raster: Raster) -> bytes:
    buf = io.BytesIO()
    raster_to_image(raster).save(buf, format="PNG")
    return buf.getvalue()
