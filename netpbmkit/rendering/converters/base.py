from __future__ import annotations

from PIL import Image, ImageOps

from ...codec.types import Raster


class RasterConverter:
    def load(self, path: str) -> Raster:
        raise NotImplementedError


class PillowConverter(RasterConverter):
    @staticmethod
    def _load_image(path: str) -> Image.Image:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return img.copy()

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode not in ("RGB", "L", "1"):
            return img.convert("RGB")
        return img
