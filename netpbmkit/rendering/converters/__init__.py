from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ...codec.types import Raster
from .base import RasterConverter
from .image import ImageConverter
from .netpbm import NetpbmConverter

NETPBM_EXTENSIONS: Set[str] = {".pbm", ".pgm", ".ppm", ".pnm"}
IMAGE_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}
SUPPORTED_EXTENSIONS: Set[str] = NETPBM_EXTENSIONS | IMAGE_EXTENSIONS


class RasterLoader:
    def __init__(self, converters: Optional[Dict[str, RasterConverter]] = None) -> None:
        if converters is None:
            converters = {}
            netpbm_converter = NetpbmConverter()
            for ext in NETPBM_EXTENSIONS:
                converters[ext] = netpbm_converter
            image_converter = ImageConverter()
            for ext in IMAGE_EXTENSIONS:
                converters[ext] = image_converter
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str) -> Raster:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter.load(path)


def load_raster(path: str) -> Raster:
    return RasterLoader().load(path)


__all__ = ["RasterConverter", "RasterLoader", "SUPPORTED_EXTENSIONS", "load_raster"]
