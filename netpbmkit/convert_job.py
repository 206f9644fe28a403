from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .codec.netpbm import encode_raster
from .codec.types import Magic, Raster
from .rendering.converters import SUPPORTED_EXTENSIONS, load_raster
from .rendering.imaging import raster_to_png_bytes
from .rendering.transforms import (
    convert_format,
    flip,
    flop,
    invert,
    resample,
    rescale_depth,
    rotate,
)

logger = logging.getLogger(__name__)


@dataclass
class ConvertSettings:
    target_magic: Optional[Magic] = None
    invert: bool = False
    flip: bool = False
    flop: bool = False
    quarter_turns: int = 0
    resize: Optional[Tuple[int, int]] = None
    max_value: Optional[int] = None
    png: bool = False


class ConvertJobBuilder:
    def __init__(self, settings: Optional[ConvertSettings] = None) -> None:
        self.settings = settings or ConvertSettings()

    def build_from_file(self, path: str) -> bytes:
        self._validate_input_path(path)
        raster = load_raster(path)
        logger.debug("Loaded %s: %s %dx%d", path, raster.magic.value, raster.width, raster.height)
        return self.build(raster)

    def build(self, raster: Raster) -> bytes:
        raster = self.apply(raster)
        if self.settings.png:
            return raster_to_png_bytes(raster)
        return encode_raster(raster)

    def apply(self, raster: Raster) -> Raster:
        """Run the configured transforms in order: rotate, flip, flop, resize, invert, format, depth."""
        settings = self.settings
        raster = rotate(raster, settings.quarter_turns)
        if settings.flip:
            flip(raster)
        if settings.flop:
            flop(raster)
        if settings.resize is not None:
            raster = resample(raster, *settings.resize)
        if settings.invert:
            invert(raster)
        if settings.target_magic is not None:
            raster = convert_format(raster, settings.target_magic)
        if settings.max_value is not None:
            rescale_depth(raster, settings.max_value)
        return raster

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
