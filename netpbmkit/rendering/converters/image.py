from __future__ import annotations

from PIL import UnidentifiedImageError

from ...codec.types import Raster
from ...errors import IOFailure, MalformedHeader
from ..imaging import image_to_raster
from .base import PillowConverter


class ImageConverter(PillowConverter):
    def load(self, path: str) -> Raster:
        try:
            img = self._load_image(path)
        except UnidentifiedImageError as exc:
            raise MalformedHeader(f"Unrecognized image data in {path}") from exc
        except OSError as exc:
            raise IOFailure(f"Read failed for {path}: {exc}") from exc
        return image_to_raster(self._normalize_image(img))
