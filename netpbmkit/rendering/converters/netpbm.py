from __future__ import annotations

from ...codec.netpbm import decode_raster
from ...codec.types import Raster
from ...transport.file import FileTransport
from .base import RasterConverter


class NetpbmConverter(RasterConverter):
    def load(self, path: str) -> Raster:
        return decode_raster(FileTransport(path).read())
