from .encoding import bytes_per_sample, pack_row, row_byte_count, unpack_row
from .formats import FORMATS, NetpbmFormat, get_format
from .header import Header, read_header
from .netpbm import decode_raster, encode_raster
from .types import (
    BLACK,
    Bitmap,
    Greymap,
    Kind,
    Magic,
    Pixel,
    Pixmap,
    Point,
    Raster,
    magics_for_kind,
)

__all__ = [
    "BLACK",
    "Bitmap",
    "bytes_per_sample",
    "decode_raster",
    "encode_raster",
    "FORMATS",
    "get_format",
    "Greymap",
    "Header",
    "Kind",
    "Magic",
    "magics_for_kind",
    "NetpbmFormat",
    "pack_row",
    "Pixel",
    "Pixmap",
    "Point",
    "Raster",
    "read_header",
    "row_byte_count",
    "unpack_row",
]
