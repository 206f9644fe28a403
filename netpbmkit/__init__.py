from .codec import (
    Bitmap,
    Greymap,
    Kind,
    Magic,
    Pixel,
    Pixmap,
    Point,
    Raster,
    decode_raster,
    encode_raster,
)
from .errors import (
    InvalidRaster,
    IOFailure,
    MalformedHeader,
    MalformedPayload,
    NetpbmError,
    TruncatedPayload,
    UnsupportedMagic,
)

__version__ = "0.1.0"

__all__ = [
    "Bitmap",
    "decode_raster",
    "encode_raster",
    "Greymap",
    "InvalidRaster",
    "IOFailure",
    "Kind",
    "Magic",
    "MalformedHeader",
    "MalformedPayload",
    "NetpbmError",
    "Pixel",
    "Pixmap",
    "Point",
    "Raster",
    "TruncatedPayload",
    "UnsupportedMagic",
]
