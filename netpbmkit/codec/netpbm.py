from __future__ import annotations

import logging
from typing import Optional, Union

from ..errors import InvalidRaster
from .formats import get_format
from .header import read_header
from .types import Magic, Raster

logger = logging.getLogger(__name__)


def decode_raster(data: bytes) -> Raster:
    """Parse a complete Netpbm byte buffer into a raster."""
    data = bytes(data)
    header = read_header(data)
    logger.debug(
        "Decoding %s %dx%d max=%s (%d bytes)",
        header.magic.value,
        header.width,
        header.height,
        header.max_value,
        len(data),
    )
    return get_format(header.magic).decode_payload(header, data)


def encode_raster(raster: Raster, magic: Optional[Union[Magic, str]] = None) -> bytes:
    """Serialize a raster in its own format, or in another variant of the same kind."""
    raster.validate()
    fmt = get_format(magic if magic is not None else raster.magic)
    if fmt.magic.kind is not raster.kind:
        raise InvalidRaster(
            f"Cannot encode a {raster.kind.value} as {fmt.magic.value}; convert the raster first"
        )
    data = fmt.encode_header(raster) + fmt.encode_payload(raster)
    logger.debug("Encoded %s %dx%d into %d bytes", fmt.magic.value, raster.width, raster.height, len(data))
    return data
