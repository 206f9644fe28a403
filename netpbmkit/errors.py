from __future__ import annotations


class NetpbmError(Exception):
    """Base class for every failure raised by netpbmkit."""


class MalformedHeader(NetpbmError, ValueError):
    """A header token is missing, non-numeric or out of range."""


class UnsupportedMagic(NetpbmError, ValueError):
    """The magic token is not one of P1..P6."""

    def __init__(self, magic: str) -> None:
        super().__init__(f"Unsupported magic number: {magic!r}")
        self.magic = magic


class TruncatedPayload(NetpbmError, ValueError):
    """The pixel payload is shorter than the header declares."""

    def __init__(self, expected: int, actual: int, unit: str = "bytes") -> None:
        super().__init__(f"Truncated payload: expected {expected} {unit}, got {actual}")
        self.expected = expected
        self.actual = actual


class MalformedPayload(NetpbmError, ValueError):
    """A pixel value is not a valid sample for the raster."""


class InvalidRaster(NetpbmError, ValueError):
    """A raster breaks the data model invariants."""


class IOFailure(NetpbmError, OSError):
    """The byte source or sink failed."""
