from __future__ import annotations

import os
from typing import Union

from ..errors import IOFailure

PathLike = Union[str, "os.PathLike[str]"]


class FileTransport:
    """Whole-buffer byte source and sink backed by a file path."""

    def __init__(self, path: PathLike) -> None:
        self._path = path

    @property
    def path(self) -> PathLike:
        return self._path

    def read(self) -> bytes:
        try:
            with open(self._path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise IOFailure(f"Read failed for {self._path}: {exc}") from exc

    def write(self, data: bytes) -> None:
        try:
            with open(self._path, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise IOFailure(f"Write failed for {self._path}: {exc}") from exc
