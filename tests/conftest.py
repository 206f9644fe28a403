"""Shared test fixtures."""

from __future__ import annotations

from typing import Set, Tuple

import pytest

from netpbmkit.codec.types import Bitmap, Greymap, Magic, Pixel, Pixmap


# Sample encoded images

P1_CHECKER = b"P1\n2 2\n1 0\n0 1\n"

P2_WITH_COMMENTS = b"P2\n# created by hand\n3 # width\n1\n255\n0 128 255\n"

P3_SMALL = b"P3\n2 1\n255\n255 0 0 0 0 255\n"

P5_TRUNCATED = b"P5\n2 2\n255\n\x00\x01\x02"


def make_bitmap(magic: Magic = Magic.P1) -> Bitmap:
    return Bitmap(
        width=3,
        height=2,
        data=[[True, False, True], [False, False, True]],
        magic=magic,
    )


def make_greymap(magic: Magic = Magic.P2, max_value: int = 255) -> Greymap:
    return Greymap(
        width=3,
        height=2,
        data=[[0, 7, max_value], [max_value // 2, 1, 0]],
        magic=magic,
        max_value=max_value,
    )


def make_pixmap(magic: Magic = Magic.P3, max_value: int = 255) -> Pixmap:
    return Pixmap(
        width=2,
        height=2,
        data=[
            [Pixel(max_value, 0, 0), Pixel(0, max_value, 0)],
            [Pixel(0, 0, max_value), Pixel(1, 2, 3)],
        ],
        magic=magic,
        max_value=max_value,
    )


def lit_pixels(raster: Bitmap) -> Set[Tuple[int, int]]:
    return {
        (x, y)
        for y, row in enumerate(raster.data)
        for x, pix in enumerate(row)
        if pix
    }


@pytest.fixture
def bitmap() -> Bitmap:
    return make_bitmap()


@pytest.fixture
def greymap() -> Greymap:
    return make_greymap()


@pytest.fixture
def pixmap() -> Pixmap:
    return make_pixmap()
