"""Tests for the Koch and Sierpinski generators."""

import logging

from netpbmkit.codec.types import Bitmap, Point
from netpbmkit.rendering.fractals import (
    MAX_FRACTAL_LEVEL,
    draw_koch_edge,
    draw_sierpinski_triangle,
    koch_apex,
)
from tests.conftest import lit_pixels


def test_koch_level_zero_is_a_straight_edge():
    canvas = Bitmap.blank(10, 3)
    draw_koch_edge(canvas, 0, Point(0, 1), 9, True)
    assert lit_pixels(canvas) == {(x, 1) for x in range(10)}


def test_koch_apex_points_up():
    assert koch_apex(Point(3, 10), Point(6, 10)) == Point(5, 8)


def test_koch_level_one_replaces_middle_third():
    canvas = Bitmap.blank(12, 12)
    draw_koch_edge(canvas, 1, Point(0, 10), 9, True)
    lit = lit_pixels(canvas)
    assert {(0, 10), (3, 10), (5, 8), (6, 10), (9, 10)} <= lit
    assert (4, 10) not in lit
    assert (5, 10) not in lit


def test_negative_level_draws_level_zero():
    expected = Bitmap.blank(10, 3)
    draw_koch_edge(expected, 0, Point(0, 1), 9, True)
    canvas = Bitmap.blank(10, 3)
    draw_koch_edge(canvas, -3, Point(0, 1), 9, True)
    assert canvas == expected


def test_sierpinski_level_zero_is_a_filled_triangle():
    canvas = Bitmap.blank(9, 7)
    draw_sierpinski_triangle(canvas, 0, Point(0, 0), 8, True)
    lit = lit_pixels(canvas)
    assert {(0, 0), (8, 0), (4, 6), (4, 2)} <= lit


def test_sierpinski_level_one_leaves_a_hole():
    canvas = Bitmap.blank(9, 7)
    draw_sierpinski_triangle(canvas, 1, Point(0, 0), 8, True)
    lit = lit_pixels(canvas)
    assert {(0, 0), (8, 0), (4, 6)} <= lit
    assert (4, 2) not in lit
    assert (4, 1) not in lit


def test_level_is_clamped(caplog):
    canvas = Bitmap.blank(9, 7)
    with caplog.at_level(logging.WARNING, logger="netpbmkit.rendering.fractals"):
        draw_sierpinski_triangle(canvas, MAX_FRACTAL_LEVEL + 40, Point(0, 0), 8, True)
    assert "clamped" in caplog.text
    assert (0, 0) in lit_pixels(canvas)
