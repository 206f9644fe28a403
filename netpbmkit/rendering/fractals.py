"""Koch snowflake edges and Sierpinski triangles.

Both generators expand their subdivision with an explicit work stack, and
levels are clamped to MAX_FRACTAL_LEVEL: a Koch edge of level n draws 4**n
segments and a Sierpinski triangle 3**n filled triangles.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Tuple

from ..codec.types import Point, Raster
from .drawing import draw_filled_triangle, draw_line

logger = logging.getLogger(__name__)

MAX_FRACTAL_LEVEL = 8

_COS_60 = math.cos(math.pi / 3.0)
_SIN_60 = math.sin(math.pi / 3.0)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _bounded_level(level: int) -> int:
    if level > MAX_FRACTAL_LEVEL:
        logger.warning("Fractal level %d clamped to %d", level, MAX_FRACTAL_LEVEL)
        return MAX_FRACTAL_LEVEL
    return max(level, 0)


def koch_apex(near: Point, far: Point) -> Point:
    """Tip of the equilateral bump: near rotated 60 degrees about far."""
    vx = near.x - far.x
    vy = near.y - far.y
    return Point(
        int(vx * _COS_60 - vy * _SIN_60) + far.x,
        int(vx * _SIN_60 + vy * _COS_60) + far.y,
    )


def draw_koch_edge(raster: Raster, level: int, start: Point, width: int, color: Any) -> None:
    """Koch curve over the horizontal segment from start to start + (width, 0)."""
    stack: List[Tuple[int, Point, Point]] = [
        (_bounded_level(level), start, Point(start.x + width, start.y))
    ]
    while stack:
        depth, p1, p2 = stack.pop()
        if depth == 0:
            draw_line(raster, p1, p2, color)
            continue
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        first_third = Point(p1.x + _trunc_div(dx, 3), p1.y + _trunc_div(dy, 3))
        second_third = Point(p1.x + _trunc_div(2 * dx, 3), p1.y + _trunc_div(2 * dy, 3))
        apex = koch_apex(first_third, second_third)
        stack.append((depth - 1, second_third, p2))
        stack.append((depth - 1, apex, second_third))
        stack.append((depth - 1, first_third, apex))
        stack.append((depth - 1, p1, first_third))


def _midpoint(a: Point, b: Point) -> Point:
    return Point(_trunc_div(a.x + b.x, 2), _trunc_div(a.y + b.y, 2))


def draw_sierpinski_triangle(raster: Raster, level: int, start: Point, width: int, color: Any) -> None:
    height = int(width * math.sqrt(3) / 2)
    corners = (
        start,
        Point(start.x + width, start.y),
        Point(start.x + _trunc_div(width, 2), start.y + height),
    )
    stack: List[Tuple[int, Point, Point, Point]] = [(_bounded_level(level),) + corners]
    while stack:
        depth, p1, p2, p3 = stack.pop()
        if depth == 0:
            draw_filled_triangle(raster, p1, p2, p3, color)
            continue
        m12 = _midpoint(p1, p2)
        m23 = _midpoint(p2, p3)
        m31 = _midpoint(p3, p1)
        stack.append((depth - 1, m31, m23, p3))
        stack.append((depth - 1, m12, p2, m23))
        stack.append((depth - 1, p1, m12, m31))
