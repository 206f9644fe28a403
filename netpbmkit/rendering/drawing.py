"""Geometric drawing primitives.

Every primitive writes into the raster in place. Pixels that fall outside
the canvas are skipped one at a time; shapes are never rejected.
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence

from ..codec.types import Point, Raster

CIRCLE_RADIUS_RATIO = 0.85
CIRCLE_RING_TOLERANCE = 0.5


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def draw_line(raster: Raster, p1: Point, p2: Point, color: Any) -> None:
    """Bresenham line from p1 to p2, both endpoints included."""
    x, y = p1.x, p1.y
    end_x, end_y = p2.x, p2.y
    dx = abs(end_x - x)
    dy = abs(end_y - y)
    sx = _sign(end_x - x)
    sy = _sign(end_y - y)
    err = dx - dy
    while True:
        raster.plot(x, y, color)
        if x == end_x and y == end_y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_rectangle(raster: Raster, corner: Point, width: int, height: int, color: Any) -> None:
    top_right = Point(corner.x + width, corner.y)
    bottom_left = Point(corner.x, corner.y + height)
    bottom_right = Point(corner.x + width, corner.y + height)
    draw_line(raster, corner, top_right, color)
    draw_line(raster, top_right, bottom_right, color)
    draw_line(raster, bottom_right, bottom_left, color)
    draw_line(raster, bottom_left, corner, color)


def draw_filled_rectangle(raster: Raster, corner: Point, width: int, height: int, color: Any) -> None:
    for y in range(corner.y, corner.y + height + 1):
        draw_line(raster, Point(corner.x, y), Point(corner.x + width, y), color)


def draw_circle(raster: Raster, center: Point, radius: int, color: Any) -> None:
    """Plot the ring of pixels lying within half a pixel of 0.85 * radius."""
    if radius < 0:
        return
    ring = radius * CIRCLE_RADIUS_RATIO
    reach = int(ring + CIRCLE_RING_TOLERANCE) + 1
    for y in range(max(0, center.y - reach), min(raster.height, center.y + reach + 1)):
        dy = y - center.y
        row = raster.data[y]
        for x in range(max(0, center.x - reach), min(raster.width, center.x + reach + 1)):
            dx = x - center.x
            if abs(math.sqrt(dx * dx + dy * dy) - ring) < CIRCLE_RING_TOLERANCE:
                row[x] = color


def draw_filled_circle(raster: Raster, center: Point, radius: int, color: Any) -> None:
    for ring_radius in range(radius, -1, -1):
        draw_circle(raster, center, ring_radius, color)


def draw_triangle(raster: Raster, p1: Point, p2: Point, p3: Point, color: Any) -> None:
    draw_line(raster, p1, p2, color)
    draw_line(raster, p2, p3, color)
    draw_line(raster, p3, p1, color)


def draw_filled_triangle(raster: Raster, p1: Point, p2: Point, p3: Point, color: Any) -> None:
    """Approximate fill: walk p1 toward p2, drawing a leg from p3 at every step."""
    x, y = p1.x, p1.y
    while x != p2.x or y != p2.y:
        draw_line(raster, p3, Point(x, y), color)
        x += _sign(p2.x - x)
        y += _sign(p2.y - y)
    draw_line(raster, p3, Point(x, y), color)


def draw_polygon(raster: Raster, points: Sequence[Point], color: Any) -> None:
    count = len(points)
    for i in range(count):
        draw_line(raster, points[i], points[(i + 1) % count], color)


def scanline_crossings(points: Sequence[Point], y: int) -> List[int]:
    """X intercepts of the polygon edges with scanline y, unsorted.

    An edge counts when min(y1, y2) <= y < max(y1, y2), so horizontal edges
    never contribute and shared vertices are counted once.
    """
    crossings = []
    count = len(points)
    for i in range(count):
        a = points[i]
        b = points[(i + 1) % count]
        if (a.y <= y < b.y) or (b.y <= y < a.y):
            crossings.append(int((y - a.y) * ((b.x - a.x) / (b.y - a.y))) + a.x)
    return crossings


def draw_filled_polygon(raster: Raster, points: Sequence[Point], color: Any) -> None:
    """Even-odd scanline fill; the outline is stroked so boundary rows are included."""
    if len(points) < 3:
        return
    top = max(min(p.y for p in points), 0)
    bottom = min(max(p.y for p in points), raster.height - 1)
    last_column = raster.width - 1
    for y in range(top, bottom + 1):
        crossings = sorted(scanline_crossings(points, y))
        row = raster.data[y]
        for i in range(0, len(crossings) - 1, 2):
            for x in range(max(crossings[i], 0), min(crossings[i + 1], last_column) + 1):
                row[x] = color
    draw_polygon(raster, points, color)
