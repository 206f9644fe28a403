from .drawing import (
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
)
from .fractals import MAX_FRACTAL_LEVEL, draw_koch_edge, draw_sierpinski_triangle
from .noise import NoiseSettings, fractal_noise, lattice_noise, perlin_fill
from .transforms import (
    convert_format,
    flip,
    flop,
    invert,
    resample,
    rescale_depth,
    rotate,
    rotate90_cw,
    to_bitmap,
    to_greymap,
    to_pixmap,
)

__all__ = [
    "convert_format",
    "draw_circle",
    "draw_filled_circle",
    "draw_filled_polygon",
    "draw_filled_rectangle",
    "draw_filled_triangle",
    "draw_koch_edge",
    "draw_line",
    "draw_polygon",
    "draw_rectangle",
    "draw_sierpinski_triangle",
    "draw_triangle",
    "flip",
    "flop",
    "fractal_noise",
    "invert",
    "lattice_noise",
    "MAX_FRACTAL_LEVEL",
    "NoiseSettings",
    "perlin_fill",
    "resample",
    "rescale_depth",
    "rotate",
    "rotate90_cw",
    "to_bitmap",
    "to_greymap",
    "to_pixmap",
]
