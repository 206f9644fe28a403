"""Tests for the procedural noise fill."""

import pytest

from netpbmkit.codec.netpbm import encode_raster
from netpbmkit.codec.types import Greymap, Pixel, Pixmap
from netpbmkit.rendering.noise import (
    NoiseSettings,
    fractal_noise,
    lattice_noise,
    lerp_color,
    perlin_fill,
)

DARK = Pixel(10, 20, 30)
LIGHT = Pixel(240, 220, 200)


def test_lattice_noise_at_origin():
    assert lattice_noise(0, 0) == pytest.approx(1.0 - 1376312589 / 1073741824.0)


def test_lattice_noise_wraps_like_64_bit_integers():
    # n * (...) overflows 64 bits here, only the low 31 bits survive
    assert lattice_noise(37, 11) == pytest.approx(1.0 - 288686341 / 1073741824.0)


def test_lattice_noise_is_constant_per_cell():
    assert lattice_noise(0.2, 0.7) == lattice_noise(0, 0)
    assert lattice_noise(3.9, 1.1) == lattice_noise(3, 1)


def test_lattice_noise_range():
    for y in range(-20, 20):
        for x in range(-20, 20):
            assert -1.0 < lattice_noise(x, y) <= 1.0


def test_fractal_noise_without_octaves():
    assert fractal_noise(1.5, 2.5, 0, 0.5) == 0.0


def test_single_octave_matches_lattice():
    assert fractal_noise(4, 7, 1, 0.5) == lattice_noise(4, 7)


def test_lerp_color_endpoints_and_clamp():
    assert lerp_color(DARK, LIGHT, 0.0, 255) == DARK
    assert lerp_color(DARK, LIGHT, 1.0, 255) == LIGHT
    assert lerp_color(Pixel(200, 200, 200), Pixel(0, 0, 0), -1.0, 255) == Pixel(255, 255, 255)
    assert lerp_color(DARK, LIGHT, 2.0, 255).r == 255


def test_fill_is_deterministic():
    first = Pixmap.blank(16, 12)
    second = Pixmap.blank(16, 12)
    perlin_fill(first, DARK, LIGHT)
    perlin_fill(second, DARK, LIGHT)
    assert encode_raster(first) == encode_raster(second)
    first.validate()


def test_fill_settings_change_the_texture():
    default = Pixmap.blank(16, 16)
    coarse = Pixmap.blank(16, 16)
    perlin_fill(default, DARK, LIGHT)
    perlin_fill(coarse, DARK, LIGHT, NoiseSettings(scale=1.0, octaves=1))
    assert default != coarse


def test_fill_needs_a_pixmap():
    with pytest.raises(TypeError):
        perlin_fill(Greymap.blank(2, 2), DARK, LIGHT)
