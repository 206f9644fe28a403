from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..codec.types import Pixel, Pixmap

_MASK64 = (1 << 64) - 1


@dataclass(frozen=True)
class NoiseSettings:
    scale: float = 0.1
    octaves: int = 4
    persistence: float = 0.5


def lattice_noise(x: float, y: float) -> float:
    """Deterministic value in (-1, 1] for the lattice cell containing (x, y)."""
    n = (int(x) + int(y) * 57) & _MASK64
    n = ((n << 13) ^ n) & _MASK64
    n = (n * ((n * n * 15731 + 789221) & _MASK64) + 1376312589) & 0x7FFFFFFF
    return 1.0 - n / 1073741824.0


def fractal_noise(x: float, y: float, octaves: int, persistence: float) -> float:
    """Sum of octaves of lattice noise, normalised by the total amplitude."""
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    amplitude_sum = 0.0
    for _ in range(octaves):
        total += lattice_noise(x * frequency, y * frequency) * amplitude
        amplitude_sum += amplitude
        amplitude *= persistence
        frequency *= 2
    if amplitude_sum == 0:
        return 0.0
    return total / amplitude_sum


def lerp_color(color1: Pixel, color2: Pixel, t: float, max_value: int) -> Pixel:
    def channel(c1: int, c2: int) -> int:
        value = int(c1 * (1.0 - t) + c2 * t)
        return min(max(value, 0), max_value)

    return Pixel(channel(color1.r, color2.r), channel(color1.g, color2.g), channel(color1.b, color2.b))


def perlin_fill(
    raster: Pixmap, color1: Pixel, color2: Pixel, settings: Optional[NoiseSettings] = None
) -> None:
    """Fill a pixmap with octave noise blended between two colors."""
    if not isinstance(raster, Pixmap):
        raise TypeError("Noise fill needs a pixmap")
    settings = settings or NoiseSettings()
    scale = settings.scale
    for y, row in enumerate(raster.data):
        for x in range(len(row)):
            t = fractal_noise(x * scale, y * scale, settings.octaves, settings.persistence)
            row[x] = lerp_color(color1, color2, t, raster.max_value)
