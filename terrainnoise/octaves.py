"""Fractal layering of any noise source exposing ``noise1d``, ``noise2d`` and ``noise3d``."""

from __future__ import annotations

from terrainnoise.perlin_math import max_amplitude


def _layers(octaves, persistence):
    """Yield (scale, amplitude) pairs: frequency doubles, amplitude shrinks by ``persistence``."""
    scale = 1
    amplitude = 1.0
    for _ in range(octaves):
        yield scale, amplitude
        scale *= 2
        amplitude *= persistence


def octave1d(noise, x, octaves, persistence=0.5):
    """Sum of ``octaves`` layers of 1D noise; the result may leave [-1, 1]."""
    return sum(noise.noise1d(x * s) * amp for s, amp in _layers(octaves, persistence))


def octave2d(noise, x, y, octaves, persistence=0.5):
    """Sum of ``octaves`` layers of 2D noise; the result may leave [-1, 1]."""
    return sum(noise.noise2d(x * s, y * s) * amp for s, amp in _layers(octaves, persistence))


def octave3d(noise, x, y, z, octaves, persistence=0.5):
    """Sum of ``octaves`` layers of 3D noise; the result may leave [-1, 1]."""
    return sum(noise.noise3d(x * s, y * s, z * s) * amp for s, amp in _layers(octaves, persistence))


def _normalizer(octaves, persistence):
    total = max_amplitude(octaves, persistence)
    if total == 0:
        raise ValueError("normalized octave noise needs at least one octave with non-zero total amplitude")
    return total


def normalized_octave1d(noise, x, octaves, persistence=0.5):
    """Layered 1D noise divided by the total amplitude, so it stays in [-1, 1]."""
    total = _normalizer(octaves, persistence)
    return octave1d(noise, x, octaves, persistence) / total


def normalized_octave2d(noise, x, y, octaves, persistence=0.5):
    """Layered 2D noise divided by the total amplitude, so it stays in [-1, 1]."""
    total = _normalizer(octaves, persistence)
    return octave2d(noise, x, y, octaves, persistence) / total


def normalized_octave3d(noise, x, y, z, octaves, persistence=0.5):
    """Layered 3D noise divided by the total amplitude, so it stays in [-1, 1]."""
    total = _normalizer(octaves, persistence)
    return octave3d(noise, x, y, z, octaves, persistence) / total