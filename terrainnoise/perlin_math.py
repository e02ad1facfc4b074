"""Scalar helpers for classic permutation-table Perlin noise."""

from __future__ import annotations


def fade(t):
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a, b, t):
    return a + (b - a) * t


def grad(hash_value, x, y, z):
    """Dot product of the offset with one of the twelve edge gradients chosen by ``hash_value``."""
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def remap_01(x):
    """Map [-1, 1] onto [0, 1]."""
    return x * 0.5 + 0.5


def clamp_11(x):
    """Clamp to [-1, 1]."""
    return min(max(x, -1.0), 1.0)


def remap_clamp_01(x):
    """Clamp to [-1, 1] and map onto [0, 1]."""
    if x <= -1.0:
        return 0.0
    if x >= 1.0:
        return 1.0
    return x * 0.5 + 0.5


def max_amplitude(octaves, persistence):
    """Sum of the amplitudes of ``octaves`` layers, each ``persistence`` times the last."""
    result = 0.0
    amplitude = 1.0
    for _ in range(octaves):
        result += amplitude
        amplitude *= persistence
    return result