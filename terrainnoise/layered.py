"""Perlin noise with fractal octave layering and its clamped and normalized variants."""

from __future__ import annotations

from terrainnoise import octaves as _oct
from terrainnoise.perlin import PerlinNoise
from terrainnoise.perlin_math import clamp_11, remap_01, remap_clamp_01


class OctavePerlinNoise(PerlinNoise):
    """Perlin noise that can sum several octaves, each at double the previous frequency."""

    def octave1d(self, x, octaves, persistence=0.5):
        """Layered 1D noise; the result may leave [-1, 1]."""
        return _oct.octave1d(self, x, octaves, persistence)

    def octave2d(self, x, y, octaves, persistence=0.5):
        """Layered 2D noise; the result may leave [-1, 1]."""
        return _oct.octave2d(self, x, y, octaves, persistence)

    def octave3d(self, x, y, z, octaves, persistence=0.5):
        """Layered 3D noise; the result may leave [-1, 1]."""
        return _oct.octave3d(self, x, y, z, octaves, persistence)

    def octave1d_11(self, x, octaves, persistence=0.5):
        """Layered 1D noise clamped to [-1, 1]."""
        return clamp_11(self.octave1d(x, octaves, persistence))

    def octave2d_11(self, x, y, octaves, persistence=0.5):
        """Layered 2D noise clamped to [-1, 1]."""
        return clamp_11(self.octave2d(x, y, octaves, persistence))

    def octave3d_11(self, x, y, z, octaves, persistence=0.5):
        """Layered 3D noise clamped to [-1, 1]."""
        return clamp_11(self.octave3d(x, y, z, octaves, persistence))

    def octave1d_01(self, x, octaves, persistence=0.5):
        """Layered 1D noise clamped and remapped to [0, 1]."""
        return remap_clamp_01(self.octave1d(x, octaves, persistence))

    def octave2d_01(self, x, y, octaves, persistence=0.5):
        """Layered 2D noise clamped and remapped to [0, 1]."""
        return remap_clamp_01(self.octave2d(x, y, octaves, persistence))

    def octave3d_01(self, x, y, z, octaves, persistence=0.5):
        """Layered 3D noise clamped and remapped to [0, 1]."""
        return remap_clamp_01(self.octave3d(x, y, z, octaves, persistence))

    def normalized_octave1d(self, x, octaves, persistence=0.5):
        """Layered 1D noise divided by the total amplitude."""
        return _oct.normalized_octave1d(self, x, octaves, persistence)

    def normalized_octave2d(self, x, y, octaves, persistence=0.5):
        """Layered 2D noise divided by the total amplitude."""
        return _oct.normalized_octave2d(self, x, y, octaves, persistence)

    def normalized_octave3d(self, x, y, z, octaves, persistence=0.5):
        """Layered 3D noise divided by the total amplitude."""
        return _oct.normalized_octave3d(self, x, y, z, octaves, persistence)

    def normalized_octave1d_01(self, x, octaves, persistence=0.5):
        """Normalized layered 1D noise remapped to [0, 1]."""
        return remap_01(self.normalized_octave1d(x, octaves, persistence))

    def normalized_octave2d_01(self, x, y, octaves, persistence=0.5):
        """Normalized layered 2D noise remapped to [0, 1]."""
        return remap_01(self.normalized_octave2d(x, y, octaves, persistence))

    def normalized_octave3d_01(self, x, y, z, octaves, persistence=0.5):
        """Normalized layered 3D noise remapped to [0, 1]."""
        return remap_01(self.normalized_octave3d(x, y, z, octaves, persistence))