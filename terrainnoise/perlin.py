"""Classic permutation-table Perlin noise in one, two and three dimensions."""

from __future__ import annotations

import math

from terrainnoise.perlin_math import fade, grad, lerp, remap_01
from terrainnoise.permutation import MT19937, default_permutation, shuffle

DEFAULT_Y = 0.12345
DEFAULT_Z = 0.34567


class PerlinNoise:
    """Perlin noise driven by a 256-entry permutation table.

    Without a seed the classic reference permutation is used. ``seed`` may be an
    integer, which seeds a Mersenne Twister, or a callable returning unsigned
    random integers.
    """

    def __init__(self, seed=None):
        if seed is None:
            self._permutation = default_permutation()
        else:
            self.reseed(seed)

    def reseed(self, seed):
        """Rebuild the permutation by shuffling 0..255 with the given seed or generator."""
        urbg = seed if callable(seed) else MT19937(seed)
        permutation = list(range(256))
        shuffle(permutation, urbg)
        self._permutation = permutation

    def serialize(self):
        """Return the permutation table as a tuple of 256 bytes."""
        return tuple(self._permutation)

    def deserialize(self, state):
        """Replace the permutation table with ``state``."""
        values = list(state)
        if len(values) != 256:
            raise ValueError(f"permutation state must have 256 entries, got {len(values)}")
        if any(not 0 <= v <= 255 for v in values):
            raise ValueError("permutation entries must be in 0..255")
        self._permutation = values

    def noise1d(self, x):
        """Noise in [-1, 1] along a fixed line through 3D space."""
        return self.noise3d(x, DEFAULT_Y, DEFAULT_Z)

    def noise2d(self, x, y):
        """Noise in [-1, 1] on a fixed plane through 3D space."""
        return self.noise3d(x, y, DEFAULT_Z)

    def noise3d(self, x, y, z):
        """Noise in [-1, 1] at (x, y, z)."""
        p = self._permutation
        fx0 = math.floor(x)
        fy0 = math.floor(y)
        fz0 = math.floor(z)

        ix = fx0 & 255
        iy = fy0 & 255
        iz = fz0 & 255

        fx = x - fx0
        fy = y - fy0
        fz = z - fz0

        u = fade(fx)
        v = fade(fy)
        w = fade(fz)

        a = (p[ix] + iy) & 255
        b = (p[(ix + 1) & 255] + iy) & 255

        aa = (p[a] + iz) & 255
        ab = (p[(a + 1) & 255] + iz) & 255
        ba = (p[b] + iz) & 255
        bb = (p[(b + 1) & 255] + iz) & 255

        p0 = grad(p[aa], fx, fy, fz)
        p1 = grad(p[ba], fx - 1, fy, fz)
        p2 = grad(p[ab], fx, fy - 1, fz)
        p3 = grad(p[bb], fx - 1, fy - 1, fz)
        p4 = grad(p[(aa + 1) & 255], fx, fy, fz - 1)
        p5 = grad(p[(ba + 1) & 255], fx - 1, fy, fz - 1)
        p6 = grad(p[(ab + 1) & 255], fx, fy - 1, fz - 1)
        p7 = grad(p[(bb + 1) & 255], fx - 1, fy - 1, fz - 1)

        q0 = lerp(p0, p1, u)
        q1 = lerp(p2, p3, u)
        q2 = lerp(p4, p5, u)
        q3 = lerp(p6, p7, u)

        r0 = lerp(q0, q1, v)
        r1 = lerp(q2, q3, v)

        return lerp(r0, r1, w)

    def noise1d_01(self, x):
        """One-dimensional noise remapped to [0, 1]."""
        return remap_01(self.noise1d(x))

    def noise2d_01(self, x, y):
        """Two-dimensional noise remapped to [0, 1]."""
        return remap_01(self.noise2d(x, y))

    def noise3d_01(self, x, y, z):
        """Three-dimensional noise remapped to [0, 1]."""
        return remap_01(self.noise3d(x, y, z))