"""Perlin, value and gradient lattice noise, domain warp kernels and a wall-clock timer."""

__version__ = "0.1.0"

__all__ = [
    "gradients",
    "lattice",
    "layered",
    "octaves",
    "perlin",
    "perlin_math",
    "permutation",
    "timing",
    "warp",
]