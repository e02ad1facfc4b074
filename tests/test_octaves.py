import itertools

import pytest

from terrainnoise.octaves import (
    normalized_octave1d,
    normalized_octave2d,
    normalized_octave3d,
    octave1d,
    octave2d,
    octave3d,
)
from terrainnoise.perlin import PerlinNoise
from terrainnoise.perlin_math import max_amplitude


class ConstantNoise:
    def noise1d(self, x):
        return 1.0

    def noise2d(self, x, y):
        return 1.0

    def noise3d(self, x, y, z):
        return 1.0


class RecordingNoise:
    def __init__(self):
        self.calls = []

    def noise1d(self, x):
        self.calls.append((x,))
        return 0.0

    def noise2d(self, x, y):
        self.calls.append((x, y))
        return 0.0

    def noise3d(self, x, y, z):
        self.calls.append((x, y, z))
        return 0.0


@pytest.mark.parametrize("octaves, persistence", [(1, 0.5), (3, 0.5), (5, 0.25), (4, 0.9)])
def test_constant_noise_sums_to_max_amplitude(octaves, persistence):
    noise = ConstantNoise()
    expected = max_amplitude(octaves, persistence)
    assert octave1d(noise, 0.3, octaves, persistence) == pytest.approx(expected)
    assert octave2d(noise, 0.3, 0.4, octaves, persistence) == pytest.approx(expected)
    assert octave3d(noise, 0.3, 0.4, 0.5, octaves, persistence) == pytest.approx(expected)


@pytest.mark.parametrize("octaves", [1, 2, 6])
def test_normalized_constant_noise_is_one(octaves):
    noise = ConstantNoise()
    assert normalized_octave1d(noise, 1.0, octaves) == pytest.approx(1.0)
    assert normalized_octave2d(noise, 1.0, 2.0, octaves) == pytest.approx(1.0)
    assert normalized_octave3d(noise, 1.0, 2.0, 3.0, octaves) == pytest.approx(1.0)


def test_coordinates_double_each_octave():
    noise = RecordingNoise()
    octave3d(noise, 1.5, -2.0, 0.25, 3, 0.5)
    assert noise.calls == [(1.5, -2.0, 0.25), (3.0, -4.0, 0.5), (6.0, -8.0, 1.0)]


def test_2d_coordinates_double_each_octave():
    noise = RecordingNoise()
    octave2d(noise, 0.5, 3.0, 2)
    assert noise.calls == [(0.5, 3.0), (1.0, 6.0)]


def test_zero_octaves_gives_zero():
    noise = ConstantNoise()
    assert octave1d(noise, 0.5, 0) == 0
    assert octave2d(noise, 0.5, 0.5, 0) == 0


@pytest.mark.parametrize("func, args", [
    (normalized_octave1d, (0.5,)),
    (normalized_octave2d, (0.5, 0.5)),
    (normalized_octave3d, (0.5, 0.5, 0.5)),
])
def test_normalized_with_zero_octaves_raises(func, args):
    with pytest.raises(ValueError):
        func(ConstantNoise(), *args, 0)


def test_single_octave_matches_base_noise():
    noise = PerlinNoise(7)
    assert octave3d(noise, 0.3, 1.7, 2.2, 1) == pytest.approx(noise.noise3d(0.3, 1.7, 2.2))
    assert octave2d(noise, 0.3, 1.7, 1) == pytest.approx(noise.noise2d(0.3, 1.7))
    assert octave1d(noise, 0.3, 1) == pytest.approx(noise.noise1d(0.3))


def test_normalized_perlin_stays_in_range():
    noise = PerlinNoise(42)
    grid = [i * 0.37 - 3 for i in range(12)]
    for x, y in itertools.product(grid, grid):
        assert -1.0 <= normalized_octave2d(noise, x, y, 4) <= 1.0
        assert -1.0 <= normalized_octave3d(noise, x, y, 0.5, 4, 0.6) <= 1.0


def test_normalized_equals_octave_over_max_amplitude():
    noise = PerlinNoise(3)
    raw = octave1d(noise, 2.7, 5, 0.4)
    assert normalized_octave1d(noise, 2.7, 5, 0.4) == pytest.approx(raw / max_amplitude(5, 0.4))