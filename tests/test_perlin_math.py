import pytest

from terrainnoise.perlin_math import (
    clamp_11,
    fade,
    grad,
    lerp,
    max_amplitude,
    remap_01,
    remap_clamp_01,
)


def test_fade_endpoints():
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0


def test_fade_is_symmetric():
    for t in (0.1, 0.25, 0.4, 0.5):
        assert fade(t) + fade(1 - t) == pytest.approx(1.0)


def test_fade_is_monotonic():
    samples = [fade(i / 50) for i in range(51)]
    assert all(a <= b for a, b in zip(samples, samples[1:]))


def test_lerp_endpoints_and_midpoint():
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0
    assert lerp(2.0, 6.0, 0.5) == pytest.approx((2.0 + 6.0) / 2)


@pytest.mark.parametrize("x, y, z", [(0.3, -0.7, 0.9), (1.5, 2.0, -0.25)])
def test_grad_selects_edge_gradients(x, y, z):
    assert grad(0, x, y, z) == pytest.approx(x + y)
    assert grad(1, x, y, z) == pytest.approx(-x + y)
    assert grad(2, x, y, z) == pytest.approx(x - y)
    assert grad(3, x, y, z) == pytest.approx(-x - y)
    assert grad(4, x, y, z) == pytest.approx(x + z)
    assert grad(8, x, y, z) == pytest.approx(y + z)
    assert grad(12, x, y, z) == pytest.approx(y + x)
    assert grad(14, x, y, z) == pytest.approx(y - x)


def test_grad_uses_low_four_bits():
    for h in range(16):
        assert grad(h + 16, 0.2, 0.5, -0.8) == grad(h, 0.2, 0.5, -0.8)
        assert grad(h + 240, 0.2, 0.5, -0.8) == grad(h, 0.2, 0.5, -0.8)


def test_remap_01_endpoints():
    assert remap_01(-1.0) == 0.0
    assert remap_01(1.0) == 1.0
    assert remap_01(0.0) == 0.5


def test_clamp_11():
    assert clamp_11(5.0) == 1.0
    assert clamp_11(-5.0) == -1.0
    assert clamp_11(0.25) == 0.25


def test_remap_clamp_01():
    assert remap_clamp_01(-3.0) == 0.0
    assert remap_clamp_01(3.0) == 1.0
    assert remap_clamp_01(0.5) == remap_01(0.5)


def test_max_amplitude_small_cases():
    assert max_amplitude(0, 0.5) == 0.0
    assert max_amplitude(1, 0.5) == 1.0
    assert max_amplitude(3, 0.5) == pytest.approx(1.75)


@pytest.mark.parametrize("octaves", [1, 4, 8])
def test_max_amplitude_unit_persistence_counts_octaves(octaves):
    assert max_amplitude(octaves, 1.0) == pytest.approx(octaves)