import itertools

import pytest

from terrainnoise.gradients import PRIME_X, PRIME_Y, PRIME_Z, val_coord2, val_coord3, wrap_i32
from terrainnoise.lattice import perlin2, perlin3, value2, value3, value_cubic2, value_cubic3

SEED = 1337

SAMPLES_2D = [(0.3, 0.7), (12.25, -3.5), (-7.9, 4.1), (100.01, 55.55), (-0.45, -0.95)]
SAMPLES_3D = [(0.3, 0.7, 0.1), (12.25, -3.5, 8.8), (-7.9, 4.1, -2.2), (-0.45, -0.95, 3.3)]


@pytest.mark.parametrize("x, y", [(1.0, 2.0), (5.0, 7.0), (0.0, 0.0), (3.0, -4.0)])
def test_perlin2_vanishes_on_lattice(x, y):
    assert perlin2(SEED, x, y) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("x, y, z", [(1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (4.0, 9.0, -6.0)])
def test_perlin3_vanishes_on_lattice(x, y, z):
    assert perlin3(SEED, x, y, z) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("x, y", [(1, 2), (5, 7), (0, 0), (300, 41)])
def test_value2_on_lattice_is_corner_value(x, y):
    expected = val_coord2(SEED, wrap_i32(x * PRIME_X), wrap_i32(y * PRIME_Y))
    assert value2(SEED, float(x), float(y)) == pytest.approx(expected)


@pytest.mark.parametrize("x, y, z", [(1, 2, 3), (0, 0, 0), (17, 5, 9)])
def test_value3_on_lattice_is_corner_value(x, y, z):
    expected = val_coord3(SEED, wrap_i32(x * PRIME_X), wrap_i32(y * PRIME_Y), wrap_i32(z * PRIME_Z))
    assert value3(SEED, float(x), float(y), float(z)) == pytest.approx(expected)


@pytest.mark.parametrize("x, y", [(1, 2), (0, 0), (42, 13)])
def test_value_cubic2_on_lattice_is_scaled_corner_value(x, y):
    corner = val_coord2(SEED, wrap_i32(x * PRIME_X), wrap_i32(y * PRIME_Y))
    assert value_cubic2(SEED, float(x), float(y)) == pytest.approx(corner / 2.25)


@pytest.mark.parametrize("x, y, z", [(1, 2, 3), (0, 0, 0), (8, 21, 4)])
def test_value_cubic3_on_lattice_is_scaled_corner_value(x, y, z):
    corner = val_coord3(SEED, wrap_i32(x * PRIME_X), wrap_i32(y * PRIME_Y), wrap_i32(z * PRIME_Z))
    assert value_cubic3(SEED, float(x), float(y), float(z)) == pytest.approx(corner / 3.375)


@pytest.mark.parametrize("func", [perlin2, value2, value_cubic2])
def test_2d_kernels_are_deterministic(func):
    first = [func(SEED, x, y) for x, y in SAMPLES_2D]
    second = [func(SEED, x, y) for x, y in SAMPLES_2D]
    assert first == second


@pytest.mark.parametrize("func", [perlin3, value3, value_cubic3])
def test_3d_kernels_are_deterministic(func):
    first = [func(SEED, *p) for p in SAMPLES_3D]
    second = [func(SEED, *p) for p in SAMPLES_3D]
    assert first == second


@pytest.mark.parametrize("func", [perlin2, value2, value_cubic2])
def test_2d_kernels_depend_on_seed(func):
    a = [func(1, x, y) for x, y in SAMPLES_2D]
    b = [func(2, x, y) for x, y in SAMPLES_2D]
    assert any(abs(p - q) > 1e-9 for p, q in zip(a, b))


@pytest.mark.parametrize("func", [perlin3, value3, value_cubic3])
def test_3d_kernels_depend_on_seed(func):
    a = [func(1, *p) for p in SAMPLES_3D]
    b = [func(2, *p) for p in SAMPLES_3D]
    assert any(abs(p - q) > 1e-9 for p, q in zip(a, b))


def test_value2_stays_within_corner_range():
    grid = [i * 0.37 - 5 for i in range(30)]
    for x, y in itertools.product(grid, grid):
        assert -1.0 <= value2(SEED, x, y) <= 1.0


def test_value3_stays_within_corner_range():
    grid = [i * 0.61 - 3 for i in range(10)]
    for x, y, z in itertools.product(grid, grid, grid):
        assert -1.0 <= value3(SEED, x, y, z) <= 1.0


def test_perlin2_is_bounded():
    grid = [i * 0.23 - 4 for i in range(40)]
    values = [perlin2(SEED, x, y) for x, y in itertools.product(grid, grid)]
    assert max(abs(v) for v in values) <= 1.0
    assert max(abs(v) for v in values) > 0.05


def test_perlin3_is_bounded():
    grid = [i * 0.41 - 2 for i in range(12)]
    values = [perlin3(SEED, *p) for p in itertools.product(grid, grid, grid)]
    assert max(abs(v) for v in values) <= 1.0
    assert max(abs(v) for v in values) > 0.05


@pytest.mark.parametrize("func", [perlin2, value2, value_cubic2])
def test_2d_kernels_continuous_across_negative_lattice_line(func):
    # Negative whole numbers fall into the cell below, so continuity must still hold there.
    at = func(SEED, -3.0, 0.4)
    near = func(SEED, -3.0 + 1e-9, 0.4)
    assert at == pytest.approx(near, abs=1e-6)


@pytest.mark.parametrize("func", [perlin3, value3, value_cubic3])
def test_3d_kernels_continuous_across_negative_lattice_plane(func):
    at = func(SEED, 0.4, -2.0, 0.6)
    near = func(SEED, 0.4, -2.0 - 1e-9, 0.6)
    assert at == pytest.approx(near, abs=1e-6)


def test_value_cubic2_differs_from_linear_between_points():
    assert value_cubic2(SEED, 0.5, 0.5) != pytest.approx(value2(SEED, 0.5, 0.5), abs=1e-9)