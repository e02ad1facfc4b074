import math

import pytest

from terrainnoise.gradients import PRIME_X, PRIME_Y, PRIME_Z, grad_coord_out2, grad_coord_out3, wrap_i32
from terrainnoise.warp import (
    DomainWarpType,
    basic_grid_warp2,
    basic_grid_warp3,
    open_simplex2_gradient_warp3,
    simplex_gradient_warp2,
)


def test_domain_warp_type_accepts_integer_settings():
    assert DomainWarpType(2) is DomainWarpType.BASIC_GRID
    assert list(DomainWarpType) == [
        DomainWarpType.OPEN_SIMPLEX2,
        DomainWarpType.OPEN_SIMPLEX2_REDUCED,
        DomainWarpType.BASIC_GRID,
    ]


@pytest.mark.parametrize("point", [(0, 0), (3, -2), (-7, 11)])
def test_basic_grid_2d_at_lattice_point_is_random_vector(point):
    x, y = point
    expected = grad_coord_out2(1337, wrap_i32(x * PRIME_X), wrap_i32(y * PRIME_Y))
    dx, dy = basic_grid_warp2(1337, 2.0, 1.0, float(x), float(y))
    assert dx == pytest.approx(expected[0] * 2.0)
    assert dy == pytest.approx(expected[1] * 2.0)


@pytest.mark.parametrize("point", [(0, 0, 0), (4, -1, 2)])
def test_basic_grid_3d_at_lattice_point_is_random_vector(point):
    x, y, z = point
    expected = grad_coord_out3(42, wrap_i32(x * PRIME_X), wrap_i32(y * PRIME_Y), wrap_i32(z * PRIME_Z))
    result = basic_grid_warp3(42, 1.5, 1.0, float(x), float(y), float(z))
    assert result == pytest.approx(tuple(c * 1.5 for c in expected))


@pytest.mark.parametrize("point", [(0.3, 0.7), (12.25, -3.9), (-100.5, 55.1)])
def test_basic_grid_2d_magnitude_bounded_by_amp(point):
    dx, dy = basic_grid_warp2(7, 3.0, 0.5, *point)
    assert math.hypot(dx, dy) <= 3.0 + 1e-9


def test_basic_grid_3d_magnitude_bounded_by_amp():
    result = basic_grid_warp3(7, 2.0, 0.37, 1.1, -4.6, 9.3)
    assert math.sqrt(sum(c * c for c in result)) <= 2.0 + 1e-9


def test_basic_grid_is_linear_in_amplitude():
    one = basic_grid_warp2(5, 1.0, 0.1, 13.7, 2.2)
    three = basic_grid_warp2(5, 3.0, 0.1, 13.7, 2.2)
    assert three == pytest.approx(tuple(3 * c for c in one))


def test_zero_amplitude_gives_no_displacement():
    assert basic_grid_warp3(5, 0.0, 0.1, 1.0, 2.0, 3.0) == (0.0, 0.0, 0.0)
    assert simplex_gradient_warp2(5, 0.0, 0.1, 1.0, 2.0, False) == (0.0, 0.0)


def test_simplex_warp_at_origin_out_grad_only():
    expected = grad_coord_out2(9, 0, 0)
    dx, dy = simplex_gradient_warp2(9, 2.0, 1.0, 0.0, 0.0, True)
    assert dx == pytest.approx(0.0625 * 2.0 * expected[0])
    assert dy == pytest.approx(0.0625 * 2.0 * expected[1])


def test_simplex_warp_at_origin_dual_is_zero():
    assert simplex_gradient_warp2(9, 2.0, 1.0, 0.0, 0.0, False) == pytest.approx((0.0, 0.0))


def test_open_simplex2_warp_at_origin_out_grad_only():
    expected = grad_coord_out3(9, 0, 0, 0)
    result = open_simplex2_gradient_warp3(9, 1.0, 1.0, 0.0, 0.0, 0.0, True)
    assert result == pytest.approx(tuple(0.6 ** 4 * c for c in expected))


def test_open_simplex2_warp_at_origin_dual_is_zero():
    assert open_simplex2_gradient_warp3(9, 1.0, 1.0, 0.0, 0.0, 0.0, False) == pytest.approx((0.0, 0.0, 0.0))


@pytest.mark.parametrize("out_grad_only", [True, False])
def test_simplex_warp_is_deterministic(out_grad_only):
    first = simplex_gradient_warp2(3, 1.0, 0.05, 123.4, -56.7, out_grad_only)
    second = simplex_gradient_warp2(3, 1.0, 0.05, 123.4, -56.7, out_grad_only)
    assert first == second


def test_open_simplex2_warp_is_linear_in_amplitude():
    one = open_simplex2_gradient_warp3(3, 1.0, 0.02, 10.3, 20.7, -5.1, True)
    two = open_simplex2_gradient_warp3(3, 2.0, 0.02, 10.3, 20.7, -5.1, True)
    assert two == pytest.approx(tuple(2 * c for c in one))


def test_simplex_warp_out_grad_magnitude_bounded():
    dx, dy = simplex_gradient_warp2(11, 1.0, 1.0, 0.4, 0.8, True)
    assert math.hypot(dx, dy) <= 3 * 0.0625 + 1e-9