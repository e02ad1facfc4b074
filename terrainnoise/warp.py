"""Domain warp kernels that return the displacement to add to a sample position."""

from __future__ import annotations

from enum import IntEnum

from terrainnoise.gradients import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    fast_floor,
    fast_round,
    grad_coord_dual2,
    grad_coord_dual3,
    grad_coord_out2,
    grad_coord_out3,
    hash2,
    hash3,
    interp_hermite,
    lerp,
    rand_vec_2d,
    rand_vec_3d,
    wrap_i32,
)

_SQRT3 = 1.7320508075688772935274463415059
_G2 = (3 - _SQRT3) / 6
_C_T = 2 * (1 - 2 * _G2) * (1 / _G2 - 2)
_C_A = -2 * (1 - 2 * _G2) * (1 - 2 * _G2)
_SEED_OFFSET = 1293373


class DomainWarpType(IntEnum):
    OPEN_SIMPLEX2 = 0
    OPEN_SIMPLEX2_REDUCED = 1
    BASIC_GRID = 2


def _falloff(a):
    return (a * a) * (a * a)


def _cell(coord, prime):
    base = fast_floor(coord)
    return wrap_i32(base * prime), interp_hermite(coord - base)


def _lerp_vec(a, b, t):
    return tuple(lerp(p, q, t) for p, q in zip(a, b))


def basic_grid_warp2(seed, warp_amp, frequency, x, y):
    """Displacement from bilinearly blended random vectors on a square grid."""
    x0, xs = _cell(x * frequency, PRIME_X)
    y0, ys = _cell(y * frequency, PRIME_Y)
    x1 = wrap_i32(x0 + PRIME_X)
    y1 = wrap_i32(y0 + PRIME_Y)

    def vec(xp, yp):
        return rand_vec_2d((hash2(seed, xp, yp) >> 1) & 255)

    row0 = _lerp_vec(vec(x0, y0), vec(x1, y0), xs)
    row1 = _lerp_vec(vec(x0, y1), vec(x1, y1), xs)
    dx, dy = _lerp_vec(row0, row1, ys)
    return dx * warp_amp, dy * warp_amp


def basic_grid_warp3(seed, warp_amp, frequency, x, y, z):
    """Displacement from trilinearly blended random vectors on a cubic grid."""
    x0, xs = _cell(x * frequency, PRIME_X)
    y0, ys = _cell(y * frequency, PRIME_Y)
    z0, zs = _cell(z * frequency, PRIME_Z)
    x1 = wrap_i32(x0 + PRIME_X)
    y1 = wrap_i32(y0 + PRIME_Y)
    z1 = wrap_i32(z0 + PRIME_Z)

    def vec(xp, yp, zp):
        return rand_vec_3d((hash3(seed, xp, yp, zp) >> 2) & 255)

    def layer(zp):
        row0 = _lerp_vec(vec(x0, y0, zp), vec(x1, y0, zp), xs)
        row1 = _lerp_vec(vec(x0, y1, zp), vec(x1, y1, zp), xs)
        return _lerp_vec(row0, row1, ys)

    dx, dy, dz = _lerp_vec(layer(z0), layer(z1), zs)
    return dx * warp_amp, dy * warp_amp, dz * warp_amp


def simplex_gradient_warp2(seed, warp_amp, frequency, x, y, out_grad_only):
    """Displacement from a 2D simplex gradient field; input must already be skewed.

    With ``out_grad_only`` each corner contributes its random vector directly,
    otherwise the vector is scaled by the corner's gradient dot product.
    """
    x *= frequency
    y *= frequency

    i = fast_floor(x)
    j = fast_floor(y)
    xi = x - i
    yi = y - j

    t = (xi + yi) * _G2
    x0 = xi - t
    y0 = yi - t

    i = wrap_i32(i * PRIME_X)
    j = wrap_i32(j * PRIME_Y)
    i_next = wrap_i32(i + PRIME_X)
    j_next = wrap_i32(j + PRIME_Y)

    def corner(weight, ip, jp, xd, yd):
        if out_grad_only:
            xo, yo = grad_coord_out2(seed, ip, jp)
        else:
            xo, yo = grad_coord_dual2(seed, ip, jp, xd, yd)
        w = _falloff(weight)
        return w * xo, w * yo

    vx = vy = 0.0

    a = 0.5 - x0 * x0 - y0 * y0
    if a > 0:
        dx, dy = corner(a, i, j, x0, y0)
        vx += dx
        vy += dy

    c = _C_T * t + (_C_A + a)
    if c > 0:
        x2 = x0 + (2 * _G2 - 1)
        y2 = y0 + (2 * _G2 - 1)
        dx, dy = corner(c, i_next, j_next, x2, y2)
        vx += dx
        vy += dy

    if y0 > x0:
        x1 = x0 + _G2
        y1 = y0 + (_G2 - 1)
        ip, jp = i, j_next
    else:
        x1 = x0 + (_G2 - 1)
        y1 = y0 + _G2
        ip, jp = i_next, j
    b = 0.5 - x1 * x1 - y1 * y1
    if b > 0:
        dx, dy = corner(b, ip, jp, x1, y1)
        vx += dx
        vy += dy

    return vx * warp_amp, vy * warp_amp


def open_simplex2_gradient_warp3(seed, warp_amp, frequency, x, y, z, out_grad_only):
    """Displacement from a 3D OpenSimplex2 gradient field; input must already be rotated."""
    x *= frequency
    y *= frequency
    z *= frequency

    i = fast_round(x)
    j = fast_round(y)
    k = fast_round(z)
    x0 = x - i
    y0 = y - j
    z0 = z - k

    x_sign = int(-x0 - 1.0) | 1
    y_sign = int(-y0 - 1.0) | 1
    z_sign = int(-z0 - 1.0) | 1

    ax0 = x_sign * -x0
    ay0 = y_sign * -y0
    az0 = z_sign * -z0

    i = wrap_i32(i * PRIME_X)
    j = wrap_i32(j * PRIME_Y)
    k = wrap_i32(k * PRIME_Z)

    vx = vy = vz = 0.0

    def corner(weight, s, ip, jp, kp, xd, yd, zd):
        if out_grad_only:
            xo, yo, zo = grad_coord_out3(s, ip, jp, kp)
        else:
            xo, yo, zo = grad_coord_dual3(s, ip, jp, kp, xd, yd, zd)
        w = _falloff(weight)
        return w * xo, w * yo, w * zo

    a = (0.6 - x0 * x0) - (y0 * y0 + z0 * z0)
    for lattice in (0, 1):
        if a > 0:
            dx, dy, dz = corner(a, seed, i, j, k, x0, y0, z0)
            vx += dx
            vy += dy
            vz += dz

        b = a + 1
        i1, j1, k1 = i, j, k
        x1, y1, z1 = x0, y0, z0

        if ax0 >= ay0 and ax0 >= az0:
            x1 += x_sign
            b -= x_sign * 2 * x1
            i1 = wrap_i32(i1 - x_sign * PRIME_X)
        elif ay0 > ax0 and ay0 >= az0:
            y1 += y_sign
            b -= y_sign * 2 * y1
            j1 = wrap_i32(j1 - y_sign * PRIME_Y)
        else:
            z1 += z_sign
            b -= z_sign * 2 * z1
            k1 = wrap_i32(k1 - z_sign * PRIME_Z)

        if b > 0:
            dx, dy, dz = corner(b, seed, i1, j1, k1, x1, y1, z1)
            vx += dx
            vy += dy
            vz += dz

        if lattice == 1:
            break

        ax0 = 0.5 - ax0
        ay0 = 0.5 - ay0
        az0 = 0.5 - az0

        x0 = x_sign * ax0
        y0 = y_sign * ay0
        z0 = z_sign * az0

        a += (0.75 - ax0) - (ay0 + az0)

        i = wrap_i32(i + ((x_sign >> 1) & PRIME_X))
        j = wrap_i32(j + ((y_sign >> 1) & PRIME_Y))
        k = wrap_i32(k + ((z_sign >> 1) & PRIME_Z))

        x_sign = -x_sign
        y_sign = -y_sign
        z_sign = -z_sign

        seed = wrap_i32(seed + _SEED_OFFSET)

    return vx * warp_amp, vy * warp_amp, vz * warp_amp