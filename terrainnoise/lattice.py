"""Lattice noise kernels: gradient (Perlin), cubic value and linear value noise."""

from __future__ import annotations

from terrainnoise.gradients import (
    PRIME_X,
    PRIME_Y,
    PRIME_Z,
    cubic_lerp,
    fast_floor,
    grad_coord2,
    grad_coord3,
    interp_hermite,
    interp_quintic,
    lerp,
    val_coord2,
    val_coord3,
    wrap_i32,
)

_PERLIN2_SCALE = 1.4247691104677813
_PERLIN3_SCALE = 0.964921414852142333984375
_CUBIC2_SCALE = 1 / (1.5 * 1.5)
_CUBIC3_SCALE = 1 / (1.5 * 1.5 * 1.5)


def _cell(coord, prime):
    """Split a coordinate into its primed lattice cell and the fractional offset."""
    base = fast_floor(coord)
    return wrap_i32(base * prime), coord - base


def _cubic_rows(primed, prime):
    """Primed lattice coordinates of the four cells around ``primed`` (one before, two after)."""
    return (
        wrap_i32(primed - prime),
        primed,
        wrap_i32(primed + prime),
        wrap_i32(primed + wrap_i32(prime << 1)),
    )


def perlin2(seed, x, y):
    """2D gradient noise at (x, y)."""
    x0, xd0 = _cell(x, PRIME_X)
    y0, yd0 = _cell(y, PRIME_Y)
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)
    x1 = wrap_i32(x0 + PRIME_X)
    y1 = wrap_i32(y0 + PRIME_Y)

    xf0 = lerp(grad_coord2(seed, x0, y0, xd0, yd0), grad_coord2(seed, x1, y0, xd1, yd0), xs)
    xf1 = lerp(grad_coord2(seed, x0, y1, xd0, yd1), grad_coord2(seed, x1, y1, xd1, yd1), xs)
    return lerp(xf0, xf1, ys) * _PERLIN2_SCALE


def perlin3(seed, x, y, z):
    """3D gradient noise at (x, y, z)."""
    x0, xd0 = _cell(x, PRIME_X)
    y0, yd0 = _cell(y, PRIME_Y)
    z0, zd0 = _cell(z, PRIME_Z)
    xd1 = xd0 - 1
    yd1 = yd0 - 1
    zd1 = zd0 - 1
    xs = interp_quintic(xd0)
    ys = interp_quintic(yd0)
    zs = interp_quintic(zd0)
    x1 = wrap_i32(x0 + PRIME_X)
    y1 = wrap_i32(y0 + PRIME_Y)
    z1 = wrap_i32(z0 + PRIME_Z)

    def along_x(yp, zp, yd, zd):
        return lerp(grad_coord3(seed, x0, yp, zp, xd0, yd, zd), grad_coord3(seed, x1, yp, zp, xd1, yd, zd), xs)

    yf0 = lerp(along_x(y0, z0, yd0, zd0), along_x(y1, z0, yd1, zd0), ys)
    yf1 = lerp(along_x(y0, z1, yd0, zd1), along_x(y1, z1, yd1, zd1), ys)
    return lerp(yf0, yf1, zs) * _PERLIN3_SCALE


def value_cubic2(seed, x, y):
    """2D value noise with cubic interpolation over a 4x4 neighbourhood."""
    x1, xs = _cell(x, PRIME_X)
    y1, ys = _cell(y, PRIME_Y)
    columns = _cubic_rows(x1, PRIME_X)
    rows = _cubic_rows(y1, PRIME_Y)

    along_x = [cubic_lerp(*(val_coord2(seed, xp, yp) for xp in columns), xs) for yp in rows]
    return cubic_lerp(*along_x, ys) * _CUBIC2_SCALE


def value_cubic3(seed, x, y, z):
    """3D value noise with cubic interpolation over a 4x4x4 neighbourhood."""
    x1, xs = _cell(x, PRIME_X)
    y1, ys = _cell(y, PRIME_Y)
    z1, zs = _cell(z, PRIME_Z)
    columns = _cubic_rows(x1, PRIME_X)
    rows = _cubic_rows(y1, PRIME_Y)
    layers = _cubic_rows(z1, PRIME_Z)

    def layer(zp):
        along_x = [cubic_lerp(*(val_coord3(seed, xp, yp, zp) for xp in columns), xs) for yp in rows]
        return cubic_lerp(*along_x, ys)

    return cubic_lerp(*(layer(zp) for zp in layers), zs) * _CUBIC3_SCALE


def value2(seed, x, y):
    """2D value noise with Hermite interpolation."""
    x0, xd = _cell(x, PRIME_X)
    y0, yd = _cell(y, PRIME_Y)
    xs = interp_hermite(xd)
    ys = interp_hermite(yd)
    x1 = wrap_i32(x0 + PRIME_X)
    y1 = wrap_i32(y0 + PRIME_Y)

    xf0 = lerp(val_coord2(seed, x0, y0), val_coord2(seed, x1, y0), xs)
    xf1 = lerp(val_coord2(seed, x0, y1), val_coord2(seed, x1, y1), xs)
    return lerp(xf0, xf1, ys)


def value3(seed, x, y, z):
    """3D value noise with Hermite interpolation."""
    x0, xd = _cell(x, PRIME_X)
    y0, yd = _cell(y, PRIME_Y)
    z0, zd = _cell(z, PRIME_Z)
    xs = interp_hermite(xd)
    ys = interp_hermite(yd)
    zs = interp_hermite(zd)
    x1 = wrap_i32(x0 + PRIME_X)
    y1 = wrap_i32(y0 + PRIME_Y)
    z1 = wrap_i32(z0 + PRIME_Z)

    def along_x(yp, zp):
        return lerp(val_coord3(seed, x0, yp, zp), val_coord3(seed, x1, yp, zp), xs)

    yf0 = lerp(along_x(y0, z0), along_x(y1, z0), ys)
    yf1 = lerp(along_x(y0, z1), along_x(y1, z1), ys)
    return lerp(yf0, yf1, zs)