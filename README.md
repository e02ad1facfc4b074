# terrainnoise

Deterministic coherent noise for procedural terrain and textures, in pure Python,
with no runtime dependencies.

## What is in the package

| Module | What it gives you |
| --- | --- |
| `terrainnoise.perlin` | `PerlinNoise`: classic permutation-table Perlin noise in 1, 2 and 3 dimensions |
| `terrainnoise.layered` | `OctavePerlinNoise`: `PerlinNoise` with octave sums, clamped, remapped and normalized |
| `terrainnoise.octaves` | octave functions that work on any object with `noise1d`, `noise2d` and `noise3d` |
| `terrainnoise.perlin_math` | `fade`, `lerp`, `grad`, `remap_01`, `clamp_11`, `remap_clamp_01`, `max_amplitude` |
| `terrainnoise.permutation` | `MT19937` (32-bit Mersenne Twister), `random_below`, `shuffle`, `default_permutation` |
| `terrainnoise.lattice` | seeded hash-based kernels: `perlin2`, `perlin3`, `value_cubic2`, `value_cubic3`, `value2`, `value3` |
| `terrainnoise.warp` | domain warp kernels: `basic_grid_warp2`, `basic_grid_warp3`, `simplex_gradient_warp2`, `open_simplex2_gradient_warp3`, and the `DomainWarpType` enum |
| `terrainnoise.gradients` | lattice hashing (`hash2`, `hash3`), value and gradient lookups, gradient and random-vector tables, interpolation helpers, `wrap_i32` |
| `terrainnoise.timing` | `now()`, `elapsed_time()` and a pausable `Timer` |

## Perlin noise

```python
from terrainnoise.perlin import PerlinNoise

perlin = PerlinNoise(12345)            # seeds a Mersenne Twister and shuffles 0..255
value = perlin.noise2d(0.5, 1.25)      # in -1..1
unit = perlin.noise3d_01(0.5, 1.25, 2.0)  # remapped to 0..1

classic = PerlinNoise()                # no seed: the reference permutation table
```

`seed` may be an integer or any callable that returns unsigned random integers.
`reseed(seed)` rebuilds the table. `noise1d(x)` and `noise2d(x, y)` sample 3D
noise with the missing coordinates fixed at 0.12345 and 0.34567.

The permutation table can be saved and restored:

```python
state = perlin.serialize()     # tuple of 256 ints
other = PerlinNoise(0)
other.deserialize(state)       # ValueError unless 256 entries, each 0..255
```

## Octave noise

```python
from terrainnoise.layered import OctavePerlinNoise

layered = OctavePerlinNoise(12345)
raw = layered.octave2d(0.1, 0.2, 4, 0.5)              # may leave -1..1
clamped = layered.octave2d_11(0.1, 0.2, 4)            # clamped to -1..1
unit = layered.octave2d_01(0.1, 0.2, 4)               # clamped, remapped to 0..1
norm = layered.normalized_octave2d(0.1, 0.2, 4, 0.5)  # divided by total amplitude
norm01 = layered.normalized_octave2d_01(0.1, 0.2, 4)
```

Each octave doubles the frequency and multiplies the amplitude by `persistence`
(default 0.5). The 1D and 3D forms take `x` or `x, y, z` in the same way.
The same sums are available as free functions in `terrainnoise.octaves`, taking
the noise object first; the normalized ones raise `ValueError` when the total
amplitude is zero (for example with no octaves).

## Lattice kernels

The kernels in `terrainnoise.lattice` take a 32-bit integer seed and coordinates
in lattice units; apply any frequency or fractal layering yourself.

```python
from terrainnoise.lattice import perlin2, value_cubic3, value2

h = perlin2(1337, 3.7, 8.2)            # gradient noise, 0 at integer points
v = value2(1337, 3.7, 8.2)             # value noise with Hermite smoothing
c = value_cubic3(1337, 3.7, 8.2, 1.5)  # value noise with cubic smoothing
```

## Domain warp kernels

The functions in `terrainnoise.warp` return a displacement tuple to add to the
sample position; they scale the input by `frequency` and the result by
`warp_amp`.

```python
from terrainnoise.warp import basic_grid_warp2

dx, dy = basic_grid_warp2(1337, 30.0, 0.01, x, y)
warped = (x + dx, y + dy)
```

`simplex_gradient_warp2` expects coordinates already skewed onto the simplex
grid, and `open_simplex2_gradient_warp3` expects coordinates already rotated.
With `out_grad_only=True` each corner contributes its random vector directly;
otherwise the vector is scaled by the corner's gradient dot product.

## Timing

```python
from terrainnoise.timing import Timer, elapsed_time, now

timer = Timer()           # starts at once; Timer(False) starts paused
# ... work ...
seconds = timer.stop()    # total elapsed seconds, as a float
timer.start()             # resume
timer.reset()             # clear the elapsed time and start again
timer.running             # True while running
```

Calling `start()` on a running timer raises `RuntimeError`. `now()` reads the
high-resolution clock in seconds; `elapsed_time()` gives the seconds since it was
first called.

## What this package does not do

- There is no single configurable generator object: no shared frequency, seed,
  fractal type or 3D rotation settings sitting in front of the kernels.
- There is no simplex or OpenSimplex2 noise sampling and no cellular (Worley)
  noise; only the simplex-based warp kernels are provided.
- It does not render images or build terrain maps, and it has no command-line
  tool or viewer.

## Running the tests

```
pip install "terrainnoise[test]"
pytest
```