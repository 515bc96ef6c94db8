"""Seeded 2D Perlin and simplex noise."""

from __future__ import annotations

import math
from collections import deque

PERLIN_SIZE = 256

_MASK32 = 0xFFFFFFFF


class _LibcRandom:
    """Additive lagged Fibonacci generator matching the common libc ``rand``."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        if seed == 0:
            seed = 1
        if seed >= 1 << 31:
            seed -= 1 << 32
        state = [seed & _MASK32]
        word = seed
        for _ in range(1, 31):
            word = (16807 * word) % 2147483647
            state.append(word)
        state.extend(state[:3])
        self._state = deque(state, maxlen=34)
        for _ in range(310):
            self._step()

    def _step(self) -> int:
        value = (self._state[-31] + self._state[-3]) & _MASK32
        self._state.append(value)
        return value

    def rand(self) -> int:
        return self._step() >> 1


def _shuffled_table(seed: int, size: int) -> list[int]:
    rng = _LibcRandom(seed)
    table = list(range(size))
    for i in range(size):
        j = rng.rand() % size
        table[i], table[j] = table[j], table[i]
    return table + table


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _grad(hash_value: int, x: float, y: float) -> float:
    h = hash_value & 0x3F
    u = x if h < 4 else y
    v = y if h < 4 else x
    return (-u if h & 1 else u) + (-v if h & 2 else v)


class PerlinNoise:
    """Classic 2D Perlin noise over a seeded permutation table."""

    def __init__(self, seed: int = 0) -> None:
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        self.seed = seed
        self._perm = _shuffled_table(seed, PERLIN_SIZE)

    def value(self, x: float, y: float) -> float:
        p = self._perm
        fx, fy = math.floor(x), math.floor(y)
        xi = int(fx) & 255
        yi = int(fy) & 255
        xf = x - fx
        yf = y - fy
        u = _fade(xf)
        v = _fade(yf)

        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]

        x1 = _lerp(_grad(aa, xf, yf), _grad(ba, xf - 1, yf), u)
        x2 = _lerp(_grad(ab, xf, yf - 1), _grad(bb, xf - 1, yf - 1), u)
        return _lerp(x1, x2, v)


_GRAD3 = (
    (1, 1), (-1, 1), (1, -1), (-1, -1),
    (1, 0), (-1, 0), (1, 0), (-1, 0),
    (0, 1), (0, -1), (0, 1), (0, -1),
)

_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
_G2 = (3.0 - math.sqrt(3.0)) / 6.0


def _corner(gradient_index: int, x: float, y: float) -> float:
    t = 0.5 - x * x - y * y
    if t < 0:
        return 0.0
    gx, gy = _GRAD3[gradient_index]
    return t ** 4 * (gx * x + gy * y)


class SimplexNoise:
    """2D simplex noise over a seeded permutation table, roughly in [-1, 1]."""

    def __init__(self, seed: int) -> None:
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        self.seed = seed
        self._perm = _shuffled_table(seed, 256)

    def value(self, x: float, y: float) -> float:
        perm = self._perm
        s = (x + y) * _F2
        i = math.floor(x + s)
        j = math.floor(y + s)

        t = (i + j) * _G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        i1, j1 = (1, 0) if x0 > y0 else (0, 1)

        x1 = x0 - i1 + _G2
        y1 = y0 - j1 + _G2
        x2 = x0 - 1.0 + 2.0 * _G2
        y2 = y0 - 1.0 + 2.0 * _G2

        ii = i & 255
        jj = j & 255
        gi0 = perm[ii + perm[jj]] % 12
        gi1 = perm[ii + i1 + perm[jj + j1]] % 12
        gi2 = perm[ii + 1 + perm[jj + 1]] % 12

        total = _corner(gi0, x0, y0) + _corner(gi1, x1, y1) + _corner(gi2, x2, y2)
        return 70.0 * total