from __future__ import annotations

import math
from typing import Tuple

from ..utils.math2d import _clamp_value, _lerp
from .rng import DeterministicRng

_TABLE_SIZE = 256


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _grad(hash_value: int, x: float, y: float, z: float) -> float:
    # 12 cube-edge gradients folded into 16 cases.
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


class NoiseField:
    """Gradient noise over (x, y, z) with values in [-1, 1].

    The permutation table is shuffled once from ``seed`` and never changes, so
    ``evaluate`` is a pure function of its arguments for a given instance.
    """

    def __init__(self, seed: int = 0) -> None:
        table = list(range(_TABLE_SIZE))
        DeterministicRng(seed).shuffle(table)
        self._perm: Tuple[int, ...] = tuple(table + table)

    def evaluate(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        perm = self._perm
        fx = math.floor(x)
        fy = math.floor(y)
        fz = math.floor(z)
        xi = int(fx) & 255
        yi = int(fy) & 255
        zi = int(fz) & 255
        x -= fx
        y -= fy
        z -= fz
        u = _fade(x)
        v = _fade(y)
        w = _fade(z)

        a = perm[xi] + yi
        aa = perm[a] + zi
        ab = perm[a + 1] + zi
        b = perm[xi + 1] + yi
        ba = perm[b] + zi
        bb = perm[b + 1] + zi

        value = _lerp(
            _lerp(
                _lerp(_grad(perm[aa], x, y, z), _grad(perm[ba], x - 1, y, z), u),
                _lerp(_grad(perm[ab], x, y - 1, z), _grad(perm[bb], x - 1, y - 1, z), u),
                v,
            ),
            _lerp(
                _lerp(_grad(perm[aa + 1], x, y, z - 1), _grad(perm[ba + 1], x - 1, y, z - 1), u),
                _lerp(_grad(perm[ab + 1], x, y - 1, z - 1), _grad(perm[bb + 1], x - 1, y - 1, z - 1), u),
                v,
            ),
            w,
        )
        return _clamp_value(value, -1.0, 1.0)
