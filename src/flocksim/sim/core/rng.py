from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

from .vector import Vector2, random_unit

T = TypeVar("T")


def derive_stream_seed(seed: int, salt: int) -> int:
    return (int(seed) ^ int(salt)) & 0xFFFFFFFFFFFFFFFF


class DeterministicRng:
    def __init__(self, seed: int):
        self._random = random.Random(seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_unit_circle(self) -> Vector2:
        return random_unit(self._random)

    def shuffle(self, items: MutableSequence[T]) -> None:
        self._random.shuffle(items)
