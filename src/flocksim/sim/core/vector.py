from __future__ import annotations

import math
import random
from dataclasses import dataclass

from ..utils.math2d import TAU, _heading_from_xy


@dataclass(slots=True)
class Vector2:
    """Mutable 2D vector.

    Methods that change the vector do so in place and return ``self`` so calls
    can be chained. The module-level ``add``/``sub``/``scale`` helpers build new
    vectors instead. Dividing or normalizing by zero leaves the vector as it was.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle: float) -> "Vector2":
        return cls(math.cos(angle), math.sin(angle))

    def update(self, x: float, y: float) -> "Vector2":
        self.x = x
        self.y = y
        return self

    def add(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def sub(self, other: "Vector2") -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    def mult(self, scalar: float) -> "Vector2":
        self.x *= scalar
        self.y *= scalar
        return self

    def div(self, scalar: float) -> "Vector2":
        if scalar != 0:
            self.x /= scalar
            self.y /= scalar
        return self

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalize(self) -> "Vector2":
        mag = self.magnitude()
        if mag != 0:
            self.div(mag)
        return self

    def set_magnitude(self, magnitude: float) -> "Vector2":
        return self.normalize().mult(magnitude)

    def limit(self, max_magnitude: float) -> "Vector2":
        if self.magnitude_squared() > max_magnitude * max_magnitude:
            self.set_magnitude(max_magnitude)
        return self

    def distance_squared(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: "Vector2") -> float:
        return math.sqrt(self.distance_squared(other))

    def heading(self) -> float:
        return _heading_from_xy(self.x, self.y)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def scale(vector: Vector2, scalar: float) -> Vector2:
    return Vector2(vector.x * scalar, vector.y * scalar)


def random_unit(rng: random.Random | None = None) -> Vector2:
    source = random if rng is None else rng
    return Vector2.from_angle(source.random() * TAU)
