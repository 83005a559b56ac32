from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .vector import Vector2


class AgentRole(str, Enum):
    AGENT = "agent"
    PREDATOR = "predator"


@dataclass(slots=True)
class Agent:
    position: Vector2
    velocity: Vector2
    max_speed: float
    min_speed: float
    max_force: float
    size: float
    color: str
    role: AgentRole = AgentRole.AGENT
    acceleration: Vector2 = field(default_factory=Vector2)

    def apply_force(self, force: Vector2) -> None:
        self.acceleration.add(force)

    def integrate(self) -> None:
        velocity = self.velocity
        velocity.add(self.acceleration)
        velocity.limit(self.max_speed)
        # Floor is applied after the ceiling, so min_speed > max_speed ends at min_speed.
        if self.min_speed > 0 and velocity.magnitude() < self.min_speed:
            velocity.set_magnitude(self.min_speed)
        self.position.add(velocity)
        self.acceleration.update(0.0, 0.0)

    def wrap_bounds(self, width: float, height: float) -> None:
        """Teleport to the opposite edge once outside; the overshoot is dropped."""
        position = self.position
        if position.x > width:
            position.x = 0.0
        elif position.x < 0:
            position.x = width
        if position.y > height:
            position.y = 0.0
        elif position.y < 0:
            position.y = height

    def heading(self) -> float:
        return self.velocity.heading()
