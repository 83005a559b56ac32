from __future__ import annotations

import math
from typing import Iterable, Optional, TYPE_CHECKING

from ..core.vector import Vector2, sub

if TYPE_CHECKING:
    from ..core.agent import Agent

FLEE_SPEED_FACTOR = 1.5
FLEE_FORCE_FACTOR = 2.0


def flee(agent: Agent, threats: Iterable[Vector2], radius: float) -> Optional[Vector2]:
    """
    Steer away from every threat position strictly inside ``radius``.

    Each threat pushes with 1 / distance, a gentler falloff than separation.
    Returns the applied force, or ``None`` when no threat was close enough and
    nothing was applied.
    """

    steering = Vector2()
    total = 0
    position = agent.position
    for threat in threats:
        distance = position.distance(threat)
        if distance < radius:
            steering.add(sub(position, threat).div(distance))
            total += 1
    if total == 0:
        return None
    steering.div(total)
    steering.set_magnitude(agent.max_speed * FLEE_SPEED_FACTOR)
    steering.sub(agent.velocity)
    steering.limit(agent.max_force * FLEE_FORCE_FACTOR)
    agent.apply_force(steering)
    return steering


def seek(agent: Agent, targets: Iterable[Vector2], radius: float) -> Optional[Vector2]:
    """Steer towards the nearest target inside ``radius``; the first one wins ties."""
    closest: Vector2 | None = None
    min_distance = math.inf
    position = agent.position
    for target in targets:
        distance = position.distance(target)
        if distance < radius and distance < min_distance:
            min_distance = distance
            closest = target
    if closest is None:
        return None
    desired = sub(closest, position).set_magnitude(agent.max_speed)
    steer = sub(desired, agent.velocity).limit(agent.max_force)
    agent.apply_force(steer)
    return steer
