from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..core.vector import Vector2

if TYPE_CHECKING:
    from ..core.agent import Agent
    from ..core.config import FlowFieldParams
    from ..core.noise import NoiseField

# Noise in [-1, 1] spans two full turns.
_TURNS_PER_UNIT = 2.0


def flow_angle(noise_value: float) -> float:
    return noise_value * math.pi * 2.0 * _TURNS_PER_UNIT


def sample_angle(noise: NoiseField, x: float, y: float, scale: float, z: float) -> float:
    return flow_angle(noise.evaluate(x * scale, y * scale, z))


def flow_force(agent: Agent, noise: NoiseField, params: FlowFieldParams, z: float) -> Vector2:
    angle = sample_angle(noise, agent.position.x, agent.position.y, params.scale, z)
    return Vector2.from_angle(angle).set_magnitude(params.strength)


def apply_flow(agent: Agent, noise: NoiseField, params: FlowFieldParams, z: float) -> Vector2:
    """Push ``agent`` along the flow line under it. Not limited by ``max_force``."""
    force = flow_force(agent, noise, params, z)
    agent.apply_force(force)
    return force
