from __future__ import annotations

import math
from typing import Sequence

from ..core.agent import Agent
from ..types.metrics import TickMetrics
from ..types.snapshot import AgentView


def agent_view(agent: Agent) -> AgentView:
    velocity = agent.velocity
    return AgentView(
        x=agent.position.x,
        y=agent.position.y,
        vx=velocity.x,
        vy=velocity.y,
        heading=agent.heading(),
        size=agent.size,
        color=agent.color,
        role=agent.role,
    )


def compute_tick_metrics(
    tick: int,
    agents: Sequence[Agent],
    predators: Sequence[Agent],
    noise_time: float,
    tick_duration_ms: float,
) -> TickMetrics:
    if agents:
        speeds = [math.hypot(agent.velocity.x, agent.velocity.y) for agent in agents]
        average_speed = sum(speeds) / len(speeds)
        min_speed = min(speeds)
        max_speed = max(speeds)
    else:
        average_speed = 0.0
        min_speed = 0.0
        max_speed = 0.0
    return TickMetrics(
        tick=tick,
        agents=len(agents),
        predators=len(predators),
        average_speed=average_speed,
        min_speed=min_speed,
        max_speed=max_speed,
        noise_time=noise_time,
        tick_duration_ms=tick_duration_ms,
    )
