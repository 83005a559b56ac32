from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.agent import AgentRole


@dataclass(frozen=True, slots=True)
class AgentView:
    x: float
    y: float
    vx: float
    vy: float
    heading: float
    size: float
    color: str
    role: AgentRole


@dataclass(frozen=True, slots=True)
class Snapshot:
    tick: int
    noise_time: float
    width: float
    height: float
    agents: Tuple[AgentView, ...]
    predators: Tuple[AgentView, ...]
