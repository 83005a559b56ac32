from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, TYPE_CHECKING

from ..core.config import Algorithm
from ..core.vector import Vector2, sub

if TYPE_CHECKING:
    from ..core.agent import Agent
    from ..core.config import ReynoldsParams

NEAREST_NEIGHBOR_LIMIT = 7

NeighborFilter = Callable[["Agent", Sequence["Agent"], float], List["Agent"]]


def _steer_towards(agent: Agent, desired: Vector2) -> Vector2:
    desired.set_magnitude(agent.max_speed)
    desired.sub(agent.velocity)
    return desired.limit(agent.max_force)


def align(agent: Agent, neighbors: Sequence[Agent], radius: float) -> Vector2:
    steering = Vector2()
    total = 0
    position = agent.position
    for other in neighbors:
        if other is agent or position.distance(other.position) >= radius:
            continue
        steering.add(other.velocity)
        total += 1
    if total == 0:
        return steering
    return _steer_towards(agent, steering.div(total))


def cohesion(agent: Agent, neighbors: Sequence[Agent], radius: float) -> Vector2:
    steering = Vector2()
    total = 0
    position = agent.position
    for other in neighbors:
        if other is agent or position.distance(other.position) >= radius:
            continue
        steering.add(other.position)
        total += 1
    if total == 0:
        return steering
    return _steer_towards(agent, steering.div(total).sub(position))


def separation(agent: Agent, neighbors: Sequence[Agent], radius: float) -> Vector2:
    """Average of offsets away from each neighbor, weighted by 1 / distance²."""
    steering = Vector2()
    total = 0
    position = agent.position
    for other in neighbors:
        if other is agent:
            continue
        dist_sq = position.distance_squared(other.position)
        if dist_sq >= radius * radius:
            continue
        # Coincident agents contribute a zero offset; div() ignores a zero divisor.
        steering.add(sub(position, other.position).div(dist_sq))
        total += 1
    if total == 0:
        return steering
    return _steer_towards(agent, steering.div(total))


def apply_rules(agent: Agent, neighbors: Sequence[Agent], params: ReynoldsParams) -> None:
    radius = params.perception_radius
    alignment_force = align(agent, neighbors, radius).mult(params.alignment_weight)
    cohesion_force = cohesion(agent, neighbors, radius).mult(params.cohesion_weight)
    separation_force = separation(agent, neighbors, radius).mult(params.separation_weight)
    # Weighted forces are not re-limited; their sum may exceed max_force.
    agent.apply_force(alignment_force)
    agent.apply_force(cohesion_force)
    agent.apply_force(separation_force)


def nearest_neighbors(
    agent: Agent,
    neighbors: Sequence[Agent],
    radius: float,
    limit: int = NEAREST_NEIGHBOR_LIMIT,
) -> List[Agent]:
    """
    Up to ``limit`` neighbors strictly inside ``radius``, nearest first.

    The radius filter runs before truncation, so a far agent is never picked to
    fill the quota. Equal distances keep their input order.
    """

    position = agent.position
    radius_sq = radius * radius
    candidates = []
    for other in neighbors:
        if other is agent:
            continue
        dist_sq = position.distance_squared(other.position)
        if dist_sq < radius_sq:
            candidates.append((dist_sq, other))
    candidates.sort(key=lambda entry: entry[0])
    return [other for _, other in candidates[:limit]]


NEIGHBOR_FILTERS: Dict[Algorithm, Optional[NeighborFilter]] = {
    Algorithm.REYNOLDS: None,
    Algorithm.NEIGHBOR_OPTIMIZED: nearest_neighbors,
}


def flock(
    agent: Agent,
    neighbors: Sequence[Agent],
    params: ReynoldsParams,
    neighbor_filter: NeighborFilter | None = None,
) -> None:
    if neighbor_filter is not None:
        neighbors = neighbor_filter(agent, neighbors, params.perception_radius)
    apply_rules(agent, neighbors, params)
