from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, List, Optional

from .agent import Agent, AgentRole
from .config import Algorithm, InteractionMode, SimulationConfig
from .noise import NoiseField
from .rng import DeterministicRng, derive_stream_seed
from .vector import Vector2
from ..systems import flow, interactions, steering
from ..systems import metrics as metrics_system
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot

logger = logging.getLogger(__name__)

_NOISE_RNG_SALT = 0x9E3779B97F4A7C15
_OFF_SURFACE = -1000.0


class SimulationEngine:
    """Owns the population and advances it one synchronous tick at a time.

    Agents are updated in place while the pass iterates, so an agent late in the
    list steers against neighbors that already moved this tick.
    """

    def __init__(self, config: SimulationConfig, on_tick: Optional[Callable[[], None]] = None):
        self._config = config
        self._on_tick = on_tick
        self._rng = DeterministicRng(config.seed)
        self._noise = NoiseField(derive_stream_seed(config.seed, _NOISE_RNG_SALT))
        self._agents: List[Agent] = []
        self._predators: List[Agent] = []
        self._pointer = Vector2(_OFF_SURFACE, _OFF_SURFACE)
        self._noise_time = 0.0
        self._tick = 0
        self._metrics: TickMetrics | None = None
        self.reinitialize()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def agents(self) -> List[Agent]:
        return self._agents

    @property
    def predators(self) -> List[Agent]:
        return self._predators

    @property
    def noise(self) -> NoiseField:
        return self._noise

    @property
    def noise_time(self) -> float:
        return self._noise_time

    @property
    def pointer(self) -> Vector2:
        return self._pointer

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def set_pointer(self, x: float, y: float) -> None:
        self._pointer.update(x, y)

    def clear_pointer(self) -> None:
        self._pointer.update(_OFF_SURFACE, _OFF_SURFACE)

    def create_agent(self, role: AgentRole = AgentRole.AGENT) -> Agent:
        config = self._config
        tuning = config.agent
        rng = self._rng
        position = Vector2(rng.next_float() * config.width, rng.next_float() * config.height)
        velocity = rng.next_unit_circle().mult(rng.next_range(config.initial_speed_min, config.initial_speed_max))
        if role is AgentRole.PREDATOR:
            predators = config.predators
            return Agent(
                position=position,
                velocity=velocity,
                max_speed=tuning.max_speed * predators.speed_factor,
                min_speed=tuning.min_speed,
                max_force=tuning.max_force,
                size=tuning.size * predators.size_factor,
                color=predators.color,
                role=AgentRole.PREDATOR,
            )
        return Agent(
            position=position,
            velocity=velocity,
            max_speed=tuning.max_speed,
            min_speed=tuning.min_speed,
            max_force=tuning.max_force,
            size=tuning.size,
            color=tuning.color,
        )

    def reinitialize(self) -> None:
        config = self._config
        self._agents = [self.create_agent(AgentRole.AGENT) for _ in range(config.agent_count)]
        self._predators = [self.create_agent(AgentRole.PREDATOR) for _ in range(config.predators.count)]
        logger.info(
            "population initialized: agents=%d predators=%d algorithm=%s",
            len(self._agents),
            len(self._predators),
            config.algorithm.value,
        )

    def tick(self) -> TickMetrics:
        start = perf_counter()
        self._step_agents()
        self._step_predators()
        self._noise_time += self._config.noise_speed

        tick_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.compute_tick_metrics(
            self._tick, self._agents, self._predators, self._noise_time, tick_ms
        )
        logger.debug(
            "tick=%d avg_speed=%.4f tick_ms=%.3f", self._tick, self._metrics.average_speed, tick_ms
        )
        self._tick += 1
        if self._on_tick is not None:
            self._on_tick()
        return self._metrics

    def snapshot(self) -> Snapshot:
        config = self._config
        return Snapshot(
            tick=self._tick,
            noise_time=self._noise_time,
            width=config.width,
            height=config.height,
            agents=tuple(metrics_system.agent_view(agent) for agent in self._agents),
            predators=tuple(metrics_system.agent_view(predator) for predator in self._predators),
        )

    def _step_agents(self) -> None:
        config = self._config
        algorithm = config.algorithm
        tuning = config.agent
        interaction = config.interaction
        agents = self._agents
        pointer_targets = [self._pointer]
        predator_positions = [predator.position for predator in self._predators]
        flee_radius = config.predators.flee_radius
        neighbor_filter = steering.NEIGHBOR_FILTERS.get(algorithm)

        for agent in agents:
            if algorithm is Algorithm.FLOW_FIELD:
                flow.apply_flow(agent, self._noise, config.flow_field, self._noise_time)
            else:
                steering.flock(agent, agents, config.reynolds, neighbor_filter)

            if interaction.mode is InteractionMode.ATTRACT:
                interactions.seek(agent, pointer_targets, interaction.radius)
            elif interaction.mode is InteractionMode.REPULSE:
                interactions.flee(agent, pointer_targets, interaction.radius)

            if predator_positions:
                interactions.flee(agent, predator_positions, flee_radius)

            agent.wrap_bounds(config.width, config.height)

            agent.max_speed = tuning.max_speed
            agent.min_speed = tuning.min_speed
            agent.max_force = tuning.max_force
            agent.size = tuning.size
            agent.color = tuning.color
            agent.integrate()

    def _step_predators(self) -> None:
        config = self._config
        predator_config = config.predators
        predators = self._predators
        prey_positions = [agent.position for agent in self._agents]

        for predator in predators:
            interactions.seek(predator, prey_positions, predator_config.hunt_radius)
            spacing = steering.separation(predator, predators, predator_config.separation_radius)
            predator.apply_force(spacing.mult(predator_config.separation_weight))
            predator.wrap_bounds(config.width, config.height)
            predator.integrate()
