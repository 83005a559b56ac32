from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml


class Algorithm(str, Enum):
    REYNOLDS = "reynolds"
    NEIGHBOR_OPTIMIZED = "neighbor-optimized"
    FLOW_FIELD = "flow-field"


class InteractionMode(str, Enum):
    NONE = "none"
    ATTRACT = "attract"
    REPULSE = "repulse"


class Shape(str, Enum):
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    LINE = "line"


@dataclass
class ReynoldsParams:
    perception_radius: float = 50.0
    separation_weight: float = 1.0
    alignment_weight: float = 1.0
    cohesion_weight: float = 1.0


@dataclass
class FlowFieldParams:
    scale: float = 0.003
    strength: float = 0.25


@dataclass
class AgentTuning:
    # Re-applied to every ordinary agent on every tick.
    max_speed: float = 4.0
    min_speed: float = 2.0
    max_force: float = 0.1
    size: float = 5.0
    color: str = "#22d3ee"


@dataclass
class InteractionConfig:
    mode: InteractionMode = InteractionMode.NONE
    radius: float = 150.0


@dataclass
class PredatorConfig:
    count: int = 0
    color: str = "#ef4444"
    speed_factor: float = 0.8
    size_factor: float = 1.5
    flee_radius: float = 100.0
    hunt_radius: float = math.inf
    separation_radius: float = 50.0
    separation_weight: float = 2.0


@dataclass
class SimulationConfig:
    width: float = 800.0
    height: float = 600.0
    agent_count: int = 100
    seed: int = 42
    algorithm: Algorithm = Algorithm.REYNOLDS
    noise_speed: float = 0.003
    initial_speed_min: float = 2.0
    initial_speed_max: float = 4.0
    config_version: str = "v1"
    reynolds: ReynoldsParams = field(default_factory=ReynoldsParams)
    flow_field: FlowFieldParams = field(default_factory=FlowFieldParams)
    agent: AgentTuning = field(default_factory=AgentTuning)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    predators: PredatorConfig = field(default_factory=PredatorConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data.get("simulation", data))


@dataclass
class RenderConfig:
    shape: Shape = Shape.TRIANGLE
    show_flow_field: bool = False
    show_noise_background: bool = False
    flow_field_color: str = "#ffffff1a"
    background_color: str = "#0f172a"
    grid_resolution: int = 20


@dataclass
class AppConfig:
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    fps: int = 60

    @staticmethod
    def from_yaml(path: Path) -> "AppConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_app_config(data)


_SECTIONS = {"reynolds", "flow_field", "agent", "interaction", "predators"}


def load_config(raw: dict) -> SimulationConfig:
    interaction_raw = dict(raw.get("interaction", {}))
    if "mode" in interaction_raw:
        interaction_raw["mode"] = InteractionMode(interaction_raw["mode"])
    predators_raw = dict(raw.get("predators", {}))
    if predators_raw.get("hunt_radius") is None:
        predators_raw.pop("hunt_radius", None)

    sim_values = {k: v for k, v in raw.items() if k not in _SECTIONS}
    if "algorithm" in sim_values:
        sim_values["algorithm"] = Algorithm(sim_values["algorithm"])
    return SimulationConfig(
        reynolds=ReynoldsParams(**raw.get("reynolds", {})),
        flow_field=FlowFieldParams(**raw.get("flow_field", {})),
        agent=AgentTuning(**raw.get("agent", {})),
        interaction=InteractionConfig(**interaction_raw),
        predators=PredatorConfig(**predators_raw),
        **sim_values,
    )


def load_app_config(raw: dict) -> AppConfig:
    render_raw = dict(raw.get("render", {}))
    if "shape" in render_raw:
        render_raw["shape"] = Shape(render_raw["shape"])
    app_values = {k: v for k, v in raw.items() if k not in {"simulation", "render"}}
    return AppConfig(
        simulation=load_config(raw.get("simulation", {})),
        render=RenderConfig(**render_raw),
        **app_values,
    )
