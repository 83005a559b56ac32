from __future__ import annotations

import math

import pytest

from flocksim.sim.core.config import FlowFieldParams
from flocksim.sim.core.noise import NoiseField
from flocksim.sim.systems import flow


class FixedNoise:
    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = []

    def evaluate(self, x, y=0.0, z=0.0):
        self.calls.append((x, y, z))
        return self.value


def test_flow_queries_scaled_position_and_applies_force(make_agent):
    agent = make_agent(10, 20, 0, 0, max_force=0.01)
    noise = FixedNoise(0.125)

    force = flow.apply_flow(agent, noise, FlowFieldParams(scale=0.1, strength=0.05), 0)

    assert noise.calls == [(pytest.approx(1.0), pytest.approx(2.0), 0)]
    assert force.x == pytest.approx(0.0, abs=1e-12)
    assert force.y == pytest.approx(0.05)
    assert agent.acceleration.y == pytest.approx(0.05)


def test_flow_force_bypasses_max_force(make_agent):
    agent = make_agent(5, 5, max_force=0.1)
    force = flow.flow_force(agent, FixedNoise(0.3), FlowFieldParams(scale=1.0, strength=2.0), 0.0)
    assert force.magnitude() == pytest.approx(2.0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, 0.0), (0.25, math.pi), (-0.5, -2 * math.pi), (1.0, 4 * math.pi)],
)
def test_flow_angle_spans_two_turns(value, expected):
    assert flow.flow_angle(value) == pytest.approx(expected)


def test_flow_uses_clock_as_third_coordinate(make_agent):
    agent = make_agent(100, 50)
    noise = NoiseField(seed=4)
    params = FlowFieldParams(scale=0.003, strength=0.25)
    early = flow.flow_force(agent, noise, params, 0.0)
    late = flow.flow_force(agent, noise, params, 0.7)
    again = flow.flow_force(agent, noise, params, 0.7)
    assert late == again
    assert early != late
