import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
import pytest  # noqa: E402

from flocksim.app.viewer import PygameRenderer  # noqa: E402
from flocksim.sim.core.agent import AgentRole  # noqa: E402
from flocksim.sim.core.config import PredatorConfig, RenderConfig, Shape, SimulationConfig  # noqa: E402
from flocksim.sim.core.engine import SimulationEngine  # noqa: E402
from flocksim.sim.core.noise import NoiseField  # noqa: E402
from flocksim.sim.types.snapshot import AgentView  # noqa: E402

BLACK = pygame.Color(0, 0, 0)


def _view(x=50.0, y=50.0, heading=0.0):
    return AgentView(x=x, y=y, vx=1.0, vy=0.0, heading=heading, size=8.0, color="#ff0000", role=AgentRole.AGENT)


@pytest.mark.parametrize("shape", list(Shape))
def test_draw_agent_paints_at_position(shape):
    surface = pygame.Surface((100, 100))
    renderer = PygameRenderer(surface)
    renderer.clear("#000000")

    renderer.draw_agent(_view(), shape)

    painted = [surface.get_at((50, row))[:3] for row in range(48, 53)]
    assert (255, 0, 0) in painted
    assert surface.get_at((5, 5)) == BLACK


def test_noise_background_maps_noise_to_gray():
    surface = pygame.Surface((40, 40))
    renderer = PygameRenderer(surface)
    renderer.draw_noise_background(40, 40, NoiseField(seed=2), 0.05, 0.3, resolution=20)
    r, g, b, _ = surface.get_at((25, 25))
    assert r == g == b


def test_render_draws_every_agent_and_predator(monkeypatch):
    engine = SimulationEngine(SimulationConfig(width=120, height=90, agent_count=4, predators=PredatorConfig(count=2)))
    renderer = PygameRenderer(pygame.Surface((120, 90)))
    drawn = []
    monkeypatch.setattr(renderer, "draw_agent", lambda view, shape: drawn.append((view.role, shape)))

    renderer.render(
        engine,
        RenderConfig(shape=Shape.LINE, show_flow_field=True, show_noise_background=True, grid_resolution=30),
    )

    assert [role for role, _ in drawn] == [AgentRole.AGENT] * 4 + [AgentRole.PREDATOR] * 2
    assert all(shape is Shape.LINE for _, shape in drawn)
