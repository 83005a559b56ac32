from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame
from pygame.math import Vector2 as ScreenVector

from ..sim.core.config import Algorithm, AppConfig, RenderConfig, Shape
from ..sim.core.engine import SimulationEngine
from ..sim.core.noise import NoiseField
from ..sim.systems.flow import sample_angle
from ..sim.types.snapshot import AgentView

logger = logging.getLogger(__name__)

_ALGORITHM_KEYS = {
    pygame.K_1: Algorithm.REYNOLDS,
    pygame.K_2: Algorithm.NEIGHBOR_OPTIMIZED,
    pygame.K_3: Algorithm.FLOW_FIELD,
}


class PygameRenderer:
    """Draws engine snapshots onto a pygame surface. Holds no simulation state."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def clear(self, color: str) -> None:
        self._surface.fill(pygame.Color(color))

    def draw_noise_background(
        self, width: int, height: int, noise: NoiseField, scale: float, z: float, resolution: int = 20
    ) -> None:
        for x in range(0, width, resolution):
            for y in range(0, height, resolution):
                level = (noise.evaluate(x * scale, y * scale, z) + 1.0) * 0.5
                value = int(level * 255)
                self._surface.fill((value, value, value), pygame.Rect(x, y, resolution, resolution))

    def draw_flow_field(
        self,
        width: int,
        height: int,
        noise: NoiseField,
        scale: float,
        z: float,
        color: str,
        resolution: int = 20,
    ) -> None:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        line_color = pygame.Color(color)
        for x in range(0, width, resolution):
            for y in range(0, height, resolution):
                angle = sample_angle(noise, x, y, scale, z)
                tip = ScreenVector(resolution * 0.5, 0).rotate_rad(angle)
                pygame.draw.line(overlay, line_color, (x, y), (x + tip.x, y + tip.y), 1)
        self._surface.blit(overlay, (0, 0))

    def draw_agent(self, view: AgentView, shape: Shape = Shape.TRIANGLE) -> None:
        color = pygame.Color(view.color)
        center = ScreenVector(view.x, view.y)
        size = view.size
        if shape is Shape.CIRCLE:
            pygame.draw.circle(self._surface, color, center, size)
            return
        if shape is Shape.LINE:
            tail = ScreenVector(-size, 0).rotate_rad(view.heading) + center
            head = ScreenVector(size, 0).rotate_rad(view.heading) + center
            pygame.draw.line(self._surface, color, tail, head, 2)
            return
        points = [
            ScreenVector(size, 0),
            ScreenVector(-size, size / 2),
            ScreenVector(-size, -size / 2),
        ]
        pygame.draw.polygon(self._surface, color, [point.rotate_rad(view.heading) + center for point in points])

    def render(self, engine: SimulationEngine, render_config: RenderConfig) -> None:
        snapshot = engine.snapshot()
        width = int(snapshot.width)
        height = int(snapshot.height)
        scale = engine.config.flow_field.scale
        self.clear(render_config.background_color)
        if render_config.show_noise_background:
            self.draw_noise_background(
                width, height, engine.noise, scale, snapshot.noise_time, render_config.grid_resolution
            )
        if render_config.show_flow_field:
            self.draw_flow_field(
                width,
                height,
                engine.noise,
                scale,
                snapshot.noise_time,
                render_config.flow_field_color,
                render_config.grid_resolution,
            )
        for view in snapshot.agents:
            self.draw_agent(view, render_config.shape)
        for view in snapshot.predators:
            self.draw_agent(view, render_config.shape)


def run_viewer(app_config: AppConfig, max_frames: Optional[int] = None) -> None:
    config = app_config.simulation
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(config.width), int(config.height)))
        pygame.display.set_caption("flocksim")
        clock = pygame.time.Clock()
        engine = SimulationEngine(config)
        renderer = PygameRenderer(screen)
        paused = False
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEMOTION:
                    engine.set_pointer(*event.pos)
                elif event.type == pygame.WINDOWLEAVE:
                    engine.clear_pointer()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        paused = not paused
                    elif event.key == pygame.K_r:
                        engine.reinitialize()
                    elif event.key in _ALGORITHM_KEYS:
                        config.algorithm = _ALGORITHM_KEYS[event.key]
                        logger.info("algorithm switched to %s", config.algorithm.value)
            if not paused:
                engine.tick()
            renderer.render(engine, app_config.render)
            pygame.display.flip()
            clock.tick(app_config.fps)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
    finally:
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive flocking viewer")
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--log-level", default="INFO", help="Python logging level")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app_config = AppConfig.from_yaml(args.config) if args.config else AppConfig()
    run_viewer(app_config)


if __name__ == "__main__":
    main()
