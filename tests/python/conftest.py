import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from flocksim.sim.core.agent import Agent  # noqa: E402
from flocksim.sim.core.vector import Vector2  # noqa: E402


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-config-tests",
        action="store_true",
        default=False,
        help="run tests that are intended only for configuration changes",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "config_change: marks tests that should only run when configuration files change",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-config-tests"):
        return

    skip_marker = pytest.mark.skip(
        reason="Run only when configuration is modified (use --run-config-tests)",
    )

    for item in items:
        if "config_change" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture
def make_agent():
    def _make(x=0.0, y=0.0, vx=0.0, vy=0.0, max_speed=4.0, min_speed=1.0, max_force=0.1):
        return Agent(
            position=Vector2(x, y),
            velocity=Vector2(vx, vy),
            max_speed=max_speed,
            min_speed=min_speed,
            max_force=max_force,
            size=5.0,
            color="blue",
        )

    return _make
