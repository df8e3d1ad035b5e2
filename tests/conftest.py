from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from rps_sims.core import Entity, EntityType, GameConfig, SimConfig, Simulation
from rps_sims.utils.random import seed_all


@pytest.fixture(autouse=True)
def _seeded():
    seed_all(1234)
    yield
    seed_all(None)


def make_entity(x, y, type=EntityType.ROCK, vx=0.0, vy=0.0, radius=10.0, id=None) -> Entity:
    return Entity(
        id=id,
        pos=np.array([x, y], dtype=float),
        vel=np.array([vx, vy], dtype=float),
        type=EntityType(type),
        radius=radius,
    )


class Recorder:
    """Collects everything a Simulation reports through its callbacks."""

    def __init__(self):
        self.stats = []
        self.game_overs = []
        self.frames = []

    def callbacks(self) -> dict:
        return {
            "on_stats_update": self.stats.append,
            "on_game_over": self.game_overs.append,
            "on_frame": self.frames.append,
        }


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def duel(recorder):
    """One rock and one scissors, overlapping and heading into each other."""
    config = SimConfig(game=GameConfig(count_rock=1, count_paper=0, count_scissors=1))
    sim = Simulation(config, **recorder.callbacks())
    sim.init()
    rock, scissors = sim.entities
    rock.pos[:] = (100.0, 100.0)
    rock.vel[:] = (60.0, 0.0)
    scissors.pos[:] = (120.0, 100.0)
    scissors.vel[:] = (-60.0, 0.0)
    return sim
