from __future__ import annotations
from typing import Callable

from rps_sims.core import Arena, FrameScheduler, FrameSnapshot, GameStats, EntityType, SimConfig, Simulation
from rps_sims.utils.random import seed_all


def make_simulation(
    sim_config: SimConfig,
    *,
    scheduler: FrameScheduler | None = None,
    on_stats_update: Callable[[GameStats], None] | None = None,
    on_game_over: Callable[[EntityType], None] | None = None,
    on_frame: Callable[[FrameSnapshot], None] | None = None,
    populate: bool = True,
) -> Simulation:
    """Build a Simulation from config and (by default) spawn its population."""
    if sim_config.seed is not None:
        seed_all(sim_config.seed)
    arena = Arena(sim_config.width, sim_config.height, viewport=sim_config.viewport)
    sim = Simulation(
        sim_config,
        arena=arena,
        scheduler=scheduler,
        on_stats_update=on_stats_update,
        on_game_over=on_game_over,
        on_frame=on_frame,
    )
    if populate:
        sim.init(sim_config.game)
    return sim
