# src/rps_sims/core/__init__.py

from .config import SimConfig, GameConfig
from .entity import Entity, EntityType, create_entity, radius_for_viewport
from .arena import Arena, viewport_for_width
from .simulation import Simulation, SimState, run_simulation
from .physics import step_physics
from .rules import BEATS, beats, winning_type, apply_dominance
from .stats import GameStats, count_types
from .scheduler import FrameScheduler, ManualFrameScheduler
from .recording import FrameSnapshot, EntityStateSnapshot, SimulationRecording
from .events import (
    BaseEvent,
    CollisionEvent,
    HitWallEvent,
    ConversionEvent,
    GameOverEvent,
)

__all__ = [
    "SimConfig",
    "GameConfig",
    "Entity",
    "EntityType",
    "create_entity",
    "radius_for_viewport",
    "Arena",
    "viewport_for_width",
    "Simulation",
    "SimState",
    "run_simulation",
    "step_physics",
    "BEATS",
    "beats",
    "winning_type",
    "apply_dominance",
    "GameStats",
    "count_types",
    "FrameScheduler",
    "ManualFrameScheduler",
    "FrameSnapshot",
    "EntityStateSnapshot",
    "SimulationRecording",
    "BaseEvent",
    "CollisionEvent",
    "HitWallEvent",
    "ConversionEvent",
    "GameOverEvent",
]
