# src/rps_sims/core/entity.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List
import numpy as np

from .events import HitWallEvent
from rps_sims.utils.random import HEADING_STREAM, rng


class EntityType(str, Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


# radius per viewport class ("compact" is a narrow / mobile display)
VIEWPORT_RADIUS = {
    "normal": 19.0,
    "compact": 14.0,
}
DEFAULT_SPEED = 60.0


def radius_for_viewport(viewport: str) -> float:
    try:
        return VIEWPORT_RADIUS[viewport]
    except KeyError:
        raise ValueError(
            f"Unknown viewport {viewport!r}, expected one of {sorted(VIEWPORT_RADIUS)}"
        ) from None


@dataclass
class Entity:
    """
    A single rock, paper or scissors token.

    - pos / vel: arena-space position & velocity of the center
    - type: current side; mutated in place when the entity is converted
    - radius: collision and containment extent, shared by all entities
    """
    id: int | None
    pos: np.ndarray           # shape (2,)
    vel: np.ndarray           # shape (2,)
    type: EntityType
    radius: float
    collision_count: int = 0
    conversion_count: int = 0

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.vel))

    def update(self, dt: float, width: float, height: float, t: float = 0.0) -> List[HitWallEvent]:
        """
        Integrate one step and bounce off the arena walls.

        Each axis resolves at most one wall per call (left *or* right, top
        *or* bottom), and the position is clamped so the full disc stays
        inside [0, width] x [0, height].
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        events: List[HitWallEvent] = []
        r = self.radius
        pos = self.pos
        vel = self.vel
        pos += vel * dt

        # X axis
        if pos[0] - r < 0.0:
            pos[0] = r
            vel[0] = -vel[0]
            events.append(HitWallEvent(t=t, body_id=self.id, norm_vec=np.array([1.0, 0.0])))
        elif pos[0] + r > width:
            pos[0] = width - r
            vel[0] = -vel[0]
            events.append(HitWallEvent(t=t, body_id=self.id, norm_vec=np.array([-1.0, 0.0])))

        # Y axis
        if pos[1] - r < 0.0:
            pos[1] = r
            vel[1] = -vel[1]
            events.append(HitWallEvent(t=t, body_id=self.id, norm_vec=np.array([0.0, 1.0])))
        elif pos[1] + r > height:
            pos[1] = height - r
            vel[1] = -vel[1]
            events.append(HitWallEvent(t=t, body_id=self.id, norm_vec=np.array([0.0, -1.0])))

        return events


def random_heading(speed: float) -> np.ndarray:
    angle = rng(HEADING_STREAM).uniform(0.0, 2 * np.pi)
    return np.array([np.cos(angle) * speed, np.sin(angle) * speed], dtype=float)


def create_entity(
    pos: np.ndarray,
    type: EntityType | str,
    *,
    radius: float = VIEWPORT_RADIUS["normal"],
    speed: float = DEFAULT_SPEED,
    vel: np.ndarray | None = None,
    id: int | None = None,
) -> Entity:
    """Helper to create an Entity with a random heading at a fixed speed."""
    if radius <= 0:
        raise ValueError(f"radius must be > 0, got {radius}")
    if vel is None:
        vel = random_heading(speed)
    return Entity(
        id=id,
        pos=np.asarray(pos, dtype=float).copy(),
        vel=np.asarray(vel, dtype=float).copy(),
        type=EntityType(type),
        radius=float(radius),
    )
