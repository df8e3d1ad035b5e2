# src/rps_sims/core/events.py

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
from abc import ABC
if TYPE_CHECKING:
    from .entity import EntityType


@dataclass(kw_only=True)
class BaseEvent(ABC):
    """Marker base class so you can type on 'list[BaseEvent]'."""
    t: float  # simulation time when this event occurred
    a_id: int | None = None
    b_id: int | None = None
    def to_payload_dict(self) -> dict:
        """Convert event-specific data to a serializable dict."""
        return {}

@dataclass(kw_only=True)
class CollisionEvent(BaseEvent):
    a_id: int
    b_id: int
    pos: np.ndarray        # contact point (2,)
    relative_speed: float  # |v_b - v_a| along normal, before the swap
    separated: bool = True # False when centers coincided and physics was skipped

    def to_payload_dict(self) -> dict:
        return {
            "pos": self.pos.tolist(),
            "relative_speed": self.relative_speed,
            "separated": self.separated,
        }


@dataclass(kw_only=True)
class HitWallEvent(BaseEvent):
    body_id: int
    norm_vec: np.ndarray    # (2,) unit vector pointing into the arena from wall

    def __post_init__(self):
        self.a_id = self.body_id

    def to_payload_dict(self) -> dict:
        return {
            "norm_vec": self.norm_vec.tolist(),
        }

@dataclass(kw_only=True)
class ConversionEvent(BaseEvent):
    winner_id: int
    loser_id: int
    from_type: EntityType
    to_type: EntityType

    def __post_init__(self):
        self.a_id = self.winner_id
        self.b_id = self.loser_id

    def to_payload_dict(self) -> dict:
        return {
            "from_type": self.from_type.value,
            "to_type": self.to_type.value,
        }

@dataclass(kw_only=True)
class GameOverEvent(BaseEvent):
    winner: EntityType

    def to_payload_dict(self) -> dict:
        payload = super().to_payload_dict()
        payload.update({
            "winner": self.winner.value
        })
        return payload
