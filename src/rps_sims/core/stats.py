# src/rps_sims/core/stats.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from .entity import Entity, EntityType


@dataclass
class GameStats:
    rock: int = 0
    paper: int = 0
    scissors: int = 0
    winner: EntityType | None = None

    def count(self, type: EntityType) -> int:
        return getattr(self, EntityType(type).value)

    @property
    def total(self) -> int:
        return self.rock + self.paper + self.scissors

    @property
    def active_types(self) -> list[EntityType]:
        return [t for t in EntityType if self.count(t) > 0]

    @property
    def dominant(self) -> EntityType | None:
        """The only type still present, or None while 0 or >= 2 types remain."""
        active = self.active_types
        return active[0] if len(active) == 1 else None

    def to_dict(self) -> dict:
        return {
            "rock": self.rock,
            "paper": self.paper,
            "scissors": self.scissors,
            "winner": self.winner.value if self.winner is not None else None,
        }


def count_types(entities: Iterable[Entity]) -> GameStats:
    stats = GameStats()
    for e in entities:
        name = e.type.value
        setattr(stats, name, getattr(stats, name) + 1)
    stats.winner = stats.dominant
    return stats
