# src/rps_sims/core/rules.py

from __future__ import annotations

from .entity import Entity, EntityType
from .events import ConversionEvent

# each type beats exactly one other and loses to exactly one other
BEATS: dict[EntityType, EntityType] = {
    EntityType.ROCK: EntityType.SCISSORS,
    EntityType.SCISSORS: EntityType.PAPER,
    EntityType.PAPER: EntityType.ROCK,
}


def beats(a: EntityType, b: EntityType) -> bool:
    return BEATS[a] is b


def winning_type(a: EntityType, b: EntityType) -> EntityType | None:
    """Type that wins an a-vs-b encounter, or None for a draw."""
    if a is b:
        return None
    return a if beats(a, b) else b


def apply_dominance(a: Entity, b: Entity, t: float) -> ConversionEvent | None:
    """
    Convert the loser of the pair to the winner's type.

    Exactly one entity changes; same-type pairs are left alone.
    """
    winner_type = winning_type(a.type, b.type)
    if winner_type is None:
        return None
    winner, loser = (a, b) if a.type is winner_type else (b, a)
    old_type = loser.type
    loser.type = winner_type
    loser.conversion_count += 1
    return ConversionEvent(
        t=t,
        winner_id=winner.id,
        loser_id=loser.id,
        from_type=old_type,
        to_type=winner_type,
    )
