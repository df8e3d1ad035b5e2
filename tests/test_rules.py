"""Tests for the cyclic dominance rule."""
from __future__ import annotations

import pytest

from rps_sims.core import BEATS, ConversionEvent, EntityType, apply_dominance, beats, winning_type
from conftest import make_entity

R, P, S = EntityType.ROCK, EntityType.PAPER, EntityType.SCISSORS


class TestBeats:
    def test_cycle(self) -> None:
        assert beats(R, S)
        assert beats(S, P)
        assert beats(P, R)
        assert not beats(S, R)
        assert not beats(R, R)

    def test_each_type_beats_exactly_one(self) -> None:
        assert set(BEATS) == set(EntityType)
        assert set(BEATS.values()) == set(EntityType)

    @pytest.mark.parametrize(
        "a, b, expected",
        [(R, S, R), (S, R, R), (S, P, S), (P, S, S), (P, R, P), (R, P, P), (R, R, None)],
    )
    def test_winning_type(self, a, b, expected) -> None:
        assert winning_type(a, b) is expected


class TestApplyDominance:
    @pytest.mark.parametrize("winner, loser", [(R, S), (S, P), (P, R)])
    @pytest.mark.parametrize("winner_first", [True, False])
    def test_loser_converted_winner_unchanged(self, winner, loser, winner_first) -> None:
        w = make_entity(0.0, 0.0, winner, id=1)
        l = make_entity(0.0, 0.0, loser, id=2)
        a, b = (w, l) if winner_first else (l, w)
        ev = apply_dominance(a, b, t=2.0)
        assert w.type is winner
        assert l.type is winner
        assert isinstance(ev, ConversionEvent)
        assert ev.winner_id == 1 and ev.loser_id == 2
        assert ev.from_type is loser and ev.to_type is winner
        assert ev.t == 2.0
        assert l.conversion_count == 1
        assert w.conversion_count == 0

    @pytest.mark.parametrize("t", list(EntityType))
    def test_same_type_no_conversion(self, t) -> None:
        a = make_entity(0.0, 0.0, t, id=1)
        b = make_entity(0.0, 0.0, t, id=2)
        assert apply_dominance(a, b, t=0.0) is None
        assert a.type is t and b.type is t

    def test_payload(self) -> None:
        ev = apply_dominance(make_entity(0, 0, P, id=0), make_entity(0, 0, R, id=1), t=0.0)
        assert ev.to_payload_dict() == {"from_type": "rock", "to_type": "paper"}
