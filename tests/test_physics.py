"""Tests for pair detection, separation and the elastic response."""
from __future__ import annotations

import math

import numpy as np

from rps_sims.core import CollisionEvent, EntityType, step_physics
from rps_sims.core.physics import clamp_to_bounds, elastic_swap, get_penetration, resolve_collision
from conftest import make_entity


def kinetic(*entities) -> float:
    return sum(float(np.dot(e.vel, e.vel)) for e in entities)


class TestGetPenetration:
    def test_no_overlap(self) -> None:
        penetration, n = get_penetration((0.0, 0.0), 1.0, (3.0, 0.0), 1.0)
        assert penetration < 0
        assert n is None

    def test_touching_is_no_collision(self) -> None:
        penetration, n = get_penetration((0.0, 0.0), 1.0, (2.0, 0.0), 1.0)
        assert penetration == 0
        assert n is None

    def test_overlapping(self) -> None:
        penetration, n = get_penetration((0.0, 0.0), 1.0, (1.5, 0.0), 1.0)
        assert math.isclose(penetration, 0.5)
        assert np.allclose(n, [1.0, 0.0])

    def test_normal_points_from_a_to_b(self) -> None:
        _, n = get_penetration((0.0, 0.0), 1.0, (0.0, 1.5), 1.0)
        assert np.allclose(n, [0.0, 1.0])

    def test_coincident_centers(self) -> None:
        penetration, n = get_penetration((5.0, 5.0), 1.0, (5.0, 5.0), 1.0)
        assert math.isclose(penetration, 2.0)
        assert n is None


class TestResolveCollision:
    def test_head_on_swaps_velocities(self) -> None:
        a = make_entity(100.0, 100.0, vx=60.0, radius=19.0, id=0)
        b = make_entity(120.0, 100.0, vx=-60.0, radius=19.0, id=1)
        ev = resolve_collision(a, b, t=0.5)
        assert isinstance(ev, CollisionEvent)
        assert ev.separated
        assert math.isclose(ev.relative_speed, 120.0)
        assert np.allclose(a.vel, [-60.0, 0.0])
        assert np.allclose(b.vel, [60.0, 0.0])

    def test_separation_splits_overlap_evenly(self) -> None:
        a = make_entity(100.0, 100.0, radius=19.0)
        b = make_entity(120.0, 100.0, radius=19.0)
        resolve_collision(a, b, t=0.0)
        # overlap of 18 -> each moves 9
        assert np.allclose(a.pos, [91.0, 100.0])
        assert np.allclose(b.pos, [129.0, 100.0])
        assert math.isclose(float(np.linalg.norm(b.pos - a.pos)), 38.0)

    def test_oblique_conserves_energy_and_momentum(self) -> None:
        a = make_entity(100.0, 100.0, vx=36.0, vy=48.0, radius=10.0)
        b = make_entity(112.0, 109.0, vx=-60.0, vy=0.0, radius=10.0)
        e_before = kinetic(a, b)
        p_before = a.vel + b.vel
        resolve_collision(a, b, t=0.0)
        assert math.isclose(kinetic(a, b), e_before, rel_tol=1e-12)
        assert np.allclose(a.vel + b.vel, p_before)

    def test_tangential_component_kept(self) -> None:
        a = make_entity(0.0, 0.0, vx=10.0, vy=5.0)
        b = make_entity(1.0, 0.0, vx=-2.0, vy=-7.0)
        elastic_swap(a, b, np.array([1.0, 0.0]))
        assert np.allclose(a.vel, [-2.0, 5.0])
        assert np.allclose(b.vel, [10.0, -7.0])

    def test_no_collision_returns_none(self) -> None:
        a = make_entity(100.0, 100.0, vx=1.0, radius=10.0)
        b = make_entity(130.0, 100.0, vx=-1.0, radius=10.0)
        assert resolve_collision(a, b, t=0.0) is None
        assert a.collision_count == 0

    def test_coincident_centers_skip_physics(self) -> None:
        a = make_entity(50.0, 50.0, vx=60.0, radius=10.0)
        b = make_entity(50.0, 50.0, vy=60.0, radius=10.0)
        ev = resolve_collision(a, b, t=0.0)
        assert ev is not None
        assert not ev.separated
        assert np.allclose(a.pos, [50.0, 50.0])
        assert np.allclose(b.pos, [50.0, 50.0])
        assert np.allclose(a.vel, [60.0, 0.0])
        assert np.allclose(b.vel, [0.0, 60.0])


class TestStepPhysics:
    def test_contact_hook_called_per_colliding_pair(self) -> None:
        a = make_entity(100.0, 100.0, radius=10.0, id=0)
        b = make_entity(115.0, 100.0, radius=10.0, id=1)
        c = make_entity(400.0, 400.0, radius=10.0, id=2)
        seen = []

        def hook(x, y, t):
            seen.append((x.id, y.id, t))
            return []

        events = step_physics([a, b, c], (800.0, 600.0), 0.0, 1.0, on_contact=hook)
        assert seen == [(0, 1, 1.0)]
        assert [type(e) for e in events] == [CollisionEvent]

    def test_hook_events_are_returned(self) -> None:
        a = make_entity(100.0, 100.0, radius=10.0, id=0)
        b = make_entity(115.0, 100.0, radius=10.0, id=1)
        marker = object()
        events = step_physics([a, b], (800.0, 600.0), 0.0, 0.0, on_contact=lambda x, y, t: [marker])
        assert events[-1] is marker

    def test_all_pairs_scanned(self) -> None:
        entities = [make_entity(100.0 + i, 100.0, radius=10.0, id=i) for i in range(4)]
        events = step_physics(entities, (800.0, 600.0), 0.0, 0.0)
        collisions = [e for e in events if isinstance(e, CollisionEvent)]
        assert len(collisions) >= 3
        assert all(c.a_id < c.b_id for c in collisions)

    def test_integrates_before_collisions(self) -> None:
        a = make_entity(100.0, 100.0, vx=60.0, radius=10.0, id=0)
        b = make_entity(130.0, 100.0, vx=-60.0, radius=10.0, id=1)
        # 30 apart, closing at 120/s: overlapping after 0.1s
        events = step_physics([a, b], (800.0, 600.0), 0.1, 0.1)
        assert any(isinstance(e, CollisionEvent) for e in events)
        assert a.vel[0] < 0 < b.vel[0]

    def test_separation_never_leaves_the_arena(self) -> None:
        a = make_entity(10.0, 100.0, radius=10.0, id=0)
        b = make_entity(12.0, 100.0, radius=10.0, id=1)
        step_physics([a, b], (800.0, 600.0), 0.0, 0.0)
        assert a.pos[0] >= 10.0
        assert b.pos[0] >= 10.0

    def test_clamp_to_bounds(self) -> None:
        e = make_entity(-5.0, 700.0, radius=10.0)
        clamp_to_bounds(e, 800.0, 600.0)
        assert np.allclose(e.pos, [10.0, 590.0])

    def test_types_untouched_without_hook(self) -> None:
        a = make_entity(100.0, 100.0, EntityType.ROCK, radius=10.0, id=0)
        b = make_entity(105.0, 100.0, EntityType.SCISSORS, radius=10.0, id=1)
        step_physics([a, b], (800.0, 600.0), 0.0, 0.0)
        assert a.type is EntityType.ROCK
        assert b.type is EntityType.SCISSORS
