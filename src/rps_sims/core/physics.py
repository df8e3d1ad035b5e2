# src/rps_sims/core/physics.py

from __future__ import annotations
from typing import Callable, List, Sequence
import numpy as np
from .entity import Entity
from .events import CollisionEvent, BaseEvent

ContactHook = Callable[[Entity, Entity, float], List[BaseEvent]]


def step_physics(
    entities: Sequence[Entity],
    bounds: tuple[float, float],
    dt: float,
    t: float,
    on_contact: ContactHook | None = None,
) -> List[BaseEvent]:
    """
    Advance all entities by dt seconds and resolve contacts.

    `t` is the time stamped on the events (end of the step). `on_contact` is
    called for every overlapping pair right after its physical resolution,
    so anything it mutates is visible to the pairs scanned after it.
    """
    events: List[BaseEvent] = []
    width, height = bounds

    # Integrate + walls
    for e in entities:
        events.extend(e.update(dt, width, height, t=t))

    # Exhaustive pair scan, i < j
    n = len(entities)
    for i in range(n):
        for j in range(i + 1, n):
            a = entities[i]
            b = entities[j]
            ev = resolve_collision(a, b, t)
            if ev is None:
                continue
            events.append(ev)
            if on_contact is not None:
                events.extend(on_contact(a, b, t))

    # separation may have pushed a disc through a wall
    for e in entities:
        clamp_to_bounds(e, width, height)

    return events


def clamp_to_bounds(entity: Entity, width: float, height: float) -> None:
    """Keep the full disc inside the arena. Position only, velocity untouched."""
    r = entity.radius
    entity.pos[0] = min(max(entity.pos[0], r), width - r)
    entity.pos[1] = min(max(entity.pos[1], r), height - r)


def get_penetration(a_pos, a_radius, b_pos, b_radius) -> tuple[float, np.ndarray | None]:
    """
    Overlap depth and unit normal from a to b.

    The normal is None when the discs do not overlap or when the centers
    coincide (direction undefined).
    """
    delta = np.asarray(b_pos, dtype=float) - np.asarray(a_pos, dtype=float)
    dist = float(np.hypot(delta[0], delta[1]))
    radius_sum = a_radius + b_radius
    penetration = radius_sum - dist
    if penetration <= 0 or dist == 0.0:
        return penetration, None
    return penetration, delta / dist


def resolve_collision(a: Entity, b: Entity, t: float) -> CollisionEvent | None:
    penetration, n = get_penetration(a.pos, a.radius, b.pos, b.radius)
    if penetration <= 0:
        return None

    a.collision_count += 1
    b.collision_count += 1

    if n is None:
        # coincident centers: no normal, leave positions & velocities as they are
        return CollisionEvent(
            t=t,
            a_id=a.id,
            b_id=b.id,
            pos=a.pos.copy(),
            relative_speed=0.0,
            separated=False,
        )

    relative_speed = abs(float(np.dot(b.vel - a.vel, n)))
    separate(a, b, n, penetration)
    elastic_swap(a, b, n)

    return CollisionEvent(
        t=t,
        a_id=a.id,
        b_id=b.id,
        pos=a.pos + n * a.radius,
        relative_speed=relative_speed,
    )


def separate(a: Entity, b: Entity, n: np.ndarray, penetration: float) -> None:
    """Push both entities apart along n, half the overlap each (equal mass)."""
    if penetration <= 0:
        return
    correction = n * penetration * 0.5
    a.pos -= correction
    b.pos += correction


def elastic_swap(a: Entity, b: Entity, n: np.ndarray) -> None:
    """
    Equal-mass elastic response: exchange the normal velocity components,
    keep the tangential ones.
    """
    tangent = np.array([-n[1], n[0]])

    v1n = float(np.dot(a.vel, n))
    v2n = float(np.dot(b.vel, n))
    v1t = float(np.dot(a.vel, tangent))
    v2t = float(np.dot(b.vel, tangent))

    a.vel[:] = v2n * n + v1t * tangent
    b.vel[:] = v1n * n + v2t * tangent
