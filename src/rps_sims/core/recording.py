# src/rps_sims/core/recording.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Tuple
from pathlib import Path
import pickle
import lzma
import numpy as np
if TYPE_CHECKING:
    from .events import BaseEvent
    from .entity import Entity


@dataclass
class EntityStateSnapshot:
    """Per-frame state of an entity: all a renderer needs."""
    pos: Tuple[float, float]
    vel: Tuple[float, float]
    type: str                # EntityType value


@dataclass
class EventSnapshot:
    t: float
    type: str               # e.g. "CollisionEvent", "ConversionEvent", ...
    a_id: int | None = None
    b_id: int | None = None
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass
class FrameSnapshot:
    t: float
    entities: dict[int, EntityStateSnapshot]
    stats: dict[str, Any] = field(default_factory=dict)
    events: list[EventSnapshot] = field(default_factory=list)
    arena: Tuple[float, float] | None = None     # (width, height) at this frame
    radius: float | None = None


@dataclass
class SimulationRecording:
    """
    Frozen record of a full simulation run.

    `meta` holds config, seed, etc.
    """
    frames: list[FrameSnapshot] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def add_frame(self, frame: FrameSnapshot) -> None:
        self.frames.append(frame)

    @property
    def times(self) -> list[float]:
        return [f.t for f in self.frames]

    @property
    def t_end(self) -> float | None:
        """Time of the last frame, or None if no frames."""
        if not self.frames:
            return None
        return self.frames[-1].t

    @property
    def final_stats(self) -> dict[str, Any] | None:
        if not self.frames:
            return None
        return self.frames[-1].stats

    def iter_events(self) -> Iterator[EventSnapshot]:
        """Iterate over all EventSnapshots in time order."""
        for frame in self.frames:
            for ev in frame.events:
                yield ev

    def save(self, path: str | Path) -> None:
        path = Path(path)
        with lzma.open(path, "wb") as f:
            pickle.dump(self, f, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def load(cls, path: str | Path) -> "SimulationRecording":
        path = Path(path)
        with lzma.open(path, "rb") as f:
            rec = pickle.load(f)
        if not isinstance(rec, cls):
            raise TypeError(f"{path} does not contain a {cls.__name__}")
        return rec


def make_entity_snapshot(entity: "Entity") -> EntityStateSnapshot:
    pos = np.asarray(entity.pos, dtype=float)
    vel = np.asarray(entity.vel, dtype=float)
    return EntityStateSnapshot(
        pos=(float(pos[0]), float(pos[1])),
        vel=(float(vel[0]), float(vel[1])),
        type=entity.type.value,
    )


def make_event_snapshot(event: "BaseEvent") -> EventSnapshot:
    return EventSnapshot(
        t=event.t,
        type=type(event).__name__,
        a_id=getattr(event, "a_id", None),
        b_id=getattr(event, "b_id", None),
        payload=event.to_payload_dict(),
    )


def snapshot_entities(
    entities: Iterable["Entity"],
    t: float,
    *,
    events: Iterable["BaseEvent"] = (),
    stats: dict[str, Any] | None = None,
    arena: Tuple[float, float] | None = None,
    radius: float | None = None,
) -> FrameSnapshot:
    states: dict[int, EntityStateSnapshot] = {}
    for entity in entities:
        if entity.id is None:
            raise ValueError("All entities must have an id before snapshotting")
        states[entity.id] = make_entity_snapshot(entity)

    return FrameSnapshot(
        t=t,
        entities=states,
        stats=dict(stats) if stats is not None else {},
        events=[make_event_snapshot(e) for e in events],
        arena=arena,
        radius=radius,
    )
