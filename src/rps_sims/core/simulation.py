# src/rps_sims/core/simulation.py

from __future__ import annotations
from enum import Enum
from typing import Any, Callable, List, Mapping

from .arena import Arena
from .config import GameConfig, SimConfig
from .entity import Entity, EntityType, create_entity
from .events import BaseEvent, GameOverEvent
from .physics import step_physics
from .recording import FrameSnapshot, SimulationRecording, snapshot_entities
from .rules import apply_dominance
from .scheduler import FrameScheduler
from .stats import GameStats, count_types


class SimState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINAL = "terminal"


class Simulation:
    """
    Rock-paper-scissors arena: owns the entities and drives the step.

    The simulation never draws and never reads global UI state. Everything
    it reports goes through the optional callbacks:

    - on_stats_update(stats): once per `init` and after every conversion
    - on_game_over(winner): exactly once per game, when one type is left
    - on_frame(snapshot): after every tick, for a renderer

    Frames can be pumped by hand with `tick(dt)`, or by a host loop through
    a `FrameScheduler` (see `start`).
    """

    def __init__(
        self,
        config: SimConfig | None = None,
        *,
        arena: Arena | None = None,
        on_stats_update: Callable[[GameStats], None] | None = None,
        on_game_over: Callable[[EntityType], None] | None = None,
        on_frame: Callable[[FrameSnapshot], None] | None = None,
        scheduler: FrameScheduler | None = None,
    ):
        self.config = config or SimConfig()
        self.arena = arena or Arena(self.config.width, self.config.height, self.config.viewport)
        self.on_stats_update = on_stats_update
        self.on_game_over = on_game_over
        self.on_frame = on_frame
        self.scheduler = scheduler

        self.entities: List[Entity] = []
        self.state = SimState.IDLE
        self.time = 0.0
        self.frame_index = 0
        self.stats = GameStats()
        self.winner: EntityType | None = None
        self._next_id = 0
        self._frame_handle: Any = None
        self._last_frame_time: float | None = None
        self._game_over_sent = False

    @property
    def radius(self) -> float:
        return self.config.entity_radius

    @property
    def is_running(self) -> bool:
        return self.state is SimState.RUNNING

    @property
    def n_entities(self) -> int:
        return len(self.entities)

    # ------------------------------------------------------------------
    # population

    def init(self, game: GameConfig | Mapping[str, Any] | None = None) -> None:
        """Throw away the current population and spawn a fresh one."""
        self.stop()
        if game is None:
            game = self.config.game
        elif not isinstance(game, GameConfig):
            game = GameConfig.from_mapping(game)

        self.entities = []
        self._next_id = 0
        self.time = 0.0
        self.frame_index = 0
        self.winner = None
        self._game_over_sent = False
        self._last_frame_time = None
        self.state = SimState.IDLE

        # centers at least one radius from the walls, even with a small margin
        margin = max(self.config.spawn_margin, self.radius)
        for entity_type, n in game.counts():
            for _ in range(n):
                pos = self.arena.sample_position(margin)
                self.add_entity(
                    create_entity(pos, entity_type, radius=self.radius, speed=self.config.speed)
                )
        self._publish_stats()

    def add_entity(self, entity: Entity) -> Entity:
        if not self.arena.contains(entity.pos, radius=entity.radius):
            raise ValueError("Entity placed outside arena")
        if entity.id is None:
            entity.id = self._new_id()
        elif any(e.id == entity.id for e in self.entities):
            raise ValueError(f"Entity id {entity.id} already exists in simulation")
        else:
            self._next_id = max(self._next_id, entity.id + 1)
        self.entities.append(entity)
        return entity

    def _new_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # ------------------------------------------------------------------
    # lifecycle

    def start(self) -> None:
        if self.state is SimState.RUNNING:
            return
        self.state = SimState.RUNNING
        # a single-type population is already decided
        if self._check_win_condition():
            return
        self._last_frame_time = None
        self._request_frame()

    def stop(self) -> None:
        """Halt the loop without declaring a winner. Safe to call repeatedly."""
        self._cancel_frame()
        if self.state is SimState.RUNNING:
            self.state = SimState.IDLE

    def resize(self, width: float, height: float) -> None:
        """
        Resize the arena. Sizes below one entity diameter are raised to it,
        so an entity always fits.
        """
        diameter = 2 * self.radius
        self.arena.resize(max(width, diameter), max(height, diameter))

    # ------------------------------------------------------------------
    # stepping

    def tick(self, dt: float) -> List[BaseEvent]:
        """
        Advance the game by one frame of dt seconds:
        - integrate and bounce off walls,
        - resolve every overlapping pair and apply the dominance rule,
        - check whether a single type is left,
        - hand a snapshot to the renderer.
        """
        if self.state is not SimState.RUNNING:
            return []
        dt = self._clamp_dt(dt)
        t = self.time + dt

        events = step_physics(
            self.entities,
            self.arena.bounds,
            dt,
            t,
            on_contact=self._apply_rules,
        )
        self.time = t
        self.frame_index += 1

        events.extend(self._check_win_condition())

        if self.on_frame is not None:
            self.on_frame(self.snapshot(events))
        return events

    def _clamp_dt(self, dt: float) -> float:
        dt = max(float(dt), 0.0)
        if self.config.max_dt is not None:
            dt = min(dt, self.config.max_dt)
        return dt

    def _apply_rules(self, a: Entity, b: Entity, t: float) -> List[BaseEvent]:
        ev = apply_dominance(a, b, t)
        if ev is None:
            return []
        self._publish_stats()
        return [ev]

    def _publish_stats(self) -> None:
        self.stats = count_types(self.entities)
        if self.on_stats_update is not None:
            self.on_stats_update(self.stats)

    def _check_win_condition(self) -> List[BaseEvent]:
        self.stats = count_types(self.entities)
        winner = self.stats.dominant
        if winner is None:
            return []

        self.state = SimState.TERMINAL
        self.winner = winner
        self._cancel_frame()
        if self._game_over_sent:
            return []
        self._game_over_sent = True
        if self.on_game_over is not None:
            self.on_game_over(winner)
        return [GameOverEvent(t=self.time, winner=winner)]

    # ------------------------------------------------------------------
    # host frame loop

    def _request_frame(self) -> None:
        if self.scheduler is None or self._frame_handle is not None:
            return
        self._frame_handle = self.scheduler.request_frame(self._on_frame)

    def _cancel_frame(self) -> None:
        if self._frame_handle is None:
            return
        if self.scheduler is not None:
            self.scheduler.cancel_frame(self._frame_handle)
        self._frame_handle = None

    def _on_frame(self, now: float) -> None:
        self._frame_handle = None
        if self.state is not SimState.RUNNING:
            return
        # first frame after start() has nothing to measure against
        dt = 0.0 if self._last_frame_time is None else now - self._last_frame_time
        self._last_frame_time = now
        self.tick(dt)
        if self.state is SimState.RUNNING:
            self._request_frame()

    # ------------------------------------------------------------------

    def snapshot(self, events: List[BaseEvent] | tuple = ()) -> FrameSnapshot:
        """Read-only copy of the current entity state for renderers/recorders."""
        return snapshot_entities(
            self.entities,
            t=self.time,
            events=events,
            stats=self.stats.to_dict(),
            arena=self.arena.bounds,
            radius=self.radius,
        )


def run_simulation(
    sim: Simulation,
    n_steps: int,
    dt: float,
    log_interval: int = 600,
    *,
    record_events: bool = True,
) -> SimulationRecording:
    """
    Step the simulation forward up to n_steps fixed steps and record frames.

    Stops early once a single type is left. The simulation must already be
    populated with `init`.
    """
    recording = SimulationRecording()
    if sim.state is SimState.IDLE:
        sim.start()
    recording.add_frame(sim.snapshot())

    for step in range(n_steps):
        if sim.state is not SimState.RUNNING:
            break
        events = sim.tick(dt)
        recording.add_frame(sim.snapshot(events if record_events else []))
        if (step + 1) % log_interval == 0:
            counts = sim.stats
            print(f"Simulated {sim.time:.3f} seconds / {n_steps*dt:.3f} seconds...")
            print(f"Rock: {counts.rock}  Paper: {counts.paper}  Scissors: {counts.scissors}")

    if sim.winner is not None:
        print(f"Game over at t={sim.time:.3f}s: {sim.winner.value} wins")
    recording.meta["winner"] = sim.winner.value if sim.winner is not None else None
    recording.meta["n_frames"] = len(recording.frames)
    return recording
