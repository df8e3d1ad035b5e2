# src/rps_sims/render/live.py

from __future__ import annotations

import time
from typing import Callable

import matplotlib.pyplot as plt

from .renderer import MatplotlibRenderer, RendererConfig
from rps_sims.core import EntityType, FrameSnapshot, GameStats, SimConfig, viewport_for_width
from rps_sims.presets.basic import make_simulation

# share of the display the arena takes, per viewport class
DISPLAY_FRACTION = {
    "compact": 0.95,
    "normal": 0.7,
}


class MatplotlibTimerScheduler:
    """
    FrameScheduler backed by single-shot Matplotlib canvas timers.

    Each requested frame fires once, `1/fps` seconds later, with a
    `time.perf_counter()` timestamp.
    """

    def __init__(self, canvas, fps: int = 60):
        self.canvas = canvas
        self.interval_ms = max(int(1000 / fps), 1)

    def request_frame(self, callback: Callable[[float], None]):
        timer = self.canvas.new_timer(interval=self.interval_ms)
        timer.single_shot = True
        timer.add_callback(lambda: callback(time.perf_counter()))
        timer.start()
        return timer

    def cancel_frame(self, handle) -> None:
        handle.stop()


class LiveViewer:
    """
    Interactive window: plays the game in real time.

    Keys:
      r      restart with the configured counts
      space  pause / resume
    Resizing the window resizes the arena.
    """

    def __init__(self, sim_config: SimConfig, renderer_config: RendererConfig | None = None, fps: int = 60):
        self.sim_config = sim_config
        self.renderer = MatplotlibRenderer(renderer_config)
        fig, _ = self.renderer.init_figure(arena_aspect=sim_config.width / sim_config.height)
        self.scheduler = MatplotlibTimerScheduler(fig.canvas, fps=fps)
        self.sim = make_simulation(
            sim_config,
            scheduler=self.scheduler,
            on_stats_update=self._on_stats_update,
            on_game_over=self._on_game_over,
            on_frame=self._on_frame,
        )
        self.stats: GameStats | None = self.sim.stats
        fig.canvas.mpl_connect("key_press_event", self._on_key)
        fig.canvas.mpl_connect("resize_event", self._on_resize)
        self._draw(self.sim.snapshot())

    # --- simulation callbacks ---

    def _on_stats_update(self, stats: GameStats) -> None:
        self.stats = stats

    def _on_game_over(self, winner: EntityType) -> None:
        print(f"Game over at t={self.sim.time:.1f}s: {winner.value} wins. Press 'r' to play again.")

    def _on_frame(self, snapshot: FrameSnapshot) -> None:
        self._draw(snapshot)

    # --- UI events ---

    def _on_key(self, event) -> None:
        if event.key == "r":
            self.restart()
        elif event.key == " ":
            if self.sim.is_running:
                self.sim.stop()
            else:
                self.sim.start()

    def _on_resize(self, event) -> None:
        if event.width <= 0 or event.height <= 0:
            return
        fraction = DISPLAY_FRACTION[viewport_for_width(event.width)]
        self.sim.resize(event.width * fraction, event.height * fraction)
        width, height = self.sim.arena.bounds
        self.renderer.set_arena_aspect(width / height)
        self._draw(self.sim.snapshot())

    # ---

    def restart(self) -> None:
        self.sim.init(self.sim_config.game)
        self.sim.start()
        self._draw(self.sim.snapshot())

    def _draw(self, snapshot: FrameSnapshot) -> None:
        self.renderer.render_snapshot(snapshot)
        self.renderer.fig.canvas.draw_idle()

    def show(self) -> None:
        self.sim.start()
        plt.show()
        self.sim.stop()
