"""Tests for the interactive viewer wiring (Agg backend, timers never fire)."""
from __future__ import annotations

from types import SimpleNamespace

import matplotlib.pyplot as plt
import pytest

from rps_sims.core import GameConfig, SimConfig, SimState
from rps_sims.render.live import LiveViewer, MatplotlibTimerScheduler


@pytest.fixture
def viewer():
    v = LiveViewer(SimConfig(game=GameConfig(3, 3, 3)), fps=30)
    yield v
    v.sim.stop()
    plt.close("all")


class TestLiveViewer:
    def test_built_but_not_running(self, viewer) -> None:
        assert viewer.sim.n_entities == 9
        assert viewer.sim.state is SimState.IDLE
        assert isinstance(viewer.sim.scheduler, MatplotlibTimerScheduler)
        assert viewer.scheduler.interval_ms == 33

    def test_space_toggles(self, viewer) -> None:
        viewer.sim.start()
        viewer._on_key(SimpleNamespace(key=" "))
        assert viewer.sim.state is SimState.IDLE
        viewer._on_key(SimpleNamespace(key=" "))
        assert viewer.sim.state is SimState.RUNNING

    def test_restart(self, viewer) -> None:
        viewer.sim.start()
        viewer.sim.tick(0.05)
        viewer._on_key(SimpleNamespace(key="r"))
        assert viewer.sim.time == 0.0
        assert viewer.sim.state is SimState.RUNNING
        assert viewer.stats.total == 9

    def test_resize_follows_window(self, viewer) -> None:
        viewer._on_resize(SimpleNamespace(width=1000, height=800))
        assert viewer.sim.arena.bounds == pytest.approx((700.0, 560.0))
        viewer._on_resize(SimpleNamespace(width=500, height=900))
        assert viewer.sim.arena.bounds == pytest.approx((475.0, 855.0))

    def test_frame_redraws(self, viewer) -> None:
        viewer.sim.start()
        viewer.sim.tick(0.01)
        assert len(viewer.renderer.ax.patches) == 1 + 9
