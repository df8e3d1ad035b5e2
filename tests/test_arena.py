"""Tests for arena bounds, resizing and spawn sampling."""
from __future__ import annotations

import threading

import matplotlib.pyplot as plt
import pytest

from rps_sims.core import Arena, viewport_for_width


class TestArena:
    def test_bounds(self) -> None:
        arena = Arena(800.0, 600.0)
        assert arena.bounds == (800.0, 600.0)
        assert arena.width == 800.0 and arena.height == 600.0

    @pytest.mark.parametrize("size", [(0.0, 10.0), (10.0, -1.0)])
    def test_invalid_size(self, size) -> None:
        with pytest.raises(ValueError):
            Arena(*size)

    def test_unknown_viewport(self) -> None:
        with pytest.raises(ValueError):
            Arena(10.0, 10.0, viewport="wide")

    def test_resize(self) -> None:
        arena = Arena(800.0, 600.0)
        arena.resize(300, 200)
        assert arena.bounds == (300.0, 200.0)
        with pytest.raises(ValueError):
            arena.resize(0.0, 200.0)
        assert arena.bounds == (300.0, 200.0)

    def test_resize_from_another_thread_is_seen_whole(self) -> None:
        arena = Arena(100.0, 100.0)
        sizes = {(100.0, 100.0), (400.0, 300.0)}

        def flip():
            for i in range(2000):
                arena.resize(*((400.0, 300.0) if i % 2 else (100.0, 100.0)))

        worker = threading.Thread(target=flip)
        worker.start()
        for _ in range(2000):
            assert arena.bounds in sizes
        worker.join()

    def test_contains(self) -> None:
        arena = Arena(100.0, 100.0)
        assert arena.contains((50.0, 50.0), radius=10.0)
        assert arena.contains((10.0, 90.0), radius=10.0)
        assert not arena.contains((9.0, 50.0), radius=10.0)
        assert not arena.contains((50.0, 95.0), radius=10.0)

    def test_sample_position_respects_margin(self) -> None:
        arena = Arena(200.0, 100.0)
        for _ in range(200):
            x, y = arena.sample_position(margin=20.0)
            assert 20.0 <= x <= 180.0
            assert 20.0 <= y <= 80.0

    def test_margin_larger_than_arena(self) -> None:
        arena = Arena(30.0, 30.0)
        x, y = arena.sample_position(margin=20.0)
        assert (x, y) == (15.0, 15.0)


class TestArenaPlot:
    def test_draws_onto_given_axes(self) -> None:
        fig, ax = plt.subplots()
        out = Arena(400.0, 300.0).plot(ax, facecolor="none", edgecolor="red")
        assert out is ax
        assert len(ax.patches) == 1
        assert ax.patches[0].get_width() == 400.0
        assert ax.get_xlim() == (0.0, 400.0)
        # screen orientation, y grows downward
        assert ax.get_ylim() == (300.0, 0.0)
        plt.close(fig)

    def test_creates_figure_without_axes(self) -> None:
        fig, ax = Arena(10.0, 20.0).plot()
        assert ax.figure is fig
        assert ax.get_ylim() == (20.0, 0.0)
        plt.close(fig)


class TestViewportForWidth:
    def test_breakpoint(self) -> None:
        assert viewport_for_width(768) == "compact"
        assert viewport_for_width(769) == "normal"
        assert viewport_for_width(500, breakpoint=400) == "normal"
