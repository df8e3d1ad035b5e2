from __future__ import annotations

from pathlib import Path
import matplotlib.pyplot as plt

from .renderer import MatplotlibRenderer, RendererConfig
from rps_sims.core.recording import SimulationRecording


def export_frame(
    recording: SimulationRecording,
    *,
    out_path: str | Path,
    frame_index: int | None = None,
    t: float | None = None,
    renderer: MatplotlibRenderer | None = None,
) -> Path:
    """
    Render a single frame from `recording` to a PNG (or whatever extension
    you provide), with the same look as the video.

    Provide either:
      - frame_index (index into recording.frames, negative allowed)
      - t (choose the frame closest in time)
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig())

    if (frame_index is None) == (t is None):
        raise ValueError("Provide exactly one of frame_index or t")

    frames = recording.frames
    if not frames:
        raise ValueError("Recording has no frames")

    if frame_index is not None:
        if not -len(frames) <= frame_index < len(frames):
            raise IndexError(f"frame_index {frame_index} out of range (0..{len(frames)-1})")
        frame = frames[frame_index]
    else:
        frame = min(frames, key=lambda f: abs(float(f.t) - float(t)))

    width, height = frame.arena or (4.0, 3.0)
    renderer.init_figure(arena_aspect=width / height)
    try:
        renderer.render_snapshot(frame)
        renderer.fig.savefig(out_path, dpi=renderer.config.dpi, bbox_inches=None, pad_inches=0)
    finally:
        plt.close(renderer.fig)
    return out_path
