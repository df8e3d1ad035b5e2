# src/rps_sims/render/video.py

from __future__ import annotations

from copy import copy
from pathlib import Path
import shutil

import matplotlib.pyplot as plt
from matplotlib.animation import FFMpegWriter

from .renderer import MatplotlibRenderer, RendererConfig
from rps_sims.core.recording import SimulationRecording, FrameSnapshot
from rps_sims.utils.video_utils import even_pixels, ffmpeg_args


def select_frames_for_fps(recording: SimulationRecording, fps: int) -> list[FrameSnapshot]:
    """
    Pick one recorded frame per video frame. Events of skipped frames are
    re-attached to the nearest selected frame so conversions are not lost.
    """
    target_dt = 1.0 / fps
    frames = recording.frames
    if not frames:
        return []

    selected: list[FrameSnapshot] = []
    next_t = frames[0].t
    for f in frames:
        if f.t + 1e-9 >= next_t:
            # shallow copy so we can rewrite events without mutating the recording
            f2 = copy(f)
            f2.events = []
            selected.append(f2)
            next_t += target_dt

    # always show the final (decided) state
    if selected[-1].t < frames[-1].t:
        last = copy(frames[-1])
        last.events = []
        selected.append(last)

    j = 0
    for f in frames:
        for e in f.events:
            while j + 1 < len(selected) and abs(selected[j + 1].t - f.t) <= abs(selected[j].t - f.t):
                j += 1
            selected[j].events.append(e)

    return selected


def render_video(
    recording: SimulationRecording,
    *,
    output_path: str | Path,
    fps: int = 60,
    renderer: MatplotlibRenderer | None = None,
    bitrate: int | None = None,
    preview: bool = False,
    hold_last: float = 1.0,
    log_interval: int = 1,  # seconds of video
) -> Path:
    """
    Render a SimulationRecording to an MP4 using Matplotlib + ffmpeg.
    The last frame is held for `hold_last` seconds.
    """
    if shutil.which("ffmpeg") is None:
        raise RuntimeError(
            "ffmpeg not found. Install with: conda install -c conda-forge ffmpeg"
        )
    if renderer is None:
        renderer = MatplotlibRenderer(RendererConfig())

    frames_to_render = select_frames_for_fps(recording, fps)
    if not frames_to_render:
        raise ValueError("Recording has no frames")

    output_path = Path(output_path)
    writer = FFMpegWriter(
        fps=fps,
        metadata={"artist": "rps_sims"},
        bitrate=bitrate,
        extra_args=ffmpeg_args(preview),
    )

    cfg = renderer.config
    cfg.width_px, cfg.height_px = even_pixels(cfg.width_px, cfg.height_px)
    width, height = frames_to_render[0].arena or (4.0, 3.0)
    renderer.init_figure(arena_aspect=width / height)

    try:
        with writer.saving(renderer.fig, str(output_path), renderer.config.dpi):
            for idx, frame in enumerate(frames_to_render):
                renderer.render_snapshot(frame)
                writer.grab_frame()
                if (idx + 1) % (fps * log_interval) == 0:
                    print(f"Rendered {(idx+1)/fps:.1f} seconds of video...")
            for _ in range(int(hold_last * fps)):
                writer.grab_frame()
    finally:
        plt.close(renderer.fig)
    return output_path
