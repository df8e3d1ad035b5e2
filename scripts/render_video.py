# scripts/render_video.py
# Re-render a saved recording without re-running the simulation.

from __future__ import annotations

import argparse
from pathlib import Path

from rps_sims.core import SimulationRecording
from rps_sims.render.renderer import MatplotlibRenderer, RendererConfig
from rps_sims.render.video import render_video


def main():
    parser = argparse.ArgumentParser(description="Render a recording to MP4")
    parser.add_argument("recording", type=str, help="path to recording.pkl.xz")
    parser.add_argument("--output", type=str, default=None,
                        help="output video path (default: next to the recording)")
    parser.add_argument("--frame_rate", type=int, default=60)
    parser.add_argument("--preview", action="store_true")
    parser.add_argument("--background_color", type=str, default="black")
    parser.add_argument("--width_px", type=int, default=None)
    parser.add_argument("--height_px", type=int, default=None)
    args = parser.parse_args()

    recording_path = Path(args.recording)
    recording = SimulationRecording.load(recording_path)
    print(f"Loaded {len(recording.frames)} frames, winner: {recording.meta.get('winner')}")

    output = Path(args.output) if args.output else recording_path.with_name("video.mp4")
    renderer = MatplotlibRenderer(RendererConfig(
        background_color=args.background_color,
        width_px=args.width_px,
        height_px=args.height_px,
    ))
    render_video(recording, output_path=output, fps=args.frame_rate,
                 renderer=renderer, preview=args.preview)
    print(f"Saved video to {output}")


if __name__ == "__main__":
    main()
