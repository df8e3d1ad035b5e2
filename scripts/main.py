# scripts/main.py

from __future__ import annotations

from pathlib import Path
from dataclasses import asdict

from rps_sims.core import run_simulation, SimConfig
from rps_sims.presets.basic import make_simulation
from rps_sims.render.renderer import MatplotlibRenderer, RendererConfig
from rps_sims.render.video import render_video
from rps_sims.render.frame_export import export_frame
from rps_sims.utils.cli import build_parser
from rps_sims.utils.io import experiment_dir, next_free_path
from rps_sims.utils.preset_loader import load_preset

PROJECT_ROOT = Path(__file__).parent.parent


def main():
    parser = build_parser()
    args = parser.parse_args()

    base = load_preset(args.preset).to_sim_config() if args.preset is not None else None
    sim_config = SimConfig.from_args(args, base=base)

    # 1. Build the arena & spawn the population
    sim = make_simulation(sim_config)
    print(f"Spawned {sim.n_entities} entities in a "
          f"{sim.arena.width:.0f}x{sim.arena.height:.0f} arena")

    # 2. Run at a fixed step until one type is left (or time runs out)
    dt = 1 / args.frame_rate
    n_steps = int(args.duration * args.frame_rate)
    recording = run_simulation(sim, n_steps, dt, log_interval=args.log_interval)
    if sim.winner is None:
        print(f"No winner after {sim.time:.1f} seconds: {sim.stats.to_dict()}")
    recording.meta.update({
        "sim_config": asdict(sim_config),
        "seed": sim_config.seed,
        "engine_version": "0.1.0",
    })

    # 3. Output paths
    exp_dir = experiment_dir(PROJECT_ROOT / args.outdir, args.exp_name)
    recording_path = next_free_path(exp_dir / "recording.pkl.xz")
    recording.save(recording_path)
    print(f"Saved recording to {recording_path}")

    render_config = RendererConfig(
        background_color=args.background_color,
        width_px=args.width_px,
        height_px=args.height_px,
    )
    export_frame(
        recording,
        out_path=next_free_path(exp_dir / "final_frame.png"),
        frame_index=-1,
        renderer=MatplotlibRenderer(render_config),
    )
    if args.no_video:
        return

    # 4. Render video
    print("Rendering video...")
    video_path = render_video(
        recording,
        output_path=next_free_path(exp_dir / "video.mp4"),
        fps=args.frame_rate,
        renderer=MatplotlibRenderer(render_config),
        bitrate=args.bitrate,
        preview=args.preview,
    )
    print(f"Saved video to {video_path}")


if __name__ == "__main__":
    main()
