# scripts/play.py
# Interactive window. Keys: r = restart, space = pause/resume.

from __future__ import annotations

from rps_sims.core import SimConfig
from rps_sims.render.live import LiveViewer
from rps_sims.utils.cli import build_parser
from rps_sims.utils.preset_loader import load_preset


def main():
    parser = build_parser()
    args = parser.parse_args()
    base = load_preset(args.preset).to_sim_config() if args.preset is not None else None
    sim_config = SimConfig.from_args(args, base=base)
    viewer = LiveViewer(sim_config, fps=args.frame_rate)
    viewer.show()


if __name__ == "__main__":
    main()
