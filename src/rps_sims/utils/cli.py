import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Rock-paper-scissors arena simulation')
    parser.add_argument('--exp_name', type=str, default='', metavar='N',
                        help='experiment_name')
    parser.add_argument('--preset', type=str, default=None,
                        help='bundled preset name (classic, compact, crowd) or path to a YAML preset; '
                             'explicit flags override it')
    parser.add_argument('--seed', type=int, default=None, metavar='N',
                        help='random seed (default: unseeded)')
    parser.add_argument('--frame_rate', type=int, default=60, metavar='N',
                        help='frame rate for stepping and rendering (default: 60)')
    parser.add_argument('--duration', type=float, default=120.0, metavar='N',
                        help='maximum simulated seconds before giving up on a winner (default: 120.0)')
    parser.add_argument('--outdir', type=str, default='results', metavar='N',
                        help='directory to save the recording and video (default: results)')
    parser.add_argument('--count_rock', '--rock', type=int, default=None, metavar='N',
                        help='initial number of rocks (default: 10)')
    parser.add_argument('--count_paper', '--paper', type=int, default=None, metavar='N',
                        help='initial number of papers (default: 10)')
    parser.add_argument('--count_scissors', '--scissors', type=int, default=None, metavar='N',
                        help='initial number of scissors (default: 10)')
    parser.add_argument('--width', type=float, default=None, metavar='N',
                        help='arena width (default: 800)')
    parser.add_argument('--height', type=float, default=None, metavar='N',
                        help='arena height (default: 600)')
    parser.add_argument('--viewport', type=str, default=None, choices=['normal', 'compact'],
                        help='viewport class, sets the default entity radius (default: normal)')
    parser.add_argument('--radius', type=float, default=None, metavar='N',
                        help='entity radius, overrides the viewport default')
    parser.add_argument('--speed', type=float, default=None, metavar='N',
                        help='entity speed in units per second (default: 60)')
    parser.add_argument('--max_dt', type=float, default=None, metavar='N',
                        help='cap on a single step in seconds (default: 0.1)')
    parser.add_argument('--no_video', action='store_true',
                        help='only simulate and save the recording')
    parser.add_argument('--bitrate', type=int, default=None, metavar='N',
                        help='bitrate for the rendered video in kbps')
    parser.add_argument('--preview', action='store_true',
                        help='whether to use preview settings for faster rendering')
    parser.add_argument('--width_px', type=int, default=None,
                        help='width in pixels for the rendered video')
    parser.add_argument('--height_px', type=int, default=None,
                        help='height in pixels for the rendered video')
    parser.add_argument('--background_color', type=str, default='black',
                        help='background color for the rendered video')
    parser.add_argument('--log_interval', type=int, default=600,
                        help='print progress every N steps')
    return parser

'''
usage: python scripts/main.py --exp_name duel --seed 42 --preset classic \
    --count_rock 15 --count_paper 15 --count_scissors 15 --frame_rate 60 --duration 90
'''
