#!/usr/bin/env python3
"""
FARS report command

Usage:
    # Month x year accident counts
    fars-report summary 2013 2014 2015 --data-dir data/bronze/fars

    # Accident map for Georgia (13) in 2014
    fars-report map 13 2014 --boundaries data/bronze/boundaries/cb_2018_us_state_20m.shp
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

from pandera.errors import SchemaError

from config.paths import BRONZE_FARS, default_map_path
from fars.figures import save_figure
from fars.mapping import fars_map_state
from fars.states import state_name
from fars.summary import fars_summarize_years, plot_monthly_summary


def print_header(text):
    """Print a formatted header"""
    print('\n' + '=' * 80)
    print(text.center(80))
    print('=' * 80 + '\n')


def _default_data_dir():
    # Files in the working directory win over the project data folder
    return None if any(Path.cwd().glob('accident_*.csv.bz2')) else BRONZE_FARS


def run_summary(args) -> int:
    print_header('FARS ACCIDENTS BY MONTH AND YEAR')
    summary = fars_summarize_years(args.years, data_dir=args.data_dir)

    if summary.empty:
        print('⚠️  No year could be loaded')
        return 0

    print(summary.to_string(na_rep='-'))

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        summary.to_csv(output)
        print(f'\n  ✓ Saved: {output}')

    if args.heatmap:
        path = save_figure(plot_monthly_summary(summary), args.heatmap)
        print(f'  ✓ Saved: {path}')

    return 0


def run_map(args) -> int:
    print_header(f'FARS ACCIDENT MAP: {state_name(args.state)} {args.year}')
    ax = fars_map_state(args.state, args.year, data_dir=args.data_dir,
                        boundaries=args.boundaries)
    if ax is None:
        return 0

    path = save_figure(ax, args.output or default_map_path(args.state, args.year))
    print(f'  ✓ Saved: {path}')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Summaries and maps of FARS yearly accident files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fars-report summary 2013 2014 2015
  fars-report summary 2013 2014 --output summary.csv --heatmap summary.png
  fars-report map 13 2014 --output georgia_2014.png
        """
    )
    parser.add_argument(
        '--data-dir',
        type=Path,
        default=None,
        help='Directory holding accident_<year>.csv.bz2 files '
             '(default: working directory if it has any, else data/bronze/fars)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    summary = subparsers.add_parser('summary', help='Accident counts by month and year')
    summary.add_argument('years', nargs='+', help='Years to summarize')
    summary.add_argument('--output', help='Write the summary as CSV')
    summary.add_argument('--heatmap', help='Write a heatmap image of the summary')
    summary.set_defaults(func=run_summary)

    state_map = subparsers.add_parser('map', help='Map accident locations of one state')
    state_map.add_argument('state', help='FARS STATE code (e.g. 13 for Georgia)')
    state_map.add_argument('year', help='Year of the accident file')
    state_map.add_argument('--boundaries', help='State boundary file readable by geopandas')
    state_map.add_argument('--output', help='Image path (default: outputs/maps/state_<STATE>_<YEAR>.png)')
    state_map.set_defaults(func=run_map)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.data_dir is None:
        args.data_dir = _default_data_dir()

    try:
        return args.func(args)
    except (FileNotFoundError, ValueError, SchemaError) as e:
        print(f'\n✗ {e}')
        return 1


if __name__ == '__main__':
    sys.exit(main())
