# src/connect4_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from connect4.config import PROFILE_PATTERN, PROFILE_RESULTS_DIR

from ..io.load_results import LoadSpec, load_results
from ..metrics.summarize import depth_summary
from ..plots.chart import plot_column_histogram, plot_nodes_by_depth, plot_time_by_depth
from .analyze_csv import resolve_csv


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect4_analysis figures",
        description="Plot search cost from search_profile_*.csv",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a specific profile CSV.")
    ap.add_argument("--results-dir", type=str, default=PROFILE_RESULTS_DIR)
    ap.add_argument("--pattern", type=str, default=PROFILE_PATTERN)
    ap.add_argument("--figures-dir", type=str, default="data/figures", help="Output directory for PNGs")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args)
    df = load_results(LoadSpec(csv_path=csv_path))
    summary = depth_summary(df)

    outdir = Path(args.figures_dir)
    created = [
        plot_nodes_by_depth(summary, outdir, show=args.show),
        plot_time_by_depth(summary, outdir, show=args.show),
        plot_column_histogram(df, outdir, show=args.show),
    ]

    print(f"Loaded: {csv_path}")
    for p in created:
        if p is not None:
            print(f"- {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
