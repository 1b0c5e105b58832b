from __future__ import annotations

import argparse
from pathlib import Path

from connect4.config import PROFILE_PATTERN, PROFILE_RESULTS_DIR, WIN_SCORE

from ..io.load_results import LoadSpec, load_latest_from_dir, load_results
from ..metrics.summarize import SummaryConfig, column_distribution, decisive_rate, depth_summary


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize minimax search-profile CSV results.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a profile CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default=PROFILE_RESULTS_DIR, help="Directory containing search_profile_*.csv")
    ap.add_argument("--pattern", type=str, default=PROFILE_PATTERN, help="Glob pattern for selecting latest file")
    ap.add_argument("--min-depth", type=int, default=1, help="Ignore depths below this")
    ap.add_argument("--max-depth", type=int, default=None, help="Ignore depths above this")
    return ap


def resolve_csv(args: argparse.Namespace) -> Path:
    if args.csv:
        return Path(args.csv)
    return load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = resolve_csv(args)
    df = load_results(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(min_depth=args.min_depth, max_depth=args.max_depth)

    table = depth_summary(df, cfg)
    print("\n=== Search cost by depth ===")
    print(table.to_string(index=False))

    dist = column_distribution(df)
    if not dist.empty:
        print("\n=== Column choice share ===")
        print(dist.round(3).to_string())

    rate = decisive_rate(df, WIN_SCORE)
    if not rate.empty:
        print("\n=== Decisive root scores ===")
        print(rate.round(3).to_string())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
