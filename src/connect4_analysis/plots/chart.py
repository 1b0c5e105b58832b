from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_nodes_by_depth(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if summary.empty or "mean_nodes" not in summary.columns:
        return None

    fig = plt.figure()
    plt.plot(summary["depth"], summary["mean_nodes"], marker="o", label="mean")
    plt.plot(summary["depth"], summary["max_nodes"], marker="x", linestyle="--", label="max")
    plt.yscale("log")
    plt.title("Nodes searched per decision")
    plt.xlabel("depth")
    plt.ylabel("nodes")
    plt.legend()
    return _finish(fig, outdir, "nodes_by_depth.png", show=show)


def plot_time_by_depth(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if summary.empty or "mean_ms" not in summary.columns:
        return None

    fig = plt.figure()
    plt.bar(summary["depth"].astype(str), summary["mean_ms"].astype(float))
    plt.title("Mean decision time")
    plt.xlabel("depth")
    plt.ylabel("ms")
    return _finish(fig, outdir, "time_by_depth.png", show=show)


def plot_column_histogram(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if df.empty or "column" not in df.columns:
        return None

    fig = plt.figure()
    for depth, part in df.groupby("depth"):
        plt.hist(part["column"].dropna(), bins=list(range(int(df["column"].max()) + 2)), alpha=0.5, label=f"d{depth}")
    plt.title("Chosen columns")
    plt.xlabel("column")
    plt.ylabel("count")
    plt.legend()
    return _finish(fig, outdir, "column_histogram.png", show=show)
