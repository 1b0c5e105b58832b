"""Tests for search-profile analysis."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from connect4.config import WIN_SCORE
from connect4_analysis.__main__ import main as analysis_main
from connect4_analysis.io.load_results import LoadSpec, load_latest_from_dir, load_results
from connect4_analysis.metrics.summarize import (
    SummaryConfig,
    column_distribution,
    decisive_rate,
    depth_summary,
)
from connect4_analysis.plots import plot_column_histogram, plot_nodes_by_depth, plot_time_by_depth


@pytest.fixture
def profile_df() -> pd.DataFrame:
    return pd.DataFrame({
        "depth": [1, 1, 2, 2],
        "game": [0, 1, 0, 0],
        "ply": [1, 1, 1, 3],
        "column": [0, 3, 3, 3],
        "eval": [0, WIN_SCORE, 0, -WIN_SCORE],
        "nodes": [7, 7, 56, 42],
        "time_ms": [1, 3, 10, 20],
    })


@pytest.fixture
def profile_csv(tmp_path, profile_df):
    path = tmp_path / "search_profile_20240101_000000.csv"
    profile_df.to_csv(path, index=False)
    return path


def test_depth_summary(profile_df):
    table = depth_summary(profile_df)
    assert list(table["depth"]) == [1, 2]
    assert list(table["moves"]) == [2, 2]
    assert list(table["games"]) == [2, 1]
    assert table.loc[0, "mean_nodes"] == 7
    assert table.loc[1, "max_nodes"] == 56
    assert table.loc[1, "mean_ms"] == 15
    assert table.loc[1, "branching"] == pytest.approx(7.0)


def test_depth_summary_filters(profile_df):
    table = depth_summary(profile_df, SummaryConfig(min_depth=2))
    assert list(table["depth"]) == [2]
    assert depth_summary(profile_df, SummaryConfig(min_depth=3)).empty


def test_depth_summary_requires_columns():
    with pytest.raises(ValueError, match="Missing required columns"):
        depth_summary(pd.DataFrame({"depth": [1]}))


def test_column_distribution(profile_df):
    dist = column_distribution(profile_df)
    assert dist.loc[1, 0] == pytest.approx(0.5)
    assert dist.loc[2, 3] == pytest.approx(1.0)
    assert dist.sum(axis=1).tolist() == pytest.approx([1.0, 1.0])


def test_decisive_rate(profile_df):
    rate = decisive_rate(profile_df, WIN_SCORE)
    assert rate.loc[1] == pytest.approx(0.5)
    assert rate.loc[2] == pytest.approx(0.5)


def test_load_results(profile_csv):
    df = load_results(LoadSpec(csv_path=profile_csv))
    assert len(df) == 4
    assert pd.api.types.is_integer_dtype(df["depth"])


def test_load_results_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_results(LoadSpec(csv_path=tmp_path / "missing.csv"))

    bad = tmp_path / "bad.csv"
    bad.write_text("depth,nodes\n1,7\n")
    with pytest.raises(ValueError, match="missing required columns"):
        load_results(LoadSpec(csv_path=bad))


def test_load_latest_from_dir(tmp_path, profile_df):
    for ts in ("20240101_000000", "20240301_000000", "20240201_000000"):
        profile_df.to_csv(tmp_path / f"search_profile_{ts}.csv", index=False)
    assert load_latest_from_dir(tmp_path).name == "search_profile_20240301_000000.csv"

    with pytest.raises(FileNotFoundError):
        load_latest_from_dir(tmp_path / "nope")


def test_plots_are_saved(tmp_path, profile_df):
    summary = depth_summary(profile_df)
    paths = [
        plot_nodes_by_depth(summary, tmp_path, show=False),
        plot_time_by_depth(summary, tmp_path, show=False),
        plot_column_histogram(profile_df, tmp_path, show=False),
    ]
    for p in paths:
        assert p is not None and p.exists()


def test_plots_skip_empty(tmp_path):
    assert plot_nodes_by_depth(pd.DataFrame(), tmp_path, show=False) is None


def test_cli_router(profile_csv, tmp_path, capsys):
    assert analysis_main(["analyze", "--csv", str(profile_csv)]) == 0
    out = capsys.readouterr().out
    assert "Search cost by depth" in out

    figs = tmp_path / "figs"
    assert analysis_main(["figures", "--csv", str(profile_csv), "--figures-dir", str(figs)]) == 0
    assert (figs / "nodes_by_depth.png").exists()

    assert analysis_main(["bogus"]) == 2
