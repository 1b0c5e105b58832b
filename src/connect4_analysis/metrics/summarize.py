from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    min_depth: int = 1
    max_depth: int | None = None


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["depth"])
    out = df[df["depth"] >= cfg.min_depth]
    if cfg.max_depth is not None:
        out = out[out["depth"] <= cfg.max_depth]
    return out.copy()


def depth_summary(df: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    """
    One row per search depth: decision count, node and time statistics and
    the effective branching factor (mean_nodes ** (1 / depth)).
    """
    _require_cols(df, ["depth", "game", "nodes", "time_ms"])
    out = filter_rows(df, cfg)
    if out.empty:
        return pd.DataFrame(
            columns=["depth", "moves", "games", "mean_nodes", "max_nodes", "mean_ms", "p95_ms", "branching"]
        )

    g = out.groupby("depth")
    table = pd.DataFrame({
        "moves": g.size(),
        "games": g["game"].nunique(),
        "mean_nodes": g["nodes"].mean(),
        "max_nodes": g["nodes"].max(),
        "mean_ms": g["time_ms"].mean(),
        "p95_ms": g["time_ms"].quantile(0.95),
    }).reset_index()

    table["branching"] = table["mean_nodes"] ** (1.0 / table["depth"])
    return table.sort_values("depth").reset_index(drop=True)


def column_distribution(df: pd.DataFrame) -> pd.DataFrame:
    """Share of decisions per chosen column, one row per depth."""
    _require_cols(df, ["depth", "column"])
    if df.empty:
        return pd.DataFrame()
    return pd.crosstab(df["depth"], df["column"], normalize="index")


def decisive_rate(df: pd.DataFrame, win_score: int) -> pd.Series:
    """Fraction of decisions per depth whose root score was a forced win or loss."""
    _require_cols(df, ["depth", "eval"])
    decisive = df["eval"].abs() >= win_score
    return decisive.groupby(df["depth"]).mean().rename("decisive_rate")
