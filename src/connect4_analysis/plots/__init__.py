from .chart import (
    plot_column_histogram,
    plot_nodes_by_depth,
    plot_time_by_depth,
)

__all__ = [
    "plot_column_histogram",
    "plot_nodes_by_depth",
    "plot_time_by_depth",
]
