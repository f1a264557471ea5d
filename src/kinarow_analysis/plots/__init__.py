from .chart import (
    plot_score_matrix,
    plot_search_cost,
    plot_seat_outcomes,
)

__all__ = [
    "plot_score_matrix",
    "plot_search_cost",
    "plot_seat_outcomes",
]
