from .chart import (
    plot_column_frequency,
    plot_game_lengths,
)

__all__ = [
    "plot_column_frequency",
    "plot_game_lengths",
]
