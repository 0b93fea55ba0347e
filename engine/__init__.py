from .life import cell_index, check_board, wrap_neighbors, neighbor_counts, step

__all__ = [
    "cell_index",
    "check_board",
    "wrap_neighbors",
    "neighbor_counts",
    "step",
]
