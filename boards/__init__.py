from .seed import empty_board, random_board, board_from_rows
from .patterns import PATTERNS, pattern_cells, place_pattern, pattern_board
from .trajectory import iterate_generations, make_trajectory

__all__ = [
    "empty_board",
    "random_board",
    "board_from_rows",
    "PATTERNS",
    "pattern_cells",
    "place_pattern",
    "pattern_board",
    "iterate_generations",
    "make_trajectory",
]
