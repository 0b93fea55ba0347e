from __future__ import annotations

import numpy as np
from typing import Dict, List, Sequence, Tuple, Union

from engine.life import cell_index, check_board

Cells = List[Tuple[int, int]]

# (dx, dy) offsets of live cells, top-left anchored.
PATTERNS: Dict[str, Cells] = {
    "block": [(0, 0), (1, 0), (0, 1), (1, 1)],
    "blinker": [(0, 0), (1, 0), (2, 0)],
    "toad": [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
    "beacon": [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
    "glider": [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
}


def pattern_cells(name: str) -> Cells:
    try:
        return list(PATTERNS[name])
    except KeyError:
        raise KeyError(f"unknown pattern {name!r}; known: {', '.join(sorted(PATTERNS))}") from None


def place_pattern(
    board,
    width: int,
    height: int,
    pattern: Union[str, Sequence[Tuple[int, int]]],
    x0: int,
    y0: int,
) -> np.ndarray:
    """Return a copy of ``board`` with the pattern's cells set live at (x0, y0).

    Offsets wrap around the torus, so a pattern may straddle an edge.
    """
    cells = pattern_cells(pattern) if isinstance(pattern, str) else list(pattern)
    out = check_board(board, width, height).copy()
    for dx, dy in cells:
        out[cell_index((x0 + dx) % width, (y0 + dy) % height, width)] = True
    return out


def pattern_board(name: str, width: int, height: int) -> np.ndarray:
    """Empty board with the named pattern placed near the centre."""
    cells = pattern_cells(name)
    pw = max(dx for dx, _ in cells) + 1
    ph = max(dy for _, dy in cells) + 1
    blank = np.zeros(width * height, dtype=bool)
    return place_pattern(blank, width, height, cells, (width - pw) // 2, (height - ph) // 2)
