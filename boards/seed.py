from __future__ import annotations

import numpy as np
from typing import Optional, Sequence, Tuple

from engine.life import check_board

LIVE_CHARS = frozenset("#1Oo*X█")


def empty_board(width: int, height: int) -> np.ndarray:
    """Return an all-dead flat board."""
    return check_board(np.zeros(width * height, dtype=bool), width, height)


def random_board(
    width: int,
    height: int,
    p: float = 0.2,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """Return a flat board with each cell live independently with probability p.

    The random source is either passed in as ``rng`` or built from ``seed``;
    the same seed always yields the same board.
    """
    if not (0.0 <= p <= 1.0):
        raise ValueError(f"p must be in [0,1], got {p}")
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be positive, got {width}x{height}")
    g = rng if rng is not None else np.random.default_rng(seed)
    return g.random(width * height) < p


def board_from_rows(rows: Sequence) -> Tuple[np.ndarray, int, int]:
    """Build (board, width, height) from equal-length rows.

    Rows may be strings, where any of ``#1Oo*X█`` marks a live cell, or
    sequences of truthy values.
    """
    if len(rows) == 0:
        raise ValueError("rows must not be empty")
    width = len(rows[0])
    cells = []
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {r} has length {len(row)}, expected {width}")
        if isinstance(row, str):
            cells.extend(ch in LIVE_CHARS for ch in row)
        else:
            cells.extend(bool(v) for v in row)
    height = len(rows)
    board = check_board(np.array(cells, dtype=bool), width, height)
    return board, width, height
