import numpy as np
from typing import List, Tuple


def cell_index(x: int, y: int, width: int) -> int:
    """Row-major index of cell (x, y) in a flat board."""
    return y * width + x


def check_board(board, width: int, height: int) -> np.ndarray:
    """Validate dimensions and return the board as a flat bool array.

    Raises:
        ValueError: non-positive dimensions, a board that is not 1D, or a
            board whose length is not ``width * height``.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be positive, got {width}x{height}")
    b = np.asarray(board)
    if b.ndim != 1:
        raise ValueError("board must be 1D (flat, row-major)")
    if b.shape[0] != width * height:
        raise ValueError(
            f"board length {b.shape[0]} does not match {width}x{height}={width * height}"
        )
    return b.astype(bool)


def wrap_neighbors(x: int, y: int, width: int, height: int) -> List[Tuple[int, int]]:
    """Return the 8 Moore neighbors of (x, y) with toroidal wraparound.

    On boards narrower or shorter than 3 cells the same coordinate can appear
    more than once, matching how ``neighbor_counts`` counts it.
    """
    left = width - 1 if x == 0 else x - 1
    right = 0 if x == width - 1 else x + 1
    up = height - 1 if y == 0 else y - 1
    down = 0 if y == height - 1 else y + 1
    cols = (left, x, right)
    rows = (up, y, down)
    return [
        (cols[i], rows[j])
        for j in range(3)
        for i in range(3)
        if (i, j) != (1, 1)
    ]


def neighbor_counts(board, width: int, height: int) -> np.ndarray:
    """Compute 8-neighbor counts for a flat board on a torus.

    Args:
        board: 1D array of length width*height, row-major, truthy = live.
        width: Number of columns.
        height: Number of rows.

    Returns:
        1D array of the same length with integer counts in [0, 8].
    """
    b = check_board(board, width, height).reshape(height, width).astype(np.uint8)
    up = np.roll(b, -1, axis=0)
    down = np.roll(b, 1, axis=0)
    left = np.roll(b, -1, axis=1)
    right = np.roll(b, 1, axis=1)
    up_left = np.roll(up, -1, axis=1)
    up_right = np.roll(up, 1, axis=1)
    down_left = np.roll(down, -1, axis=1)
    down_right = np.roll(down, 1, axis=1)
    counts = (
        up + down + left + right + up_left + up_right + down_left + down_right
    )
    return counts.astype(np.int16).reshape(-1)


def step(board, width: int, height: int) -> np.ndarray:
    """Canonical Conway's Life step (B3/S23) on a toroidal grid.

    Reads only from ``board`` and returns a freshly allocated board, so the
    caller swaps buffers instead of updating in place.

    Args:
        board: 1D array of length width*height, row-major.
        width: Number of columns (> 0).
        height: Number of rows (> 0).

    Returns:
        Next board, 1D bool array of the same length.
    """
    live = check_board(board, width, height)
    counts = neighbor_counts(live, width, height)
    born = (~live) & (counts == 3)
    survive = live & ((counts == 2) | (counts == 3))
    return born | survive
