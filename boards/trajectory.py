from __future__ import annotations

import numpy as np
from typing import Iterator

from engine.life import check_board, step


def iterate_generations(board, width: int, height: int, generations: int) -> Iterator[np.ndarray]:
    """Yield ``generations`` successive boards, each computed from the previous one."""
    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")
    current = check_board(board, width, height)
    for _ in range(generations):
        current = step(current, width, height)
        yield current


def make_trajectory(board, width: int, height: int, generations: int) -> np.ndarray:
    """Return trajectory array (T+1, H*W); row 0 is the starting board."""
    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")
    start = check_board(board, width, height)
    traj = np.empty((generations + 1, width * height), dtype=bool)
    traj[0] = start
    for t, nxt in enumerate(iterate_generations(start, width, height, generations), start=1):
        traj[t] = nxt
    return traj
