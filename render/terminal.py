from __future__ import annotations

import sys
from typing import Optional, TextIO

from engine.life import check_board

# https://www.gnu.org/software/screen/manual/html_node/Control-Sequences.html
ALT_SCREEN_SET = "\x1b[?1049h"
ALT_SCREEN_RESET = "\x1b[?1049l"
REPOSITION_CURSOR = "\x1b[H"

LIVE_GLYPH = "█"
DEAD_GLYPH = "░"
SEPARATOR = "---"


def format_board(board, width: int, height: int) -> str:
    """Render a flat board as ``height`` newline-terminated rows of glyphs."""
    b = check_board(board, width, height).reshape(height, width)
    lines = []
    for r in range(height):
        lines.append(''.join(LIVE_GLYPH if v else DEAD_GLYPH for v in b[r].tolist()))
    return "\n".join(lines) + "\n"


def format_frame(generation: int, board, width: int, height: int, clear: bool) -> str:
    """Format one frame.

    With ``clear`` the frame starts by moving the cursor home and printing a
    ``gen N`` header, so consecutive frames overwrite each other.
    """
    parts = []
    if clear:
        parts.append(REPOSITION_CURSOR)
        parts.append(f"gen {generation}\n")
    parts.append(format_board(board, width, height))
    parts.append(SEPARATOR + "\n")
    return "".join(parts)


def print_frame(
    generation: int,
    board,
    width: int,
    height: int,
    clear: bool,
    out: Optional[TextIO] = None,
) -> None:
    stream = out if out is not None else sys.stdout
    stream.write(format_frame(generation, board, width, height, clear))
    stream.flush()
