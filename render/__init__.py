from .terminal import (
    ALT_SCREEN_SET,
    ALT_SCREEN_RESET,
    REPOSITION_CURSOR,
    LIVE_GLYPH,
    DEAD_GLYPH,
    format_board,
    format_frame,
    print_frame,
)

__all__ = [
    "ALT_SCREEN_SET",
    "ALT_SCREEN_RESET",
    "REPOSITION_CURSOR",
    "LIVE_GLYPH",
    "DEAD_GLYPH",
    "format_board",
    "format_frame",
    "print_frame",
]
