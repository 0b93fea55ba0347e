from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import Any, Callable, Dict, Optional, TextIO

import numpy as np
import yaml

# Ensure repo root on path when run as a script
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.life import step
from boards.seed import random_board
from boards.patterns import PATTERNS, pattern_board
from render.terminal import ALT_SCREEN_SET, ALT_SCREEN_RESET, print_frame

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = dict(
    width=60,
    height=None,  # width // 2
    generations=100,
    time=500,
    seed=None,
    probability=0.2,
    pattern=None,
)


def _strict_int(value) -> int:
    # YAML values arrive typed; only real ints pass, never floats or bools
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")


def positive_int(text) -> int:
    v = _strict_int(text)
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {v}")
    return v


def non_negative_int(text) -> int:
    v = _strict_int(text)
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {v}")
    return v


def probability(text) -> float:
    if isinstance(text, bool):
        raise argparse.ArgumentTypeError(f"invalid probability: {text!r}")
    try:
        v = float(text)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(f"invalid probability: {text!r}")
    if not (0.0 <= v <= 1.0):
        raise argparse.ArgumentTypeError(f"probability must be in [0,1], got {v}")
    return v


def pattern_name(text) -> str:
    if text not in PATTERNS:
        raise argparse.ArgumentTypeError(f"unknown pattern {text!r}; known: {', '.join(sorted(PATTERNS))}")
    return text


def seed_value(text) -> int:
    v = _strict_int(text)
    if v < 0:
        raise argparse.ArgumentTypeError(f"seed must be a non-negative integer, got {v}")
    return v


# Config keys and the converter applied to each YAML value.
CONFIG_TYPES: Dict[str, Callable[[Any], Any]] = dict(
    width=positive_int,
    height=positive_int,
    generations=non_negative_int,
    time=non_negative_int,
    seed=seed_value,
    probability=probability,
    pattern=pattern_name,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Conway's Game of Life on a toroidal board, rendered to the terminal.")
    # Overridable flags default to None so YAML values can fill them in
    ap.add_argument("-w", "--width", type=positive_int, help="width of the board (default 60)")
    ap.add_argument("--height", type=positive_int, help="height of the board (default width/2)")
    ap.add_argument("-t", "--time", type=non_negative_int, help="time (in ms) between generations (default 500)")
    ap.add_argument("-g", "--generations", type=non_negative_int, help="number of generations (default 100)")
    ap.add_argument("-p", "--probability", type=probability, help="chance a cell starts alive (default 0.2)")
    ap.add_argument("--seed", type=seed_value, help="seed for the random initial board")
    ap.add_argument("--pattern", type=pattern_name, help=f"start from a named pattern: {', '.join(sorted(PATTERNS))}")
    ap.add_argument("--config", type=str, help="YAML config file")
    ap.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def load_config(path: str) -> Dict[str, Any]:
    """Read a YAML config and convert each known key; raise ValueError on bad input."""
    with open(path, "r") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    unknown = sorted(set(cfg) - set(CONFIG_TYPES))
    if unknown:
        raise ValueError(f"{path}: unknown keys: {', '.join(unknown)}")
    out: Dict[str, Any] = {}
    for key, value in cfg.items():
        if value is None:
            continue
        try:
            out[key] = CONFIG_TYPES[key](value)
        except argparse.ArgumentTypeError as e:
            raise ValueError(f"{path}: {key}: {e}") from None
    return out


def resolve_settings(args: argparse.Namespace, ap: argparse.ArgumentParser) -> argparse.Namespace:
    """Merge defaults < YAML config < explicit CLI flags into one namespace."""
    settings = dict(DEFAULTS)
    if args.config:
        try:
            cfg = load_config(args.config)
        except (OSError, yaml.YAMLError, ValueError) as e:
            ap.error(f"cannot load config: {e}")
        logger.info("loaded config from %s: %s", args.config, cfg)
        settings.update(cfg)
    for key in DEFAULTS:
        value = getattr(args, key, None)
        if value is not None:
            settings[key] = value
    if settings["height"] is None:
        settings["height"] = settings["width"] // 2
        if settings["height"] <= 0:
            ap.error(f"width {settings['width']} gives an empty board (height = width/2 = 0)")
    ns = argparse.Namespace(**settings)
    logger.debug("resolved settings: %s", vars(ns))
    return ns


def initial_board(settings: argparse.Namespace) -> np.ndarray:
    if settings.pattern:
        logger.info("seeding from pattern %s", settings.pattern)
        return pattern_board(settings.pattern, settings.width, settings.height)
    if settings.seed is None:
        logger.info("seeding randomly from fresh entropy, p=%s", settings.probability)
    else:
        logger.info("seeding randomly with seed=%d, p=%s", settings.seed, settings.probability)
    rng = np.random.default_rng(settings.seed)
    return random_board(settings.width, settings.height, settings.probability, rng=rng)


def run(
    settings: argparse.Namespace,
    out: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> np.ndarray:
    """Run the simulation and return the final board.

    Prints the initial board, one frame per generation on the alternate
    screen, then the final board on the normal screen.
    """
    stream = out if out is not None else sys.stdout
    w, h, n = settings.width, settings.height, settings.generations

    print(f"num gens: {n}", file=stream)
    print(f"width:    {w} cells", file=stream)
    print(f"height:   {h} cells", file=stream)
    print(f"ms/gen:   {settings.time} ms", file=stream)

    board = initial_board(settings)
    logger.info("initial live cells: %d", int(board.sum()))

    print("initial state:", file=stream)
    print_frame(0, board, w, h, clear=False, out=stream)

    stream.write(ALT_SCREEN_SET)
    try:
        for i in range(n):
            board = step(board, w, h)
            print_frame(i, board, w, h, clear=True, out=stream)
            if i != n - 1:
                sleep(settings.time / 1000.0)
    finally:
        stream.write(ALT_SCREEN_RESET)
        stream.flush()

    logger.info("final live cells: %d", int(board.sum()))
    print("final state:", file=stream)
    print_frame(0, board, w, h, clear=False, out=stream)
    return board


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    settings = resolve_settings(args, ap)
    run(settings)


if __name__ == "__main__":
    main()
