import io

import numpy as np
import pytest

import scripts.run_life as run_life
from boards.patterns import pattern_board
from boards.seed import random_board
from boards.trajectory import make_trajectory
from render.terminal import ALT_SCREEN_RESET, ALT_SCREEN_SET, REPOSITION_CURSOR


def _settings(argv):
    ap = run_life.build_parser()
    return run_life.resolve_settings(ap.parse_args(argv), ap)


def test_defaults():
    s = _settings([])
    assert (s.width, s.height, s.generations, s.time) == (60, 30, 100, 500)
    assert s.probability == 0.2
    assert s.seed is None and s.pattern is None


def test_height_override():
    s = _settings(["-w", "10", "--height", "7"])
    assert (s.width, s.height) == (10, 7)


def test_run_sequence():
    s = _settings(["-w", "6", "-g", "3", "-t", "250", "--seed", "1"])
    out = io.StringIO()
    sleeps = []
    final = run_life.run(s, out=out, sleep=sleeps.append)
    text = out.getvalue()

    assert text.startswith("num gens: 3\nwidth:    6 cells\nheight:   3 cells\nms/gen:   250 ms\n")
    assert sleeps == [0.25, 0.25]
    assert text.count(ALT_SCREEN_SET) == 1
    assert text.count(ALT_SCREEN_RESET) == 1
    assert text.index("initial state:") < text.index(ALT_SCREEN_SET)
    assert text.index(ALT_SCREEN_RESET) < text.index("final state:")
    # Three cleared frames labelled by step index, plus initial and final
    assert text.count(REPOSITION_CURSOR + "gen ") == 3
    assert REPOSITION_CURSOR + "gen 2\n" in text
    assert text.count("---\n") == 5

    start = random_board(6, 3, 0.2, rng=np.random.default_rng(1))
    assert np.array_equal(final, make_trajectory(start, 6, 3, 3)[-1])


def test_engine_called_once_per_generation(monkeypatch):
    calls = []
    real_step = run_life.step

    def counting_step(board, w, h):
        calls.append(1)
        return real_step(board, w, h)

    monkeypatch.setattr(run_life, "step", counting_step)
    s = _settings(["-w", "8", "-g", "7", "-t", "0", "--seed", "3"])
    run_life.run(s, out=io.StringIO(), sleep=lambda _: None)
    assert len(calls) == 7


def test_zero_generations_renders_initial_and_final():
    s = _settings(["-w", "4", "-g", "0", "--seed", "0"])
    out = io.StringIO()
    sleeps = []
    final = run_life.run(s, out=out, sleep=sleeps.append)
    text = out.getvalue()
    assert sleeps == []
    assert REPOSITION_CURSOR not in text
    assert np.array_equal(final, random_board(4, 2, 0.2, rng=np.random.default_rng(0)))


def test_pattern_block_is_stable():
    s = _settings(["-w", "8", "-g", "5", "-t", "0", "--pattern", "block"])
    final = run_life.run(s, out=io.StringIO(), sleep=lambda _: None)
    assert np.array_equal(final, pattern_board("block", 8, 4))


def test_interrupt_restores_screen():
    s = _settings(["-w", "6", "-g", "4", "--seed", "0"])
    out = io.StringIO()

    def interrupt(_):
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        run_life.run(s, out=out, sleep=interrupt)
    text = out.getvalue()
    assert text.endswith(ALT_SCREEN_RESET)
    assert "final state:" not in text


def test_config_file_precedence(tmp_path):
    cfg = tmp_path / "life.yaml"
    cfg.write_text("width: 10\ngenerations: 2\ntime: 0\nseed: 5\n")
    s = _settings(["--config", str(cfg), "-g", "1"])
    assert (s.width, s.height) == (10, 5)
    assert s.generations == 1
    assert s.time == 0
    assert s.seed == 5


def test_empty_config_means_defaults(tmp_path):
    cfg = tmp_path / "empty.yaml"
    cfg.write_text("")
    s = _settings(["--config", str(cfg)])
    assert (s.width, s.generations) == (60, 100)


@pytest.mark.parametrize("body", [
    "colour: red\n",
    "width: -3\n",
    "generations: lots\n",
    "- 1\n- 2\n",
    "seed: -1\n",
    "time: 1.5\n",
    "width: 10.9\n",
    "width: true\n",
    "probability: true\n",
])
def test_bad_config_is_fatal(tmp_path, body):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text(body)
    with pytest.raises(SystemExit) as exc:
        _settings(["--config", str(cfg)])
    assert exc.value.code == 2


def test_missing_config_is_fatal(tmp_path):
    with pytest.raises(SystemExit):
        _settings(["--config", str(tmp_path / "nope.yaml")])


@pytest.mark.parametrize("argv", [
    ["-w", "abc"],
    ["-g", "-1"],
    ["-t", "1.5"],
    ["-w", "0"],
    ["-p", "2"],
    ["--pattern", "nope"],
    ["--seed=-1"],
])
def test_bad_flags_are_fatal(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        run_life.main(argv)
    assert exc.value.code == 2
    assert "error" in capsys.readouterr().err


def test_width_one_gives_empty_board():
    with pytest.raises(SystemExit):
        _settings(["-w", "1"])


def test_main_runs(capsys):
    run_life.main(["-w", "4", "-g", "0", "--seed", "1"])
    out = capsys.readouterr().out
    assert "initial state:" in out
    assert "final state:" in out


def test_shipped_glider_config_loads():
    import os

    path = os.path.join(os.path.dirname(os.path.dirname(__file__)), "configs", "glider.yaml")
    s = _settings(["--config", path])
    assert (s.width, s.height, s.pattern) == (24, 12, "glider")
