import csv
from pathlib import Path

import pytest

from gridpath import cli
from gridpath.grid import GridWorld


def test_gen_writes_grids(tmp_path: Path, capsys):
    out = tmp_path / "envs"
    rc = cli.main(["gen", "--count", "3", "--width", "8", "--height", "6",
                   "--rough", "0.2", "--out", str(out), "--seed", "5"])
    assert rc == 0
    files = sorted(p.name for p in out.iterdir())
    assert files == ["grid_000.txt", "grid_001.txt", "grid_002.txt"]
    g = GridWorld.load(str(out / "grid_001.txt"))
    assert (g.width, g.height) == (8, 6)
    assert g == GridWorld.random(8, 6, p_blocked=0.25, p_rough=0.2, rough_weight=5, seed=6)
    assert capsys.readouterr().out.count("wrote") == 3


def test_demo_prints_stats_and_pngs(tmp_path: Path, capsys):
    env = tmp_path / "maze.txt"
    GridWorld.uniform(4, 4, (0, 0), (3, 3)).save(str(env))
    out = tmp_path / "runs"
    assert cli.main(["demo", "--env", str(env), "--out", str(out)]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert [ln.split()[0] for ln in lines] == ["bfs", "dijkstra", "astar"]
    assert all("found=True" in ln and "cost=     6" in ln for ln in lines)
    assert sorted(p.name for p in out.iterdir()) == ["maze_astar.png", "maze_bfs.png", "maze_dijkstra.png"]


def test_demo_subset_with_trace(tmp_path: Path, capsys):
    env = tmp_path / "m.txt"
    GridWorld.uniform(3, 3, (0, 0), (2, 2)).save(str(env))
    assert cli.main(["demo", "--env", str(env), "--out", str(tmp_path / "o"),
                     "--algorithms", "astar", "--trace"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1 and lines[0].startswith("astar")


def test_bench_writes_csv(tmp_path: Path):
    envdir = tmp_path / "envs"
    for i in range(2):
        GridWorld.random(6, 6, p_blocked=0.1, seed=i).save(str(envdir / f"g{i}.txt"))
    report = tmp_path / "bench.csv"
    assert cli.main(["bench", "--envdir", str(envdir), "--out", str(tmp_path / "runs"),
                     "--csv", str(report), "--no-png"]) == 0
    with open(report, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 6
    assert set(rows[0]) == {"env", "alg", "found", "path_len", "cost", "visited", "steps", "time_sec"}
    assert {r["alg"] for r in rows} == {"bfs", "dijkstra", "astar"}
    assert not (tmp_path / "runs").exists()


def test_unknown_algorithm_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["demo", "--env", "x.txt", "--algorithms", "bfs,dfs"])
    assert exc.value.code == 2


def test_missing_file_returns_error(tmp_path: Path, capsys):
    rc = cli.main(["demo", "--env", str(tmp_path / "nope.txt"), "--out", str(tmp_path)])
    assert rc == 1
    assert "gridpath: error" in capsys.readouterr().err


def test_ragged_legacy_file_returns_error(tmp_path: Path, capsys):
    env = tmp_path / "ragged.txt"
    env.write_text("000\n01\n000\n")
    rc = cli.main(["demo", "--env", str(env), "--out", str(tmp_path)])
    assert rc == 1
    assert "row 1 has 2 cells" in capsys.readouterr().err


def test_log_level_must_be_a_level_name(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--log-level", "basic_format", "gen", "--count", "1", "--out", str(tmp_path)])
    assert exc.value.code == 2


def test_log_level_is_case_insensitive(tmp_path: Path):
    assert cli.main(["--log-level", "debug", "gen", "--count", "1", "--out", str(tmp_path)]) == 0


def test_bad_log_level_from_environment(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("GRIDPATH_LOG_LEVEL", "bogus")
    with pytest.raises(SystemExit) as exc:
        cli.main(["gen", "--count", "1", "--out", str(tmp_path)])
    assert exc.value.code == 2
