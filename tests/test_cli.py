import pytest

from statesearch import cli


def test_vacuum_bfs(capsys):
    assert cli.main(["--problem", "vacuum", "--strategy", "bfs"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Suck", "Right", "Suck", "cost=3 steps=3"]


def test_romania_ucs(capsys):
    assert cli.main(["--problem", "romania", "--strategy", "ucs", "--start", "Arad", "--goal", "Bucharest"]) == 0
    out = capsys.readouterr().out
    assert "Pitesti" in out
    assert out.strip().endswith("cost=418 steps=4")


def test_puzzle_prints_board_and_plan(capsys):
    assert cli.main(["--problem", "puzzle", "--scramble-depth", "6", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "." in out.splitlines()[0] + out.splitlines()[1] + out.splitlines()[2]
    assert "cost=" in out


def test_no_solution_exits_nonzero(capsys, monkeypatch):
    monkeypatch.setitem(cli.STRATEGIES, "bfs", lambda problem: None)
    assert cli.main(["--problem", "vacuum", "--strategy", "bfs"]) == 1
    captured = capsys.readouterr()
    assert "Could not find a solution" in captured.err
    assert captured.out == ""


def test_puzzle_size_below_two_is_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--problem", "puzzle", "--size", "1"])
    assert exc.value.code == 2
    assert "at least 2" in capsys.readouterr().err
