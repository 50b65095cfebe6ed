"""Tests for the command-line runner."""

import argparse

import pytest

from gridsearch.__main__ import (
    EXIT_ERROR, EXIT_NO_PATH, EXIT_PATH_FOUND, main, parse_coord,
)


def test_parse_coord():
    assert parse_coord("3,4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord("3;4")


def test_open_grid_run(qapp, capsys):
    code = main(["--size", "5", "--source", "0,0", "--goal", "4,4"])
    out = capsys.readouterr().out

    assert code == EXIT_PATH_FOUND
    assert "Path found: 9 cells, cost 80" in out
    assert out.splitlines()[0].startswith("S")


def test_wall_scenario_with_diagonals(qapp, capsys):
    walls = []
    for y in range(4):
        walls += ["--wall", f"2,{y}"]
    code = main(["--size", "5", "--source", "0,0", "--goal", "4,4", "--diagonal", "--quiet"] + walls)

    assert code == EXIT_PATH_FOUND
    assert "cost 68" in capsys.readouterr().out


def test_layout_file_without_path(qapp, tmp_path, capsys):
    layout = tmp_path / "enclosed.txt"
    layout.write_text("S....\n.....\n..###\n..#G#\n..###\n")

    code = main(["--layout", str(layout), "--algorithm", "astar", "--diagonal", "--quiet"])

    assert code == EXIT_NO_PATH
    assert "No path exists (16 cells settled)" in capsys.readouterr().out


def test_missing_layout_file(qapp, tmp_path, capsys):
    code = main(["--layout", str(tmp_path / "missing.txt")])
    assert code == EXIT_ERROR
    assert "Error building grid" in capsys.readouterr().out


def test_layout_without_goal(qapp, tmp_path, capsys):
    layout = tmp_path / "nogoal.txt"
    layout.write_text("S..\n...\n")
    code = main(["--layout", str(layout)])
    assert code == EXIT_ERROR
    assert "no goal" in capsys.readouterr().out


def test_weight_out_of_range(qapp, capsys):
    code = main(["--size", "5", "--algorithm", "astar", "--weight", "25"])
    assert code == EXIT_ERROR
    assert "Heuristic weight" in capsys.readouterr().out


def test_heap_frontier_with_random_walls(qapp, capsys):
    args = ["--size", "15", "--density", "0.2", "--seed", "3", "--quiet"]
    linear_code = main(args + ["--frontier", "linear"])
    linear_out = capsys.readouterr().out
    heap_code = main(args + ["--frontier", "heap"])
    heap_out = capsys.readouterr().out

    assert linear_code == heap_code
    assert linear_out == heap_out


def test_live_run(qapp, capsys):
    code = main(["--size", "5", "--source", "0,0", "--goal", "1,0", "--live", "--speed", "60", "--quiet"])
    out = capsys.readouterr().out

    assert code == EXIT_PATH_FOUND
    assert "step 1: settled (0, 0)" in out
    assert "Path found: 2 cells, cost 10" in out
