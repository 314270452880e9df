import csv
import os

import pytest

from crucible.cli import build_argparser, main


@pytest.fixture
def example_file(tmp_path, example_text):
    p = tmp_path / "example.txt"
    p.write_text(example_text)
    return str(p)


@pytest.fixture
def small_file(tmp_path):
    p = tmp_path / "small.txt"
    p.write_text("12\n34\n")
    return str(p)


def test_solve_prints_both_profiles(capsys, example_file):
    assert main(["solve", example_file]) == 0
    assert capsys.readouterr().out == "normal: 102\nultra: 94\n"


def test_solve_reports_no_path(capsys, small_file):
    assert main(["solve", small_file]) == 1
    assert capsys.readouterr().out == "normal: 6\nultra: no path\n"


def test_solve_custom_profile_with_path(capsys, small_file):
    assert main(["solve", small_file, "--profile", "1:1", "--path"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1:1: 6"
    assert out[1].split() == ["X(0,", "0)x0", "E(1,", "0)x1", "S(1,", "1)x1"]


def test_solve_stats(capsys, example_file):
    assert main(["solve", example_file, "--profile", "normal", "--stats"]) == 0
    line = capsys.readouterr().out.strip()
    assert line.startswith("normal")
    assert "reached=True" in line
    assert "cost=   102" in line


def test_bad_grid_file(capsys, tmp_path):
    p = tmp_path / "bad.txt"
    p.write_text("12\n3x\n")
    assert main(["solve", str(p)]) == 1
    assert "invalid cost character" in capsys.readouterr().err


def test_missing_file(capsys, tmp_path):
    assert main(["solve", str(tmp_path / "nope.txt")]) == 1
    assert "crucible:" in capsys.readouterr().err


def test_bad_profile(capsys, small_file):
    assert main(["solve", small_file, "--profile", "9:1"]) == 1
    assert "max_straight" in capsys.readouterr().err


def test_profile_default_not_shared_between_parses():
    ap = build_argparser()
    a = ap.parse_args(["solve", "f", "--profile", "ultra"])
    b = ap.parse_args(["solve", "f"])
    assert a.profile == ["ultra"]
    assert b.profile is None


def test_gen_then_bench(capsys, tmp_path):
    envs = tmp_path / "envs"
    assert main(["gen", "--count", "2", "--width", "6", "--height", "5", "--seed", "7", "--out", str(envs)]) == 0
    assert sorted(os.listdir(envs)) == ["grid_000.txt", "grid_001.txt"]

    out_csv = tmp_path / "bench.csv"
    assert main(["bench", "--envdir", str(envs), "--profile", "normal", "--csv", str(out_csv)]) == 0
    with open(out_csv, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [(r["env"], r["profile"], r["reached"]) for r in rows] == [
        ("grid_000.txt", "normal", "True"),
        ("grid_001.txt", "normal", "True"),
    ]
    assert all(int(r["cost"]) > 0 for r in rows)


def test_png(capsys, tmp_path, small_file):
    out_dir = tmp_path / "runs"
    assert main(["png", small_file, "--out", str(out_dir), "--profile", "normal", "--profile", "2:3"]) == 0
    assert sorted(os.listdir(out_dir)) == ["small_2-3.png", "small_normal.png"]
    out = capsys.readouterr().out
    assert "normal: 6" in out
    assert "2:3: no path" in out


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])
