import io

import numpy as np
import pytest

from matching_core.cli import main
from matching_core.io import random_matrix
from matching_core.validation import brute_force_min_cost


def test_stdin_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 1 3\n2 0 5\n3 2 2\n"))
    assert main(["3", "3", "--no-color"]) == 0
    out = capsys.readouterr().out
    assert "Input:" in out and "Output:" in out
    assert "Sum: 5" in out
    assert "    1^" in out


def test_random_with_seed(capsys):
    assert main(["3", "4", "--random", "--seed", "3", "--no-color"]) == 0
    expected = brute_force_min_cost(random_matrix(3, 4, 64, np.random.default_rng(3)))
    assert f"Sum: {expected}" in capsys.readouterr().out


def test_csv_input(tmp_path, capsys):
    path = tmp_path / "m.csv"
    path.write_text("4,1,3\n2,0,5\n3,2,2\n", encoding="utf-8")
    assert main(["--csv", str(path), "--no-color"]) == 0
    assert "Sum: 5" in capsys.readouterr().out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("rows: 2\ncols: 5\nmax_value: 10\nrandom_seed: 8\ncolor: false\n", encoding="utf-8")
    assert main(["--config", str(path)]) == 0
    expected = brute_force_min_cost(random_matrix(2, 5, 10, np.random.default_rng(8)))
    out = capsys.readouterr().out
    assert f"Sum: {expected}" in out
    assert "\033[" not in out


def test_default_random_run(capsys):
    assert main([]) == 0
    assert "Sum:" in capsys.readouterr().out


def test_more_rows_than_columns_exits_2():
    with pytest.raises(SystemExit) as exc:
        main(["3", "2", "--random"])
    assert exc.value.code == 2


def test_rows_without_columns_exits_2():
    with pytest.raises(SystemExit) as exc:
        main(["3"])
    assert exc.value.code == 2


def test_short_stdin_exits_2(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3"))
    with pytest.raises(SystemExit) as exc:
        main(["2", "2"])
    assert exc.value.code == 2


def test_missing_csv_exits_2(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--csv", str(tmp_path / "missing.csv")])
    assert exc.value.code == 2


def test_bad_yaml_exits_2(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("rows: [1\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path)])
    assert exc.value.code == 2


def test_malformed_csv_exits_2(tmp_path):
    path = tmp_path / "m.csv"
    path.write_text("1,2\n3,4,5,6\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--csv", str(path)])
    assert exc.value.code == 2
