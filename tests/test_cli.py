import numpy as np
import pytest

from hungarian_rect import run


def test_default_run_prints_example(capsys) -> None:
    assert run.main([]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Minimum total cost = 10.200",
        "Job 0 -> Worker 1 (Cost = 6.20)",
        "Job 1 -> Worker 0 (Cost = 2.50)",
        "Job 2 -> Worker 2 (Cost = 1.50)",
        "Job 3 -> unassigned",
    ]


def test_csv_input(tmp_path, capsys) -> None:
    path = tmp_path / "costs.csv"
    path.write_text("4,1,3\n2,0,5\n3,2,2\n")

    assert run.main(["--csv", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Minimum total cost = 5.000" in out
    assert "Job 1 -> Worker 0 (Cost = 1.00)" in out


def test_generated_large_matrix_prints_summary_only(capsys) -> None:
    assert run.main(["--n", "15", "--m", "25", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "n=15 m=25" in out
    assert "Job 0" not in out


def test_invalid_matrix_exits_with_error(tmp_path, capsys) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("1,nan\n2,3\n")

    assert run.main(["--csv", str(path)]) == 2

    err = capsys.readouterr().err
    assert "not finite" in err


def test_npy_input(tmp_path, capsys) -> None:
    path = tmp_path / "costs.npy"
    np.save(path, np.array([[2.0, 1.0], [1.0, 2.0], [5.0, 5.0]]))

    assert run.main(["--npy", str(path)]) == 0

    out = capsys.readouterr().out
    assert "Minimum total cost = 2.000" in out


def test_missing_file_exits_with_error(tmp_path, capsys) -> None:
    assert run.main(["--csv", str(tmp_path / "nope.csv")]) == 2

    assert capsys.readouterr().err.startswith("error:")


def test_ragged_csv_exits_with_error(tmp_path, capsys) -> None:
    path = tmp_path / "ragged.csv"
    path.write_text("1,2,3\n4,5\n")

    assert run.main(["--csv", str(path)]) == 2

    assert capsys.readouterr().err.startswith("error:")


def test_negative_size_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        run.main(["--n", "-1"])

    assert exc.value.code == 2
    assert "--n must be >= 0" in capsys.readouterr().err
