import numpy as np
import pytest

from bench import benchmark
from hungarian_rect.utils import generate_matrix
from hungarian_scipy import hungarian_scipy_solve


def test_parse_sizes() -> None:
    assert benchmark.parse_sizes("10x12, 50,3X2") == [(10, 12), (50, 50), (3, 2)]


@pytest.mark.parametrize("bad", ["", "axb", "4x-1"])
def test_parse_sizes_rejects_garbage(bad: str) -> None:
    with pytest.raises(ValueError):
        benchmark.parse_sizes(bad)


def test_scipy_oracle_uses_match_per_job() -> None:
    res = hungarian_scipy_solve([[9.0, 2.5, 7.1, 8.3], [6.2, 4.8, 3.0, 7.9], [5.0, 8.1, 1.5, 8.7]])

    assert res.match.tolist() == [1, 0, 2, -1]
    assert res.cost == pytest.approx(10.2)


def test_scipy_oracle_empty() -> None:
    res = hungarian_scipy_solve(np.zeros((0, 3)))

    assert res.match.tolist() == [-1, -1, -1]
    assert res.cost == 0.0


def test_run_once_rows() -> None:
    C = generate_matrix(8, 12, seed=0)

    rows = benchmark.run_once(C, algo="all", mode="uniform", seed=0)

    by_algo = {r["algo"]: r for r in rows}
    assert set(by_algo) == {"hungarian_rect", "hungarian_scipy", "greedy"}
    assert by_algo["hungarian_rect"]["rel_error"] == pytest.approx(0.0, abs=1e-9)
    assert by_algo["greedy"]["cost"] >= by_algo["hungarian_rect"]["cost"] - 1e-12
    assert all((r["n"], r["m"]) == (8, 12) for r in rows)


def test_run_once_single_algo() -> None:
    rows = benchmark.run_once(generate_matrix(4, 4, seed=1), algo="greedy")

    assert [r["algo"] for r in rows] == ["greedy"]


def test_main_writes_summary_and_aggregate(tmp_path) -> None:
    out_csv = tmp_path / "summary.csv"

    benchmark.main([
        "--sizes", "4x6,5",
        "--repeats", "2",
        "--outdir", str(tmp_path),
        "--out_csv", str(out_csv),
        "--plot",
    ])

    agg = benchmark.aggregate(str(out_csv))
    assert len(agg) == 6
    assert set(agg["count"]) == {2}
    assert (tmp_path / "agg_stats.csv").exists()
    assert (tmp_path / "lines_elapsed_vs_n.png").exists()
    rect = agg[agg["algo"] == "hungarian_rect"]
    assert np.allclose(rect["mean_rel_error"], 0.0, atol=1e-9)
