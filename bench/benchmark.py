from __future__ import annotations
import argparse, os, time, csv
from typing import Dict, List, Optional, Tuple
import numpy as np
import pandas as pd


def _lazy_import_matplotlib():
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    return plt


from hungarian_rect.hungarian import hungarian_solve
from hungarian_rect.utils import generate_matrix, greedy_baseline
from hungarian_scipy.hungarian_lib import hungarian_scipy_solve

ALGOS = ["hungarian_rect", "hungarian_scipy", "greedy", "all"]
FIELDS = ["algo", "n", "m", "mode", "seed", "cost", "opt_cost", "rel_error", "elapsed", "iterations"]

ALGO_LABELS_RU = {
    "hungarian_rect": "Венгерский (прямоугольный)",
    "hungarian_scipy": "Венгерский SciPy",
    "greedy": "Жадный",
}


def display_algo(name: str) -> str:
    return ALGO_LABELS_RU.get(name, name)


def metric_label(metric: str) -> str:
    m = metric.lower()
    if m.endswith("elapsed"):
        return "Время выполнения, с"
    if m.endswith("rel_error"):
        return "Относительная ошибка (доля)"
    return metric.replace("_", " ").title()


def parse_sizes(sizes_arg: str) -> List[Tuple[int, int]]:
    """'10x12,50' -> [(10, 12), (50, 50)]"""
    sizes = []
    for part in sizes_arg.split(","):
        part = part.strip().lower()
        if not part:
            continue
        if "x" in part:
            n, m = part.split("x", 1)
            sizes.append((int(n), int(m)))
        else:
            sizes.append((int(part), int(part)))
    if not sizes:
        raise ValueError(f"no sizes in {sizes_arg!r}")
    if any(n < 0 or m < 0 for n, m in sizes):
        raise ValueError(f"negative size in {sizes_arg!r}")
    return sizes


def rel_error(cost: float, opt_cost: Optional[float]):
    if opt_cost is None or opt_cost <= 0:
        return ""
    return (cost - opt_cost) / opt_cost


def run_hungarian_rect(C: np.ndarray) -> Dict[str, object]:
    res = hungarian_solve(C)
    return {"algo": "hungarian_rect", "cost": res.cost, "elapsed": res.elapsed, "iterations": res.iterations}


def run_hungarian_scipy(C: np.ndarray) -> Dict[str, object]:
    res = hungarian_scipy_solve(C)
    return {"algo": "hungarian_scipy", "cost": res.cost, "elapsed": res.elapsed, "iterations": ""}


def run_greedy(C: np.ndarray) -> Dict[str, object]:
    t0 = time.time()
    _, cost = greedy_baseline(C)
    return {"algo": "greedy", "cost": cost, "elapsed": time.time() - t0, "iterations": ""}


RUNNERS = {
    "hungarian_rect": run_hungarian_rect,
    "hungarian_scipy": run_hungarian_scipy,
    "greedy": run_greedy,
}


def run_once(C: np.ndarray, algo: str = "all", mode: str = "", seed: int = 0) -> List[Dict[str, object]]:
    n, m = C.shape
    opt_cost = hungarian_scipy_solve(C).cost
    names = [a for a in RUNNERS if algo in (a, "all")]
    rows: List[Dict[str, object]] = []
    for name in names:
        res = RUNNERS[name](C)
        rows.append({
            "algo": name, "n": n, "m": m, "mode": mode, "seed": seed,
            "cost": res["cost"], "opt_cost": opt_cost, "rel_error": rel_error(res["cost"], opt_cost),
            "elapsed": res["elapsed"], "iterations": res["iterations"],
        })
    return rows


def save_rows(rows: List[Dict[str, object]], out_csv: str) -> None:
    if not rows:
        return
    write_header = not os.path.exists(out_csv)
    os.makedirs(os.path.dirname(out_csv) or ".", exist_ok=True)
    with open(out_csv, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        if write_header: w.writeheader()
        for r in rows: w.writerow({k: r.get(k, "") for k in FIELDS})


def aggregate(summary_csv: str) -> pd.DataFrame:
    df = pd.read_csv(summary_csv)
    df["rel_error"] = pd.to_numeric(df["rel_error"], errors="coerce")
    df["elapsed"] = pd.to_numeric(df["elapsed"], errors="coerce")
    agg = df.groupby(["algo", "n", "m"]).agg(
        mean_elapsed=("elapsed", "mean"),
        std_elapsed=("elapsed", "std"),
        mean_rel_error=("rel_error", "mean"),
        std_rel_error=("rel_error", "std"),
        count=("elapsed", "count"),
    ).reset_index()
    agg["N"] = agg[["n", "m"]].max(axis=1)
    return agg


def plot_lines(agg: pd.DataFrame, out_png: str, metric: str, title: str) -> None:
    if agg.empty:
        return
    plt = _lazy_import_matplotlib()
    plt.figure(figsize=(9, 6))
    for algo, g in agg.groupby("algo"):
        g = g.sort_values("N")
        plt.plot(g["N"], g[metric], marker="o", label=display_algo(algo))
    plt.xlabel("Размер задачи, max(n, m)")
    plt.ylabel(metric_label(metric))
    plt.title(title)
    plt.legend()
    plt.grid(True, ls="--", alpha=0.4)
    plt.tight_layout()
    plt.savefig(out_png)
    plt.close()


def main(argv=None):
    p = argparse.ArgumentParser(description="Benchmark rectangular Hungarian against SciPy and greedy")
    p.add_argument("--algo", choices=ALGOS, default="all")
    p.add_argument("--sizes", type=str, default="10x12,50x40,100x150")
    p.add_argument("--mode", type=str, default="uniform")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--repeats", type=int, default=1)
    p.add_argument("--outdir", type=str, default="out")
    p.add_argument("--out_csv", type=str, default="out/summary.csv")
    p.add_argument("--plot", action="store_true")
    args = p.parse_args(argv)

    sizes = parse_sizes(args.sizes)
    os.makedirs(args.outdir, exist_ok=True)

    total = len(sizes) * args.repeats
    cur = 0
    for n, m in sizes:
        for r in range(args.repeats):
            cur += 1
            seed = args.seed + r
            print(f"[bench] {cur}/{total} : n={n}, m={m}, seed={seed}")
            C = generate_matrix(n, m, mode=args.mode, seed=seed)
            rows = run_once(C, algo=args.algo, mode=args.mode, seed=seed)
            save_rows(rows, args.out_csv)
            for row in rows: print(row)

    agg = aggregate(args.out_csv)
    agg_csv = os.path.join(args.outdir, "agg_stats.csv")
    agg.to_csv(agg_csv, index=False)
    print(f"Saved aggregated stats to {agg_csv}")

    if args.plot:
        out_png = os.path.join(args.outdir, "lines_elapsed_vs_n.png")
        plot_lines(agg, out_png, "mean_elapsed", "Зависимость времени выполнения от размера задачи")
        print("Saved", out_png)
    return 0


if __name__ == "__main__":
    main()
