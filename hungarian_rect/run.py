from __future__ import annotations
import argparse, sys
import numpy as np
from .errors import AssignmentError
from .hungarian import HungarianParams, hungarian_solve, UNASSIGNED
from .utils import generate_matrix, load_matrix

EXAMPLE = np.array([
    [9.0, 2.5, 7.1, 8.3],
    [6.2, 4.8, 3.0, 7.9],
    [5.0, 8.1, 1.5, 8.7],
], dtype=float)


def build_matrix(args) -> np.ndarray:
    if args.csv:
        return load_matrix(args.csv)
    elif args.npy:
        return load_matrix(args.npy)
    elif args.n is not None:
        return generate_matrix(args.n, args.m, mode=args.mode, seed=args.seed)
    return EXAMPLE


def format_result(C: np.ndarray, res) -> str:
    lines = [f"Minimum total cost = {res.cost:.3f}"]
    if len(res.match) > 20:
        lines.append(f"n={C.shape[0]} m={C.shape[1]} elapsed={res.elapsed:.3f}s steps={res.iterations}")
        return "\n".join(lines)
    for j, i in enumerate(res.match):
        if i != UNASSIGNED:
            lines.append(f"Job {j} -> Worker {i} (Cost = {C[i, j]:.2f})")
        else:
            lines.append(f"Job {j} -> unassigned")
    return "\n".join(lines)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Rectangular Hungarian assignment (rows = workers, cols = jobs)")
    ap.add_argument("--csv", type=str, default=None, help="Path to CSV matrix")
    ap.add_argument("--npy", type=str, default=None, help="Path to .npy matrix")
    ap.add_argument("--n", type=int, default=None, help="Workers for generated matrix")
    ap.add_argument("--m", type=int, default=None, help="Jobs for generated matrix (default: n)")
    ap.add_argument("--mode", type=str, default="uniform", help="Matrix gen mode")
    ap.add_argument("--seed", type=int, default=42)
    ap.add_argument("--pad_margin", type=float, default=1.0)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    for name in ("n", "m"):
        if getattr(args, name) is not None and getattr(args, name) < 0:
            ap.error(f"--{name} must be >= 0")

    try:
        C = build_matrix(args)
        res = hungarian_solve(C, params=HungarianParams(pad_margin=args.pad_margin, verbose=args.verbose))
    except (AssignmentError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(format_result(C, res))
    return 0


if __name__ == "__main__":
    sys.exit(main())
