from __future__ import annotations
import argparse, numpy as np
from hungarian_rect.utils import generate_matrix, load_matrix
from .hungarian_lib import hungarian_scipy_solve


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", type=str, default=None)
    ap.add_argument("--n", type=int, default=40)
    ap.add_argument("--m", type=int, default=None)
    ap.add_argument("--mode", type=str, default="uniform")
    ap.add_argument("--seed", type=int, default=42)
    args = ap.parse_args()
    if args.csv:
        C = load_matrix(args.csv)
    else:
        C = generate_matrix(args.n, args.m, mode=args.mode, seed=args.seed)
    res = hungarian_scipy_solve(C)
    print(f"status=ok n={C.shape[0]} m={C.shape[1]} cost={res.cost:.6f} elapsed={res.elapsed:.6f}s")
    if C.shape[1] <= 20: print("match:", res.match.tolist())


if __name__ == "__main__":
    main()
