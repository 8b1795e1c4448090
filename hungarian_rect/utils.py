from __future__ import annotations
import numpy as np
from typing import Optional, Tuple
import itertools
import os

from .hungarian import UNASSIGNED


def assignment_cost(C: np.ndarray, match: np.ndarray) -> float:
    C = np.asarray(C, dtype=float)
    match = np.asarray(match, dtype=int)
    jobs = np.flatnonzero(match != UNASSIGNED)
    return float(C[match[jobs], jobs].sum())


def is_valid_match(match: np.ndarray, n: int, m: int) -> bool:
    """
    Matching property: length m, every entry a worker in [0, n) or UNASSIGNED,
    no worker used twice, and exactly min(n, m) jobs covered.
    """
    match = np.asarray(match, dtype=int)
    if match.shape != (m,):
        return False
    assigned = match[match != UNASSIGNED]
    if np.any((assigned < 0) | (assigned >= n)):
        return False
    if len(set(assigned.tolist())) != len(assigned):
        return False
    return len(assigned) == min(n, m)


def brute_force_opt(C: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Exact optimum via brute-force injective maps of the smaller side into the
    larger one (ONLY for very small matrices). Returns (match, cost) where
    match[j] is the worker of job j or UNASSIGNED.
    """
    C = np.asarray(C, dtype=float)
    n, m = C.shape
    assert min(n, m) <= 8 and max(n, m) <= 9, "brute force is only meant for tiny matrices"
    best_cost = float("inf")
    best_match = np.full(m, UNASSIGNED, dtype=int)
    if n == 0 or m == 0:
        return best_match, 0.0
    if n <= m:
        for cols in itertools.permutations(range(m), n):
            cost = float(C[np.arange(n), list(cols)].sum())
            if cost < best_cost:
                best_cost = cost
                best_match = np.full(m, UNASSIGNED, dtype=int)
                best_match[list(cols)] = np.arange(n)
    else:
        for rows in itertools.permutations(range(n), m):
            cost = float(C[list(rows), np.arange(m)].sum())
            if cost < best_cost:
                best_cost = cost
                best_match = np.array(rows, dtype=int)
    return best_match, best_cost


def greedy_baseline(C: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Simple greedy: repeatedly pick globally smallest unused cell (row, col not used).
    """
    C = np.asarray(C, dtype=float)
    n, m = C.shape
    rows_used = set()
    match = np.full(m, UNASSIGNED, dtype=int)
    target = min(n, m)
    # Flatten and sort
    flat = [(C[i, j], i, j) for i in range(n) for j in range(m)]
    flat.sort(key=lambda x: x[0])
    for _, i, j in flat:
        if len(rows_used) == target:
            break
        if i in rows_used or match[j] != UNASSIGNED:
            continue
        match[j] = i
        rows_used.add(i)
    return match, assignment_cost(C, match)


def generate_matrix(n: int, m: Optional[int] = None, mode: str = "uniform", seed: int = 42,
                    **kwargs) -> np.ndarray:
    """
    Generate synthetic n x m cost matrices (square when m is None).
    Modes:
      - uniform: U[0,1)
      - normal: N(0,1) abs
      - diag_dom: near-zero main diagonal, larger elsewhere
      - block: clusters of low-cost blocks
      - integer: integers in [0, high), lots of ties
    """
    m = n if m is None else m
    rng = np.random.default_rng(seed)
    if mode == "uniform":
        C = rng.random((n, m))
    elif mode == "normal":
        C = np.abs(rng.normal(0, 1, (n, m)))
    elif mode == "diag_dom":
        C = 0.1 * rng.random((n, m)) + 1.0
        k = min(n, m)
        C[np.arange(k), np.arange(k)] = 0.01 * rng.random(k)
    elif mode == "block":
        C = 1.0 + rng.random((n, m))
        b = kwargs.get("blocks", 4)
        bs_r, bs_c = max(1, n // b), max(1, m // b)
        for bi in range(b):
            for bj in range(b):
                si = slice(bi * bs_r, min((bi + 1) * bs_r, n))
                sj = slice(bj * bs_c, min((bj + 1) * bs_c, m))
                C[si, sj] *= rng.uniform(0.1, 0.5)
    elif mode == "integer":
        C = rng.integers(0, kwargs.get("high", 100), (n, m)).astype(float)
    else:
        raise ValueError(f"Unknown mode: {mode}")
    return C


def load_matrix(path: str) -> np.ndarray:
    ext = os.path.splitext(path)[1].lower()
    if ext == ".npy":
        return np.asarray(np.load(path), dtype=float)
    return np.loadtxt(path, delimiter=",", dtype=float, ndmin=2)
