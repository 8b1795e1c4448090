from __future__ import annotations
from dataclasses import dataclass
import numpy as np, time

from hungarian_rect.hungarian import UNASSIGNED


@dataclass
class SciPyHungarianResult:
    match: np.ndarray
    cost: float
    elapsed: float


def hungarian_scipy_solve(C: np.ndarray) -> SciPyHungarianResult:
    """Library reference: match[j] is the row given to column j, or -1."""
    t0 = time.time()
    try:
        from scipy.optimize import linear_sum_assignment
    except Exception as e:
        raise RuntimeError("SciPy is required (pip install scipy)") from e
    C = np.array(C, dtype=float)
    if C.ndim != 2:
        raise ValueError(f"cost matrix must be 2-D, got shape {C.shape}")
    match = np.full(C.shape[1], UNASSIGNED, dtype=int)
    if C.size == 0:
        return SciPyHungarianResult(match=match, cost=0.0, elapsed=(time.time() - t0))
    r, c = linear_sum_assignment(C)
    match[c] = r
    cost = float(C[r, c].sum())
    return SciPyHungarianResult(match=match, cost=cost, elapsed=(time.time() - t0))
