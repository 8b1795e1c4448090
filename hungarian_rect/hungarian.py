from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import math
import numpy as np, time

from .errors import InvalidDimension, NonFiniteCost

UNASSIGNED = -1


@dataclass
class HungarianParams:
    pad_margin: float = 1.0
    verbose: bool = False
    log_every: int = 100

    def __post_init__(self):
        if not math.isfinite(self.pad_margin) or self.pad_margin <= 0:
            raise ValueError(f"pad_margin must be a positive finite number, got {self.pad_margin!r}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be >= 1, got {self.log_every!r}")


@dataclass
class HungarianResult:
    match: np.ndarray
    cost: float
    elapsed: float
    iterations: int
    shape: Tuple[int, int] = field(default=(0, 0))

    def row_to_col(self) -> np.ndarray:
        """Inverse view: for each worker the job it got, or UNASSIGNED."""
        out = np.full(self.shape[0], UNASSIGNED, dtype=int)
        for j, i in enumerate(self.match):
            if i != UNASSIGNED:
                out[i] = j
        return out

    def pairs(self) -> List[Tuple[int, int]]:
        return [(int(i), j) for j, i in enumerate(self.match) if i != UNASSIGNED]


def padding_value(C: np.ndarray, N: int, margin: float = 1.0) -> float:
    """
    Cost written into cells outside the real n x m rectangle.

    Strictly larger than N times the largest cost magnitude, so a padded
    cell never wins against a real one when the smaller side can be fully
    matched with real pairs. Near the float limit the product overflows; padded
    rows and columns are uniform, so any finite value keeps the optimum and
    max|c| + margin is used instead.
    """
    biggest = float(np.max(np.abs(C))) if C.size else 0.0
    pad = (biggest + margin) * (N + 1)
    if not math.isfinite(pad):
        pad = biggest + margin
    return pad


def _as_cost_matrix(C, n: Optional[int], m: Optional[int]) -> np.ndarray:
    for name, dim in (("n", n), ("m", m)):
        if dim is not None and dim < 0:
            raise InvalidDimension(f"{name} must be >= 0, got {dim}")

    C0 = np.asarray(C, dtype=float)
    if C0.size == 0 and C0.ndim < 2:
        # [] carries no shape of its own, take it from n/m
        if n and m:
            raise InvalidDimension(f"empty cost matrix cannot describe a {n}x{m} problem")
        C0 = C0.reshape(n or 0, m or 0)
    if C0.ndim != 2:
        raise InvalidDimension(f"cost matrix must be 2-D, got shape {C0.shape}")
    if (n is not None and C0.shape[0] != n) or (m is not None and C0.shape[1] != m):
        raise InvalidDimension(f"cost matrix has shape {C0.shape}, expected ({n}, {m})")

    bad = np.argwhere(~np.isfinite(C0))
    if bad.size:
        r, c = (int(x) for x in bad[0])
        raise NonFiniteCost(r, c, float(C0[r, c]))
    return C0


def hungarian_solve(C, n: Optional[int] = None, m: Optional[int] = None,
                    params: Optional[HungarianParams] = None) -> HungarianResult:
    """
    Rectangular assignment: rows are workers, columns are jobs.

    Runs the potential-based Hungarian method on the max(n, m) square obtained
    by padding the smaller side. Returns a match vector of length m where
    match[j] is the worker assigned to job j or UNASSIGNED, and the total cost
    of the real pairs. O(N^3) time, O(N^2) memory.
    """
    params = params or HungarianParams()
    t0 = time.time()

    C0 = _as_cost_matrix(C, n, m)
    n, m = C0.shape

    if n == 0 or m == 0:
        return HungarianResult(
            match=np.full(m, UNASSIGNED, dtype=int), cost=0.0,
            elapsed=(time.time() - t0), iterations=0, shape=(n, m)
        )

    N = max(n, m)
    a = np.full((N, N), padding_value(C0, N, params.pad_margin), dtype=float)
    a[:n, :m] = C0

    # Потенциалы и паросочетание; столбец N играет роль виртуального корня
    root = N
    u = np.zeros(N, dtype=float)
    v = np.zeros(N + 1, dtype=float)
    p = np.full(N + 1, UNASSIGNED, dtype=int)
    way = np.full(N + 1, root, dtype=int)

    # Рабочие буферы одни на весь вызов, каждую итерацию только сбрасываются
    minv = np.empty(N + 1, dtype=float)
    used = np.zeros(N + 1, dtype=bool)
    minv_jobs, used_jobs, way_jobs, v_jobs = minv[:N], used[:N], way[:N], v[:N]

    iterations = 0

    for i in range(N):
        p[root] = i
        j0 = root
        minv.fill(np.inf)
        used.fill(False)
        way.fill(root)

        while True:
            used[j0] = True
            i0 = p[j0]
            free = ~used_jobs

            # Релаксация по свободным столбцам
            cur = a[i0] - u[i0] - v_jobs
            better = free & (cur < minv_jobs)
            minv_jobs[better] = cur[better]
            way_jobs[better] = j0

            masked = np.where(free, minv_jobs, np.inf)
            j1 = int(np.argmin(masked))  # first minimum wins ties
            delta = masked[j1]

            # Подтягиваем потенциалы
            tree = np.flatnonzero(used)
            u[p[tree]] += delta
            v[tree] -= delta
            minv[~used] -= delta

            j0 = j1
            iterations += 1
            if p[j0] == UNASSIGNED:
                break

        # Разворачиваем увеличивающий путь до корня
        while j0 != root:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1

        if params.verbose and ((i + 1) % params.log_every == 0 or i + 1 == N):
            print(f"[hungarian] row={i + 1}/{N} steps={iterations} elapsed={time.time() - t0:.3f}s")

    match = np.full(m, UNASSIGNED, dtype=int)
    cost = 0.0
    for j in range(m):
        if 0 <= p[j] < n:
            match[j] = p[j]
            cost += float(C0[p[j], j])

    elapsed = time.time() - t0
    if params.verbose:
        print(f"[hungarian] n={n} m={m} cost={cost:.6f} steps={iterations} elapsed={elapsed:.3f}s")
    return HungarianResult(match=match, cost=cost, elapsed=elapsed, iterations=iterations, shape=(n, m))
