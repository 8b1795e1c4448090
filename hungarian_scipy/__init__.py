from .hungarian_lib import SciPyHungarianResult, hungarian_scipy_solve

__all__ = ["hungarian_scipy_solve", "SciPyHungarianResult"]
