from __future__ import annotations


class AssignmentError(ValueError):
    """Base class for invalid cost-matrix input."""


class InvalidDimension(AssignmentError):
    """Negative size, non 2-D matrix, or declared n/m that disagree with the data."""


class NonFiniteCost(AssignmentError):
    """A cost is NaN or infinite, so no padding cost can dominate it."""

    def __init__(self, row: int, col: int, value: float):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(f"cost[{row}, {col}] = {value!r} is not finite")
