from .errors import AssignmentError, InvalidDimension, NonFiniteCost
from .hungarian import HungarianParams, HungarianResult, UNASSIGNED, hungarian_solve, padding_value

__all__ = [
    "hungarian_solve",
    "HungarianParams",
    "HungarianResult",
    "UNASSIGNED",
    "padding_value",
    "AssignmentError",
    "InvalidDimension",
    "NonFiniteCost",
]
