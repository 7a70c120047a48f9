"""Result models — ROI output contracts."""

from callscore_roi.models.results import RoiResult, RoiWorkings

__all__ = [
    "RoiResult",
    "RoiWorkings",
]
