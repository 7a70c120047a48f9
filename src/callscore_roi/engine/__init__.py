"""Engine — ROI calculation and the assumption store it reads from."""

from callscore_roi.engine.roi import calculate
from callscore_roi.engine.store import AssumptionStore
from callscore_roi.engine.calculator import RoiCalculator

__all__ = [
    "calculate",
    "AssumptionStore",
    "RoiCalculator",
]
