"""Shared test fixtures — assumption records matching the dashboard defaults."""

from __future__ import annotations

import pytest

from callscore_roi.config import Assumptions
from callscore_roi.engine import RoiCalculator


@pytest.fixture
def defaults() -> Assumptions:
    return Assumptions()


@pytest.fixture
def calculator() -> RoiCalculator:
    return RoiCalculator()


@pytest.fixture
def slow_review() -> Assumptions:
    """Automated review slower than manual scoring: auto QA hours exceed baseline.

    calls_year = 120,000
    baseline_qa_hours = 120,000 × 0.15 × 8 / 60 = 2,400
    auto_qa_hours     = 120,000 × 0.95 × 3 / 60 = 5,700
    labor_savings     = (2,400 − 5,700) × 45    = −148,500
    """
    return Assumptions(auto_review_minutes=3)


@pytest.fixture
def no_licence() -> Assumptions:
    return Assumptions(pro_seats=0)


@pytest.fixture
def no_benefit() -> Assumptions:
    """Every benefit driver switched off; only the licence cost remains."""
    return Assumptions(
        auto_coverage=1.0,
        auto_review_minutes=8,
        baseline_manual_coverage=0.15,
        aht_reduction_percent=0,
        repeat_reduction_percent=0,
        deal_close_lift=0,
    )
