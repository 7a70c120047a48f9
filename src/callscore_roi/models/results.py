"""Result types — the contract between the ROI engine and its readers.

A new ``RoiResult`` is built from scratch for every assumption change; no
field is ever updated in place.  Money values are annual and in the
assumption record's display currency.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RoiWorkings(BaseModel):
    """Intermediate quantities behind the headline figures ("show the math")."""

    model_config = ConfigDict(frozen=True)

    baseline_qa_hours: float
    """calls_year × baseline_manual_coverage × manual_minutes / 60."""

    auto_qa_hours: float
    """calls_year × auto_coverage × auto_review_minutes / 60."""

    aht_minutes_saved: float
    """calls_year × baseline_aht_minutes × aht_reduction_percent."""

    repeats_avoided: float
    """calls_year × repeat_rate × repeat_reduction_percent."""

    opp_calls: float
    """calls_year × opp_rate — calls carrying a commercial opportunity."""

    baseline_deals: float
    """opp_calls × deal_close_rate."""

    incremental_deals: float
    """baseline_deals × deal_close_lift (relative lift, not percentage points)."""


class RoiResult(BaseModel):
    """Derived financial metrics for one assumption record."""

    model_config = ConfigDict(frozen=True)

    # --- Volume ---
    calls_year: float

    # --- Benefits ---
    labor_savings: float
    """QA labour saved. Reported unfloored; may be negative."""
    aht_cost_savings: float
    repeat_savings: float
    deal_benefit: float
    performance_benefit: float
    """Sum of AHT, repeat and deal benefits, each floored at zero independently."""

    # --- Costs ---
    license_cost_year: float
    annual_cost: float

    # --- Totals ---
    total_benefit: float
    """max(0, labor_savings) + performance_benefit."""
    net: float
    roi: float
    """net / annual_cost as a fraction (5.12 = 512%); 0 when there is no cost."""
    payback: float | None
    """Months to recover the annual cost; ``None`` when no payback is achievable."""

    workings: RoiWorkings

    @property
    def has_payback(self) -> bool:
        return self.payback is not None
