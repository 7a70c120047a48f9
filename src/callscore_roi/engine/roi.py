"""ROI engine — business assumptions → annual benefit, cost, ROI and payback.

Pure arithmetic, one pass, no state.  Benefits are floored at zero only
where they are summed; the standalone figures are reported as computed.
"""

from __future__ import annotations

import math

from callscore_roi.config.assumptions import Assumptions
from callscore_roi.models.results import RoiResult, RoiWorkings


def _finite(value: float) -> float:
    """Overflowed products (inf, or nan from inf − inf) count as zero."""
    return value if math.isfinite(value) else 0.0


def calculate(x: Assumptions) -> RoiResult:
    """Compute every ROI output from one complete assumption record."""

    # ── Volume (all calls are CS) ──────────────────────────────────────
    calls_year = _finite(x.agents * x.calls_per_day * x.workdays)

    # ── QA labour: manual-scored coverage → automated-scored coverage ──
    baseline_qa_hours = _finite(calls_year * x.baseline_manual_coverage * x.manual_minutes / 60)
    auto_qa_hours = _finite(calls_year * x.auto_coverage * x.auto_review_minutes / 60)
    labor_savings = _finite((baseline_qa_hours - auto_qa_hours) * x.qa_hourly_cost)

    # ── CS impact: handle time + repeat contacts ───────────────────────
    aht_minutes_saved = _finite(calls_year * x.baseline_aht_minutes * x.aht_reduction_percent)
    aht_cost_savings = _finite((aht_minutes_saved / 60) * x.agent_hourly_cost)
    repeats_avoided = _finite(calls_year * x.repeat_rate * x.repeat_reduction_percent)
    repeat_savings = _finite(repeats_avoided * x.cost_per_repeat_contact)

    # ── Deal close uplift on commercial opportunities ──────────────────
    # Lift is relative to the baseline deal count.
    opp_calls = _finite(calls_year * x.opp_rate)
    baseline_deals = _finite(opp_calls * x.deal_close_rate)
    incremental_deals = _finite(baseline_deals * x.deal_close_lift)
    deal_benefit = _finite(incremental_deals * x.margin_per_deal)

    performance_benefit = _finite(max(0.0, aht_cost_savings) + max(0.0, repeat_savings) + max(0.0, deal_benefit))

    # ── Cost: Pro licences only ────────────────────────────────────────
    license_cost_year = _finite(12 * (x.pro_seats * x.pro_price))
    annual_cost = license_cost_year

    # ── Totals ─────────────────────────────────────────────────────────
    total_benefit = _finite(max(0.0, labor_savings) + performance_benefit)
    net = _finite(total_benefit - annual_cost)
    roi = _finite(net / annual_cost) if annual_cost > 0 else 0.0
    payback = _finite(12 * (annual_cost / total_benefit)) if total_benefit > 0 else None

    return RoiResult(
        calls_year=calls_year,
        labor_savings=labor_savings,
        aht_cost_savings=aht_cost_savings,
        repeat_savings=repeat_savings,
        deal_benefit=deal_benefit,
        performance_benefit=performance_benefit,
        license_cost_year=license_cost_year,
        annual_cost=annual_cost,
        total_benefit=total_benefit,
        net=net,
        roi=roi,
        payback=payback,
        workings=RoiWorkings(
            baseline_qa_hours=baseline_qa_hours,
            auto_qa_hours=auto_qa_hours,
            aht_minutes_saved=aht_minutes_saved,
            repeats_avoided=repeats_avoided,
            opp_calls=opp_calls,
            baseline_deals=baseline_deals,
            incremental_deals=incremental_deals,
        ),
    )
