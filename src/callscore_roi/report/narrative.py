"""Narrative generator — plain-English interpretation of an ROI result.

Converts ``Assumptions`` + ``RoiResult`` into a sectioned text block that
explains the headline outcome, what drives the benefit, and what it costs.
"""

from __future__ import annotations

from callscore_roi.config.assumptions import Assumptions
from callscore_roi.models.results import RoiResult
from callscore_roi.report.formatting import currency_symbol, money, number, payback_months, percent


def _heading(title: str) -> list[str]:
    return ["=" * 60, title, "=" * 60]


def generate_narrative(assumptions: Assumptions, result: RoiResult) -> str:
    """Generate a plain-English summary of one ROI calculation.

    Returns a structured text block covering:
      1. Headline (net benefit, ROI, payback)
      2. Benefit breakdown with the largest driver named
      3. Cost
      4. Verdict
    """
    ccy = assumptions.currency
    r = result
    w = r.workings

    benefit_components = [
        ("QA labour savings", max(0.0, r.labor_savings)),
        ("AHT savings", max(0.0, r.aht_cost_savings)),
        ("Repeat contact savings", max(0.0, r.repeat_savings)),
        ("Deal revenue lift", max(0.0, r.deal_benefit)),
    ]
    benefit_components.sort(key=lambda x: x[1], reverse=True)
    top_name, top_value = benefit_components[0]

    sections: list[str] = []

    # ── 1. Headline ──
    sections.extend(_heading("HEADLINE"))
    sections.append(
        f"Annual net benefit: {money(r.net, ccy)}\n"
        f"ROI: {percent(r.roi)}\n"
        f"Payback: {payback_months(r.payback)}"
        + (" months" if r.has_payback else " (no payback: benefits do not exceed zero)")
    )

    # ── 2. Benefits ──
    sections.append("")
    sections.extend(_heading("BENEFITS"))
    sections.append(
        f"Calls per year: {number(r.calls_year)}\n"
        f"QA hours: {number(w.baseline_qa_hours)} manual today vs "
        f"{number(w.auto_qa_hours)} reviewing automated scores\n"
        f"Labor savings: {money(r.labor_savings, ccy)}\n"
        f"AHT savings: {money(r.aht_cost_savings, ccy)}\n"
        f"Repeat contact savings: {money(r.repeat_savings, ccy)} "
        f"({number(w.repeats_avoided)} repeats avoided)\n"
        f"Deal revenue lift: {money(r.deal_benefit, ccy)} "
        f"({number(w.incremental_deals)} incremental deals)\n"
        f"Total benefit: {money(r.total_benefit, ccy)}"
    )
    if r.labor_savings < 0:
        sections.append(
            "Note: automated review takes more QA time than manual scoring today, "
            "so labor savings are negative and count as zero in the total."
        )
    if r.total_benefit > 0:
        share = top_value / r.total_benefit
        sections.append(f"Largest driver: {top_name} ({percent(share)} of total benefit).")

    # ── 3. Cost ──
    sections.append("")
    sections.extend(_heading("COST"))
    sections.append(
        f"Pro licences: {number(assumptions.pro_seats)} seats × "
        f"{money(assumptions.pro_price, ccy)} × 12 months = {money(r.license_cost_year, ccy)}"
    )

    # ── 4. Verdict ──
    sections.append("")
    sections.extend(_heading("VERDICT"))
    if r.annual_cost <= 0:
        sections.append("No licence cost entered; ROI is reported as 0%.")
    elif r.net > 0:
        sections.append(
            f"POSITIVE: every {currency_symbol(ccy)}1 of licence spend returns "
            f"{currency_symbol(ccy)}{r.total_benefit / r.annual_cost:.2f} of benefit."
        )
    else:
        sections.append(
            f"NEGATIVE: benefits fall {money(-r.net, ccy)} short of the annual licence cost."
        )

    return "\n".join(sections)
