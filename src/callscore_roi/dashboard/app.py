"""Call Scoring ROI — Streamlit dashboard.

Layout: header (currency + reset) → sidebar inputs grouped by section →
main area with headline metrics, volume / benefit / cost breakdown, formulas
in expanders, and an Analysis tab with tornado, what-if sweep and narrative.

Every widget change is applied through ``RoiCalculator.edit`` so the page
always renders the result derived from the current assumptions.
"""

from __future__ import annotations

import logging
import os

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from callscore_roi.config import CURRENCIES, SECTION_TITLES, FieldSpec, iter_fields
from callscore_roi.engine import RoiCalculator
from callscore_roi.finance.sensitivity import METRICS, run_sensitivity, run_sweep
from callscore_roi.report.formatting import currency_symbol, money, number, payback_months, percent
from callscore_roi.report.narrative import generate_narrative

logging.basicConfig(
    level=os.environ.get("CALLSCORE_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Call Scoring ROI", page_icon="📞", layout="wide")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: 10px;
    padding: 14px 16px 12px;
}
div[data-testid="stMetric"] label {
    color: rgba(255,255,255,0.50) !important;
    font-size: 0.7rem !important;
    text-transform: uppercase;
    letter-spacing: 0.6px;
}
</style>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
_FIELDS: list[FieldSpec] = list(iter_fields())
_CURRENCY_KEY = "in_currency"


def _key(fld: FieldSpec) -> str:
    return f"in_{fld.name}"


def _to_widget(fld: FieldSpec, value: float) -> float:
    """Model value → widget value (fractions are edited as percentages)."""
    if fld.kind == "percent":
        return round(value * 1000) / 10
    return float(value)


def _from_widget(fld: FieldSpec, value: float | None) -> float | None:
    if fld.kind == "percent" and value is not None:
        return value / 100
    return value


def _sync_widgets(calc: RoiCalculator) -> None:
    """Push the calculator's current assumptions into every widget."""
    a = calc.assumptions
    st.session_state[_CURRENCY_KEY] = a.currency
    for fld in _FIELDS:
        st.session_state[_key(fld)] = _to_widget(fld, getattr(a, fld.name))


if "calculator" not in st.session_state:
    st.session_state["calculator"] = RoiCalculator()
    _sync_widgets(st.session_state["calculator"])

calc: RoiCalculator = st.session_state["calculator"]


def _on_field_change(fld: FieldSpec) -> None:
    calc.edit(fld.name, _from_widget(fld, st.session_state[_key(fld)]))


def _on_currency_change() -> None:
    calc.edit("currency", st.session_state[_CURRENCY_KEY])


def _on_reset() -> None:
    logger.info("Resetting dashboard to default assumptions")
    calc.reset()
    _sync_widgets(calc)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
h1, h2, h3 = st.columns([6, 1, 1])
h1.title("Automated Call Scoring — Simple ROI (Customer Success)")
h1.caption("Assumes all calls are CS. Pro-only licensing. Includes deal close uplift.")
h2.selectbox(
    "Currency", CURRENCIES, key=_CURRENCY_KEY, on_change=_on_currency_change,
    format_func=lambda c: f"{c} {currency_symbol(c)}",
)
h3.button("↻ Reset", on_click=_on_reset, use_container_width=True)

ccy = calc.assumptions.currency
sym = currency_symbol(ccy)


# ---------------------------------------------------------------------------
# SIDEBAR — Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Inputs")

for section, title in SECTION_TITLES.items():
    with st.sidebar.expander(title, expanded=(section == "volume")):
        for fld in iter_fields(section):
            if fld.kind == "percent":
                label, step, fmt = f"{fld.label} (%)", 0.1, "%.1f"
                floor = 0.0
            elif fld.kind == "money":
                label, step, fmt = f"{fld.label} ({sym})", 1.0, "%.2f"
                floor = None
            elif fld.kind == "minutes":
                label, step, fmt = fld.label, 0.1, "%.1f"
                floor = 0.0
            else:
                label, step, fmt = fld.label, 1.0, "%.0f"
                floor = 0.0
            st.number_input(
                label, min_value=floor, step=step, format=fmt, help=fld.help,
                key=_key(fld), on_change=_on_field_change, args=(fld,),
            )


# Result is read only after all widgets have had their callbacks applied.
a = calc.assumptions
r = calc.result
w = r.workings

results_tab, analysis_tab = st.tabs(["Results", "Analysis"])


# ═══════════════════════════════════════════════════════════════════════════
# ==================  RESULTS TAB  ========================================
# ═══════════════════════════════════════════════════════════════════════════
with results_tab:
    m1, m2, m3 = st.columns(3)
    m1.metric("Annual net benefit", money(r.net, ccy))
    m2.metric("ROI percent", percent(r.roi))
    m3.metric("Payback months", payback_months(r.payback),
              help="Months of licence cost covered by benefit. N/A when total benefit is zero.")

    c1, c2, c3 = st.columns(3)
    with c1:
        st.subheader("Volume")
        st.markdown(f"Calls per year: **{number(r.calls_year)}**")
    with c2:
        st.subheader("Benefits")
        st.markdown(
            f"Labor savings: **{money(r.labor_savings, ccy)}**  \n"
            f"AHT savings: **{money(r.aht_cost_savings, ccy)}**  \n"
            f"Repeat contact savings: **{money(r.repeat_savings, ccy)}**  \n"
            f"Deal revenue lift: **{money(r.deal_benefit, ccy)}**  \n"
            f"Total performance benefit: **{money(r.performance_benefit, ccy)}**"
        )
        if r.labor_savings < 0:
            st.warning("Labor savings are negative and count as zero in the total benefit.")
    with c3:
        st.subheader("Costs")
        st.markdown(
            f"License cost per year (Pro only): **{money(r.license_cost_year, ccy)}**  \n"
            f"Total annual cost: **{money(r.annual_cost, ccy)}**"
        )

    # --- Benefit vs cost chart ---
    fig = go.Figure(go.Bar(
        x=["Labor", "AHT", "Repeat", "Deals", "Licence cost"],
        y=[max(0.0, r.labor_savings), max(0.0, r.aht_cost_savings), max(0.0, r.repeat_savings),
           max(0.0, r.deal_benefit), -r.annual_cost],
        marker_color=["#00b894", "#0984e3", "#6c5ce7", "#fdcb6e", "#e17055"],
    ))
    fig.update_layout(height=320, margin=dict(l=10, r=10, t=30, b=10),
                      title="Annual benefit and cost", yaxis_title=ccy)
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Show formulas"):
        formulas = {
            "Calls per year": (
                "`agents × calls_per_day × workdays`",
                f"{number(a.agents)} × {number(a.calls_per_day)} × {number(a.workdays)} = **{number(r.calls_year)}**",
            ),
            "Labor savings": (
                "`(calls × manual_cov × manual_min − calls × auto_cov × review_min) / 60 × QA_cost`",
                f"({number(w.baseline_qa_hours)} h − {number(w.auto_qa_hours)} h) × {money(a.qa_hourly_cost, ccy)} "
                f"= **{money(r.labor_savings, ccy)}**",
            ),
            "AHT savings": (
                "`calls × AHT × reduction / 60 × agent_cost`",
                f"{number(w.aht_minutes_saved)} min / 60 × {money(a.agent_hourly_cost, ccy)} "
                f"= **{money(r.aht_cost_savings, ccy)}**",
            ),
            "Repeat contact savings": (
                "`calls × repeat_rate × reduction × cost_per_repeat`",
                f"{number(w.repeats_avoided)} × {money(a.cost_per_repeat_contact, ccy)} "
                f"= **{money(r.repeat_savings, ccy)}**",
            ),
            "Deal revenue lift": (
                "`calls × opp_rate × close_rate × lift × margin`  ← lift is relative",
                f"{number(w.incremental_deals)} deals × {money(a.margin_per_deal, ccy)} "
                f"= **{money(r.deal_benefit, ccy)}**",
            ),
            "Licence cost": (
                "`12 × seats × price`",
                f"12 × {number(a.pro_seats)} × {money(a.pro_price, ccy)} = **{money(r.license_cost_year, ccy)}**",
            ),
            "ROI": (
                "`(total_benefit − cost) / cost`",
                f"{money(r.net, ccy)} / {money(r.annual_cost, ccy)} = **{percent(r.roi)}**",
            ),
        }
        for name, (formula, worked) in formulas.items():
            st.markdown(f"**{name}** — {formula}  \n{worked}")

    st.caption(
        "Notes: This simplified model assumes all seats are Pro and all calls are CS. "
        "Auto scoring usually increases coverage while reducing review time per call."
    )
    st.caption(
        "Assumption: Labor savings = (manual coverage × manual minutes − auto coverage × "
        "auto review minutes) × QA hourly cost × total calls."
    )


# ═══════════════════════════════════════════════════════════════════════════
# ==================  ANALYSIS TAB  =======================================
# ═══════════════════════════════════════════════════════════════════════════
with analysis_tab:
    st.subheader("Sensitivity")
    metric = st.radio("Metric", METRICS, horizontal=True,
                      format_func=lambda m: {"net": "Net benefit", "roi": "ROI",
                                             "total_benefit": "Total benefit"}[m])
    sens = run_sensitivity(a, metric=metric)
    if sens.bars:
        bars = list(reversed(sens.bars))
        tfig = go.Figure()
        tfig.add_trace(go.Bar(
            y=[b.param_name for b in bars], x=[b.metric_at_low - sens.base_value for b in bars],
            orientation="h", name="Low", marker_color="#e17055",
        ))
        tfig.add_trace(go.Bar(
            y=[b.param_name for b in bars], x=[b.metric_at_high - sens.base_value for b in bars],
            orientation="h", name="High", marker_color="#00b894",
        ))
        tfig.update_layout(barmode="overlay", height=360, margin=dict(l=10, r=10, t=30, b=10),
                           title="Change from base", xaxis_title=metric)
        st.plotly_chart(tfig, use_container_width=True)

        df = pd.DataFrame([
            {
                "Parameter": b.param_name,
                "Base": b.base_value,
                "Low": b.low_value,
                "High": b.high_value,
                "At low": b.metric_at_low,
                "At high": b.metric_at_high,
                "Swing": b.delta,
            }
            for b in sens.bars
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)

    st.subheader("What-if sweep")
    labels = {fld.name: fld.label for fld in _FIELDS}
    s1, s2 = st.columns([2, 1])
    param = s1.selectbox("Assumption", list(labels), format_func=labels.get,
                         index=list(labels).index("pro_seats"))
    current = float(getattr(a, param))
    span = s2.slider("Range around current (±%)", 10, 100, 50, 10)
    low = current * (1 - span / 100)
    high = current * (1 + span / 100) if current else 1.0
    sweep = run_sweep(a, param, low, high, steps=21, metric=metric)
    sfig = go.Figure(go.Scatter(x=sweep.x, y=sweep.y, mode="lines+markers", line_color="#6c5ce7"))
    sfig.add_vline(x=current, line_dash="dot")
    sfig.update_layout(height=320, margin=dict(l=10, r=10, t=30, b=10),
                       xaxis_title=labels[param], yaxis_title=metric)
    st.plotly_chart(sfig, use_container_width=True)

    with st.expander("Plain-English summary"):
        st.text(generate_narrative(a, r))
