"""Sensitivity / tornado analysis over the ROI assumptions.

Vary one assumption at a time, measure the change in an output metric.
Produces tornado chart data sorted by impact, plus single-parameter sweeps
for what-if curves.

Default sweep set:
  - aht_reduction_percent ± 20%
  - repeat_reduction_percent ± 20%
  - deal_close_lift ± 20%
  - margin_per_deal ± 15%
  - agent_hourly_cost ± 10%
  - pro_price ± 10%
  - calls_per_day ± 15%
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from callscore_roi.config.assumptions import Assumptions
from callscore_roi.engine.roi import calculate

logger = logging.getLogger(__name__)

Metric = Literal["net", "roi", "total_benefit"]
METRICS: tuple[str, ...] = ("net", "roi", "total_benefit")


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Assumption field name (e.g. 'pro_price')."""

    base_value: float
    low_value: float
    high_value: float

    metric_at_low: float
    """Metric when param = low_value."""

    metric_at_high: float
    """Metric when param = high_value."""

    delta: float
    """abs(metric_at_high − metric_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    metric: str
    base_value: float
    """Metric for the unmodified assumptions."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta (descending)."""


@dataclass
class SweepResult:
    """Metric evaluated across evenly spaced values of one assumption."""

    param_path: str
    metric: str
    x: list[float]
    y: list[float]


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("AHT reduction", "aht_reduction_percent", -0.20, 0.20),
    ("Repeat contact reduction", "repeat_reduction_percent", -0.20, 0.20),
    ("Close rate lift", "deal_close_lift", -0.20, 0.20),
    ("Margin per deal", "margin_per_deal", -0.15, 0.15),
    ("Agent hourly cost", "agent_hourly_cost", -0.10, 0.10),
    ("Pro price", "pro_price", -0.10, 0.10),
    ("Calls per agent per day", "calls_per_day", -0.15, 0.15),
]


def _check_metric(metric: str) -> None:
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}; expected one of {METRICS}")


def _with_value(assumptions: Assumptions, path: str, value: float) -> Assumptions:
    """Copy of ``assumptions`` with one field replaced (re-validated)."""
    data = assumptions.model_dump()
    data[path] = value
    return Assumptions.model_validate(data)


def _run_metric(assumptions: Assumptions, metric: str) -> float:
    return float(getattr(calculate(assumptions), metric))


def run_sensitivity(
    assumptions: Assumptions,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    metric: Metric = "net",
) -> SensitivityResult:
    """Run one-at-a-time sensitivity analysis.

    Parameters
    ----------
    assumptions : Assumptions
        Base assumption record. Never modified.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps as relative changes. None = use DEFAULT_SWEEPS.
    metric : {"net", "roi", "total_benefit"}
        Output to measure.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by impact.
    """
    _check_metric(metric)
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base = _run_metric(assumptions, metric)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        if path == "currency" or path not in Assumptions.model_fields:
            logger.warning("Skipping sensitivity sweep for unknown assumption %r", path)
            continue

        base_val = float(getattr(assumptions, path))
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        metric_low = _run_metric(_with_value(assumptions, path, low_val), metric)
        metric_high = _run_metric(_with_value(assumptions, path, high_val), metric)

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            metric_at_low=round(metric_low, 4),
            metric_at_high=round(metric_high, 4),
            delta=round(abs(metric_high - metric_low), 4),
        ))

    # Largest swing first
    bars.sort(key=lambda b: b.delta, reverse=True)

    return SensitivityResult(metric=metric, base_value=round(base, 4), bars=bars)


def run_sweep(
    assumptions: Assumptions,
    path: str,
    low: float,
    high: float,
    steps: int = 21,
    metric: Metric = "net",
) -> SweepResult:
    """Evaluate ``metric`` at ``steps`` evenly spaced values of one assumption in [low, high]."""
    _check_metric(metric)
    if steps < 2:
        raise ValueError("steps must be at least 2")
    if path == "currency" or path not in Assumptions.model_fields:
        raise KeyError(f"Unknown assumption: {path!r}")

    xs = np.linspace(low, high, steps)
    ys = np.array([_run_metric(_with_value(assumptions, path, float(v)), metric) for v in xs])

    return SweepResult(param_path=path, metric=metric, x=xs.tolist(), y=ys.tolist())
