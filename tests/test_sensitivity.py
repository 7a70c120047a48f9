"""Tests for finance/sensitivity.py — tornado bars and one-parameter sweeps."""

from __future__ import annotations

import pytest

from callscore_roi.config import Assumptions
from callscore_roi.engine.roi import calculate
from callscore_roi.finance.sensitivity import (
    DEFAULT_SWEEPS,
    METRICS,
    run_sensitivity,
    run_sweep,
)


class TestRunSensitivity:

    def test_base_value_matches_engine(self, defaults: Assumptions):
        result = run_sensitivity(defaults)
        assert result.metric == "net"
        assert result.base_value == pytest.approx(75_300)

    def test_one_bar_per_default_sweep(self, defaults: Assumptions):
        assert len(run_sensitivity(defaults).bars) == len(DEFAULT_SWEEPS)

    def test_bars_sorted_by_swing(self, defaults: Assumptions):
        bars = run_sensitivity(defaults).bars
        deltas = [b.delta for b in bars]
        assert deltas == sorted(deltas, reverse=True)

    def test_ranking_for_defaults(self, defaults: Assumptions):
        """Hand-computed swings on net benefit.

        calls/day ±15% scales all 90,000 of benefit → 27,000
        close lift ±20% on 36,000 → 14,400
        margin ±15% on 36,000 → 10,800
        AHT reduction ±20% on 24,000 → 9,600
        agent cost ±10% on 24,000 → 4,800
        repeat reduction ±20% on 7,500 → 3,000
        Pro price ±10% on 14,700 → 2,940
        """
        bars = run_sensitivity(defaults).bars
        assert [b.param_path for b in bars] == [
            "calls_per_day", "deal_close_lift", "margin_per_deal", "aht_reduction_percent",
            "agent_hourly_cost", "repeat_reduction_percent", "pro_price",
        ]
        assert bars[0].delta == pytest.approx(27_000)
        assert bars[-1].delta == pytest.approx(2_940)

    def test_cost_param_moves_net_down(self, defaults: Assumptions):
        bar = next(b for b in run_sensitivity(defaults).bars if b.param_path == "pro_price")
        assert bar.low_value == pytest.approx(44.1)
        assert bar.high_value == pytest.approx(53.9)
        assert bar.metric_at_high < bar.metric_at_low

    def test_base_assumptions_untouched(self, defaults: Assumptions):
        before = defaults.model_dump()
        run_sensitivity(defaults)
        assert defaults.model_dump() == before

    def test_custom_sweeps_and_metric(self, defaults: Assumptions):
        result = run_sensitivity(defaults, [("Seats", "pro_seats", -0.2, 0.2)], metric="roi")
        assert result.metric == "roi"
        assert result.base_value == pytest.approx(calculate(defaults).roi, abs=1e-4)
        (bar,) = result.bars
        assert bar.low_value == 20
        assert bar.high_value == 30
        # fewer seats → lower cost → higher ROI
        assert bar.metric_at_low > bar.metric_at_high

    def test_unknown_path_skipped(self, defaults: Assumptions, caplog):
        result = run_sensitivity(defaults, [("Nope", "not_a_field", -0.1, 0.1),
                                            ("Currency", "currency", -0.1, 0.1)])
        assert result.bars == []
        assert "not_a_field" in caplog.text

    def test_unknown_metric(self, defaults: Assumptions):
        with pytest.raises(ValueError):
            run_sensitivity(defaults, metric="payback")


    def test_every_metric_accepted(self, defaults: Assumptions):
        for metric in METRICS:
            assert run_sensitivity(defaults, metric=metric).metric == metric


class TestRunSweep:

    def test_linear_in_seats(self, defaults: Assumptions):
        sweep = run_sweep(defaults, "pro_seats", 0, 50, steps=11)
        assert sweep.x == pytest.approx([0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50])
        # net = 90,000 − 12 × 49 × seats
        assert sweep.y == pytest.approx([90_000 - 588 * s for s in sweep.x])

    def test_matches_engine_at_current_value(self, defaults: Assumptions):
        sweep = run_sweep(defaults, "agents", 5, 45, steps=5, metric="total_benefit")
        assert sweep.x[2] == pytest.approx(25)
        assert sweep.y[2] == pytest.approx(calculate(defaults).total_benefit)

    def test_steps_validated(self, defaults: Assumptions):
        with pytest.raises(ValueError):
            run_sweep(defaults, "agents", 0, 10, steps=1)

    def test_unknown_path(self, defaults: Assumptions):
        with pytest.raises(KeyError):
            run_sweep(defaults, "currency", 0, 1)
