"""Tests for config/assumptions.py — defaults, coercion, metadata."""

from __future__ import annotations

import logging
import math

import pytest
from pydantic import ValidationError

from callscore_roi.config import (
    DEFAULT_ASSUMPTIONS,
    NUMERIC_FIELDS,
    SECTION_TITLES,
    Assumptions,
    coerce_number,
    iter_fields,
)


class TestDefaults:

    def test_default_values(self, defaults: Assumptions):
        assert defaults.model_dump() == {
            "currency": "GBP",
            "agents": 25, "calls_per_day": 20, "workdays": 240,
            "baseline_manual_coverage": 0.15, "auto_coverage": 0.95,
            "manual_minutes": 8, "auto_review_minutes": 1, "qa_hourly_cost": 45,
            "baseline_aht_minutes": 8, "aht_reduction_percent": 0.05, "agent_hourly_cost": 30,
            "repeat_rate": 0.25, "repeat_reduction_percent": 0.05, "cost_per_repeat_contact": 5,
            "opp_rate": 0.10, "deal_close_rate": 0.20, "deal_close_lift": 0.05, "margin_per_deal": 300,
            "pro_price": 49, "pro_seats": 25,
        }

    def test_defaults_are_floats(self, defaults: Assumptions):
        for name in NUMERIC_FIELDS:
            assert isinstance(getattr(defaults, name), float), name

    def test_module_constant_matches_fresh_instance(self):
        assert DEFAULT_ASSUMPTIONS == Assumptions()

    def test_record_is_frozen(self, defaults: Assumptions):
        with pytest.raises(ValidationError):
            defaults.agents = 50


class TestCurrency:

    @pytest.mark.parametrize("code", ["GBP", "USD", "EUR"])
    def test_supported_currencies(self, code: str):
        assert Assumptions(currency=code).currency == code

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValidationError):
            Assumptions(currency="JPY")


class TestCoercion:

    @pytest.mark.parametrize("raw,expected", [
        (12, 12.0),
        (2.5, 2.5),
        ("42", 42.0),
        (" 3.5 ", 3.5),
        ("1,200", 1200.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        (float("-inf"), 0.0),
        ("nan", 0.0),
        ([1, 2], 0.0),
    ])
    def test_coerce_number(self, raw, expected):
        assert coerce_number(raw) == expected

    def test_model_coerces_on_construction(self):
        a = Assumptions(agents="", workdays="abc", pro_price=float("inf"), pro_seats="10")
        assert a.agents == 0.0
        assert a.workdays == 0.0
        assert a.pro_price == 0.0
        assert a.pro_seats == 10.0

    def test_negative_values_pass_through(self):
        a = Assumptions(agents=-5, aht_reduction_percent=-0.1, auto_coverage=1.5)
        assert a.agents == -5
        assert a.aht_reduction_percent == -0.1
        assert a.auto_coverage == 1.5

    def test_result_is_always_finite(self):
        a = Assumptions(**{name: float("nan") for name in NUMERIC_FIELDS})
        for name in NUMERIC_FIELDS:
            assert math.isfinite(getattr(a, name))

    def test_coerce_number_logs_field_name(self, caplog):
        with caplog.at_level(logging.WARNING, logger="callscore_roi.config.assumptions"):
            assert coerce_number("n/a", "pro_price") == 0.0
        assert "pro_price" in caplog.text

    def test_unparseable_input_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="callscore_roi.config.assumptions"):
            Assumptions(agents="twenty")
        assert "agents" in caplog.text

    def test_blank_input_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="callscore_roi.config.assumptions"):
            Assumptions(agents="")
        assert caplog.records == []


class TestFieldMetadata:

    def test_every_numeric_field_listed(self):
        assert [f.name for f in iter_fields()] == list(NUMERIC_FIELDS)
        assert len(NUMERIC_FIELDS) == 20

    def test_every_field_has_known_section_and_kind(self):
        for fld in iter_fields():
            assert fld.section in SECTION_TITLES, fld.name
            assert fld.kind in {"count", "percent", "minutes", "money"}, fld.name
            assert fld.label and fld.help

    def test_filter_by_section(self):
        names = [f.name for f in iter_fields("licensing")]
        assert names == ["pro_price", "pro_seats"]

    def test_fraction_fields_are_percent(self):
        kinds = {f.name: f.kind for f in iter_fields()}
        for name in ("baseline_manual_coverage", "auto_coverage", "aht_reduction_percent",
                     "repeat_rate", "repeat_reduction_percent", "opp_rate",
                     "deal_close_rate", "deal_close_lift"):
            assert kinds[name] == "percent"

    def test_defaults_exposed(self):
        defaults = {f.name: f.default for f in iter_fields()}
        assert defaults["margin_per_deal"] == 300
        assert defaults["opp_rate"] == 0.10
