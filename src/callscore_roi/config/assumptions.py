"""Business assumptions — the flat input record for one ROI calculation.

Every numeric field is coerced before validation: empty strings, ``None``,
non-numeric text, NaN and infinities all become ``0.0``.  No range checks
are applied; negative or >1 fractions pass straight through to the engine.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterator, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

logger = logging.getLogger(__name__)

Currency = Literal["GBP", "USD", "EUR"]
CURRENCIES: tuple[str, ...] = ("GBP", "USD", "EUR")

Section = Literal["volume", "coverage", "cs_impact", "deal_uplift", "licensing"]
SECTION_TITLES: dict[str, str] = {
    "volume": "Volume",
    "coverage": "Scoring coverage and effort",
    "cs_impact": "CS impact",
    "deal_uplift": "Deal close uplift",
    "licensing": "Licensing (Pro only)",
}

InputKind = Literal["count", "percent", "minutes", "money"]


def _meta(section: Section, kind: InputKind) -> dict[str, str]:
    return {"section": section, "kind": kind}


def _parse_number(value: Any) -> float | None:
    """Parse a raw input; ``None`` means it is not a finite number.

    Blank input (``None`` or an empty string) parses to ``0.0``.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return 0.0
        value = text
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def coerce_number(value: Any, name: str = "value") -> float:
    """Coerce one raw input to a finite float, falling back to ``0.0``.

    Blank input is zero silently; anything else unparseable logs a warning.
    """
    number = _parse_number(value)
    if number is None:
        logger.warning("Assumption %r: %r is not a finite number, using 0", name, value)
        return 0.0
    return number


class Assumptions(BaseModel):
    """Complete set of business assumptions behind the ROI estimate.

    All calls are treated as customer-success calls and every licensed seat
    is a Pro seat.  Fractions are stored as fractions (0.05 = 5%).
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    currency: Currency = Field(
        default="GBP", title="Currency",
        description="Display currency. A label only; no exchange-rate conversion is applied.",
    )

    # --- Volume ---
    agents: float = Field(
        default=25, title="Agents",
        description="Number of agents whose calls will be scored and coached.",
        json_schema_extra=_meta("volume", "count"),
    )
    calls_per_day: float = Field(
        default=20, title="Calls per agent per day",
        description="Typical calls handled per agent in a working day.",
        json_schema_extra=_meta("volume", "count"),
    )
    workdays: float = Field(
        default=240, title="Workdays per year",
        description="Working days in a year after holidays and PTO.",
        json_schema_extra=_meta("volume", "count"),
    )

    # --- Scoring coverage and effort ---
    baseline_manual_coverage: float = Field(
        default=0.15, title="Manual scoring coverage",
        description="Percent of calls manually scored today.",
        json_schema_extra=_meta("coverage", "percent"),
    )
    auto_coverage: float = Field(
        default=0.95, title="Auto scoring coverage",
        description="Percent of calls automatically scored (often near full coverage).",
        json_schema_extra=_meta("coverage", "percent"),
    )
    manual_minutes: float = Field(
        default=8, title="Manual minutes per scored call",
        description="Average time to manually score one call.",
        json_schema_extra=_meta("coverage", "minutes"),
    )
    auto_review_minutes: float = Field(
        default=1, title="Auto review minutes per scored call",
        description="Average time to review an automatically scored call.",
        json_schema_extra=_meta("coverage", "minutes"),
    )
    qa_hourly_cost: float = Field(
        default=45, title="QA hourly cost",
        description="Fully loaded hourly cost for scoring and reviews.",
        json_schema_extra=_meta("coverage", "money"),
    )

    # --- CS impact (AHT + repeat contacts) ---
    baseline_aht_minutes: float = Field(
        default=8, title="Baseline AHT (minutes)",
        description="Average handle time for CS calls today.",
        json_schema_extra=_meta("cs_impact", "minutes"),
    )
    aht_reduction_percent: float = Field(
        default=0.05, title="Expected AHT reduction",
        description="Estimated AHT reduction from better behaviours and coaching driven by scoring.",
        json_schema_extra=_meta("cs_impact", "percent"),
    )
    agent_hourly_cost: float = Field(
        default=30, title="Agent hourly cost",
        description="Fully loaded hourly cost for agents handling CS calls.",
        json_schema_extra=_meta("cs_impact", "money"),
    )
    repeat_rate: float = Field(
        default=0.25, title="Baseline repeat contact rate",
        description="Percent of CS interactions that result in a repeat contact from the same customer.",
        json_schema_extra=_meta("cs_impact", "percent"),
    )
    repeat_reduction_percent: float = Field(
        default=0.05, title="Expected repeat contact reduction",
        description="Reduction in repeat contacts from improved quality and consistency.",
        json_schema_extra=_meta("cs_impact", "percent"),
    )
    cost_per_repeat_contact: float = Field(
        default=5, title="Cost per repeat contact",
        description="Operational cost of handling one repeat contact (time, channel, tooling).",
        json_schema_extra=_meta("cs_impact", "money"),
    )

    # --- Deal close uplift ---
    opp_rate: float = Field(
        default=0.10, title="Percent of calls with a deal opportunity",
        description="Share of CS calls where there is an upsell, renewal, or expansion opportunity.",
        json_schema_extra=_meta("deal_uplift", "percent"),
    )
    deal_close_rate: float = Field(
        default=0.20, title="Baseline deal close rate",
        description="Typical close rate on those opportunities today.",
        json_schema_extra=_meta("deal_uplift", "percent"),
    )
    deal_close_lift: float = Field(
        default=0.05, title="Expected close rate improvement",
        description="Relative improvement in close rate from faster feedback and better coaching.",
        json_schema_extra=_meta("deal_uplift", "percent"),
    )
    margin_per_deal: float = Field(
        default=300, title="Margin per closed deal",
        description="Average contribution margin for a closed deal, renewal, or expansion.",
        json_schema_extra=_meta("deal_uplift", "money"),
    )

    # --- Licensing: Pro only ---
    pro_price: float = Field(
        default=49, title="Pro price per license per month",
        description="Monthly price for each Pro seat.",
        json_schema_extra=_meta("licensing", "money"),
    )
    pro_seats: float = Field(
        default=25, title="Pro seats",
        description="Total Pro seats across agents and managers who will use scoring.",
        json_schema_extra=_meta("licensing", "count"),
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numeric(cls, value: Any, info: ValidationInfo) -> Any:
        if info.field_name == "currency":
            return value
        return coerce_number(value, info.field_name)


DEFAULT_ASSUMPTIONS = Assumptions()

NUMERIC_FIELDS: tuple[str, ...] = tuple(n for n in Assumptions.model_fields if n != "currency")


@dataclass(frozen=True)
class FieldSpec:
    """Display metadata for one numeric assumption."""

    name: str
    label: str
    help: str
    section: str
    kind: str
    default: float


def iter_fields(section: str | None = None) -> Iterator[FieldSpec]:
    """Yield numeric assumption fields in display order, optionally for one section."""
    for name in NUMERIC_FIELDS:
        info = Assumptions.model_fields[name]
        extra = info.json_schema_extra or {}
        if section is not None and extra.get("section") != section:
            continue
        yield FieldSpec(
            name=name,
            label=info.title or name,
            help=info.description or "",
            section=str(extra.get("section", "")),
            kind=str(extra.get("kind", "count")),
            default=getattr(DEFAULT_ASSUMPTIONS, name),
        )
