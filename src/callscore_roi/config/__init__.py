"""Configuration models — the assumption record and its field metadata."""

from callscore_roi.config.assumptions import (
    CURRENCIES,
    DEFAULT_ASSUMPTIONS,
    NUMERIC_FIELDS,
    SECTION_TITLES,
    Assumptions,
    Currency,
    FieldSpec,
    coerce_number,
    iter_fields,
)

__all__ = [
    "Assumptions",
    "Currency",
    "CURRENCIES",
    "DEFAULT_ASSUMPTIONS",
    "NUMERIC_FIELDS",
    "SECTION_TITLES",
    "FieldSpec",
    "coerce_number",
    "iter_fields",
]
