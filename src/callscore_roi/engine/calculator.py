"""Calculator session — replace-then-recompute over one assumption store.

Every mutation swaps the whole record in the store and immediately derives a
fresh ``RoiResult``; callers can never observe a result that is stale with
respect to ``assumptions``.
"""

from __future__ import annotations

import logging
from typing import Any

from callscore_roi.config.assumptions import Assumptions
from callscore_roi.engine.roi import calculate
from callscore_roi.engine.store import AssumptionStore
from callscore_roi.models.results import RoiResult

logger = logging.getLogger(__name__)


class RoiCalculator:
    """Assumption store plus the result derived from its current record."""

    def __init__(self, store: AssumptionStore | None = None) -> None:
        self._store = store if store is not None else AssumptionStore()
        self._result = calculate(self._store.get_current())

    @property
    def assumptions(self) -> Assumptions:
        return self._store.get_current()

    @property
    def result(self) -> RoiResult:
        return self._result

    def submit(self, record: Assumptions | dict[str, Any]) -> RoiResult:
        """Replace the whole assumption record and recompute.

        A plain mapping is validated (and coerced) into ``Assumptions`` first.

        Raises
        ------
        KeyError
            If a mapping is missing any assumption or names an unknown one.
        """
        if not isinstance(record, Assumptions):
            missing = sorted(set(Assumptions.model_fields) - set(record))
            unknown = sorted(set(record) - set(Assumptions.model_fields))
            if missing or unknown:
                raise KeyError(f"Incomplete assumption record: missing={missing} unknown={unknown}")
            record = Assumptions.model_validate(record)
        self._store.replace(record)
        return self._recompute()

    def edit(self, name: str, value: Any) -> RoiResult:
        """Overwrite one named assumption on a copy of the current record and submit it.

        Raises
        ------
        KeyError
            If ``name`` is not an assumption field.
        """
        if name not in Assumptions.model_fields:
            raise KeyError(f"Unknown assumption: {name!r}")
        data = self.assumptions.model_dump()
        data[name] = value
        return self.submit(Assumptions.model_validate(data))

    def reset(self) -> RoiResult:
        """Restore the default assumptions and recompute."""
        self._store.reset_to_defaults()
        return self._recompute()

    def _recompute(self) -> RoiResult:
        self._result = calculate(self._store.get_current())
        logger.debug(
            "Recomputed ROI: net=%.2f roi=%.4f payback=%s",
            self._result.net, self._result.roi, self._result.payback,
        )
        return self._result
