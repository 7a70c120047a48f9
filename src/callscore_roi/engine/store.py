"""Assumption store — holds the single current assumption record.

No computation and no validation beyond what ``Assumptions`` itself does.
"""

from __future__ import annotations

import logging

from callscore_roi.config.assumptions import DEFAULT_ASSUMPTIONS, Assumptions

logger = logging.getLogger(__name__)


class AssumptionStore:
    """Current assumption record, starting from the fixed defaults."""

    def __init__(self, initial: Assumptions | None = None) -> None:
        self._current = initial if initial is not None else DEFAULT_ASSUMPTIONS

    def get_current(self) -> Assumptions:
        return self._current

    def replace(self, record: Assumptions) -> None:
        """Adopt ``record`` wholesale as the current assumptions."""
        logger.debug("Replacing assumption record")
        self._current = record

    def reset_to_defaults(self) -> None:
        logger.debug("Resetting assumptions to defaults")
        self.replace(DEFAULT_ASSUMPTIONS)
