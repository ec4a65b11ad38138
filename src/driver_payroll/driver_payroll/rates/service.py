from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from ..core.enums import AllowanceType, OvertimeCategory
from .repository import RateRepository

logger = logging.getLogger(__name__)


def _latest_by(rows: Iterable, key: str, value: str, as_of: date) -> dict[str, float]:
    """Keep, per type, the value of the row with the most recent effective_date <= as_of."""
    latest: dict[str, tuple[date, float]] = {}
    for row in rows:
        if row.effective_date > as_of:
            continue
        name = getattr(row, key)
        current = latest.get(name)
        if current is None or row.effective_date > current[0]:
            latest[name] = (row.effective_date, float(getattr(row, value)))
    return {name: amount for name, (_, amount) in latest.items()}


@dataclass(frozen=True)
class RateSnapshot:
    """Rates in force on one date. Unknown types are worth 0."""

    as_of: date
    overtime: dict[str, float] = field(default_factory=dict)
    allowance: dict[str, float] = field(default_factory=dict)

    def rate_for(self, category: OvertimeCategory) -> float:
        return self.overtime.get(category.rate_label, 0.0)

    def allowance_for(self, allowance_type: AllowanceType) -> float:
        return self.allowance.get(allowance_type.value, 0.0)


class RateTable:
    def __init__(self, rates: RateRepository):
        self._rates = rates

    def snapshot(self, as_of: date) -> RateSnapshot:
        overtime = _latest_by(self._rates.list_overtime_rates(as_of=as_of), "overtime_type", "hourly_rate", as_of)
        allowance = _latest_by(self._rates.list_allowance_rates(as_of=as_of), "allowance_type", "amount", as_of)

        missing = sorted({c.rate_label for c in OvertimeCategory} - overtime.keys())
        if missing:
            logger.warning("No overtime rate in force on %s for %s; counting as 0", as_of, ", ".join(missing))
        return RateSnapshot(as_of=as_of, overtime=overtime, allowance=allowance)

    def rate_for(self, category: OvertimeCategory, as_of: date) -> float:
        return self.snapshot(as_of).rate_for(category)

    def allowance_for(self, allowance_type: AllowanceType, as_of: date) -> float:
        return self.snapshot(as_of).allowance_for(allowance_type)
