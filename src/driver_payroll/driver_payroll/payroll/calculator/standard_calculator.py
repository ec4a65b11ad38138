from __future__ import annotations

from ...core.enums import AllowanceType, OvertimeCategory
from ...rates.service import RateSnapshot
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hours x hourly rate, events x allowance amount, unrated counts as 0."""

    def overtime_amount(self, category: OvertimeCategory, hours: float, rates: RateSnapshot) -> float:
        return max(hours, 0.0) * rates.rate_for(category)

    def allowance_amount(self, allowance_type: AllowanceType, count: int, rates: RateSnapshot) -> float:
        return max(int(count), 0) * rates.allowance_for(allowance_type)
