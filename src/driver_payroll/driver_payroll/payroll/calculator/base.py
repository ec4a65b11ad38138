from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import AllowanceType, OvertimeCategory
from ...rates.service import RateSnapshot


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def overtime_amount(self, category: OvertimeCategory, hours: float, rates: RateSnapshot) -> float:
        raise NotImplementedError

    @abstractmethod
    def allowance_amount(self, allowance_type: AllowanceType, count: int, rates: RateSnapshot) -> float:
        raise NotImplementedError
