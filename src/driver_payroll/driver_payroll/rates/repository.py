from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AllowanceRate, OvertimeRate


class RateRepository(Protocol):
    def list_overtime_rates(self, *, as_of: date) -> Sequence[OvertimeRate]:
        """All overtime rate rows with effective_date <= as_of."""

        raise NotImplementedError

    def list_allowance_rates(self, *, as_of: date) -> Sequence[AllowanceRate]:
        """All allowance rate rows with effective_date <= as_of."""

        raise NotImplementedError
