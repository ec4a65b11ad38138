from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class OvertimeRate:
    """Hourly surcharge for one rate label, valid from ``effective_date``."""

    overtime_type: str
    hourly_rate: float
    effective_date: date
    rate_id: Optional[int] = None


@dataclass(frozen=True)
class AllowanceRate:
    """Amount paid per event (vacuum job, car stay, ...), valid from ``effective_date``."""

    allowance_type: str
    amount: float
    effective_date: date
    rate_id: Optional[int] = None
