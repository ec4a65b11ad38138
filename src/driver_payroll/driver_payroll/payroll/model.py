from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.time_utils import format_hours
from ..core.enums import AllowanceType, OvertimeCategory


@dataclass(frozen=True)
class MonthlyRecord:
    """Per-period figures entered by hand for one driver."""

    driver_id: int
    period_start: date
    period_end: date
    phone_allowance: float = 0.0
    revenue_sales: float = 0.0
    accident_free_amount: float = 0.0
    monthly_record_id: Optional[int] = None


@dataclass(frozen=True)
class MonthlyReport:
    driver_id: int
    driver_name: str
    period_start: date
    period_end: date
    hours: dict[OvertimeCategory, float] = field(default_factory=dict)
    amounts: dict[OvertimeCategory, float] = field(default_factory=dict)
    allowance_counts: dict[AllowanceType, int] = field(default_factory=dict)
    allowance_amounts: dict[AllowanceType, float] = field(default_factory=dict)
    phone_allowance: float = 0.0
    revenue_sales: float = 0.0
    accident_free_amount: float = 0.0

    @property
    def total_hours(self) -> float:
        return sum(self.hours.values())

    @property
    def total_amount(self) -> float:
        return sum(self.amounts.values())

    @property
    def allowance_total(self) -> float:
        return sum(self.allowance_amounts.values()) + self.accident_free_amount

    @property
    def monthly_total(self) -> float:
        return self.phone_allowance + self.revenue_sales

    def to_dict(self) -> dict:
        return {
            "driver_id": self.driver_id,
            "driver_name": self.driver_name,
            "period_start": self.period_start.strftime("%Y-%m-%d"),
            "period_end": self.period_end.strftime("%Y-%m-%d"),
            "hours": {c.value: format_hours(h) for c, h in self.hours.items()},
            "amounts": {c.value: round(a) for c, a in self.amounts.items()},
            "allowance_counts": {t.name.lower(): n for t, n in self.allowance_counts.items()},
            "allowance_amounts": {t.name.lower(): round(a) for t, a in self.allowance_amounts.items()},
            "phone_allowance": round(self.phone_allowance),
            "revenue_sales": round(self.revenue_sales),
            "accident_free_amount": round(self.accident_free_amount),
            "total_hours": format_hours(self.total_hours),
            "total_amount": round(self.total_amount),
            "allowance_total": round(self.allowance_total),
            "monthly_total": round(self.monthly_total),
        }


@dataclass(frozen=True)
class CarStayRow:
    driver_id: int
    driver_name: str
    counts: dict[date, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass(frozen=True)
class CarStayMatrix:
    """Car stays per driver and day over one period, with row, column and grand totals."""

    period_start: date
    period_end: date
    dates: list[date] = field(default_factory=list)
    rows: list[CarStayRow] = field(default_factory=list)

    def day_total(self, day: date) -> int:
        return sum(r.counts.get(day, 0) for r in self.rows)

    @property
    def grand_total(self) -> int:
        return sum(r.total for r in self.rows)

    def to_dict(self) -> dict:
        return {
            "period_start": self.period_start.strftime("%Y-%m-%d"),
            "period_end": self.period_end.strftime("%Y-%m-%d"),
            "dates": [d.strftime("%Y-%m-%d") for d in self.dates],
            "rows": [
                {
                    "driver_id": r.driver_id,
                    "driver_name": r.driver_name,
                    "counts": [r.counts.get(d, 0) for d in self.dates],
                    "total": r.total,
                }
                for r in self.rows
            ],
            "day_totals": [self.day_total(d) for d in self.dates],
            "grand_total": self.grand_total,
        }
