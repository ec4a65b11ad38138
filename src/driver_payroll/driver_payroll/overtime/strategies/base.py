from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DayType, OvertimeCategory
from ..model import ShiftTimeline


class CategoryStrategy(ABC):
    """Strategy Pattern: encapsulate how one day type splits a shift into pay categories.

    Implementations return whole minutes per category; categories outside the
    strategy's family are never returned.
    """

    day_type: DayType

    @abstractmethod
    def assign(self, timeline: ShiftTimeline) -> dict[OvertimeCategory, int]:
        raise NotImplementedError
