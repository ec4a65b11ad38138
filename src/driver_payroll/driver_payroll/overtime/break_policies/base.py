from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import REFERENCE_BREAK_MINUTES
from ..model import BreakAdjustment


class BreakPolicy(ABC):
    """Strategy Pattern: how a break adjustment turns into the break deducted from the shift."""

    name: str = ""

    @abstractmethod
    def deficit_break(self, minutes: int) -> int:
        raise NotImplementedError

    def effective_break(self, adjustment: BreakAdjustment) -> int:
        if adjustment.is_deficit:
            return self.deficit_break(adjustment.minutes)
        return REFERENCE_BREAK_MINUTES - adjustment.minutes
