from __future__ import annotations

from ...core.constants import REFERENCE_BREAK_MINUTES
from .base import BreakPolicy


class AdditiveDeficitBreakPolicy(BreakPolicy):
    """A ``-`` adjustment is break time on top of the reference: ``-00:45`` deducts 105 minutes."""

    name = "additive_deficit"

    def deficit_break(self, minutes: int) -> int:
        return REFERENCE_BREAK_MINUTES + minutes
