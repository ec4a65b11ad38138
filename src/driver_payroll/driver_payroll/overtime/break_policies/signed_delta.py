from __future__ import annotations

from .base import BreakPolicy


class SignedDeltaBreakPolicy(BreakPolicy):
    """A ``-`` adjustment is the break actually taken: ``-00:45`` deducts 45 minutes."""

    name = "signed_delta"

    def deficit_break(self, minutes: int) -> int:
        return minutes
