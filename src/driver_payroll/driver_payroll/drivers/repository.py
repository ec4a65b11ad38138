from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Driver


class DriverRepository(Protocol):
    def get_by_id(self, driver_id: int) -> Optional[Driver]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Driver]:
        """Active drivers ordered by dispatch order (unset last)."""

        raise NotImplementedError
