from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_for_user(self, user_id: int, *, start_date: date, end_date: date) -> Sequence[Shift]:
        """Shifts of one employee with start_date <= date <= end_date."""

        raise NotImplementedError
