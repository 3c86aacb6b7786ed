from __future__ import annotations

from datetime import date
from typing import AbstractSet, Protocol


class HolidayRepository(Protocol):
    def list_dates(self) -> AbstractSet[date]:
        """Every public holiday on record; global, not company scoped."""

        raise NotImplementedError
