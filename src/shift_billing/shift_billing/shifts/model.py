from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Union


@dataclass(frozen=True)
class Shift:
    """Domain entity: a rostered shift, wall-clock times with no timezone."""

    shift_id: Union[int, str]
    user_id: int
    company_id: int
    date: date
    start_time: Union[str, time]
    end_time: Union[str, time]
    shift_type: str
