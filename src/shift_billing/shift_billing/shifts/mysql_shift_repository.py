from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int, *, start_date: date, end_date: date) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, company_id, date, start_time, end_time, shift_type
                FROM shiftmate_shifts
                WHERE user_id=%s AND date BETWEEN %s AND %s
                ORDER BY date, start_time
                """,
                (user_id, start_date, end_date),
            )
            rows = fetchall(cur)
            return [
                Shift(
                    shift_id=int(r["id"]),
                    user_id=int(r["user_id"]),
                    company_id=int(r["company_id"]) if r.get("company_id") is not None else 0,
                    date=normalize_mysql_date(r["date"]),
                    start_time=normalize_mysql_time(r["start_time"]),
                    end_time=normalize_mysql_time(r["end_time"]),
                    shift_type=r["shift_type"],
                )
                for r in rows
            ]
