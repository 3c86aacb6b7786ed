from __future__ import annotations

from datetime import date

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_dates(self) -> frozenset[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date FROM shiftmate_public_holidays")
            return frozenset(normalize_mysql_date(r["date"]) for r in fetchall(cur))
