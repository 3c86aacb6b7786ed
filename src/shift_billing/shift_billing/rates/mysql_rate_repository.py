from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, normalize_mysql_decimal
from .model import EmployeeRate, RateTier
from .repository import EmployeeRateRepository, RateTierRepository


class MySQLRateTierRepository(RateTierRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_tiers(
        self,
        *,
        company_id: int,
        shift_type: str,
        day_type: DayType,
        shift_date: date,
    ) -> Sequence[RateTier]:
        with db_cursor(self._conn_factory) as (_, cur):
            # valid_from <= shift_date <= valid_to, NULL bounds are open
            cur.execute(
                """
                SELECT company_id, shift_type, day_type, tier_order, hours_in_tier,
                       rate_per_hour, valid_from, valid_to, currency
                FROM shiftmate_rate_tiers
                WHERE company_id=%s AND shift_type=%s AND day_type=%s
                  AND (valid_from IS NULL OR valid_from <= %s)
                  AND (valid_to IS NULL OR valid_to >= %s)
                ORDER BY tier_order
                """,
                (company_id, shift_type, DayType(day_type).value, shift_date, shift_date),
            )
            rows = fetchall(cur)
            return [
                RateTier(
                    company_id=int(r["company_id"]),
                    shift_type=r["shift_type"],
                    day_type=DayType(r["day_type"]),
                    tier_order=int(r["tier_order"]),
                    hours_in_tier=normalize_mysql_decimal(r.get("hours_in_tier")),
                    rate_per_hour=int(r["rate_per_hour"]),
                    valid_from=normalize_mysql_date(r.get("valid_from")),
                    valid_to=normalize_mysql_date(r.get("valid_to")),
                    currency=r.get("currency") or DEFAULT_CURRENCY,
                )
                for r in rows
            ]


class MySQLEmployeeRateRepository(EmployeeRateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_user(self, user_id: int) -> Optional[EmployeeRate]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, company_id, weekday_rate, weeknight_rate, saturday_rate,
                       sunday_rate, public_holiday_rate, currency
                FROM shiftmate_employee_rates
                WHERE user_id=%s
                LIMIT 1
                """,
                (user_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return EmployeeRate(
                user_id=int(r["user_id"]),
                company_id=int(r["company_id"]),
                weekday_rate=int(r["weekday_rate"] or 0),
                weeknight_rate=int(r["weeknight_rate"] or 0),
                saturday_rate=int(r["saturday_rate"] or 0),
                sunday_rate=int(r["sunday_rate"] or 0),
                public_holiday_rate=int(r["public_holiday_rate"] or 0),
                currency=r.get("currency") or DEFAULT_CURRENCY,
            )
