from __future__ import annotations

from dataclasses import dataclass

from .billing.factory import RateProviderFactory
from .billing.service import BillingService
from .core.settings import BillingSettings
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .rates.mysql_rate_repository import MySQLEmployeeRateRepository, MySQLRateTierRepository
from .reports.service import ReportService
from .shifts.mysql_shift_repository import MySQLShiftRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    shifts_repo: MySQLShiftRepository
    rate_tiers_repo: MySQLRateTierRepository
    employee_rates_repo: MySQLEmployeeRateRepository
    holidays_repo: MySQLHolidayRepository

    providers: RateProviderFactory
    billing_service: BillingService
    report_service: ReportService


def build_container(*, settings: BillingSettings) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.db_config))

    shifts_repo = MySQLShiftRepository(conn)
    rate_tiers_repo = MySQLRateTierRepository(conn)
    employee_rates_repo = MySQLEmployeeRateRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)

    providers = RateProviderFactory(
        rate_tiers=rate_tiers_repo,
        employee_rates=employee_rates_repo,
        fallback_rate_cents=settings.fallback_rate_cents,
    )
    billing_service = BillingService(
        holidays_repo,
        providers,
        weeknight_threshold=settings.weeknight_threshold,
        max_workers=settings.max_workers,
    )
    report_service = ReportService(shifts_repo, billing_service)

    return Container(
        conn=conn,
        shifts_repo=shifts_repo,
        rate_tiers_repo=rate_tiers_repo,
        employee_rates_repo=employee_rates_repo,
        holidays_repo=holidays_repo,
        providers=providers,
        billing_service=billing_service,
        report_service=report_service,
    )
