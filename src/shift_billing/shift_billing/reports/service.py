from __future__ import annotations

import logging
from datetime import date

from ..billing.service import BillingService
from ..core.enums import BillingMode
from ..core.exceptions import ValidationError
from ..shifts.repository import ShiftRepository
from .aggregator import summarize
from .model import EmployeeReport

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, shifts: ShiftRepository, billing: BillingService):
        self._shifts = shifts
        self._billing = billing

    def build_employee_report(
        self,
        user_id: int,
        *,
        start: date,
        end: date,
        mode: BillingMode = BillingMode.TIERED,
    ) -> EmployeeReport:
        if start > end:
            raise ValidationError(f"Report start {start.isoformat()} is after end {end.isoformat()}")

        shifts = list(self._shifts.list_for_user(user_id, start_date=start, end_date=end))
        batch = self._billing.bill_shifts(shifts, mode=mode)
        summary = summarize(batch.billings)

        logger.info(
            "report for user %s %s..%s: %d shifts, %d cents",
            user_id,
            start.isoformat(),
            end.isoformat(),
            summary.shift_count,
            summary.total_amount,
        )

        return EmployeeReport(
            user_id=user_id,
            start_date=start,
            end_date=end,
            mode=BillingMode(mode),
            summary=summary,
            shifts=batch.billings,
            failures=batch.failures,
        )
