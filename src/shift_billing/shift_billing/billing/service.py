from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import time
from typing import AbstractSet, Optional, Sequence

from ..core.constants import DEFAULT_MAX_WORKERS, DEFAULT_WEEKNIGHT_THRESHOLD
from ..core.enums import BillingMode
from ..core.exceptions import DomainError, ValidationError
from ..holidays.repository import HolidayRepository
from ..shifts.model import Shift
from .calculator import ShiftBillingCalculator
from .factory import RateProviderFactory
from .model import BatchResult, ShiftBilling, ShiftFailure

logger = logging.getLogger(__name__)


def _as_mode(mode) -> BillingMode:
    try:
        return BillingMode(mode)
    except ValueError as exc:
        raise ValidationError(f"Unknown billing mode {mode!r}") from exc


def _failure(shift: Shift, exc: DomainError) -> ShiftFailure:
    logger.warning(
        "shift %s could not be billed: %s",
        shift.shift_id,
        exc,
        extra={"shift_id": shift.shift_id, "error_type": type(exc).__name__, "action": "shift_billing_failed"},
    )
    return ShiftFailure.from_error(shift, exc)


class BillingService:
    def __init__(
        self,
        holidays: HolidayRepository,
        providers: RateProviderFactory,
        *,
        weeknight_threshold: time = DEFAULT_WEEKNIGHT_THRESHOLD,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ):
        self._holidays = holidays
        self._providers = providers
        self._threshold = weeknight_threshold
        self._max_workers = max(1, int(max_workers))

    def _calculator(self, mode: BillingMode, user_id: Optional[int], holidays: AbstractSet) -> ShiftBillingCalculator:
        provider = self._providers.for_mode(mode, user_id=user_id)
        return ShiftBillingCalculator(provider, holidays, weeknight_threshold=self._threshold)

    def bill_shift(
        self,
        shift: Shift,
        *,
        mode: BillingMode = BillingMode.TIERED,
        holidays: Optional[AbstractSet] = None,
    ) -> ShiftBilling:
        """Bill a single shift; errors propagate to the caller."""

        if holidays is None:
            holidays = self._holidays.list_dates()
        return self._calculator(_as_mode(mode), shift.user_id, holidays).calculate(shift)

    def bill_shifts(self, shifts: Sequence[Shift], *, mode: BillingMode = BillingMode.TIERED) -> BatchResult:
        """Bill every shift independently on a thread pool.

        Holidays are fetched once for the whole batch. A shift failing with a
        DomainError is recorded in BatchResult.failures and the others carry
        on; results keep the input order.
        """

        if not shifts:
            return BatchResult(billings=(), failures=())

        mode = _as_mode(mode)
        holidays = frozenset(self._holidays.list_dates())

        results: dict[int, ShiftBilling] = {}
        failures: dict[int, ShiftFailure] = {}

        # employee rates are per user, tiers are shared by the whole batch
        calculators: dict[Optional[int], ShiftBillingCalculator] = {}
        setup_errors: dict[Optional[int], DomainError] = {}
        for index, shift in enumerate(shifts):
            key = shift.user_id if mode is BillingMode.EMPLOYEE_RATE else None
            if key not in calculators and key not in setup_errors:
                try:
                    calculators[key] = self._calculator(mode, shift.user_id, holidays)
                except DomainError as exc:
                    setup_errors[key] = exc
            if key in setup_errors:
                failures[index] = _failure(shift, setup_errors[key])

        logger.info(
            "billing %d shifts",
            len(shifts),
            extra={"shift_count": len(shifts), "mode": mode.value, "action": "batch_billing_start"},
        )

        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(shifts))) as executor:
            future_to_index = {}
            for index, shift in enumerate(shifts):
                if index in failures:
                    continue
                key = shift.user_id if mode is BillingMode.EMPLOYEE_RATE else None
                future_to_index[executor.submit(calculators[key].calculate, shift)] = index

            for future in as_completed(future_to_index):
                index = future_to_index[future]
                shift = shifts[index]
                try:
                    results[index] = future.result()
                except DomainError as exc:
                    failures[index] = _failure(shift, exc)

        logger.info(
            "billed %d shifts, %d failed",
            len(results),
            len(failures),
            extra={"billed": len(results), "failed": len(failures), "action": "batch_billing_done"},
        )

        return BatchResult(
            billings=tuple(results[i] for i in sorted(results)),
            failures=tuple(failures[i] for i in sorted(failures)),
        )
