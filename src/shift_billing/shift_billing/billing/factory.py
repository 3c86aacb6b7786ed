from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_FALLBACK_RATE_CENTS
from ..core.enums import BillingMode
from ..core.exceptions import ValidationError
from ..rates.model import EmployeeRate
from ..rates.repository import EmployeeRateRepository, RateTierRepository
from .providers.base import RateProvider
from .providers.employee_rate_provider import EmployeeRateProvider
from .providers.tiered_provider import TieredRateProvider

logger = logging.getLogger(__name__)


@dataclass
class RateProviderFactory:
    """Factory Pattern: choose the rate system for a billing request."""

    rate_tiers: RateTierRepository
    employee_rates: EmployeeRateRepository
    fallback_rate_cents: int = DEFAULT_FALLBACK_RATE_CENTS

    def for_mode(self, mode: BillingMode, *, user_id: Optional[int] = None) -> RateProvider:
        try:
            mode = BillingMode(mode)
        except ValueError as exc:
            raise ValidationError(f"Unknown billing mode {mode!r}") from exc

        if mode is BillingMode.TIERED:
            return TieredRateProvider(self.rate_tiers, fallback_rate_cents=self.fallback_rate_cents)

        if user_id is None:
            raise ValidationError("user_id is required for employee-rate billing")

        rate = self.employee_rates.get_for_user(user_id)
        if rate is None:
            logger.info("no employee rate for user %s, billing at zero", user_id)
            rate = EmployeeRate.zero(user_id)
        return EmployeeRateProvider(rate)
