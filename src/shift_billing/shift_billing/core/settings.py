from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from datetime import time
from types import ModuleType
from typing import Optional

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_non_negative
from .constants import (
    DEFAULT_CURRENCY,
    DEFAULT_FALLBACK_RATE_CENTS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_WEEKNIGHT_THRESHOLD,
)


@dataclass(frozen=True)
class BillingSettings:
    """Typed view over a settings module (config.development, ...)."""

    db_config: dict = field(default_factory=dict)
    debug: bool = False
    log_level: str = "INFO"
    fallback_rate_cents: int = DEFAULT_FALLBACK_RATE_CENTS
    weeknight_threshold: time = DEFAULT_WEEKNIGHT_THRESHOLD
    max_workers: int = DEFAULT_MAX_WORKERS
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_module(cls, settings: ModuleType) -> "BillingSettings":
        threshold = getattr(settings, "WEEKNIGHT_THRESHOLD", None)
        return cls(
            db_config=dict(getattr(settings, "DB_CONFIG", {}) or {}),
            debug=bool(getattr(settings, "DEBUG", False)),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
            fallback_rate_cents=require_non_negative(
                int(getattr(settings, "FALLBACK_RATE_CENTS", DEFAULT_FALLBACK_RATE_CENTS)),
                "FALLBACK_RATE_CENTS",
            ),
            weeknight_threshold=parse_hhmm(threshold, "WEEKNIGHT_THRESHOLD") if threshold else DEFAULT_WEEKNIGHT_THRESHOLD,
            max_workers=max(1, int(getattr(settings, "BILLING_MAX_WORKERS", DEFAULT_MAX_WORKERS))),
            currency=str(getattr(settings, "DEFAULT_CURRENCY", DEFAULT_CURRENCY)),
        )


def load_settings(module_name: Optional[str] = None) -> BillingSettings:
    if module_name is None:
        from config import get_settings_module

        module_name = get_settings_module()
    return BillingSettings.from_module(importlib.import_module(module_name))


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
