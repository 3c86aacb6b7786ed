from __future__ import annotations

from functools import reduce
from typing import Iterable

from ..billing.model import ShiftBilling
from .model import PeriodSummary


def summarize(billings: Iterable[ShiftBilling]) -> PeriodSummary:
    """Fold shift billings into per-category totals.

    Every line is bucketed by its own category, so a split weekday shift
    lands partly in weekday and partly in weeknight.
    """
    return reduce(PeriodSummary.add, billings, PeriodSummary.empty())


def combine(summaries: Iterable[PeriodSummary]) -> PeriodSummary:
    return reduce(PeriodSummary.merge, summaries, PeriodSummary.empty())
