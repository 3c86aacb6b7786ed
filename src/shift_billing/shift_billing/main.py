from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .common.datetime_utils import parse_iso_date
from .common.money import format_cents
from .container import build_container
from .core.enums import BillingMode
from .core.exceptions import DomainError
from .core.settings import configure_logging, load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shift-billing", description="Bill an employee's shifts for a period.")
    parser.add_argument("--user", type=int, required=True, help="employee user id")
    parser.add_argument("--start", required=True, help="first day, YYYY-MM-DD")
    parser.add_argument("--end", required=True, help="last day, YYYY-MM-DD")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in BillingMode],
        default=BillingMode.TIERED.value,
        help="company rate tiers or the employee's flat rates",
    )
    parser.add_argument("--settings", default=None, help="settings module, defaults to APP_ENV selection")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    args = build_parser().parse_args(argv)

    settings = load_settings(args.settings)
    configure_logging("DEBUG" if settings.debug else settings.log_level)

    try:
        start = parse_iso_date(args.start)
        end = parse_iso_date(args.end)
        container = build_container(settings=settings)
        report = container.report_service.build_employee_report(
            args.user, start=start, end=end, mode=BillingMode(args.mode)
        )
    except DomainError as exc:
        logger.error("report failed: %s", exc)
        return 2

    json.dump(report.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    logger.info("total %s", format_cents(report.summary.total_amount, settings.currency))
    return 1 if report.failures else 0


if __name__ == "__main__":
    sys.exit(main())
