from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
from typing import List, Optional

from .adapters.github.github_client import client_from_settings
from .app.report_service import CommitReportService
from .config import load_settings
from .errors import ApiError, ConfigError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-report",
        description="Monthly report of one user's commits across a GitHub organization",
    )
    parser.add_argument("--month", type=int, help="Month to report (1-12, default: current month)")
    parser.add_argument("--year", type=int, help="Year to report (default: current year)")
    parser.add_argument("--org", help="Organization name (overrides ORG_NAME)")
    parser.add_argument("--user", help="Commit author login (overrides TARGET_USER)")
    parser.add_argument("--output-dir", help="Directory for the JSON report (overrides OUTPUT_DIR)")
    parser.add_argument("--max-workers", type=int, help="Repositories fetched in parallel (overrides MAX_WORKERS)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic verbosity (default: INFO)",
    )
    return parser


def resolve_period(month: Optional[int], year: Optional[int], today: Optional[date] = None) -> tuple[int, int]:
    today = today or date.today()
    month = today.month if month is None else month
    year = today.year if year is None else year
    if not 1 <= month <= 12:
        raise ConfigError(f"--month must be between 1 and 12, got {month}")
    if year < 1:
        raise ConfigError(f"--year must be positive, got {year}")
    return year, month


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        year, month = resolve_period(args.month, args.year)
        settings = load_settings().with_overrides(
            org=args.org,
            target_user=args.user,
            output_dir=args.output_dir,
            max_workers=args.max_workers,
        )
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    service = CommitReportService(client_from_settings(settings), settings)
    try:
        service.run(year, month)
    except ApiError as exc:
        logger.error("Error listing repositories: %s", exc)
        return 1
    except Exception as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
