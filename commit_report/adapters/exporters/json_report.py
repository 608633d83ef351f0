from __future__ import annotations

import json
import logging
import os

from ...domain.models import DayBucket
from ...domain.report import report_to_json

logger = logging.getLogger(__name__)


def ensure_dir(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path)


def report_filename(year: int, month: int) -> str:
    return f"commits_{year}_{month:02d}.json"


def write_report(report: DayBucket, output_dir: str, year: int, month: int) -> str:
    """
    Writes the day-keyed report as indented JSON and returns its path
    """
    ensure_dir(output_dir)
    filepath = os.path.join(output_dir, report_filename(year, month))
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(report_to_json(report), f, indent=2, ensure_ascii=False)
    logger.info("Commits saved to %s", filepath)
    return filepath
