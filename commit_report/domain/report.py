from __future__ import annotations

from typing import Dict, List

from .models import DayBucket
from .time_utils import parse_day_key


def merge_day_buckets(target: DayBucket, source: DayBucket) -> DayBucket:
    """Append every record of ``source`` to ``target`` under the same day key."""
    for key, records in source.items():
        target.setdefault(key, []).extend(records)
    return target


def sort_day_buckets(buckets: DayBucket) -> DayBucket:
    """Return a new mapping with keys in ascending calendar order."""
    return {key: list(buckets[key]) for key in sorted(buckets, key=parse_day_key)}


def report_to_json(report: DayBucket) -> Dict[str, List[Dict[str, str]]]:
    return {key: [record.to_dict() for record in records] for key, records in report.items()}
