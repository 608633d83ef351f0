from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

DAY_KEY_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True)
class MonthWindow:
    """Inclusive UTC bounds of one calendar month."""

    year: int
    month: int
    since: datetime
    until: datetime


def within(moment: datetime, since: datetime, until: datetime) -> bool:
    return since <= moment <= until


def month_window(year: int, month: int) -> MonthWindow:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    last_day = calendar.monthrange(year, month)[1]
    since = datetime(year, month, 1, tzinfo=timezone.utc)
    until = datetime.combine(date(year, month, last_day), time(23, 59, 59), tzinfo=timezone.utc)
    return MonthWindow(year=year, month=month, since=since, until=until)


def parse_github_datetime(date_str: str) -> datetime:
    """Parse GitHub ISO timestamps like '2026-01-12T10:11:12Z' to aware UTC datetime."""
    # GitHub uses 'Z' for UTC. datetime.fromisoformat expects '+00:00'.
    if date_str.endswith("Z"):
        date_str = date_str[:-1] + "+00:00"
    parsed = datetime.fromisoformat(date_str)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_github_iso(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_day_key(day: date) -> str:
    # Built from integers so the host locale never leaks in.
    return f"{day.day:02d}/{day.month:02d}/{day.year:04d}"


def day_key_for(date_str: str) -> str:
    return format_day_key(parse_github_datetime(date_str).date())


def parse_day_key(key: str) -> date:
    return datetime.strptime(key, DAY_KEY_FORMAT).date()
