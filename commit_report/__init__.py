from .errors import ApiError, CommitReportError, ConfigError, RepoSkipped
from .config import Settings, load_settings
from .domain.models import CommitRecord, DayBucket, Repository
from .domain.time_utils import MonthWindow, format_day_key, month_window, parse_day_key
from .domain.repositories import list_repositories
from .domain.commits import bucket_commits, fetch_commits
from .domain.report import merge_day_buckets, report_to_json, sort_day_buckets
from .adapters.github.github_client import GitHubClient, client_from_settings
from .adapters.exporters.json_report import report_filename, write_report
from .app.report_service import CommitReportService, RunResult

__all__ = [
    "ApiError",
    "CommitReportError",
    "ConfigError",
    "RepoSkipped",
    "Settings",
    "load_settings",
    "CommitRecord",
    "DayBucket",
    "Repository",
    "MonthWindow",
    "format_day_key",
    "month_window",
    "parse_day_key",
    "list_repositories",
    "bucket_commits",
    "fetch_commits",
    "merge_day_buckets",
    "report_to_json",
    "sort_day_buckets",
    "GitHubClient",
    "client_from_settings",
    "report_filename",
    "write_report",
    "CommitReportService",
    "RunResult",
]
