from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
import logging
from typing import List, Optional

from ..adapters.exporters.json_report import write_report
from ..config import Settings
from ..domain.commits import bucket_commits, fetch_commits
from ..domain.models import DayBucket
from ..domain.report import merge_day_buckets, sort_day_buckets
from ..domain.repositories import list_repositories
from ..domain.time_utils import MonthWindow, format_day_key, month_window
from ..ports.github_port import GitHubPort

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    window: MonthWindow
    report: DayBucket
    repo_count: int
    failed_repos: List[str] = field(default_factory=list)
    output_path: Optional[str] = None

    @property
    def commit_count(self) -> int:
        return sum(len(records) for records in self.report.values())


class CommitReportService:
    """
    Collects one user's commits across an organization for one month
    """

    def __init__(self, client: GitHubPort, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    def collect(self, window: MonthWindow) -> RunResult:
        repos = list_repositories(self.client, self.settings.org)

        buckets: DayBucket = {}
        failed: List[str] = []

        # Workers only return their records; merging happens on this thread.
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as pool:
            futures = {
                pool.submit(
                    fetch_commits,
                    self.client,
                    repo.full_name,
                    self.settings.target_user,
                    window.since,
                    window.until,
                ): repo.full_name
                for repo in repos
            }
            for future in as_completed(futures):
                repo_full_name = futures[future]
                try:
                    records = future.result()
                except Exception as exc:
                    logger.error("Error processing %s: %s", repo_full_name, exc)
                    failed.append(repo_full_name)
                    continue
                merge_day_buckets(buckets, bucket_commits(records))

        return RunResult(
            window=window,
            report=sort_day_buckets(buckets),
            repo_count=len(repos),
            failed_repos=sorted(failed),
        )

    def run(self, year: int, month: int) -> RunResult:
        window = month_window(year, month)
        logger.info(
            "Collecting commits by %s in organization %s for the period %s to %s.",
            self.settings.target_user,
            self.settings.org,
            format_day_key(window.since.date()),
            format_day_key(window.until.date()),
        )

        result = self.collect(window)
        result.output_path = write_report(result.report, self.settings.output_dir, year, month)

        if result.failed_repos:
            logger.warning(
                "%d of %d repositories failed: %s",
                len(result.failed_repos),
                result.repo_count,
                ", ".join(result.failed_repos),
            )
        logger.info(
            "Collected %d commits over %d days from %d repositories",
            result.commit_count,
            len(result.report),
            result.repo_count,
        )
        return result
