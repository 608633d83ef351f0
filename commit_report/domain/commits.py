from __future__ import annotations

from collections import defaultdict
from datetime import datetime
import logging
from typing import Any, DefaultDict, Dict, Iterable, Iterator, List

from ..errors import ApiError, RepoSkipped
from ..ports.github_port import GitHubPort
from .models import CommitRecord, DayBucket
from .time_utils import day_key_for, parse_github_datetime, to_github_iso, within

logger = logging.getLogger(__name__)

PER_PAGE = 100

# 404: repository gone or not visible to the token. 409: empty repository.
SKIPPED_STATUSES = (404, 409)


def iter_commit_payloads(
    client: GitHubPort,
    repo_full_name: str,
    author: str,
    since: datetime,
    until: datetime,
) -> Iterator[Dict[str, Any]]:
    """Yield raw commit payloads, letting GitHub filter by author and range.

    Raises RepoSkipped for 404/409 and ApiError for any other failure.
    """
    params = {
        "author": author,
        "since": to_github_iso(since),
        "until": to_github_iso(until),
    }
    try:
        yield from client.rest_get_paginated(
            f"/repos/{repo_full_name}/commits", params=params, per_page=PER_PAGE
        )
    except ApiError as exc:
        if exc.status in SKIPPED_STATUSES:
            raise RepoSkipped(repo_full_name, exc.status) from exc
        raise


def fetch_commits(
    client: GitHubPort,
    repo_full_name: str,
    author: str,
    since: datetime,
    until: datetime,
) -> List[CommitRecord]:
    """Commits by ``author`` in ``repo_full_name`` dated within [since, until].

    A missing or empty repository yields an empty list with a warning.
    """
    logger.info("Collecting commits from repository: %s", repo_full_name)

    records: List[CommitRecord] = []
    try:
        for payload in iter_commit_payloads(client, repo_full_name, author, since, until):
            record = CommitRecord.from_api(repo_full_name, payload)
            committed_at = parse_github_datetime(record.date)
            if not within(committed_at, since, until):
                logger.debug("Dropping out-of-range commit %s in %s", record.date, repo_full_name)
                continue
            records.append(record)
    except RepoSkipped as exc:
        logger.warning("%s", exc)
        return []

    logger.debug("Fetched %d commits from %s", len(records), repo_full_name)
    return records


def bucket_commits(records: Iterable[CommitRecord]) -> DayBucket:
    per_day: DefaultDict[str, List[CommitRecord]] = defaultdict(list)
    for record in records:
        per_day[day_key_for(record.date)].append(record)
    return dict(per_day)
