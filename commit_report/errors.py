from __future__ import annotations

from typing import Optional


class CommitReportError(Exception):
    """Base class for errors raised while building a commit report."""


class ConfigError(CommitReportError):
    """A required setting is missing or malformed."""


class ApiError(CommitReportError):
    """GitHub answered with a status we do not know how to handle."""

    def __init__(self, status: int, reason: str = "", url: Optional[str] = None) -> None:
        self.status = status
        self.reason = reason
        self.url = url
        message = f"GitHub API request failed: {status} {reason}".rstrip()
        if url:
            message = f"{message} ({url})"
        super().__init__(message)


class RepoSkipped(CommitReportError):
    """Repository is missing (404) or empty (409); treated as zero commits."""

    def __init__(self, repo_full_name: str, status: int) -> None:
        self.repo_full_name = repo_full_name
        self.status = status
        if status == 404:
            message = f"Repository not found: {repo_full_name}"
        else:
            message = f"Empty repository or conflict while accessing: {repo_full_name}"
        super().__init__(message)
