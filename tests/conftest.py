from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

import pytest

from commit_report.config import Settings
from commit_report.domain.time_utils import parse_github_datetime
from commit_report.errors import ApiError


def make_commit(date: str, message: str = "change", name: str = "Alice", login: str = "alice") -> Dict[str, Any]:
    return {
        "sha": f"sha-{date}-{message}",
        "commit": {"message": message, "author": {"name": name, "email": f"{login}@example.com", "date": date}},
        "author": {"login": login},
    }


class FakeGitHub:
    """In-memory GitHubPort that filters commits the way the API does."""

    def __init__(
        self,
        repos: List[str],
        commits: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        errors: Optional[Dict[str, int]] = None,
    ) -> None:
        self.repos = repos
        self.commits = commits or {}
        self.errors = errors or {}
        self.calls: List[tuple] = []

    def _items(self, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        if path.startswith("/orgs/"):
            return [{"full_name": name} for name in self.repos]

        full_name = path[len("/repos/"):-len("/commits")]
        items = self.commits.get(full_name, [])
        if "author" in params:
            items = [c for c in items if c["author"]["login"] == params["author"]]
        if "since" in params:
            since = parse_github_datetime(params["since"])
            until = parse_github_datetime(params["until"])
            items = [c for c in items if since <= parse_github_datetime(c["commit"]["author"]["date"]) <= until]
        return items

    def rest_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        params = params or {}
        self.calls.append((path, dict(params)))
        if path in self.errors:
            raise ApiError(self.errors[path], "Simulated", path)
        per_page = params.get("per_page", 100)
        page = params.get("page", 1)
        items = self._items(path, params)
        return items[(page - 1) * per_page : page * per_page]

    def rest_get_paginated(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        per_page: int = 100,
        page_start: int = 1,
    ) -> Iterator[Any]:
        page = page_start
        while True:
            data = self.rest_get(path, {**(params or {}), "per_page": per_page, "page": page})
            if not data:
                return
            yield from data
            page += 1


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(token="t0ken", org="acme", target_user="alice", output_dir=str(tmp_path / "output"))
