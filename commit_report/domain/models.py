from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class Repository:
    full_name: str

    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "Repository":
        return cls(full_name=payload["full_name"])


@dataclass(frozen=True)
class CommitRecord:
    """One commit as it appears in the report."""

    repo: str
    message: str
    author: str
    date: str

    @classmethod
    def from_api(cls, repo_full_name: str, payload: Dict[str, Any]) -> "CommitRecord":
        commit = payload["commit"]
        return cls(
            repo=repo_full_name,
            message=commit["message"],
            author=commit["author"]["name"],
            date=commit["author"]["date"],
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# "DD/MM/YYYY" -> commits of that day, in arrival order.
DayBucket = Dict[str, List[CommitRecord]]
