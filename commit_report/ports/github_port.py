from __future__ import annotations

from typing import Any, Dict, Iterator, Optional, Protocol


class GitHubPort(Protocol):
    """Port used by the domain layer to talk to GitHub.

    Keeps repository listing and commit aggregation independent of the
    HTTP library, retries and session handling.
    """

    def rest_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        ...

    def rest_get_paginated(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        per_page: int = 100,
        page_start: int = 1,
    ) -> Iterator[Any]:
        ...
