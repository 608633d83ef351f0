from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
import time
from typing import Any, Dict, Iterator, Optional

import requests
from requests import Response
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import Timeout as RequestsTimeout

from ...config import GITHUB_API_URL, Settings
from ...errors import ApiError

logger = logging.getLogger(__name__)

USER_AGENT = "GitHub-Commit-Fetcher"
TRANSIENT_STATUSES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class GitHubClient:
    """Small helper around the GitHub REST API with sane defaults."""

    token: str

    base_url: str = GITHUB_API_URL
    timeout: int = 30

    # Attempts per request; 1 means no automatic retry.
    max_retries: int = 1
    backoff_seconds: float = 1.0

    session: requests.Session = field(default_factory=requests.Session, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("token is required")
        self.session.headers.update(self.rest_headers)

    @property
    def rest_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token}",
            "User-Agent": USER_AGENT,
        }

    def rest_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        resp = self._request_with_retries(url=f"{self.base_url}{path}", params=params or {})
        return resp.json()

    def _backoff(self, attempt: int) -> float:
        return (self.backoff_seconds * (2 ** (attempt - 1))) + random.uniform(0.0, 0.25)

    def _request_with_retries(self, *, url: str, params: Dict[str, Any]) -> Response:
        attempts = max(1, self.max_retries)

        for attempt in range(1, attempts + 1):
            try:
                resp = self.session.get(url, params=params, timeout=self.timeout)
            except (RequestsConnectionError, RequestsTimeout) as exc:
                if attempt >= attempts:
                    raise
                sleep_seconds = self._backoff(attempt)
                logger.warning("Request to %s failed (%s); retrying in %.1fs", url, exc, sleep_seconds)
                time.sleep(sleep_seconds)
                continue

            if resp.status_code in TRANSIENT_STATUSES and attempt < attempts:
                retry_after = resp.headers.get("Retry-After")
                if retry_after and retry_after.isdigit():
                    sleep_seconds = float(retry_after)
                else:
                    sleep_seconds = self._backoff(attempt)
                logger.warning("GitHub returned %s for %s; retrying in %.1fs", resp.status_code, url, sleep_seconds)
                time.sleep(sleep_seconds)
                continue

            if not resp.ok:
                raise ApiError(resp.status_code, resp.reason or "", url)
            return resp

    def rest_get_paginated(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        per_page: int = 100,
        page_start: int = 1,
    ) -> Iterator[Any]:
        """Yield items page by page until GitHub returns an empty page."""
        page = page_start
        while True:
            merged = {**(params or {}), "per_page": per_page, "page": page}
            data = self.rest_get(path, params=merged)
            if not data:
                return

            for item in data:
                yield item

            page += 1


def client_from_settings(settings: Settings) -> GitHubClient:
    return GitHubClient(
        token=settings.token,
        base_url=settings.api_url,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
