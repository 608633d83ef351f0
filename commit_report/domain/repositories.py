from __future__ import annotations

import logging
from typing import List

from ..ports.github_port import GitHubPort
from .models import Repository

logger = logging.getLogger(__name__)

PER_PAGE = 100


def list_repositories(client: GitHubPort, org: str) -> List[Repository]:
    """List every repository of ``org``.

    Pages through /orgs/{org}/repos until an empty page comes back.
    ApiError propagates: without repositories there is no report.
    """
    repos = [
        Repository.from_api(item)
        for item in client.rest_get_paginated(f"/orgs/{org}/repos", per_page=PER_PAGE)
    ]
    logger.info("Found %d repositories in organization %s", len(repos), org)
    return repos
