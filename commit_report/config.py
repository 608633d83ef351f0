from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

GITHUB_API_URL = "https://api.github.com"
OUTPUT_DIR = "output"
MAX_WORKERS = 8
REQUEST_TIMEOUT = 30
MAX_RETRIES = 1


@dataclass(frozen=True)
class Settings:
    """Everything a report run needs, resolved from the environment."""

    token: str
    org: str
    target_user: str

    api_url: str = GITHUB_API_URL
    output_dir: str = OUTPUT_DIR
    max_workers: int = MAX_WORKERS
    request_timeout: int = REQUEST_TIMEOUT
    max_retries: int = MAX_RETRIES

    def with_overrides(self, **overrides: object) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        settings = replace(self, **changes)
        if settings.max_workers < 1:
            raise ConfigError("max_workers must be at least 1")
        return settings


TOKEN_PLACEHOLDER = "<PASTE_GITHUB_TOKEN_HERE>"


def _required(env: Mapping[str, str], name: str) -> str:
    value = (env.get(name) or "").strip()
    if not value or value == TOKEN_PLACEHOLDER:
        raise ConfigError(
            "Make sure the GITHUB_TOKEN, ORG_NAME and TARGET_USER "
            f"environment variables are set ({name} is missing)."
        )
    return value


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int = 1) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    When ``environ`` is None the process environment is used, after pulling
    in a ``.env`` file with python-dotenv.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    return Settings(
        token=_required(environ, "GITHUB_TOKEN"),
        org=_required(environ, "ORG_NAME"),
        target_user=_required(environ, "TARGET_USER"),
        api_url=(environ.get("GITHUB_API_URL") or GITHUB_API_URL).rstrip("/"),
        output_dir=environ.get("OUTPUT_DIR") or OUTPUT_DIR,
        max_workers=_int_setting(environ, "MAX_WORKERS", MAX_WORKERS),
        request_timeout=_int_setting(environ, "REQUEST_TIMEOUT", REQUEST_TIMEOUT),
        max_retries=_int_setting(environ, "GITHUB_MAX_RETRIES", MAX_RETRIES),
    )
