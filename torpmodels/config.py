"""
Runtime configuration.

Settings are read from environment variables each time get_settings()
is called, so they can be changed between calls in one process.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_cache_dir

from .models.errors import ConfigurationError
from .models.transports import DEFAULT_API_URL, DEFAULT_RELEASES_HOST

APP_NAME = "torpmodels"
DEFAULT_REPO = "peteowen1/torpmodels"
DEFAULT_HTTP_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    """Configuration for one cache or download operation."""

    cache_dir: Path | None = None  # None -> platform cache directory
    repo: str = DEFAULT_REPO
    github_token: str | None = None
    releases_host: str = DEFAULT_RELEASES_HOST
    api_url: str = DEFAULT_API_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def models_dir(self) -> Path:
        """
        Root of the model cache.

        Not created here; the cache creates subdirectories on write.
        """
        if self.cache_dir is not None:
            return Path(self.cache_dir).expanduser()
        return Path(user_cache_dir(APP_NAME)) / "models"

    def with_overrides(self, **changes: Any) -> Settings:
        """Copy with the given non-None fields replaced."""
        return dataclasses.replace(
            self, **{k: v for k, v in changes.items() if v is not None}
        )


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"TORPMODELS_HTTP_TIMEOUT must be a number, got {raw!r}"
        ) from e
    if value <= 0:
        raise ConfigurationError(
            f"TORPMODELS_HTTP_TIMEOUT must be positive, got {raw!r}"
        )
    return value


def get_settings() -> Settings:
    """
    Build settings from the environment.

    Environment variables:
        TORPMODELS_CACHE_DIR: Cache root (replaces the platform default)
        TORPMODELS_REPO: Release repository, "owner/name"
        GITHUB_PAT / GITHUB_TOKEN: Token for the releases API
        TORPMODELS_RELEASES_HOST: Host for direct download URLs
        TORPMODELS_API_URL: Base URL of the releases API
        TORPMODELS_HTTP_TIMEOUT: Per-request timeout in seconds

    Raises:
        ConfigurationError: If a value is invalid
    """
    cache_dir = os.environ.get("TORPMODELS_CACHE_DIR") or None
    return Settings(
        cache_dir=Path(cache_dir) if cache_dir else None,
        repo=os.environ.get("TORPMODELS_REPO") or DEFAULT_REPO,
        github_token=os.environ.get("GITHUB_PAT") or os.environ.get("GITHUB_TOKEN") or None,
        releases_host=os.environ.get("TORPMODELS_RELEASES_HOST") or DEFAULT_RELEASES_HOST,
        api_url=os.environ.get("TORPMODELS_API_URL") or DEFAULT_API_URL,
        http_timeout=_parse_timeout(
            os.environ.get("TORPMODELS_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        ),
    )


def settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert settings to dictionary for logging."""
    return {
        "models_dir": str(settings.models_dir),
        "repo": settings.repo,
        "github_token": "***" if settings.github_token else "",
        "releases_host": settings.releases_host,
        "api_url": settings.api_url,
        "http_timeout": settings.http_timeout,
    }


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
