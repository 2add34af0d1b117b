"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

_ENV_VARS = (
    "TORPMODELS_CACHE_DIR",
    "TORPMODELS_REPO",
    "TORPMODELS_RELEASES_HOST",
    "TORPMODELS_API_URL",
    "TORPMODELS_HTTP_TIMEOUT",
    "GITHUB_PAT",
    "GITHUB_TOKEN",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Clear torpmodels settings and point the cache at a temp directory.

    Prevents tests from reading a developer's cache or token, and from
    writing into the real user cache directory.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    cache_dir = tmp_path / "torpmodels_cache"
    monkeypatch.setenv("TORPMODELS_CACHE_DIR", str(cache_dir))
    return cache_dir
