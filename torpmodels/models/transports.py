"""Download transports for GitHub release assets."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Protocol

import httpx

from .models import ModelDescriptor, TransportAttempt

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_RELEASES_HOST = "github.com"
DIRECT_DOWNLOAD_URL = "https://{host}/{repo}/releases/download/{tag}/{filename}"

_CHUNK_SIZE = 1024 * 1024


class Transport(Protocol):
    """
    One way of fetching a release asset into a local file.

    Implementations never raise for download problems: they report
    them through the returned TransportAttempt.
    """

    name: str

    def attempt(self, descriptor: ModelDescriptor, destination: Path) -> TransportAttempt:
        ...


def _stream_to_file(response: httpx.Response, path: Path) -> int:
    """Write a streamed response body to path, returning bytes written."""
    written = 0
    with open(path, "wb") as f:
        for chunk in response.iter_bytes(chunk_size=_CHUNK_SIZE):
            f.write(chunk)
            written += len(chunk)
    return written


class ReleaseAssetTransport:
    """
    Fetch assets through the GitHub releases API.

    Looks up the release by tag, finds the asset by filename and
    downloads it into a staging directory beside the destination, so
    the final rename is atomic and a failed refresh leaves an existing
    cache entry intact. Uses a token when one is configured, which is
    required for private repositories and raises the API rate limit.
    """

    name = "release-asset"

    def __init__(
        self,
        repo: str,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        http_timeout: float = 60.0,
        http_transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize transport.

        Args:
            repo: Repository in "owner/name" form
            token: GitHub token (optional)
            api_url: Base URL of the GitHub REST API
            http_timeout: Timeout for each HTTP request
            http_transport: Custom httpx transport (for tests)
        """
        self._repo = repo
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._http_timeout = http_timeout
        self._http_transport = http_transport

    def _client(self) -> httpx.Client:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return httpx.Client(
            headers=headers,
            timeout=self._http_timeout,
            follow_redirects=True,
            transport=self._http_transport,
        )

    def attempt(self, descriptor: ModelDescriptor, destination: Path) -> TransportAttempt:
        """
        Download an asset and move it to destination.

        Args:
            descriptor: Model to fetch (filename and tag)
            destination: Final cache path

        Returns:
            TransportAttempt describing success or the failure reason
        """
        release_url = f"{self._api_url}/repos/{self._repo}/releases/tags/{descriptor.tag}"
        temp_dir: str | None = None

        try:
            with self._client() as client:
                response = client.get(release_url)
                if response.status_code == 404:
                    return TransportAttempt.failed(
                        self.name,
                        f"Release {descriptor.tag} not found in {self._repo}",
                    )
                response.raise_for_status()

                asset = next(
                    (
                        a
                        for a in response.json().get("assets", [])
                        if a.get("name") == descriptor.filename
                    ),
                    None,
                )
                if asset is None:
                    return TransportAttempt.failed(
                        self.name,
                        f"{descriptor.filename} not found in release {descriptor.tag}",
                    )

                destination.parent.mkdir(parents=True, exist_ok=True)
                temp_dir = tempfile.mkdtemp(
                    prefix=".torpmodels_download_", dir=destination.parent
                )
                staged = Path(temp_dir) / descriptor.filename

                with client.stream(
                    "GET",
                    asset["url"],
                    headers={"Accept": "application/octet-stream"},
                ) as asset_response:
                    asset_response.raise_for_status()
                    size = _stream_to_file(asset_response, staged)

            if size == 0:
                return TransportAttempt.failed(
                    self.name, f"Downloaded {descriptor.filename} is empty"
                )

            os.replace(staged, destination)
            logger.debug(f"Moved {staged} to {destination}")
            return TransportAttempt.ok(self.name)

        except (httpx.HTTPError, OSError, ValueError, KeyError) as e:
            return TransportAttempt.failed(self.name, str(e) or type(e).__name__)

        finally:
            if temp_dir:
                shutil.rmtree(temp_dir, ignore_errors=True)


class DirectURLTransport:
    """
    Fetch assets from the public release download URL.

    The body is written to a ``.part`` file beside the destination and
    only replaces it once a non-empty download has completed, so a
    failed refresh leaves an existing cache entry intact.
    """

    name = "direct-url"

    def __init__(
        self,
        repo: str,
        host: str = DEFAULT_RELEASES_HOST,
        http_timeout: float = 60.0,
        http_transport: httpx.BaseTransport | None = None,
    ):
        self._repo = repo
        self._host = host
        self._http_timeout = http_timeout
        self._http_transport = http_transport

    def url_for(self, descriptor: ModelDescriptor) -> str:
        return DIRECT_DOWNLOAD_URL.format(
            host=self._host,
            repo=self._repo,
            tag=descriptor.tag,
            filename=descriptor.filename,
        )

    def attempt(self, descriptor: ModelDescriptor, destination: Path) -> TransportAttempt:
        url = self.url_for(descriptor)
        partial = destination.with_name(destination.name + ".part")
        logger.info(f"Trying direct download from {url}")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with httpx.Client(
                timeout=self._http_timeout,
                follow_redirects=True,
                transport=self._http_transport,
            ) as client:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    size = _stream_to_file(response, partial)

            if size == 0:
                return TransportAttempt.failed(
                    self.name, f"Downloaded {descriptor.filename} is empty"
                )

            os.replace(partial, destination)
            return TransportAttempt.ok(self.name)

        except (httpx.HTTPError, OSError) as e:
            return TransportAttempt.failed(self.name, str(e) or type(e).__name__)

        finally:
            if partial.exists():
                partial.unlink()
