"""Fetch release assets through an ordered list of transports."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .models import FetchResult, ModelDescriptor, TransportAttempt
from .transports import Transport

logger = logging.getLogger(__name__)


class ReleaseFetcher:
    """
    Try each transport in order until one produces the file.

    Every transport is attempted at most once per fetch; there is no
    retry or backoff. Failures are collected so the caller can report
    all of them together.
    """

    def __init__(self, transports: Sequence[Transport]):
        if not transports:
            raise ValueError("ReleaseFetcher needs at least one transport")
        self._transports = tuple(transports)

    @property
    def transports(self) -> tuple[Transport, ...]:
        return self._transports

    def fetch(self, descriptor: ModelDescriptor, destination: Path) -> FetchResult:
        """
        Fetch a model file into destination.

        Args:
            descriptor: Model to fetch
            destination: Cache path to populate

        Returns:
            FetchResult with one attempt per transport tried
        """
        attempts: list[TransportAttempt] = []

        for transport in self._transports:
            try:
                attempt = transport.attempt(descriptor, destination)
            except Exception as e:
                attempt = TransportAttempt.failed(
                    transport.name, f"{type(e).__name__}: {e}"
                )

            if attempt.success and not _is_populated(destination):
                if destination.is_file():
                    destination.unlink()
                attempt = TransportAttempt.failed(
                    transport.name,
                    f"{descriptor.filename} missing or empty after download",
                )

            attempts.append(attempt)

            if attempt.success:
                logger.info(
                    f"Successfully downloaded {descriptor.filename} via {transport.name}"
                )
                return FetchResult(descriptor=descriptor, success=True, attempts=attempts)

            logger.warning(
                f"{transport.name} download of {descriptor.filename} failed: {attempt.error}"
            )

        return FetchResult(descriptor=descriptor, success=False, attempts=attempts)


def _is_populated(path: Path) -> bool:
    return path.is_file() and path.stat().st_size > 0
