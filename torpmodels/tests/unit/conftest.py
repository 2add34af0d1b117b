"""Shared fixtures for unit tests."""

from __future__ import annotations

import gzip
import json
import struct
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from torpmodels.models import ModelDescriptor, TransportAttempt

VALID_PAYLOAD = b'{"model": "fitted"}'
CORRUPT_PAYLOAD = b"not a model {"


class StubTransport:
    """Transport that writes a fixed payload, or fails, and records calls."""

    def __init__(
        self,
        name: str = "stub",
        payload: bytes | None = None,
        error: str = "unavailable",
    ):
        self.name = name
        self.payload = payload
        self.error = error
        self.calls: list[tuple[str, str, Path]] = []

    def attempt(self, descriptor: ModelDescriptor, destination: Path) -> TransportAttempt:
        self.calls.append((descriptor.filename, descriptor.tag, destination))
        if self.payload is None:
            return TransportAttempt.failed(self.name, self.error)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(self.payload)
        return TransportAttempt.ok(self.name)


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text())


@pytest.fixture
def make_transport() -> type[StubTransport]:
    """StubTransport class, for tests that build their own transports."""
    return StubTransport


@pytest.fixture
def json_reader() -> Callable[[Path], Any]:
    """Deserializer used in tests in place of the default reader."""
    return _read_json


@pytest.fixture
def valid_payload() -> bytes:
    return VALID_PAYLOAD


@pytest.fixture
def corrupt_payload() -> bytes:
    return CORRUPT_PAYLOAD


@pytest.fixture
def working_transport() -> StubTransport:
    """Primary transport that succeeds with a valid payload."""
    return StubTransport(name="release-asset", payload=VALID_PAYLOAD)


@pytest.fixture
def failing_transports() -> list[StubTransport]:
    """Both transports failing with distinguishable errors."""
    return [
        StubTransport(name="release-asset", error="401 Bad credentials"),
        StubTransport(name="direct-url", error="404 Not Found"),
    ]


@pytest.fixture
def rds_stream() -> bytes:
    """Uncompressed XDR (version 3) R stream holding the integer vector 42L."""
    header = b"X\n" + struct.pack(">iii", 3, 0x040300, 0x030500)
    native_encoding = struct.pack(">i", 5) + b"UTF-8"
    intsxp = struct.pack(">iii", 13, 1, 42)
    return header + native_encoding + intsxp


@pytest.fixture
def rds_payload(rds_stream: bytes) -> bytes:
    """The same stream gzipped, as saveRDS writes it by default."""
    return gzip.compress(rds_stream)
