"""Readers turning cached model files into in-memory objects."""

from __future__ import annotations

import bz2
import gzip
import lzma
import zlib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import joblib

from .errors import UnsupportedModelFormatError

Deserializer = Callable[[Path], Any]

# Serialization format markers: XDR, ASCII and native binary.
_RDS_FORMATS = (b"X\n", b"A\n", b"B\n")

_COMPRESSED_OPENERS = (
    (b"\x1f\x8b", gzip.open),
    (b"BZh", bz2.open),
    (b"\xfd7zXZ\x00", lzma.open),
)


def is_rds_file(path: Path) -> bool:
    """
    Check whether path holds an R serialized (.rds) stream.

    saveRDS gzips by default but can also write bzip2, xz or an
    uncompressed stream; all of them start with a format marker once
    decompressed.
    """
    with open(path, "rb") as f:
        head = f.read(6)

    for magic, opener in _COMPRESSED_OPENERS:
        if head.startswith(magic):
            try:
                with opener(path, "rb") as f:
                    head = f.read(2)
            except (OSError, EOFError, zlib.error, lzma.LZMAError):
                return False
            break

    return head[:2] in _RDS_FORMATS


def read_rds(path: Path) -> Any:
    """
    Read an R serialized (.rds) model with rdata.

    rdata is an optional dependency (``pip install torpmodels[rds]``).

    Raises:
        UnsupportedModelFormatError: If rdata is not installed
    """
    try:
        import rdata
    except ImportError as e:
        raise UnsupportedModelFormatError(
            path,
            "it is an R serialized (.rds) object and the 'rdata' package is "
            "not installed. Install it with: pip install 'torpmodels[rds]'",
        ) from e
    return rdata.read_rds(path)


def load_model_file(path: Path) -> Any:
    """
    Read a cached model file.

    R serialized streams go through read_rds; anything else is treated
    as a joblib artifact. Pass a different Deserializer to ModelLoader
    to read another format.
    """
    if is_rds_file(path):
        return read_rds(path)
    return joblib.load(path)
