"""Hash adapters implementing the HashAlgorithm port.

Each backend has its own native interface:

- hashlib algorithms take the open file and pull from it themselves
  (``hashlib.file_digest``, which sizes its own read buffer).
- xxHash and MetroHash expose an ``update()`` object fed chunk by chunk.

Both styles are wrapped so callers only see ``digest(path) -> Digest``.
``build_registry()`` maps every AlgorithmName to its adapter.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import metrohash
import xxhash

from hashrace.config import READ_CHUNK_SIZE, XXHASH_SEED
from hashrace.domain.models import AlgorithmName, Digest
from hashrace.domain.ports import HashAlgorithm
from hashrace.errors import HashError

logger = logging.getLogger("hashrace.hashers")

_HasherFactory = Callable[[], Any]
_Finalizer = Callable[[Any], bytes]


def _plain_digest(hasher: Any) -> bytes:
    return hasher.digest()


class FileDigestHash:
    """hashlib algorithm that consumes the open file via ``hashlib.file_digest``."""

    def __init__(self, name: AlgorithmName, hashlib_name: str) -> None:
        self._name = name
        self._hashlib_name = hashlib_name

    @property
    def name(self) -> AlgorithmName:
        return self._name

    def digest(self, path: Path) -> Digest:
        try:
            with Path(path).open("rb") as handle:
                hasher = hashlib.file_digest(handle, self._hashlib_name)
        except OSError as exc:
            raise HashError(f"{self._name.value}: cannot read {path}: {exc}") from exc
        value = hasher.digest()
        return Digest(value, len(value) * 8)

    def __repr__(self) -> str:
        return f"FileDigestHash({self._name.value!r})"


class IncrementalHash:
    """Backend fed through ``update()`` with fixed-size reads.

    Parameters
    ----------
    name:
        Algorithm this adapter computes.
    factory:
        Zero-argument callable returning a fresh hasher object.
    finalize:
        Turns the fed hasher into digest bytes; defaults to ``hasher.digest()``.
    chunk_size:
        Bytes read from disk per ``update()`` call.

    """

    def __init__(
        self,
        name: AlgorithmName,
        factory: _HasherFactory,
        *,
        finalize: _Finalizer = _plain_digest,
        chunk_size: int = READ_CHUNK_SIZE,
    ) -> None:
        self._name = name
        self._factory = factory
        self._finalize = finalize
        self._chunk_size = chunk_size

    @property
    def name(self) -> AlgorithmName:
        return self._name

    def digest(self, path: Path) -> Digest:
        hasher = self._factory()
        try:
            with Path(path).open("rb") as handle:
                while chunk := handle.read(self._chunk_size):
                    hasher.update(chunk)
        except OSError as exc:
            raise HashError(f"{self._name.value}: cannot read {path}: {exc}") from exc
        value = self._finalize(hasher)
        return Digest(value, len(value) * 8)

    def __repr__(self) -> str:
        return f"IncrementalHash({self._name.value!r})"


# ---------------------------------------------------------------------------
# Backend factories
# ---------------------------------------------------------------------------


def _xxhash32() -> Any:
    return xxhash.xxh32(seed=XXHASH_SEED)


def _int_digest(width: int) -> _Finalizer:
    """Finalizer for hashers that report their digest as an integer."""

    def _finalize(hasher: Any) -> bytes:
        return int(hasher.intdigest()).to_bytes(width, "big")

    return _finalize


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def build_registry(*, chunk_size: int = READ_CHUNK_SIZE) -> Mapping[AlgorithmName, HashAlgorithm]:
    """Return a read-only mapping of every AlgorithmName to its adapter."""
    adapters: list[HashAlgorithm] = [
        FileDigestHash(AlgorithmName.BLAKE2B, "blake2b"),
        FileDigestHash(AlgorithmName.MD5, "md5"),
        IncrementalHash(
            AlgorithmName.METROHASH64,
            metrohash.MetroHash64,
            finalize=_int_digest(8),
            chunk_size=chunk_size,
        ),
        IncrementalHash(
            AlgorithmName.METROHASH128,
            metrohash.MetroHash128,
            finalize=_int_digest(16),
            chunk_size=chunk_size,
        ),
        FileDigestHash(AlgorithmName.SHA1, "sha1"),
        FileDigestHash(AlgorithmName.SHA224, "sha224"),
        FileDigestHash(AlgorithmName.SHA256, "sha256"),
        FileDigestHash(AlgorithmName.SHA384, "sha384"),
        FileDigestHash(AlgorithmName.SHA512, "sha512"),
        IncrementalHash(AlgorithmName.XXHASH, _xxhash32, chunk_size=chunk_size),
    ]
    registry = {adapter.name: adapter for adapter in adapters}
    logger.debug("Registered %d hash adapters", len(registry))
    return MappingProxyType(registry)
