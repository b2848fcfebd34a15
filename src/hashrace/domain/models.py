"""Core data types for hashrace.

All types are frozen dataclasses, named tuples or enums.
Apart from hashrace.errors this module imports only the standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple

from hashrace.errors import ConfigError


class AlgorithmName(Enum):
    """Hash algorithms known to the benchmark, in default run order."""

    BLAKE2B = "blake2b"
    MD5 = "md5"
    METROHASH64 = "metroHash64"
    METROHASH128 = "metroHash128"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    XXHASH = "xxhash"


class Digest(NamedTuple):
    """Final digest of a file and its size in bits."""

    value: bytes
    bit_length: int


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BenchmarkConfig:
    """Validated, read-only benchmark settings."""

    algorithms: tuple[AlgorithmName, ...]
    attempts: int
    file_size_bytes: int
    working_dir: Path | None = None
    chunk_size: int = 1024

    def __post_init__(self) -> None:
        if not self.algorithms:
            raise ConfigError("at least one algorithm must be selected")
        if len(set(self.algorithms)) != len(self.algorithms):
            raise ConfigError("algorithms must not contain duplicates")
        if self.attempts < 1:
            raise ConfigError(f"attempts must be a positive integer, got {self.attempts}")
        if self.file_size_bytes < 0:
            raise ConfigError(f"file size must not be negative, got {self.file_size_bytes}")
        if self.chunk_size < 1:
            raise ConfigError(f"chunk size must be a positive integer, got {self.chunk_size}")

    @property
    def total_attempts(self) -> int:
        """Number of generate-then-hash cycles across all algorithms."""
        return len(self.algorithms) * self.attempts


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TrialResult:
    """Timings of every attempt for one algorithm."""

    algorithm: AlgorithmName
    digest_size_bits: int
    elapsed_millis: tuple[float, ...]

    @property
    def mean_elapsed_millis(self) -> float:
        return sum(self.elapsed_millis) / len(self.elapsed_millis)


@dataclass(frozen=True)
class AggregateResult:
    """Mean time and throughput derived from a TrialResult.

    ``bytes_per_second`` is None when the mean time is zero, i.e. the
    hashing was too fast for the clock to measure.
    """

    algorithm: AlgorithmName
    mean_elapsed_millis: float
    bytes_per_second: float | None
    digest_size_bits: int


@dataclass(frozen=True)
class RankedEntry:
    """One row of the ranked report."""

    aggregate: AggregateResult
    percent_faster_than_next: float | None = None


@dataclass(frozen=True)
class RankedReport:
    """Aggregates ordered from fastest to slowest."""

    entries: tuple[RankedEntry, ...]
    file_size_bytes: int

    @property
    def is_comparative(self) -> bool:
        """True when there are at least two algorithms to compare."""
        return len(self.entries) >= 2

    @property
    def algorithms(self) -> tuple[AlgorithmName, ...]:
        return tuple(entry.aggregate.algorithm for entry in self.entries)
