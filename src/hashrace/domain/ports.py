"""Port interfaces for hashrace.

All ports are defined as typing.Protocol — structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports — only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from hashrace.domain.models import AlgorithmName, Digest, TrialResult


class HashAlgorithm(Protocol):
    """Streaming digest of a file on disk, whatever the native backend."""

    @property
    def name(self) -> AlgorithmName:
        """The algorithm this adapter computes."""
        ...

    def digest(self, path: Path) -> Digest:
        """Stream the file through the hash and return the final digest.

        Raises HashError if the file cannot be read to the end.
        """
        ...


class FileGenerator(Protocol):
    """Abstraction over disposable random input files."""

    def generate(self, size_bytes: int, directory: Path | None = None) -> Path:
        """Create a file of exactly ``size_bytes`` random bytes. Return its path."""
        ...


class ProgressSink(Protocol):
    """Fire-and-forget benchmark progress notifications.

    Called synchronously from the benchmark loop; implementations must not
    raise.
    """

    def on_algorithm_start(self, algorithm: AlgorithmName, attempts: int) -> None:
        """An algorithm's trials are about to begin."""
        ...

    def on_generate_start(self, index: int) -> None:
        """File generation for attempt ``index`` (0-based) is starting."""
        ...

    def on_hash_start(self, index: int) -> None:
        """Hashing for attempt ``index`` starts now; the timer follows."""
        ...

    def on_algorithm_complete(self, result: TrialResult) -> None:
        """All attempts of an algorithm finished."""
        ...

    def on_cleanup_error(self, path: Path, error: OSError) -> None:
        """A generated file could not be deleted (non-fatal)."""
        ...


class SilentProgress:
    """ProgressSink that ignores every notification."""

    def on_algorithm_start(self, algorithm: AlgorithmName, attempts: int) -> None:
        pass

    def on_generate_start(self, index: int) -> None:
        pass

    def on_hash_start(self, index: int) -> None:
        pass

    def on_algorithm_complete(self, result: TrialResult) -> None:
        pass

    def on_cleanup_error(self, path: Path, error: OSError) -> None:
        pass
