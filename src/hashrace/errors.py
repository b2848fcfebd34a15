"""Exception types raised by hashrace.

Filesystem failures while writing generated files surface as the built-in
``OSError`` (``IOError`` is an alias of it); everything specific to the
benchmark derives from ``HashRaceError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hashrace.domain.models import AlgorithmName, TrialResult


class HashRaceError(Exception):
    """Base exception for all hashrace errors."""


class ConfigError(HashRaceError, ValueError):
    """Raised when benchmark settings are invalid."""


class ResourceError(HashRaceError):
    """Raised when a temporary file cannot be allocated."""


class HashError(HashRaceError):
    """Raised when streaming a file through a digest fails."""


class BenchmarkAborted(HashRaceError):
    """Raised when an algorithm fails and the run stops.

    ``completed`` holds the results of the algorithms that finished before
    the failure, in benchmark order.
    """

    def __init__(
        self,
        algorithm: AlgorithmName,
        cause: BaseException,
        completed: Mapping[AlgorithmName, TrialResult],
    ) -> None:
        super().__init__(f"[{algorithm.value}] {cause}")
        self.algorithm = algorithm
        self.cause = cause
        self.completed = dict(completed)
