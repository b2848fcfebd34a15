"""Timed generate-then-hash trials for a single algorithm.

Only the digest call is inside the timed interval; file generation and
deletion happen outside it.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from hashrace.domain.models import TrialResult
from hashrace.domain.ports import FileGenerator, HashAlgorithm, ProgressSink

logger = logging.getLogger("hashrace.trials")


class TrialRunner:
    """Runs N attempts of one algorithm and collects per-attempt timings.

    Parameters
    ----------
    generator:
        Produces the random input file for each attempt.
    clock:
        Monotonic clock in fractional seconds; ``time.perf_counter`` unless
        a test substitutes its own.

    """

    def __init__(
        self,
        generator: FileGenerator,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._generator = generator
        self._clock = clock

    def run(
        self,
        algorithm: HashAlgorithm,
        attempts: int,
        file_size_bytes: int,
        directory: Path | None,
        progress: ProgressSink,
    ) -> TrialResult:
        """Generate and hash ``attempts`` files; return their timings.

        Any generation or hashing error propagates immediately and the
        timings gathered so far are dropped.
        """
        if attempts < 1:
            raise ValueError(f"attempts must be positive, got {attempts}")

        elapsed: list[float] = []
        digest_size: int | None = None

        for index in range(attempts):
            progress.on_generate_start(index)
            path = self._generator.generate(file_size_bytes, directory)
            try:
                progress.on_hash_start(index)
                start = self._clock()
                digest = algorithm.digest(path)
                millis = max((self._clock() - start) * 1000.0, 0.0)
            finally:
                self._discard(path, progress)

            elapsed.append(millis)
            if digest_size is None:
                digest_size = digest.bit_length
            logger.debug(
                "  [%s] attempt %d/%d: %.3f ms",
                algorithm.name.value,
                index + 1,
                attempts,
                millis,
            )

        assert digest_size is not None
        return TrialResult(
            algorithm=algorithm.name,
            digest_size_bits=digest_size,
            elapsed_millis=tuple(elapsed),
        )

    @staticmethod
    def _discard(path: Path, progress: ProgressSink) -> None:
        """Delete a generated file; failures are reported, not raised."""
        try:
            path.unlink()
        except OSError as exc:
            logger.warning("Could not delete generated file %s: %s", path, exc)
            progress.on_cleanup_error(path, exc)
