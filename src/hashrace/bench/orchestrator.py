"""Sequential benchmark of every selected algorithm.

Algorithms run one after another, never concurrently, so that no two
measurements compete for CPU cache, memory bandwidth or disk.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from hashrace.adapters.hashers import build_registry
from hashrace.adapters.random_file import RandomFileGenerator
from hashrace.bench.trials import TrialRunner
from hashrace.domain.models import AlgorithmName, BenchmarkConfig, TrialResult
from hashrace.domain.ports import HashAlgorithm, ProgressSink, SilentProgress
from hashrace.errors import BenchmarkAborted, ConfigError, HashRaceError

logger = logging.getLogger("hashrace.orchestrator")


class BenchmarkOrchestrator:
    """Drives a TrialRunner over the configured algorithms, in order.

    Parameters
    ----------
    registry:
        Read-only mapping from algorithm name to its hash adapter.
    runner:
        Executes the timed attempts of one algorithm.

    """

    def __init__(
        self,
        registry: Mapping[AlgorithmName, HashAlgorithm],
        runner: TrialRunner,
    ) -> None:
        self._registry = registry
        self._runner = runner

    def run(
        self,
        config: BenchmarkConfig,
        progress: ProgressSink,
    ) -> dict[AlgorithmName, TrialResult]:
        """Benchmark each algorithm of ``config`` and return results in run order.

        Raises:
            ConfigError: An algorithm has no adapter in the registry.
            BenchmarkAborted: An algorithm failed; later ones were not run.
        """
        missing = [name.value for name in config.algorithms if name not in self._registry]
        if missing:
            raise ConfigError(f"no hash adapter registered for: {', '.join(missing)}")

        results: dict[AlgorithmName, TrialResult] = {}
        for name in config.algorithms:
            logger.info(
                "Benchmarking %s: %d attempt(s) of %d bytes",
                name.value,
                config.attempts,
                config.file_size_bytes,
            )
            progress.on_algorithm_start(name, config.attempts)
            try:
                result = self._runner.run(
                    self._registry[name],
                    config.attempts,
                    config.file_size_bytes,
                    config.working_dir,
                    progress,
                )
            except (OSError, HashRaceError) as exc:
                logger.error("Benchmark of %s failed: %s", name.value, exc)
                raise BenchmarkAborted(name, exc, results) from exc

            results[name] = result
            logger.info("  %s: mean %.3f ms", name.value, result.mean_elapsed_millis)
            progress.on_algorithm_complete(result)

        return results


def run_benchmark(
    config: BenchmarkConfig,
    progress: ProgressSink | None = None,
    *,
    registry: Mapping[AlgorithmName, HashAlgorithm] | None = None,
) -> dict[AlgorithmName, TrialResult]:
    """Run a benchmark with the default registry and random file generator."""
    orchestrator = BenchmarkOrchestrator(
        registry if registry is not None else build_registry(),
        TrialRunner(RandomFileGenerator(config.chunk_size)),
    )
    return orchestrator.run(config, progress if progress is not None else SilentProgress())
