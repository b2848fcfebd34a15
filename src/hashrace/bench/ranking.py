"""Aggregation and comparative ranking of trial results.

Throughput is ``file_size_bytes / (mean_ms / 1000)``. Algorithms are ranked
fastest first and each one is compared with the next slower one.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from hashrace.domain.models import (
    AggregateResult,
    AlgorithmName,
    RankedEntry,
    RankedReport,
    TrialResult,
)

logger = logging.getLogger("hashrace.ranking")


def bytes_per_second(file_size_bytes: int, mean_elapsed_millis: float) -> float | None:
    """Throughput for one file, or None when the elapsed time is zero."""
    if mean_elapsed_millis <= 0:
        return None
    return file_size_bytes / (mean_elapsed_millis / 1000)


def percent_faster(current: float | None, following: float | None) -> float | None:
    """How much faster ``current`` is than ``following``, in percent (2 decimals).

    None when either throughput is unknown or ``following`` is zero.
    """
    if current is None or following is None or following == 0:
        return None
    return round((current - following) * 100 / following, 2)


def aggregate(result: TrialResult, file_size_bytes: int) -> AggregateResult:
    """Reduce a TrialResult to its mean time and throughput."""
    mean = result.mean_elapsed_millis
    return AggregateResult(
        algorithm=result.algorithm,
        mean_elapsed_millis=mean,
        bytes_per_second=bytes_per_second(file_size_bytes, mean),
        digest_size_bits=result.digest_size_bits,
    )


def rank(results: Mapping[AlgorithmName, TrialResult], file_size_bytes: int) -> RankedReport:
    """Sort results fastest first and compute the pairwise speed deltas.

    Ties keep the mapping's insertion order. The slowest entry, and the only
    entry of a single-algorithm run, has no percentage.
    """
    aggregates = sorted(
        (aggregate(result, file_size_bytes) for result in results.values()),
        key=lambda agg: agg.mean_elapsed_millis,
    )

    entries: list[RankedEntry] = []
    for position, current in enumerate(aggregates):
        following = aggregates[position + 1] if position + 1 < len(aggregates) else None
        delta = (
            percent_faster(current.bytes_per_second, following.bytes_per_second)
            if following is not None
            else None
        )
        entries.append(RankedEntry(aggregate=current, percent_faster_than_next=delta))

    if entries:
        logger.info(
            "Ranking: %s",
            " > ".join(entry.aggregate.algorithm.value for entry in entries),
        )
    return RankedReport(entries=tuple(entries), file_size_bytes=file_size_bytes)
