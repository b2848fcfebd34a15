#!/usr/bin/env python3
"""
hashrace CLI -- race hash algorithms against each other on random files.

Usage:
  hashrace [-a ALGORITHM ...] [-t ATTEMPTS] [-s SIZE] [-d DIR]
           [-c CONFIG] [--console {auto,rich,plain}]
           [--verbose | --quiet] [--log-file PATH]

Defaults come from ./hashrace.yaml (or --config) and are overridden by the
command line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from hashrace.bench.orchestrator import run_benchmark
from hashrace.bench.ranking import aggregate, rank
from hashrace.config import (
    DEFAULT_ATTEMPTS,
    DEFAULT_FILE_SIZE,
    build_config,
    default_config_file,
    load_config_file,
)
from hashrace.console import BACKENDS, configure, console
from hashrace.domain.models import (
    AlgorithmName,
    BenchmarkConfig,
    RankedReport,
    TrialResult,
)
from hashrace.errors import BenchmarkAborted, ConfigError
from hashrace.sizes import format_size

logger = logging.getLogger("hashrace")

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_CONFIG = 2
EXIT_INTERRUPTED = 130

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _trim(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_speed(bytes_per_second: float | None) -> str:
    """``"512MB/s"``, or ``"n/a"`` when the time was too short to measure."""
    if bytes_per_second is None:
        return "n/a"
    return f"{format_size(bytes_per_second)}/s"


def report_rows(report: RankedReport) -> list[list[str]]:
    """Table rows: algorithm, speed, comparison with the next one, digest size."""
    rows: list[list[str]] = []
    for entry in report.entries:
        agg = entry.aggregate
        delta = entry.percent_faster_than_next
        rows.append(
            [
                agg.algorithm.value,
                format_speed(agg.bytes_per_second),
                "" if delta is None else f"{_trim(delta)}% faster",
                f"{agg.digest_size_bits} bits",
            ]
        )
    return rows


# ---------------------------------------------------------------------------
# Progress display
# ---------------------------------------------------------------------------


class SpinnerProgress:
    """ProgressSink that drives the console spinner.

    The percentage counts hashed files over all algorithms.
    """

    def __init__(self, config: BenchmarkConfig) -> None:
        self._file_size = config.file_size_bytes
        self._total = config.total_attempts
        self._remaining = len(config.algorithms)
        self._attempts = config.attempts
        self._done = 0
        self._current: AlgorithmName | None = None

    @property
    def percent(self) -> int:
        return self._done * 100 // self._total

    def _render(self, action: str, index: int) -> None:
        name = self._current.value if self._current else "?"
        console.spinner_update(
            f"({self.percent:>3}%) [{name}] {action} file {index + 1}/{self._attempts}..."
        )

    def on_algorithm_start(self, algorithm: AlgorithmName, attempts: int) -> None:
        self._current = algorithm
        self._attempts = attempts

    def on_generate_start(self, index: int) -> None:
        self._render("generating", index)

    def on_hash_start(self, index: int) -> None:
        self._render("hashing", index)
        self._done += 1

    def on_algorithm_complete(self, result: TrialResult) -> None:
        self._remaining -= 1
        speed = aggregate(result, self._file_size).bytes_per_second
        console.spinner_stop()
        console.success(f"[{result.algorithm.value}] {format_speed(speed)}")
        if self._remaining > 0:
            console.spinner_start("Racing...")

    def on_cleanup_error(self, path: Path, error: OSError) -> None:
        console.warning(f"Could not delete {path}: {error}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_race(config: BenchmarkConfig) -> int:
    """Run the benchmark and print the comparison. Return the exit status."""
    console.kv(
        {
            "Algorithms": ", ".join(a.value for a in config.algorithms),
            "Attempts": str(config.attempts),
            "Individual file size": format_size(config.file_size_bytes),
            "Total file size per algorithm": format_size(
                config.file_size_bytes * config.attempts
            ),
        }
    )

    console.spinner_start("Racing...")
    try:
        results = run_benchmark(config, SpinnerProgress(config))
    except BenchmarkAborted as exc:
        console.spinner_stop()
        console.error(str(exc))
        return EXIT_ABORTED
    except KeyboardInterrupt:
        console.spinner_stop()
        console.warning("Interrupted.")
        return EXIT_INTERRUPTED
    console.spinner_stop()

    if len(results) >= 2:
        report = rank(results, config.file_size_bytes)
        console.table(
            ["Algorithm", "Speed", "Compared to next", "Digest size"],
            report_rows(report),
        )
    return EXIT_OK


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def resolve_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Merge the config file (if any) with command-line overrides.

    Raises:
        ConfigError: The file or any resulting value is invalid.
    """
    path = args.config or default_config_file()
    defaults: dict[str, Any] = load_config_file(path) if path else {}

    def pick(arg_value: Any, key: str) -> Any:
        return arg_value if arg_value is not None else defaults.get(key)

    return build_config(
        algorithms=pick(args.algorithms, "algorithms"),
        attempts=pick(args.attempts, "attempts"),
        file_size=pick(args.file_size, "file_size"),
        directory=pick(args.dir, "dir"),
        chunk_size=defaults.get("chunk_size"),
    )


def _setup_logging(args: argparse.Namespace) -> None:
    """Configure the root logger: a file when --log-file is given, else stderr."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    if args.log_file:
        logging.basicConfig(filename=str(args.log_file), format=_LOG_FORMAT, level=level)
    else:
        # The terminal belongs to the console output unless --verbose.
        logging.basicConfig(
            format=_LOG_FORMAT,
            level=level if args.verbose else logging.WARNING,
        )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hashrace",
        description="Benchmark hash algorithms on randomly generated files",
    )
    parser.add_argument(
        "-a",
        "--algorithms",
        nargs="+",
        metavar="ALGORITHM",
        default=None,
        help=f"Hash algorithms to test (default: all of {', '.join(a.value for a in AlgorithmName)})",
    )
    parser.add_argument(
        "-t",
        "--attempts",
        type=int,
        default=None,
        help=f"Number of files to generate for each hash function (default: {DEFAULT_ATTEMPTS})",
    )
    parser.add_argument(
        "-s",
        "--file-size",
        default=None,
        help=f"Size of the files to generate, e.g. 512KB or 10MB (default: {DEFAULT_FILE_SIZE})",
    )
    parser.add_argument(
        "-d",
        "--dir",
        default=None,
        help=(
            "Directory in which to create the files that will be hashed (the files are "
            "deleted afterwards, the directory is left untouched; defaults to the "
            "system's temporary directory)"
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML file with default settings (default: ./hashrace.yaml if present)",
    )
    parser.add_argument(
        "--console",
        choices=BACKENDS,
        default="auto",
        help="Output style (default: auto)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--log-file", type=Path, default=None, help="Write the log to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # -- Console configuration (terminal output) ----------------------------
    configure(backend=args.console)

    # -- Logging configuration ----------------------------------------------
    _setup_logging(args)

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        console.error(str(exc))
        return EXIT_CONFIG

    logger.debug("Resolved config: %s", config)
    return cmd_race(config)


if __name__ == "__main__":
    sys.exit(main())
