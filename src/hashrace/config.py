"""
hashrace/config.py — Defaults, config-file loading and BenchmarkConfig building.

All benchmark constants live here. The CLI and the adapters import from
this file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from hashrace.domain.models import AlgorithmName, BenchmarkConfig
from hashrace.errors import ConfigError
from hashrace.sizes import parse_size

logger = logging.getLogger("hashrace.config")

# ---------------------------------------------------------------------------
# Benchmark defaults
# ---------------------------------------------------------------------------

# Number of files generated and hashed per algorithm
DEFAULT_ATTEMPTS = 10

# Size of each generated file
DEFAULT_FILE_SIZE = "10MB"

# Random bytes written per chunk when generating a file
GENERATE_CHUNK_SIZE = 1024

# Bytes read per chunk when streaming a file through a hash
READ_CHUNK_SIZE = 64 * 1024

# Seed of the 32-bit xxHash variant
XXHASH_SEED = 0xCAFEBABE

# Default config file, looked up in the current directory
CONFIG_FILE = "hashrace.yaml"

CONFIG_KEYS = frozenset({"algorithms", "attempts", "file_size", "dir", "chunk_size"})


# ---------------------------------------------------------------------------
# Config file
# ---------------------------------------------------------------------------


def default_config_file(cwd: Path | None = None) -> Path | None:
    """Return ./hashrace.yaml if it exists, else None."""
    candidate = (cwd or Path.cwd()) / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load benchmark defaults from a YAML file.

    An empty file yields an empty dict.

    Raises:
        ConfigError: The file is unreadable, not YAML, not a mapping, or
            contains unknown keys.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")

    unknown = sorted(set(data) - CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"unknown config key(s) in {path}: {', '.join(unknown)}")

    logger.debug("Loaded config from %s: %s", path, data)
    return data


# ---------------------------------------------------------------------------
# BenchmarkConfig
# ---------------------------------------------------------------------------


def parse_algorithm(value: str) -> AlgorithmName:
    """Map a user-supplied name (case-insensitive) to an AlgorithmName."""
    for algorithm in AlgorithmName:
        if algorithm.value.lower() == value.strip().lower():
            return algorithm
    known = ", ".join(a.value for a in AlgorithmName)
    raise ConfigError(f"unknown algorithm {value!r} (choose from {known})")


def select_algorithms(names: Iterable[str | AlgorithmName] | None) -> tuple[AlgorithmName, ...]:
    """Resolve and deduplicate algorithm names, keeping first-seen order.

    None or an empty selection means every known algorithm.
    """
    selected: list[AlgorithmName] = []
    for name in names or ():
        algorithm = name if isinstance(name, AlgorithmName) else parse_algorithm(name)
        if algorithm not in selected:
            selected.append(algorithm)
    return tuple(selected) if selected else tuple(AlgorithmName)


def build_config(
    *,
    algorithms: Iterable[str | AlgorithmName] | None = None,
    attempts: int | None = None,
    file_size: str | int | None = None,
    directory: str | Path | None = None,
    chunk_size: int | None = None,
) -> BenchmarkConfig:
    """Turn raw settings into a validated BenchmarkConfig.

    Missing values fall back to the module defaults.

    Raises:
        ConfigError: Any value is invalid.
    """
    if isinstance(algorithms, str):
        algorithms = [algorithms]
    if attempts is not None and (isinstance(attempts, bool) or not isinstance(attempts, int)):
        raise ConfigError(f"attempts must be an integer, got {attempts!r}")
    if chunk_size is not None and (isinstance(chunk_size, bool) or not isinstance(chunk_size, int)):
        raise ConfigError(f"chunk size must be an integer, got {chunk_size!r}")

    working_dir = Path(directory).expanduser() if directory else None
    if working_dir is not None and not working_dir.is_dir():
        raise ConfigError(f"directory does not exist: {working_dir}")

    return BenchmarkConfig(
        algorithms=select_algorithms(algorithms),
        attempts=DEFAULT_ATTEMPTS if attempts is None else attempts,
        file_size_bytes=parse_size(DEFAULT_FILE_SIZE if file_size is None else file_size),
        working_dir=working_dir,
        chunk_size=GENERATE_CHUNK_SIZE if chunk_size is None else chunk_size,
    )
