"""Tests for config.py — YAML defaults and BenchmarkConfig building."""

from __future__ import annotations

from pathlib import Path

import pytest

from hashrace.config import (
    DEFAULT_ATTEMPTS,
    GENERATE_CHUNK_SIZE,
    build_config,
    default_config_file,
    load_config_file,
    parse_algorithm,
    select_algorithms,
)
from hashrace.domain.models import AlgorithmName
from hashrace.errors import ConfigError

# ── Test load_config_file ──


def test_load_config_file(tmp_path: Path) -> None:
    path = tmp_path / "hashrace.yaml"
    path.write_text(
        "algorithms: [md5, xxhash]\nattempts: 3\nfile_size: 512KB\n",
        encoding="utf-8",
    )

    data = load_config_file(path)

    assert data == {"algorithms": ["md5", "xxhash"], "attempts": 3, "file_size": "512KB"}


def test_empty_config_file_is_empty_dict(tmp_path: Path) -> None:
    path = tmp_path / "hashrace.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config_file(path) == {}


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("attempts: [1, 2\n", "invalid YAML"),
        ("- md5\n- sha1\n", "mapping"),
        ("attempts: 3\ncolour: red\n", "colour"),
    ],
)
def test_bad_config_file(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "hashrace.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config_file(path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read"):
        load_config_file(tmp_path / "nope.yaml")


def test_default_config_file(tmp_path: Path) -> None:
    assert default_config_file(tmp_path) is None

    (tmp_path / "hashrace.yaml").write_text("attempts: 1\n", encoding="utf-8")

    assert default_config_file(tmp_path) == tmp_path / "hashrace.yaml"


# ── Test algorithm selection ──


@pytest.mark.parametrize("text", ["metroHash64", "metrohash64", "METROHASH64", " metroHash64 "])
def test_parse_algorithm_is_case_insensitive(text: str) -> None:
    assert parse_algorithm(text) is AlgorithmName.METROHASH64


def test_parse_algorithm_unknown() -> None:
    with pytest.raises(ConfigError, match="crc32"):
        parse_algorithm("crc32")


def test_select_algorithms_defaults_to_all() -> None:
    assert select_algorithms(None) == tuple(AlgorithmName)
    assert select_algorithms([]) == tuple(AlgorithmName)


def test_select_algorithms_dedupes_in_order() -> None:
    selected = select_algorithms(["sha1", "md5", "SHA1", AlgorithmName.MD5])

    assert selected == (AlgorithmName.SHA1, AlgorithmName.MD5)


# ── Test build_config ──


def test_build_config_defaults() -> None:
    config = build_config()

    assert config.algorithms == tuple(AlgorithmName)
    assert config.attempts == DEFAULT_ATTEMPTS
    assert config.file_size_bytes == 10 * 1024 * 1024
    assert config.working_dir is None
    assert config.chunk_size == GENERATE_CHUNK_SIZE


def test_build_config_values(tmp_path: Path) -> None:
    config = build_config(
        algorithms=["xxhash", "md5"],
        attempts=4,
        file_size="2KB",
        directory=str(tmp_path),
        chunk_size=256,
    )

    assert config.algorithms == (AlgorithmName.XXHASH, AlgorithmName.MD5)
    assert config.attempts == 4
    assert config.file_size_bytes == 2048
    assert config.working_dir == tmp_path
    assert config.chunk_size == 256


def test_build_config_single_algorithm_string() -> None:
    """A YAML scalar such as ``algorithms: md5`` selects one algorithm."""
    assert build_config(algorithms="md5").algorithms == (AlgorithmName.MD5,)


def test_build_config_integer_size() -> None:
    assert build_config(file_size=4096).file_size_bytes == 4096


@pytest.mark.parametrize(
    "kwargs",
    [
        {"attempts": 0},
        {"attempts": "3"},
        {"attempts": True},
        {"chunk_size": 0},
        {"chunk_size": 1.5},
        {"file_size": "lots"},
        {"file_size": -1},
        {"algorithms": ["md5", "crc32"]},
    ],
)
def test_build_config_rejects(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        build_config(**kwargs)


def test_build_config_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="does not exist"):
        build_config(directory=tmp_path / "missing")
