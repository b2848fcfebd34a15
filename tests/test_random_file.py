"""Tests for the RandomFileGenerator adapter.

All files are created under tmp_path so nothing leaks into the real
temporary directory.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from hashrace.adapters.random_file import RandomFileGenerator
from hashrace.errors import ResourceError

# ── Exact sizes ───────────────────────────────────────────────────────────


@pytest.mark.parametrize("size", [0, 1, 1023, 1024, 1025, 4096, 10_000])
def test_generated_file_has_exact_size(tmp_path: Path, size: int) -> None:
    """The file length equals the requested size, across chunk boundaries."""
    path = RandomFileGenerator().generate(size, tmp_path)

    assert path.stat().st_size == size


def test_small_chunk_size_still_exact(tmp_path: Path) -> None:
    """A chunk size that does not divide the size truncates the last chunk."""
    path = RandomFileGenerator(chunk_size=7).generate(50, tmp_path)

    assert path.stat().st_size == 50


# ── Location and naming ───────────────────────────────────────────────────


def test_file_created_in_requested_directory(tmp_path: Path) -> None:
    """The file is placed in the given directory."""
    path = RandomFileGenerator().generate(16, tmp_path)

    assert path.parent == tmp_path
    assert path.name.startswith("hashrace-")


def test_default_directory_is_system_temp(tmp_path: Path) -> None:
    """Without a directory the platform temp dir is used."""
    with patch("tempfile.tempdir", str(tmp_path)):
        path = RandomFileGenerator().generate(8)

    assert path.parent == tmp_path


def test_each_call_creates_a_new_file(tmp_path: Path) -> None:
    """Two calls never return the same path."""
    gen = RandomFileGenerator()
    first = gen.generate(32, tmp_path)
    second = gen.generate(32, tmp_path)

    assert first != second
    assert first.exists()
    assert second.exists()


# ── Content ───────────────────────────────────────────────────────────────


def test_content_is_random(tmp_path: Path) -> None:
    """Two generated files of the same size differ."""
    gen = RandomFileGenerator()
    a = gen.generate(4096, tmp_path).read_bytes()
    b = gen.generate(4096, tmp_path).read_bytes()

    assert a != b
    assert a != b"\x00" * 4096


def test_writes_in_chunks(tmp_path: Path) -> None:
    """Random bytes are requested one chunk at a time."""
    with patch("hashrace.adapters.random_file.os.urandom", side_effect=lambda n: b"r" * n) as urandom:
        RandomFileGenerator(chunk_size=1024).generate(2500, tmp_path)

    assert [c.args[0] for c in urandom.call_args_list] == [1024, 1024, 452]


# ── Failures ──────────────────────────────────────────────────────────────


def test_missing_directory_raises_resource_error(tmp_path: Path) -> None:
    """A directory that does not exist cannot hold a temporary file."""
    with pytest.raises(ResourceError):
        RandomFileGenerator().generate(10, tmp_path / "missing")


def test_write_failure_raises_oserror_and_removes_file(tmp_path: Path) -> None:
    """An I/O error while writing propagates and leaves no partial file."""
    with (
        patch("hashrace.adapters.random_file.os.urandom", side_effect=OSError(28, "No space left")),
        pytest.raises(OSError, match="No space left"),
    ):
        RandomFileGenerator().generate(100, tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_negative_size_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        RandomFileGenerator().generate(-1, tmp_path)


def test_non_positive_chunk_size_rejected() -> None:
    with pytest.raises(ValueError):
        RandomFileGenerator(chunk_size=0)
