"""Shared pytest fixtures for hashrace tests.

Provides:
- Fake port implementations (HashAlgorithm, FileGenerator, ProgressSink)
- A deterministic clock for timing assertions
- Factory fixtures for BenchmarkConfig and TrialResult
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from hashrace.domain.models import (
    AlgorithmName,
    BenchmarkConfig,
    Digest,
    TrialResult,
)
from hashrace.errors import HashError

# ── Fake Port Implementations ─────────────────────────────────────────────


class FakeHash:
    """HashAlgorithm stub returning a fixed digest.

    Records every path it was asked to digest and whether the file existed
    at that moment. Raises HashError on the ``fail_on_call``-th call.
    """

    def __init__(
        self,
        name: AlgorithmName = AlgorithmName.MD5,
        *,
        value: bytes = b"\x00" * 16,
        fail_on_call: int | None = None,
    ) -> None:
        self._name = name
        self._value = value
        self._fail_on_call = fail_on_call
        self.calls: list[Path] = []
        self.existed: list[bool] = []

    @property
    def name(self) -> AlgorithmName:
        return self._name

    def digest(self, path: Path) -> Digest:
        self.calls.append(path)
        self.existed.append(path.exists())
        if self._fail_on_call is not None and len(self.calls) == self._fail_on_call:
            raise HashError(f"{self._name.value}: simulated read failure")
        return Digest(self._value, len(self._value) * 8)


class FakeGenerator:
    """FileGenerator writing zero-filled files into a fixed directory.

    Raises ``error`` (OSError by default) on the ``fail_on_call``-th call,
    counted across every algorithm.
    """

    def __init__(
        self,
        directory: Path,
        *,
        fail_on_call: int | None = None,
        error: BaseException | None = None,
    ) -> None:
        self._dir = directory
        self._fail_on_call = fail_on_call
        self._error = error
        self.calls = 0
        self.paths: list[Path] = []

    def generate(self, size_bytes: int, directory: Path | None = None) -> Path:
        self.calls += 1
        if self._fail_on_call == self.calls:
            raise self._error or OSError(28, "No space left on device")
        path = (directory or self._dir) / f"fake-{self.calls}.bin"
        path.write_bytes(b"\x00" * size_bytes)
        self.paths.append(path)
        return path


class RecordingProgress:
    """ProgressSink that records every notification as a tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def on_algorithm_start(self, algorithm: AlgorithmName, attempts: int) -> None:
        self.events.append(("algorithm_start", algorithm, attempts))

    def on_generate_start(self, index: int) -> None:
        self.events.append(("generate", index))

    def on_hash_start(self, index: int) -> None:
        self.events.append(("hash", index))

    def on_algorithm_complete(self, result: TrialResult) -> None:
        self.events.append(("algorithm_complete", result.algorithm))

    def on_cleanup_error(self, path: Path, error: OSError) -> None:
        self.events.append(("cleanup_error", path))

    def names(self) -> list[str]:
        return [event[0] for event in self.events]


class FakeClock:
    """Clock advancing by ``step`` seconds on every reading."""

    def __init__(self, step: float = 0.005) -> None:
        self._step = step
        self._now = 0.0

    def __call__(self) -> float:
        value = self._now
        self._now += self._step
        return value


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture()
def fake_hash_factory() -> type[FakeHash]:
    return FakeHash


@pytest.fixture()
def fake_generator(tmp_path: Path) -> FakeGenerator:
    return FakeGenerator(tmp_path)


@pytest.fixture()
def failing_generator_factory(tmp_path: Path) -> Any:
    """Factory for a FakeGenerator failing on the given call."""

    def _factory(fail_on_call: int, error: BaseException | None = None) -> FakeGenerator:
        return FakeGenerator(tmp_path, fail_on_call=fail_on_call, error=error)

    return _factory


@pytest.fixture()
def progress() -> RecordingProgress:
    return RecordingProgress()


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_config(tmp_path: Path) -> Any:
    """Factory for BenchmarkConfig with small, fast defaults."""

    def _factory(
        *algorithms: AlgorithmName,
        attempts: int = 2,
        file_size_bytes: int = 1024,
        working_dir: Path | None = None,
    ) -> BenchmarkConfig:
        return BenchmarkConfig(
            algorithms=algorithms or (AlgorithmName.MD5,),
            attempts=attempts,
            file_size_bytes=file_size_bytes,
            working_dir=working_dir if working_dir is not None else tmp_path,
        )

    return _factory


@pytest.fixture()
def make_trial_result() -> Any:
    """Factory for TrialResult from a list of timings."""

    def _factory(
        algorithm: AlgorithmName,
        *elapsed: float,
        digest_size_bits: int = 128,
    ) -> TrialResult:
        return TrialResult(
            algorithm=algorithm,
            digest_size_bits=digest_size_bits,
            elapsed_millis=tuple(elapsed) or (1.0,),
        )

    return _factory
