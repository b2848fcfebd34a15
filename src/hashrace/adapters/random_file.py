"""Random file adapter implementing FileGenerator.

Writes cryptographically random bytes chunk by chunk so peak memory stays at
one chunk whatever the file size.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from pathlib import Path

from hashrace.config import GENERATE_CHUNK_SIZE
from hashrace.errors import ResourceError

logger = logging.getLogger("hashrace.random_file")

_PREFIX = "hashrace-"
_SUFFIX = ".bin"


class RandomFileGenerator:
    """Concrete FileGenerator creating uniquely named temporary files.

    Parameters
    ----------
    chunk_size:
        Number of random bytes produced and written per write call.

    """

    def __init__(self, chunk_size: int = GENERATE_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def generate(self, size_bytes: int, directory: Path | None = None) -> Path:
        """Create a file of exactly ``size_bytes`` random bytes.

        The file lives in ``directory`` when given, otherwise in the platform's
        temporary directory. Deleting it is the caller's job.

        Raises:
            ResourceError: No temporary file could be created.
            OSError: Writing the random bytes failed; the partial file is removed.
        """
        if size_bytes < 0:
            raise ValueError(f"size_bytes must not be negative, got {size_bytes}")

        try:
            fd, name = tempfile.mkstemp(prefix=_PREFIX, suffix=_SUFFIX, dir=directory)
        except OSError as exc:
            where = directory or tempfile.gettempdir()
            raise ResourceError(f"cannot create a temporary file in {where}: {exc}") from exc

        path = Path(name)
        try:
            with os.fdopen(fd, "wb") as handle:
                written = 0
                while written < size_bytes:
                    count = min(self._chunk_size, size_bytes - written)
                    handle.write(os.urandom(count))
                    written += count
        except BaseException:
            with contextlib.suppress(OSError):
                path.unlink()
            raise

        logger.debug("Generated %s (%d bytes)", path, size_bytes)
        return path
