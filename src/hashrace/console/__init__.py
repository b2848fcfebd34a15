"""hashrace.console -- terminal output system.

Usage (any file)::

    from hashrace.console import console

    console.info("Attempts: 10")
    console.spinner_start("Racing...")
    console.table(["Algorithm", "Speed"], [["md5", "512MB/s"]])

Configuration (call once in ``cli.py:main()``)::

    from hashrace.console import configure

    configure(backend="auto")  # "rich" | "plain" | "auto"
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from hashrace.console._plain import PlainBackend

if TYPE_CHECKING:
    from hashrace.console._protocol import ConsoleProtocol

BACKENDS = ("auto", "rich", "plain")

# ---------------------------------------------------------------------------
# Global singleton -- defaults to PlainBackend until configure() runs
# ---------------------------------------------------------------------------

_backend: ConsoleProtocol = PlainBackend()


def configure(*, backend: str = "auto") -> ConsoleProtocol:
    """Select the console backend and return it.

    Should be called **once** at startup (in ``cli.py:main()``).

    Args:
        backend: ``"rich"`` -- always use Rich.
                 ``"plain"`` -- always use plain text.
                 ``"auto"`` (default) -- Rich when stdout is a TTY, plain
                 otherwise.
    """
    global _backend  # noqa: PLW0603

    if backend not in BACKENDS:
        raise ValueError(f"unknown console backend {backend!r}")

    if backend == "auto":
        backend = "rich" if sys.stdout.isatty() else "plain"

    if backend == "plain":
        _backend = PlainBackend()
    else:
        from hashrace.console._rich import RichBackend

        _backend = RichBackend()
    return _backend


def get_console() -> ConsoleProtocol:
    """Return the current backend instance."""
    return _backend


# ---------------------------------------------------------------------------
# Proxy object -- ``from hashrace.console import console``
# ---------------------------------------------------------------------------


class _ConsoleProxy:
    """Transparent proxy that delegates to the current ``_backend``.

    This lets callers import ``console`` once at module level and
    automatically pick up any later ``configure()`` call.
    """

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]
