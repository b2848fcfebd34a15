"""hashrace.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the hashrace terminal output.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """hashrace terminal output protocol.

    Three layers of methods:

    **General messages** -- usable from any module::

        console.info("Attempts: 10")
        console.success("[md5] 512MB/s")
        console.warning("Could not delete /tmp/hashrace-x.bin")
        console.error("[sha1] file vanished")

    **Structured output** -- tables and key-value displays::

        console.kv({"Algorithms": "md5, sha1", "Attempts": "10"})
        console.table(["Algorithm", "Speed"], [["md5", "512MB/s"]])

    **Spinner** -- one transient status line while a benchmark runs::

        console.spinner_start("Racing...")
        console.spinner_update("( 10%) [md5] hashing file 1/10...")
        console.spinner_stop()
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Non-fatal problem."""
        ...

    def error(self, message: str) -> None:
        """Fatal problem."""
        ...

    # -- Structured output --------------------------------------------------

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Key-value listing, keys right-aligned."""
        ...

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Simple table; short rows are padded with blanks."""
        ...

    # -- Spinner ------------------------------------------------------------

    def spinner_start(self, text: str) -> None:
        """Show the spinner with ``text``; restarts it if already running."""
        ...

    def spinner_update(self, text: str) -> None:
        """Replace the spinner text."""
        ...

    def spinner_stop(self) -> None:
        """Remove the spinner; no-op when it is not running."""
        ...
