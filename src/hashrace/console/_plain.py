"""hashrace.console._plain -- Plain-text backend.

print()-based output with no styling. Used when stdout is not a TTY or when
``--console plain`` is given; spinner updates become ordinary lines.
"""

from __future__ import annotations

import sys
from typing import TextIO


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print()."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._spinning = False

    def _print(self, text: str = "") -> None:
        print(text, file=self._stream or sys.stdout, flush=True)

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._print(f"  {message}")

    def success(self, message: str) -> None:
        self._print(f"  [ok] {message}")

    def warning(self, message: str) -> None:
        self._print(f"  [warn] {message}")

    def error(self, message: str) -> None:
        self._print(f"  [error] {message}")

    # -- Structured output --------------------------------------------------

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        if title:
            self._print(f"\n  {title}:")
        if not data:
            return
        max_key = max(len(k) for k in data)
        for k, v in data.items():
            self._print(f"  {k.rjust(max_key)}: {v}")

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        if title:
            self._print(f"\n  {title}:")

        if not headers and not rows:
            return

        # Calculate column widths
        all_rows = [headers, *rows]
        col_widths = [
            max(len(str(row[i])) if i < len(row) else 0 for row in all_rows)
            for i in range(len(headers))
        ]

        header_line = "  " + "  ".join(
            h.ljust(w) for h, w in zip(headers, col_widths, strict=True)
        )
        self._print(header_line.rstrip())
        self._print("  " + "  ".join("-" * w for w in col_widths))

        for row in rows:
            cells = [
                str(row[i]).ljust(col_widths[i]) if i < len(row) else " " * col_widths[i]
                for i in range(len(headers))
            ]
            self._print(("  " + "  ".join(cells)).rstrip())

    # -- Spinner ------------------------------------------------------------

    def spinner_start(self, text: str) -> None:
        self._spinning = True
        self._print(f"  ... {text}")

    def spinner_update(self, text: str) -> None:
        if self._spinning:
            self._print(f"  ... {text}")

    def spinner_stop(self) -> None:
        self._spinning = False
