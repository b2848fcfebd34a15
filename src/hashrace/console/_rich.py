"""hashrace.console._rich -- Rich-based terminal backend.

Provides coloured, structured terminal output using the Rich library. The
spinner is Rich's live ``Status`` display.
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.status import Status
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "info": "blue",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "spinner": "cyan",
        "dim": "dim",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self._con = console or Console(highlight=False)
        self._con.push_theme(_THEME)
        self._status: Status | None = None

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        self._con.print(f"  {escape(message)}", style="info")

    def success(self, message: str) -> None:
        self._con.print(f"  ✓ {escape(message)}", style="success")

    def warning(self, message: str) -> None:
        self._con.print(f"  ⚠ {escape(message)}", style="warning")

    def error(self, message: str) -> None:
        self._con.print(f"  ✗ {escape(message)}", style="error")

    # -- Structured output --------------------------------------------------

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        t = Table(
            title=title or None,
            box=box.SIMPLE,
            show_header=False,
            show_edge=False,
            pad_edge=True,
        )
        t.add_column("Key", style="bold", justify="right")
        t.add_column("Value")
        for k, v in data.items():
            t.add_row(f"{escape(k)}:", escape(v))
        self._con.print(t)

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        t = Table(title=title or None, box=box.SQUARE, pad_edge=True)
        for h in headers:
            t.add_column(h)
        for r in rows:
            cells = [escape(str(c)) for c in r]
            cells += [""] * (len(headers) - len(cells))
            t.add_row(*cells)
        self._con.print(t)

    # -- Spinner ------------------------------------------------------------

    def spinner_start(self, text: str) -> None:
        self.spinner_stop()
        self._status = self._con.status(escape(text), spinner="dots", spinner_style="spinner")
        self._status.start()

    def spinner_update(self, text: str) -> None:
        if self._status is not None:
            self._status.update(escape(text))

    def spinner_stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
