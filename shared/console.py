"""
PassForge Console Interface
============================

Rich-powered console abstraction giving every PassForge command the same
look: banner, section rules, status-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_FORGE_THEME = Theme(
    {
        "forge.section": "bold bright_magenta",
        "forge.success": "bold green",
        "forge.error": "bold red",
        "forge.dim": "dim white",
        "forge.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""[bright_cyan]
  ___               ___
 | _ \__ _ ______  | __|__ _ _ __ _ ___
 |  _/ _` (_-<_-<  | _/ _ \ '_/ _` / -_)
 |_| \__,_/__/__/  |_|\___/_| \__, \___|
                              |___/
[/bright_cyan]"""

_TAGLINE = "Cryptographically secure password generation and strength analysis"


class ForgeConsole:
    """Unified console interface for PassForge output.

    Usage::

        con = ForgeConsole()
        con.banner()
        con.section("Generated Passwords")
        con.success("Report written")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_FORGE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        subtitle = (
            f"[forge.highlight]{_TAGLINE}[/forge.highlight]\n"
            f"[forge.dim]Version: {version}[/forge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="forge.section")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Status-coloured messages
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[forge.success][✔] SUCCESS:[/forge.success] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[forge.error][✘] ERROR:[/forge.error] {message}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each cell is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            # Passwords can contain "[", which Rich would read as markup.
            tbl.add_row(*(Text(str(cell)) for cell in row))

        self._console.print(tbl)

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
