"""
PassForge Console Output
=========================

Rich-based display of generated batches, strength reports and character
set metadata, built on the shared :class:`ForgeConsole` styling.

Password strings are always wrapped in :class:`rich.text.Text` so that
characters such as ``[`` are printed literally instead of being parsed as
Rich markup.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ForgeConsole
from passforge.analyzers.entropy import EntropyModel
from passforge.core.models import (
    CharacterSetInfo,
    GeneratedBatch,
    PasswordAnalysis,
    StrengthTier,
)


_STRENGTH_COLOURS: dict[StrengthTier, str] = {
    StrengthTier.VERY_WEAK: "bold white on red",
    StrengthTier.WEAK: "bold red",
    StrengthTier.FAIR: "bold yellow",
    StrengthTier.STRONG: "bold green",
    StrengthTier.VERY_STRONG: "bold bright_green",
}

# Entropy at which the meter is full.
_METER_FULL_BITS = 100.0
_METER_WIDTH = 40


class ForgeConsoleOutput:
    """Console formatters for PassForge results.

    Usage::

        display = ForgeConsoleOutput(ForgeConsole())
        display.display_batch(batch)
        display.display_analysis(report)
    """

    def __init__(self, console: ForgeConsole) -> None:
        self.console = console
        self._rich = console.rich
        self._entropy_model = EntropyModel()

    def display_batch(self, batch: GeneratedBatch) -> None:
        """Show generated passwords and the entropy of each."""
        self.console.section("Generated Passwords")

        tier = self._entropy_model.classify(batch.entropy_bits)
        colour = _STRENGTH_COLOURS[tier]
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Password", style="bold bright_white")

        for idx, password in enumerate(batch.passwords, start=1):
            tbl.add_row(str(idx), Text(password))

        self._rich.print(tbl)

        summary = Text()
        summary.append(f"Mode: {batch.mode.value}   ", style="dim")
        summary.append(f"Length: {batch.length}   ", style="dim")
        summary.append(f"Pool: {batch.pool_size}   ", style="dim")
        summary.append(f"Entropy: {batch.entropy_bits:.1f} bits  ", style="bold")
        summary.append(tier.label.upper(), style=colour)
        self._rich.print(summary)

    def display_analysis(self, result: PasswordAnalysis) -> None:
        """Show a strength report with an entropy meter."""
        self.console.section("Password Analysis")

        colour = _STRENGTH_COLOURS[result.strength]
        filled = int(min(result.entropy, _METER_FULL_BITS) / _METER_FULL_BITS * _METER_WIDTH)

        meter = Text()
        meter.append(f"{result.entropy:6.1f} bits  ", style="bold")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.3:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.6:
                meter.append("█", style="yellow")
            else:
                meter.append("█", style="green")
        meter.append("]  ", style="dim")
        meter.append(result.strength.label.upper(), style=colour)
        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        tbl.add_row("Password", Text(result.password_masked))
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Uppercase", _yes_no(result.has_uppercase))
        tbl.add_row("Lowercase", _yes_no(result.has_lowercase))
        tbl.add_row("Digits", _yes_no(result.has_digits))
        tbl.add_row("Symbols", _yes_no(result.has_symbols))
        tbl.add_row("Character Pool", str(result.char_pool_size))
        tbl.add_row("Diversity", f"{result.diversity_score:.2f}")
        self._rich.print(tbl)

        if result.crack_time_estimates:
            crack_tbl = Table(
                title="Crack Time Estimates",
                border_style="bright_cyan",
                header_style="bold bright_magenta",
                show_lines=True,
            )
            crack_tbl.add_column("Attack Scenario", style="bold")
            crack_tbl.add_column("Speed", justify="right")
            crack_tbl.add_column("Estimated Time", justify="right")
            for estimate in result.crack_time_estimates:
                crack_tbl.add_row(
                    estimate.scenario,
                    f"{estimate.guesses_per_second:.0e} g/s",
                    estimate.display,
                )
            self._rich.print(crack_tbl)

        if result.suggestions:
            self.console.section("Suggestions")
            for suggestion in result.suggestions:
                self._rich.print(f"  [yellow]•[/yellow] {suggestion}")
        else:
            self.console.success("No improvements suggested.")

    def display_entropy(self, length: int, pool_size: int, bits: float) -> None:
        tier = self._entropy_model.classify(bits)
        line = Text()
        line.append(f"{length} x log2({pool_size}) = ", style="dim")
        line.append(f"{bits:.2f} bits  ", style="bold")
        line.append(tier.label.upper(), style=_STRENGTH_COLOURS[tier])
        self._rich.print(line)

    def display_charsets(self, info: CharacterSetInfo) -> None:
        self.console.table(
            "Character Sets",
            ["Class", "Size"],
            [
                ("Uppercase", info.uppercase_size),
                ("Lowercase", info.lowercase_size),
                ("Digits", info.digits_size),
                ("Symbols", info.symbols_size),
                ("Full set", info.full_set_size),
            ],
            caption=f"{info.entropy_per_character_full:.3f} bits per character (full set)",
        )


def _yes_no(flag: bool) -> str:
    return "[green]Yes[/green]" if flag else "[red]No[/red]"
