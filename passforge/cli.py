"""
PassForge CLI
==============

Click-based command-line interface for password generation and strength
analysis.

Usage::

    passforge generate --length 20 --count 5
    passforge generate --no-symbols
    passforge generate --pool 0123456789ABCDEF
    passforge pronounceable --length 10
    passforge analyze "Kj9#mP$2vX@z"
    echo "hunter2" | passforge analyze -
    passforge entropy 16 95
    passforge -o json charsets

Out-of-range lengths and counts are clamped, not rejected. A failure of
the operating system random source aborts with exit status 1.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import BaseModel

import passforge
from shared.config import ForgeConfig
from shared.console import ForgeConsole

from passforge.core.engine import ForgeEngine
from passforge.core.models import CharacterFlags, GenerationConfig, GenerationMode
from passforge.core.random_source import RandomSourceError
from passforge.output.console import ForgeConsoleOutput
from passforge.output.report import ForgeReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(passforge.__version__, prog_name="passforge")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a PassForge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase log verbosity (-v info, -vv debug).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    verbose: int,
) -> None:
    """PassForge -- secure password generation and strength analysis."""
    ctx.ensure_object(dict)

    forge_config = ForgeConfig.load(config) if config else ForgeConfig()
    if verbose:
        forge_config.global_settings.log_level = "DEBUG" if verbose > 1 else "INFO"

    ctx.obj["config"] = forge_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file

    console = ForgeConsole(quiet=output == "json")
    ctx.obj["console"] = console
    ctx.obj["engine"] = ForgeEngine(forge_config)
    ctx.obj["display"] = ForgeConsoleOutput(console)
    ctx.obj["reporter"] = ForgeReportGenerator()

    if not quiet and output == "console":
        console.banner(version=passforge.__version__)


def _handle_json(ctx: click.Context, result: BaseModel, command: str) -> None:
    """Emit *result* as a JSON report on stdout or to ``--output-file``."""
    reporter: ForgeReportGenerator = ctx.obj["reporter"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file), command=command)
        click.echo(f"JSON report saved to: {path}", err=True)
    else:
        click.echo(reporter.render_json(result, command=command))


def _abort_on_random_failure(ctx: click.Context, exc: RandomSourceError) -> None:
    if ctx.obj["output_format"] == "console":
        ctx.obj["console"].error(f"{exc}. No password was generated.")
    click.echo(f"Error: {exc}", err=True)
    ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length (4-128).")
@click.option("--count", "-n", type=int, default=None, help="Number of passwords (1-1000).")
@click.option("--no-uppercase", is_flag=True, default=False, help="Exclude A-Z.")
@click.option("--no-lowercase", is_flag=True, default=False, help="Exclude a-z.")
@click.option("--no-numbers", is_flag=True, default=False, help="Exclude 0-9.")
@click.option("--no-symbols", is_flag=True, default=False, help="Exclude symbols.")
@click.option(
    "--pool", "-p",
    default=None,
    help="Custom character pool; overrides the class flags.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    count: Optional[int],
    no_uppercase: bool,
    no_lowercase: bool,
    no_numbers: bool,
    no_symbols: bool,
    pool: Optional[str],
) -> None:
    """Generate random passwords from character classes or a custom pool.

    With every class excluded the alphanumeric pool is used.
    """
    engine: ForgeEngine = ctx.obj["engine"]
    defaults = engine.default_flags()
    request = GenerationConfig(
        length=engine.config.generator.default_length if length is None else length,
        flags=CharacterFlags(
            uppercase=defaults.uppercase and not no_uppercase,
            lowercase=defaults.lowercase and not no_lowercase,
            digits=defaults.digits and not no_numbers,
            symbols=defaults.symbols and not no_symbols,
        ),
        pool=pool,
    )

    try:
        batch = engine.generate_with(request, count=count)
    except RandomSourceError as exc:
        _abort_on_random_failure(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _handle_json(ctx, batch, "generate")
    else:
        ctx.obj["display"].display_batch(batch)


@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length (6-64).")
@click.option("--count", "-n", type=int, default=None, help="Number of passwords (1-1000).")
@click.option("--no-numbers", is_flag=True, default=False, help="Omit the 2-digit suffix.")
@click.pass_context
def pronounceable(
    ctx: click.Context,
    length: Optional[int],
    count: Optional[int],
    no_numbers: bool,
) -> None:
    """Generate pronounceable consonant/vowel passwords."""
    engine: ForgeEngine = ctx.obj["engine"]

    try:
        batch = engine.generate_batch(
            count=count,
            length=length,
            mode=GenerationMode.PRONOUNCEABLE,
            include_numbers=not no_numbers,
        )
    except RandomSourceError as exc:
        _abort_on_random_failure(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _handle_json(ctx, batch, "pronounceable")
    else:
        ctx.obj["display"].display_batch(batch)


@cli.command()
@click.argument("password")
@click.pass_context
def analyze(ctx: click.Context, password: str) -> None:
    """Analyse the strength of PASSWORD.

    Pass "-" to read the password from the first line of stdin, which
    keeps it out of shell history.
    """
    engine: ForgeEngine = ctx.obj["engine"]
    if password == "-":
        password = sys.stdin.readline().rstrip("\r\n")

    result = engine.analyze(password)

    if ctx.obj["output_format"] == "json":
        _handle_json(ctx, result, "analyze")
    else:
        ctx.obj["display"].display_analysis(result)


@cli.command()
@click.argument("length", type=int)
@click.argument("pool_size", type=int)
@click.pass_context
def entropy(ctx: click.Context, length: int, pool_size: int) -> None:
    """Compute the entropy of LENGTH characters drawn from POOL_SIZE."""
    engine: ForgeEngine = ctx.obj["engine"]
    estimate = engine.estimate_entropy(length, pool_size)

    if ctx.obj["output_format"] == "json":
        _handle_json(ctx, estimate, "entropy")
    else:
        ctx.obj["display"].display_entropy(
            estimate.length, estimate.pool_size, estimate.entropy_bits
        )


@cli.command()
@click.pass_context
def charsets(ctx: click.Context) -> None:
    """Show the built-in character set sizes."""
    engine: ForgeEngine = ctx.obj["engine"]
    info = engine.character_set_info()

    if ctx.obj["output_format"] == "json":
        _handle_json(ctx, info, "charsets")
    else:
        ctx.obj["display"].display_charsets(info)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassForge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
