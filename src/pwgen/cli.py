import logging
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import srsly
import typer
from pydantic import ValidationError

from pwgen.config import DEFAULT_COUNT, DEFAULT_LENGTH, GeneratorConfig
from pwgen.core.errors import PwgenError, UnknownSymbolSetError
from pwgen.core.random_source import SeededSource
from pwgen.core.seed import DEFAULT_SEED_FILE, FALLBACK_WARNINGS, read_seed
from pwgen.core.symbols import (
    DEFAULT_SYMBOL_SET,
    SymbolCatalog,
    build_symbol_catalog,
)
from pwgen.generate import build_pool, generate_strings

PROGRAM_NAME = "pwgen"
VERSION = "0.6.0"
AUTHORS = "Juho Rosqvist"
HELP_SELECTOR = "help"

app = typer.Typer(
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSONL = "jsonl"


def _symbol_set_lines(catalog: SymbolCatalog) -> list[str]:
    return [f"  {entry.name:<10}{entry.text()}" for entry in catalog]


def _echo_symbol_sets(catalog: SymbolCatalog) -> None:
    for line in _symbol_set_lines(catalog):
        typer.echo(line)


def _help_epilog() -> str:
    # \b keeps click from rewrapping the listing
    listing = "\n".join(_symbol_set_lines(build_symbol_catalog()))
    return (
        "If no symbols are specified, the program runs as if "
        f"`-S {DEFAULT_SYMBOL_SET}` was given.\n\n"
        f"\b\npredefined symbol sets:\n{listing}"
    )


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"{PROGRAM_NAME} version {VERSION}")
    typer.echo("License GPL-3.0-or-later <http://gnu.org/licenses/gpl.html>")
    typer.echo(
        "This is free software: you are free to change and redistribute it."
    )
    typer.echo("There is NO WARRANTY, to the extent permitted by law.")
    typer.echo(f"\nWritten by {AUTHORS}")
    raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(1)


def _emit(index: int, value: bytes, output_format: OutputFormat) -> None:
    if output_format == OutputFormat.JSONL:
        text = value.decode("utf-8", errors="backslashreplace")
        typer.echo(srsly.json_dumps({"index": index, "value": text}))
    else:
        typer.echo(value)


@app.command(epilog=_help_epilog())
def main(
    literals: Annotated[
        list[str] | None,
        typer.Argument(
            help="Characters added to the pool as-is (duplicates count).",
            show_default=False,
        ),
    ] = None,
    symbols: Annotated[
        list[str] | None,
        typer.Option(
            "--symbols",
            "-S",
            help=(
                "Append a predefined symbol set to the pool. Can be used "
                f"multiple times. `{HELP_SELECTOR}` lists the sets and exits."
            ),
            show_default=False,
        ),
    ] = None,
    count: Annotated[
        int, typer.Option("--count", "-c", help="Number of strings")
    ] = DEFAULT_COUNT,
    length: Annotated[
        int, typer.Option("--length", "-l", help="Characters per string")
    ] = DEFAULT_LENGTH,
    random_seed: Annotated[
        Path,
        typer.Option(
            "--random-seed", "-r", help="File the random seed is read from"
        ),
    ] = DEFAULT_SEED_FILE,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format: text or jsonl"),
    ] = OutputFormat.TEXT,
    debug: Annotated[
        bool, typer.Option("--debug", help="Log pool assembly to stderr")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=_version_callback,
            is_eager=True,
            help="Print version and license information and exit.",
        ),
    ] = False,
) -> None:
    """Generate random strings from a pool of symbols.

    All characters from non-option arguments are combined into a pool of
    symbols from which the random strings are formed. Each symbol has an
    equal probability of being picked, counting multiplicity.
    """
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s"
        )

    selectors = list(symbols or [])
    if HELP_SELECTOR in selectors:
        _echo_symbol_sets(build_symbol_catalog())
        raise typer.Exit()

    if count < 0:
        raise _fail("Error: --count must be >= 0")
    if length < 0:
        raise _fail("Error: --length must be >= 0")

    try:
        config = GeneratorConfig.from_arguments(
            selectors,
            [os.fsencode(lit) for lit in literals or []],
            count=count,
            length=length,
            seed_file=random_seed,
        )
    except ValidationError as err:
        raise _fail(f"Error: {err}") from err

    try:
        pool = build_pool(config.tokens)
    except UnknownSymbolSetError as err:
        typer.echo(f"{PROGRAM_NAME}: {err}", err=True)
        typer.echo(
            f"Try `{PROGRAM_NAME} --help` or "
            f"`{PROGRAM_NAME} --symbols={HELP_SELECTOR}`",
            err=True,
        )
        raise typer.Exit(1) from err
    except PwgenError as err:
        raise _fail(f"{PROGRAM_NAME}: {err}") from err

    seed = read_seed(config.seed_file)
    if seed.fallback:
        typer.echo(f"{seed.source}: {seed.reason}", err=True)
        for line in FALLBACK_WARNINGS:
            typer.echo(line, err=True)

    source = SeededSource(seed.seed)
    try:
        for index, value in enumerate(
            generate_strings(pool, config.count, config.length, source)
        ):
            _emit(index, value, output_format)
    except PwgenError as err:
        raise _fail(f"{PROGRAM_NAME}: {err}") from err


if __name__ == "__main__":
    app()
