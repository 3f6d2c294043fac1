#!/usr/bin/env python
"""Command line entry point for pemdecode."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pemdecode import __version__
from pemdecode.cli.report import (
    PROG_NAME,
    print_banner,
    print_processing,
    print_section,
    print_usage,
)
from pemdecode.exceptions import InputFileError, PemDecodeError
from pemdecode.pipeline import decode_all, read_input
from pemdecode.rendering.openssl import default_decoders
from pemdecode.rendering.options import DecodeConfig
from pemdecode.rendering.renderer import Dispatcher

app = typer.Typer(
    help="Decode PEM-formatted certificates, OCSP responses and CRLs with openssl",
    add_completion=False,
)
console = Console()

LOGGER = logging.getLogger(__name__)

EXIT_FATAL = 1
EXIT_DECODER_FAILED = 3


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                markup=False,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    logging.getLogger("pemdecode").setLevel(
        logging.DEBUG if verbose else logging.INFO
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.command()
def decode(
    files: Optional[List[str]] = typer.Argument(
        None, metavar="FILE", help="File with one or more PEM blocks"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log every openssl run, not only failures"
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Seconds to wait for each openssl run"
    ),
    openssl: Optional[str] = typer.Option(
        None, "--openssl", help="openssl binary to use"
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help=f"Exit with code {EXIT_DECODER_FAILED} if any openssl run failed",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Print every PEM block of FILE followed by its openssl text form."""
    _configure_logging(verbose)

    try:
        config = DecodeConfig.from_env(
            openssl=openssl, timeout=timeout, verbose=verbose or None
        )
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(EXIT_FATAL)

    print_banner(console)

    files = list(files or [])
    if len(files) != 1:
        console.out("\nError:\n  File argument required.", highlight=False)
        print_usage(console, config)
        raise typer.Exit(EXIT_FATAL)

    input_file = files[0]
    print_processing(console, input_file, config)

    try:
        data = read_input(input_file)
    except InputFileError as exc:
        LOGGER.error("error <%s> reading input file", exc)
        raise typer.Exit(EXIT_FATAL)

    print_section(console, f'Unmodified data from file "{input_file}" ...')
    console.file.write("\n" + data.decode("utf-8", errors="replace"))
    console.file.flush()
    print_section(console, "PEM blocks in textual form (openssl output) ...")
    console.out("")

    dispatcher = Dispatcher(config, decoders=default_decoders(config), console=console)
    try:
        summary = decode_all(data, dispatcher)
    except PemDecodeError as exc:
        LOGGER.error("failed to decode PEM data: %s", exc)
        raise typer.Exit(EXIT_FATAL)

    console.out("")
    if strict and summary.failed:
        LOGGER.error("%d block(s) could not be decoded by openssl", summary.failed)
        raise typer.Exit(EXIT_DECODER_FAILED)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
