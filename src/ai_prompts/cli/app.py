"""
Main Typer application for the ai-lib CLI.

This module defines the root CLI application and registers all commands.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from ai_prompts import __version__
from ai_prompts.cli.commands import library
from ai_prompts.cli.output import print_error, print_info
from ai_prompts.config import ConfigurationError, get_config
from ai_prompts.library import get_library
from ai_prompts.storage.paths import resolve_library_root

app = typer.Typer(
    name="ai-lib",
    help="Your prompt library at your fingertips.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def _setup_logging(level: int | str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"ai-lib version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            "-r",
            help="Library root (default: AI_LIBRARY_PATH, config, or the installed library).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """
    [bold blue]ai-lib[/bold blue] - AI prompt library

    Fetch, search, list and compose the prompts, snippets, templates,
    skills, instructions, chains, contexts and examples in your library.
    """
    try:
        config = get_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    _setup_logging(logging.DEBUG if verbose else config.logging.level)
    get_library(resolve_library_root(root, configured=config.library.root))


app.command("get")(library.get)
app.command("search")(library.search)
app.command("list")(library.list_prompts)
app.command("compose")(library.compose)
app.command("random")(library.random_prompt)
app.command("stats")(library.stats)


if __name__ == "__main__":
    app()
