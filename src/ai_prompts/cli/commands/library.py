"""
ai-lib library commands.

Usage:
    ai-lib get prd-generator
    ai-lib search "security audit" --category skills
    ai-lib list prompts
    ai-lib compose prd-generator ultrathink step-by-step
    ai-lib random snippets
    ai-lib stats
"""

import math
from typing import Annotated

import typer
from rich.markup import escape

from ai_prompts.cli.output import (
    console,
    print_error,
    print_rule,
    print_table,
    print_warning,
)
from ai_prompts.config import get_config
from ai_prompts.library import CATEGORIES, Category, Prompt, get_library

DESCRIPTION_PREVIEW = 80


def _check_category(category: str | None) -> Category | None:
    """Validate a category argument, exiting on unknown names."""
    if category is None:
        return None
    if category not in CATEGORIES:
        print_error(f"Unknown category: {escape(category)}")
        console.print(f"[dim]Categories: {', '.join(CATEGORIES)}[/dim]")
        raise typer.Exit(1)
    return category  # type: ignore[return-value]


def _print_prompt(prompt: Prompt) -> None:
    """Print a prompt with its metadata header."""
    console.print(f"\n[bold]# {escape(prompt.title)}[/bold]\n")

    if prompt.description:
        console.print(f"[dim]> {escape(prompt.description)}[/dim]\n")

    console.print(f"[dim]Category: {prompt.category}/{escape(prompt.subcategory)}[/dim]")
    if prompt.tags:
        console.print(f"[dim]Tags: {escape(', '.join(prompt.tags))}[/dim]")
    print_rule()
    typer.echo()
    typer.echo(prompt.content)


def get(
    name: Annotated[
        list[str],
        typer.Argument(
            help="Prompt id, alias or name.",
        ),
    ],
    raw: Annotated[
        bool,
        typer.Option(
            "--raw",
            help="Print only the prompt body.",
        ),
    ] = False,
) -> None:
    """Fetch a prompt by id, alias or fuzzy name."""
    library = get_library()
    query = " ".join(name)
    prompt = library.get_prompt(query)

    if prompt is None:
        print_error(f'Prompt "{escape(query)}" not found.')

        suggestions = library.search(query, limit=3)
        if suggestions:
            console.print("\n[yellow]Did you mean:[/yellow]")
            for suggestion in suggestions:
                console.print(f"  [cyan]{escape(suggestion.id)}[/cyan]")
        raise typer.Exit(1)

    if raw:
        typer.echo(prompt.content)
        return

    _print_prompt(prompt)


def search(
    query: Annotated[
        list[str],
        typer.Argument(
            help="Search query.",
        ),
    ],
    category: Annotated[
        str | None,
        typer.Option(
            "--category",
            "-c",
            help="Only search this category.",
        ),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Maximum number of results.",
        ),
    ] = None,
) -> None:
    """Search prompts by keyword."""
    text = " ".join(query)
    checked = _check_category(category)
    max_results = limit if limit is not None else get_config().search.default_limit

    results = get_library().search(text, category=checked, limit=max_results)

    if not results:
        console.print(f'[yellow]No results found for "{escape(text)}"[/yellow]')
        return

    console.print(f'\n[bold]Search results for "{escape(text)}":[/bold]\n')

    for result in results:
        console.print(f"[cyan]{escape(result.id)}[/cyan] [dim]({result.score})[/dim]")
        console.print(f"  {escape(result.title)}")
        if result.description:
            console.print(f"  [dim]{escape(result.description[:DESCRIPTION_PREVIEW])}[/dim]")
        console.print()


def list_prompts(
    category: Annotated[
        str | None,
        typer.Argument(
            help="Category to list.",
        ),
    ] = None,
) -> None:
    """List prompts, or an overview of all categories."""
    library = get_library()
    checked = _check_category(category)

    if checked is None:
        stats = library.get_stats()
        console.print("\n[bold]Library Overview:[/bold]\n")
        for name, count in stats.by_category.items():
            console.print(f"  [cyan]{name:<15}[/cyan] {count} items")
        console.print("\n[dim]Use: ai-lib list <category> for details[/dim]")
        return

    prompts = library.list_prompts(checked)
    if not prompts:
        console.print(f'[yellow]No items in category "{checked}"[/yellow]')
        return

    console.print(f"\n[bold]{checked.upper()} ({len(prompts)} items):[/bold]\n")

    by_subcategory: dict[str, list[Prompt]] = {}
    for prompt in prompts:
        by_subcategory.setdefault(prompt.subcategory, []).append(prompt)

    for subcategory, items in by_subcategory.items():
        console.print(f"[yellow]  {escape(subcategory)}/[/yellow]")
        for prompt in items:
            console.print(f"    [cyan]{escape(prompt.filename)}[/cyan] - {escape(prompt.description)}")


def compose(
    names: Annotated[
        list[str],
        typer.Argument(
            help="Prompts and snippets to combine, in order.",
        ),
    ],
) -> None:
    """Combine multiple prompts into one."""
    library = get_library()

    not_found = [name for name in names if library.get_prompt(name) is None]
    if not_found:
        print_warning(f"Could not find: {escape(', '.join(not_found))}")

    composed = library.compose(names)
    if not composed:
        print_error("No items found to compose.")
        raise typer.Exit(1)

    typer.echo(composed)


def random_prompt(
    category: Annotated[
        str | None,
        typer.Argument(
            help="Category to pick from.",
        ),
    ] = None,
) -> None:
    """Show a random prompt for inspiration."""
    checked = _check_category(category)
    prompt = get_library().random_prompt(checked)

    if prompt is None:
        if checked:
            print_error(f'No items in category "{checked}"')
        else:
            print_error("The library is empty.")
        raise typer.Exit(1)

    console.print(f"[cyan]{escape(prompt.id)}[/cyan]")
    _print_prompt(prompt)


def stats() -> None:
    """Show library statistics."""
    library = get_library()
    library_stats = library.get_stats()

    rows = [
        [name, "█" * math.ceil(count / 2), count]
        for name, count in library_stats.by_category.items()
    ]
    print_table(["Category", "", "Count"], rows, title="AI Library Statistics")
    console.print(f"[bold]Total items:[/bold] {library_stats.total}")
    console.print(f"[dim]Library path: {escape(str(library.root))}[/dim]")
