"""Command-line interface for inspecting and querying catalogs."""

import click
from pathlib import Path
from typing import Optional, Tuple
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from .config import config, configure_logging
from .errors import EmptyCatalogError, MalformedCatalogError
from .extraction.ts_parser import TSParser
from .models.catalog import Catalog
from .resolution.resolver import resolve
from .services.locator import CatalogLocator
from .validation.placeholder_validator import PlaceholderValidator

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("--log-level", default=None, help="Log level (defaults to TSCATALOG_LOG_LEVEL)")
def cli(log_level: Optional[str]):
    """Qt Linguist catalog engine CLI."""
    configure_logging(log_level)


def _load(input_path: str, language: Optional[str] = None) -> Catalog:
    """Load a catalog, aborting on unreadable documents."""
    parser = TSParser()
    try:
        return parser.parse(input_path, language)
    except MalformedCatalogError as e:
        console.print(f"[red]Cannot load catalog:[/red] {e}")
        raise click.Abort()
    except EmptyCatalogError as e:
        console.print(f"[yellow]Empty catalog:[/yellow] {e}")
        return e.catalog


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to .ts file"
)
def stats(input_path: str):
    """Show statistics for a .ts file."""
    catalog = _load(input_path)

    table = Table(title=f"Statistics for {Path(input_path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    total = len(catalog)
    table.add_row("Language", f"{catalog.language_tag} ({config.language_name(catalog.language_tag)})")
    table.add_row("Total messages", str(total))
    table.add_row("Contexts", str(len(catalog.contexts())))
    table.add_row("Finished", str(catalog.finished_count))
    table.add_row("Unfinished", str(catalog.unfinished_count))
    table.add_row("Obsolete", str(catalog.obsolete_count))
    table.add_row("Plural messages", str(catalog.plural_entry_count))

    resolvable = total - catalog.obsolete_count
    coverage = (catalog.finished_count / resolvable) * 100 if resolvable else 0
    table.add_row("Coverage", f"{catalog.finished_count}/{resolvable} ({coverage:.1f}%)")
    table.add_row("Load warnings", str(len(catalog.warnings)))

    console.print(table)

    if catalog.warnings:
        _print_warnings(catalog)


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to .ts file"
)
@click.option(
    "--limit",
    type=int,
    default=20,
    help="Limit number of messages to show"
)
def untranslated(input_path: str, limit: int):
    """Show messages that still fall back to their source text."""
    catalog = _load(input_path)
    entries = catalog.get_unfinished_entries()

    console.print(f"[cyan]Unfinished messages for {catalog.language_tag}:[/cyan] {len(entries)} total")

    if not entries:
        console.print("[green]All messages are translated![/green]")
        return

    table = Table(show_header=True)
    table.add_column("Context", style="dim", max_width=30)
    table.add_column("Source", max_width=60)
    table.add_column("Comment", style="dim", max_width=30)

    for entry in entries[:limit]:
        table.add_row(entry.context, entry.source_text[:60], entry.disambiguation or "")

    console.print(table)

    if len(entries) > limit:
        console.print(f"\n[dim]... and {len(entries) - limit} more[/dim]")


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to .ts file"
)
@click.option("--context", "-c", required=True, help="Context name (e.g., BaseGui)")
@click.option("--source", "-s", "source_text", required=True, help="Source text to resolve")
@click.option("--disambiguation", "-d", default=None, help="Disambiguation comment")
@click.option("--count", "-n", "plural_count", type=int, default=None, help="Plural count")
@click.option("--arg", "-a", "args", multiple=True, help="Value for %1, %2, ... (repeatable)")
@click.option("--language", "-l", default=None, help="Override the catalog language")
def lookup(
    input_path: str,
    context: str,
    source_text: str,
    disambiguation: Optional[str],
    plural_count: Optional[int],
    args: Tuple[str, ...],
    language: Optional[str],
):
    """Resolve one message the way an application would."""
    catalog = _load(input_path, language)
    click.echo(resolve(catalog, context, source_text, disambiguation, plural_count, args))


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to .ts file"
)
@click.option(
    "--warnings/--no-warnings",
    "show_warnings",
    default=True,
    help="Include warning-level issues"
)
def check(input_path: str, show_warnings: bool):
    """Check that translations keep the placeholders of their source."""
    catalog = _load(input_path)
    validator = PlaceholderValidator()
    issues = validator.check_catalog(catalog)

    critical = [i for i in issues if i.severity == "critical"]
    shown = issues if show_warnings else critical

    if shown:
        table = Table(show_header=True)
        table.add_column("Context", style="dim", max_width=25)
        table.add_column("Source", max_width=40)
        table.add_column("Severity", justify="center", width=10)
        table.add_column("Issue", max_width=50)

        for issue in shown:
            color = "red" if issue.severity == "critical" else "yellow"
            table.add_row(
                issue.entry.context[:25],
                issue.entry.source_text[:40],
                f"[{color}]{issue.severity}[/{color}]",
                issue.message,
            )
        console.print(table)

    panel_content = (
        f"[bold]Messages checked:[/bold] {catalog.finished_count}\n"
        f"[red]Critical:[/red] {len(critical)}\n"
        f"[yellow]Warnings:[/yellow] {len(issues) - len(critical)}"
    )
    console.print(Panel(panel_content, title="Placeholder Check"))

    if critical:
        raise SystemExit(1)


@cli.command()
@click.option(
    "--dir", "-d",
    "directories",
    multiple=True,
    type=click.Path(),
    help="Directory to search (repeatable, defaults to TSCATALOG_TRANSLATIONS_DIR)"
)
@click.option("--name", "-n", default=None, help="Catalog name (defaults to the first configured)")
def languages(directories: Tuple[str, ...], name: Optional[str]):
    """List languages with an available catalog."""
    locator = CatalogLocator([Path(d) for d in directories] or config.search_dirs)
    catalog_name = name or config.catalog_names[0]
    found = locator.find_languages(catalog_name)

    if not found:
        console.print(f"[yellow]No catalogs named '{catalog_name}' found[/yellow]")
        return

    table = Table(title=f"Catalogs for '{catalog_name}'")
    table.add_column("Tag", style="cyan")
    table.add_column("Language")
    for tag in found:
        table.add_row(tag, config.language_name(tag))
    console.print(table)


def _print_warnings(catalog: Catalog):
    """Print load warnings collected for a catalog."""
    table = Table(title="Load warnings", show_header=True)
    table.add_column("Line", justify="right", width=6)
    table.add_column("Kind", style="yellow")
    table.add_column("Message", max_width=70)

    for warning in catalog.warnings:
        table.add_row(str(warning.line or ""), warning.kind, warning.message)

    console.print(table)


if __name__ == "__main__":
    cli()
