"""ABOUTME: CLI entry point for dexcore commands.
ABOUTME: Provides matchup, forms, chart and colors commands via Typer."""

import logging
from collections.abc import Sequence
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dexcore.build import write_profile_table
from dexcore.forms import FormDescriptor, find_default_form_issue, load_form_records, resolve_all
from dexcore.logs import init_logging
from dexcore.matchups import format_multiplier, get_matchups, hex_color, type_emoji
from dexcore.settings import settings
from dexcore.utils.type_chart import TYPES, ElementType, parse_element_types

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="dexcore",
    help="Defensive type matchups and form labels for creature database records.",
    no_args_is_help=True,
)

console = Console()

DEFAULT_CHART_FILENAME = "type_chart.parquet"


def _chip(element_type: ElementType, multiplier: float | None = None) -> str:
    """Render a colored type chip, optionally with its multiplier."""
    label = f"{type_emoji(element_type)} {element_type.display_name.upper()}"
    if multiplier is not None:
        label = f"{label} {format_multiplier(multiplier)}"
    return f"[{hex_color(element_type)}]{label}[/]"


def _chips(entries: Sequence[tuple[ElementType, float]]) -> str:
    return ", ".join(_chip(element_type, multiplier) for element_type, multiplier in entries) or "-"


def _forms_table(descriptors: Sequence[FormDescriptor]) -> Table:
    """Build the table shown by the forms command."""
    table = Table(title="Forms")
    table.add_column("ID", justify="right")
    table.add_column("Internal name")
    table.add_column("Label")
    table.add_column("Kind")
    table.add_column("Default")
    table.add_column("Mega")

    for descriptor in descriptors:
        table.add_row(
            str(descriptor.pokemon_id),
            descriptor.internal_name,
            descriptor.display_label,
            descriptor.kind.value,
            "yes" if descriptor.is_default else "",
            "yes" if descriptor.is_mega else "",
        )
    return table


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Set up logging before any command runs."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path, level="DEBUG" if verbose else None)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def matchup(
    types: list[str] = typer.Argument(..., help="One or two defending type names (e.g., fire flying)"),
) -> None:
    """Show weaknesses, resistances and immunities of a type combination."""
    try:
        element_types = parse_element_types(types)
        matchups = get_matchups(element_types)
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    title = " / ".join(dict.fromkeys(t.display_name for t in element_types))
    table = Table(title=f"Defensive matchups: {title}")
    table.add_column("Category")
    table.add_column("Types")

    table.add_row("[red]Weaknesses[/]", _chips(matchups.weaknesses))
    table.add_row("[green]Resistances[/]", _chips(matchups.resistances))
    table.add_row("[blue]Immunities[/]", ", ".join(_chip(t) for t in matchups.immunities) or "-")

    console.print(table)


@app.command()
def forms(
    path: Path = typer.Argument(..., help="JSON file with the form rows of one species"),
    language: str | None = typer.Option(None, "--language", "-l", help="Language code for localized names"),
) -> None:
    """Resolve display labels for the forms of one species."""
    lang = language or settings.FORM_NAME_LANGUAGE
    try:
        records = load_form_records(path, language=lang)
        descriptors = resolve_all(records)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    console.print(_forms_table(descriptors))

    issue = find_default_form_issue(descriptors)
    if issue is not None:
        logger.warning("Ambiguous default form in %s: %s", path, issue)
        console.print(f"[yellow]Warning:[/] {escape(issue)}")


@app.command()
def chart(
    output: Path | None = typer.Argument(None, help="Output file (.parquet or .csv)"),
) -> None:
    """Write the defensive profile of every type combination to a table."""
    output_path = output or settings.exports_dir / DEFAULT_CHART_FILENAME
    try:
        written = write_profile_table(output_path)
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    console.print(f"[green]Type chart written:[/] {written}")


@app.command()
def colors() -> None:
    """List the display color of every type."""
    table = Table(title="Type colors")
    table.add_column("Type")
    table.add_column("Color")

    for element_type in TYPES:
        table.add_row(_chip(element_type), hex_color(element_type))

    console.print(table)


if __name__ == "__main__":
    app()
