"""Menu Seeder CLI application using Typer.

The ``seed`` command is the trigger for a seed run: it wipes the configured
Appwrite collections and bucket and writes the demo dataset again.
"""

import asyncio
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table

from menu_seeder.config import settings
from menu_seeder.handlers.seeder import run_seed
from menu_seeder.logging_config import configure_logging
from menu_seeder.models.exceptions import SeedDataError
from menu_seeder.models.report import EntityKind, OutcomeStatus, SeedReport, SeedStatus
from menu_seeder.models.seed_data import load_seed_data

app = typer.Typer(
    name="menu-seeder",
    help="Reset an Appwrite project and fill it with demo menu data",
    no_args_is_help=True,
)
console = Console()
logger = structlog.get_logger(__name__)


def _setup_logging(json_logs: Optional[bool]) -> None:
    if json_logs is None:
        json_logs = settings.environment != "development"
    configure_logging(
        log_level="DEBUG" if settings.debug else settings.log_level,
        format_as_json=json_logs,
        include_run_id=True,
    )


def _print_report(report: SeedReport) -> None:
    table = Table(title=f"Seed run {report.run_id}")
    table.add_column("Entity")
    table.add_column("Created", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")

    counts = report.counts()
    for kind in EntityKind:
        table.add_row(
            kind.value,
            str(counts[kind.value][OutcomeStatus.CREATED.value]),
            str(counts[kind.value][OutcomeStatus.FAILED.value]),
        )
    console.print(table)

    for outcome in report.failures():
        console.print(f"  [yellow]{outcome.kind.value}[/yellow] {outcome.name}: {outcome.reason}")

    if report.status == SeedStatus.COMPLETED:
        console.print("[bold green]Seeding complete.[/bold green]")
    elif report.status == SeedStatus.SKIPPED_ALREADY_RUNNING:
        console.print("[yellow]Seed already running. Request ignored.[/yellow]")
    else:
        console.print(f"[bold red]Seed error:[/bold red] {report.error}")


@app.command("seed")
def seed(
    data: Optional[Path] = typer.Option(
        None, "--data", help="Seed dataset JSON file (defaults to the bundled dataset)"
    ),
    json_logs: Optional[bool] = typer.Option(
        None, "--json-logs/--console-logs", help="Log format (JSON outside development)"
    ),
) -> None:
    """Clear the menu collections and storage bucket, then write the demo data."""
    _setup_logging(json_logs)

    try:
        seed_data = load_seed_data(data or settings.seed.data_path)
        report = asyncio.run(run_seed(settings, seed_data))
    except Exception as e:
        logger.error(
            "seed_trigger_failed",
            code=getattr(e, "code", None),
            type=getattr(e, "type", None) or type(e).__name__,
            message=str(e),
            raw=repr(e),
        )
        console.print(f"[bold red]Failed to seed the database:[/bold red] {e}")
        raise typer.Exit(code=1)

    _print_report(report)
    if report.status == SeedStatus.FAILED:
        raise typer.Exit(code=1)


@app.command("show-data")
def show_data(
    data: Optional[Path] = typer.Option(
        None, "--data", help="Seed dataset JSON file (defaults to the bundled dataset)"
    ),
) -> None:
    """Show what a seed run would write, without contacting Appwrite."""
    try:
        seed_data = load_seed_data(data or settings.seed.data_path)
    except SeedDataError as e:
        console.print(f"[bold red]Cannot read the seed dataset:[/bold red] {e}")
        raise typer.Exit(code=1)

    table = Table(title="Seed dataset")
    table.add_column("Menu item")
    table.add_column("Category")
    table.add_column("Price", justify="right")
    table.add_column("Customizations")
    for item in seed_data.menu:
        table.add_row(item.name, item.category_name, f"{item.price:.2f}", ", ".join(item.customizations))
    console.print(table)

    console.print(
        f"{len(seed_data.categories)} categories, "
        f"{len(seed_data.customizations)} customizations, "
        f"{len(seed_data.menu)} menu items"
    )


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
