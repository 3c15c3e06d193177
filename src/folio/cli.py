"""Folio CLI - render and validate a data-driven portfolio site."""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.panel import Panel

from . import __version__
from .config import Settings, settings
from .data import PortfolioData, PortfolioStore, data_source_for
from .dom import Page
from .orchestrator import Failed, Populated, PortfolioApp, Skipped
from .utils.console import console
from .utils.logging import get_logger, setup_logging
from .validation import BuildInput, ValidateFileInput, validate_portfolio_data

logger = get_logger(__name__)


def _validate_input(model_class: type, **kwargs: Any) -> None:
    """Validate input using a Pydantic model, exit on validation error.

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        model_class(**kwargs)
    except PydanticValidationError as e:
        console.print(f"[red]Validation error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)


def _print_panel(message: str, style: str = "blue") -> None:
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


app = typer.Typer(
    name="folio",
    help="Portfolio site builder - render a JSON portfolio into a static page",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Folio[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Also write detailed logs to this file"),
    ] = None,
) -> None:
    """Folio - one JSON document, one portfolio page."""
    setup_logging(settings.log_level, log_file or settings.log_file)


def _build_settings(**overrides: Any) -> Settings:
    return settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})


@app.command()
def build(
    data: Annotated[
        str | None,
        typer.Option("--data", "-d", help="Data document: URL or path relative to the site root"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where to write the rendered HTML"),
    ] = None,
    shell: Annotated[
        Path | None,
        typer.Option("--shell", help="HTML shell template (default: built-in)"),
    ] = None,
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Site root for local data and images"),
    ] = None,
) -> None:
    """Render the portfolio to a static HTML snapshot."""
    config = _build_settings(
        data_location=data, output_path=output, shell_path=shell, site_root=root
    )
    _validate_input(BuildInput, shell_path=config.shell_path, output_path=config.output_path)

    _print_panel("🏗️  Building portfolio...")
    console.print(f"  Data: {config.data_location}")

    page = Page.from_settings(config)
    source = data_source_for(config.data_location, config.site_root, timeout=config.http_timeout)
    store = PortfolioStore(source, config.fetch_max_attempts, config.fetch_base_delay)
    portfolio = PortfolioApp(page, store, config)
    logger.info("Building from %s into %s", config.data_location, config.output_path)

    asyncio.run(portfolio.init())
    page.scheduler.run_all()

    console.print("\n[bold cyan]Sections[/bold cyan]")
    for name, result in portfolio.results.items():
        match result:
            case Populated():
                console.print(f"  [green]✓[/green] {name}")
            case Failed(error=error):
                console.print(f"  [red]✗ {name}: {error}[/red]")
            case Skipped(reason=reason):
                console.print(f"  [dim]- {name}: skipped ({reason})[/dim]")

    if store.used_fallback:
        console.print(
            f"\n[yellow]Could not load {config.data_location}; "
            "built with fallback content.[/yellow]"
        )
    errors = store.get_validation_errors()
    if errors:
        console.print(
            f"[yellow]{len(errors)} validation issue(s); run 'folio validate' for details.[/yellow]"
        )

    path = page.write(config.output_path)
    console.print(f"\n[green]Site written to {path}[/green]")


@app.command()
def validate(
    path: Annotated[
        Path | None,
        typer.Argument(help="Portfolio JSON file (default: configured data path)"),
    ] = None,
) -> None:
    """Validate a portfolio data file."""
    path = path or settings.data_path
    _validate_input(ValidateFileInput, path=path)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        console.print(f"[red]Cannot read {path}: {e}[/red]")
        raise typer.Exit(code=1)

    result = validate_portfolio_data(raw)
    if not result.is_valid:
        console.print(f"[red]Found {len(result.errors)} validation error(s) in {path}:[/red]")
        for number, error in enumerate(result.errors, start=1):
            console.print(f"  {number}. {error}")
        raise typer.Exit(code=1)

    data = PortfolioData.from_raw(raw)
    skills = sum(len(category.skills) for category in data.skills)
    _print_panel(f"✅ {path} is valid", style="green")
    console.print(f"  Name: {data.personal.name}")
    console.print(f"  Experience entries: {len(data.experience)}")
    console.print(f"  Projects: {len(data.projects)}")
    console.print(f"  Skills: {skills} in {len(data.skills)} categories")


if __name__ == "__main__":
    app()
