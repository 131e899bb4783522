"""tagseed CLI application using Typer.

This module provides the ``generate`` command, which writes a fresh
fixture database to ``<working dir>/build``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tagseed.application.generator import GenerationResult, Generator
from tagseed.domain.shared.exceptions import DomainException
from tagseed_config.settings import Settings, get_settings

app = typer.Typer(
    name="tagseed",
    help="tagseed - SQLite fixture database generator",
    no_args_is_help=True,
)
console = Console()


def configure_logging(settings: Settings) -> None:
    """Configure logging for a CLI run.

    - Console output on stdout with timestamps and module names
    - Configurable log level for tagseed modules (from settings)
    - WARNING level for SQLAlchemy unless DATABASE_ECHO is set
    """
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("tagseed").setLevel(log_level)

    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def _print_summary(result: GenerationResult) -> None:
    table = Table(title="Generated Fixture Database")
    table.add_column("Table", style="cyan")
    table.add_column("Rows", justify="right")
    table.add_row("tags", str(result.stats.tags_created))
    table.add_row("users", str(result.stats.users_created))
    table.add_row("user_tags", str(result.stats.user_tags_created))

    console.print(table)
    console.print(f"[bold green]Written to[/bold green] {result.path}")
    if result.memory_mb is None:
        console.print(f"[dim]{result.duration_ms}ms[/dim]")
    else:
        console.print(f"[dim]{result.duration_ms}ms, {result.memory_mb}MB peak[/dim]")


@app.callback()
def main() -> None:
    """Generate SQLite fixture databases with users, tags and user_tags."""


@app.command("generate")
def generate(
    working_dir: Optional[Path] = typer.Option(
        None,
        "--working-dir",
        "-w",
        help="Directory holding tmp/ and build/ (default: WORKING_DIR or cwd)",
        file_okay=False,
    ),
    users: Optional[int] = typer.Option(
        None,
        "--users",
        "-u",
        min=0,
        help="Override DESIRED_USER_ENTRIES",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed the random generator for a reproducible database",
    ),
) -> None:
    """Generate a fixture database into build/."""
    settings = get_settings()

    overrides: dict[str, Any] = {}
    if working_dir is not None:
        overrides["working_dir"] = working_dir
    if users is not None:
        overrides["desired_user_entries"] = users
    if seed is not None:
        overrides["random_seed"] = seed
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings)

    try:
        generator = Generator.from_settings(settings)
        result = generator.generate(settings.resolved_working_dir)
    except DomainException as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        if e.details:
            console.print(f"[dim]{escape(str(e.details))}[/dim]")
        raise typer.Exit(1) from e

    _print_summary(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
