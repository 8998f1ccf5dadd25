"""Main CLI interface for FileRemover using Click."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import ConfigManager, FileRemoverConfig
from ..relocator import (
    EntryStatus,
    FileRelocator,
    InvalidRunIdError,
    RelocationReport,
    new_run_id,
)
from ..utils.logging import get_console, get_logger, setup_logging

console = get_console()
logger = get_logger(__name__)

EXIT_QUARANTINE_UNAVAILABLE = 2

STATUS_STYLES = {
    EntryStatus.MOVED: "green",
    EntryStatus.NOT_FOUND: "yellow",
    EntryStatus.FAILED: "red",
    EntryStatus.ABANDONED: "dim",
    EntryStatus.REJECTED: "magenta",
}


@click.group()
@click.version_option(version=__version__, prog_name="FileRemover")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx, config: Optional[Path]):
    """
    FileRemover - move stale files out of a deployed application.

    Files are moved into a timestamped temp folder instead of being deleted.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


def _load_config(ctx):
    config_manager = ConfigManager(ctx.obj.get("config_path"))
    config = config_manager.load(create_if_missing=True)

    setup_logging(config.logging)
    return config_manager, config


def _print_report(report: RelocationReport):
    if report.skipped:
        console.print("[warning]⚠ No file paths given. Nothing to do.[/warning]")
        return

    table = Table(title=f"Run {report.run_id}", show_header=True, header_style="bold cyan")
    table.add_column("Path", style="cyan")
    table.add_column("Status")
    table.add_column("Details", style="dim")

    for outcome in report.outcomes:
        style = STATUS_STYLES[outcome.status]
        details = outcome.error_message or (
            str(outcome.destination) if outcome.destination else ""
        )
        table.add_row(
            escape(outcome.entry), f"[{style}]{outcome.status.value}[/{style}]", escape(details)
        )

    console.print(table)

    if report.quarantine_root:
        root = escape(str(report.quarantine_root))
        console.print(f"\n[cyan]Quarantine folder:[/cyan] {root}")

    console.print(
        f"[green]{len(report.moved)} moved[/green], "
        f"[yellow]{len(report.not_found)} not found[/yellow], "
        f"[red]{len(report.failed)} failed[/red], "
        f"[magenta]{len(report.rejected)} rejected[/magenta]"
    )


@cli.command()
@click.argument("paths", nargs=-1)
@click.option(
    "--base-path",
    type=click.Path(file_okay=False, path_type=Path),
    help="Root of the deployed application (overrides config)",
)
@click.option("--run-id", help="Run identifier (defaults to the current timestamp)")
@click.option(
    "--parameter",
    "-p",
    help="Pipe (|) separated list of file paths, combined with PATHS",
)
@click.pass_context
def relocate(
    ctx,
    paths: tuple[str, ...],
    base_path: Optional[Path],
    run_id: Optional[str],
    parameter: Optional[str],
):
    """
    Move files listed in PATHS into the quarantine folder.

    Paths are relative to the base path. Missing files are skipped and a file
    that cannot be moved does not stop the others.
    """
    try:
        _, config = _load_config(ctx)
    except ValueError as e:
        console.print(f"[error]✗ Error:[/error] {escape(str(e))}")
        sys.exit(1)

    joined = "|".join(part for part in (parameter, *paths) if part)
    base = base_path or config.resolve_base_path()
    if run_id is None:
        run_id = new_run_id(fmt=config.relocation.run_id_format)

    relocator = FileRelocator(settings=config.relocation)

    try:
        report = relocator.run(base, joined, run_id)
    except InvalidRunIdError as e:
        console.print(f"[error]✗ Error:[/error] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[error]✗ Relocation failed:[/error] {escape(str(e))}")
        logger.exception("Relocate command error")
        sys.exit(1)

    _print_report(report)

    if report.aborted:
        console.print("[error]✗ Quarantine folder could not be created.[/error]")
        sys.exit(EXIT_QUARANTINE_UNAVAILABLE)


@cli.command()
@click.option(
    "--path",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("config/fileremover.yaml"),
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def init(config_file: Path, force: bool):
    """Create a default configuration file."""
    if config_file.exists() and not force:
        console.print(
            f"[warning]⚠ {escape(str(config_file))} already exists. "
            "Use --force to overwrite.[/warning]"
        )
        sys.exit(1)

    try:
        ConfigManager().save(FileRemoverConfig(), config_file)
    except OSError as e:
        console.print(f"[error]✗ Error:[/error] {escape(str(e))}")
        logger.exception("Init command error")
        sys.exit(1)

    console.print(f"✓ Created default configuration: [green]{escape(str(config_file))}[/green]")


@cli.group(name="config")
def config_group():
    """Manage FileRemover configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Display current configuration."""
    console.print("\n[bold cyan]FileRemover Configuration[/bold cyan]\n")

    try:
        config_manager, config = _load_config(ctx)
    except ValueError as e:
        console.print(f"[error]✗ Error:[/error] {escape(str(e))}")
        sys.exit(1)

    relocator = FileRelocator(settings=config.relocation)
    base = config.resolve_base_path()

    console.print("[bold]Base Path:[/bold]")
    console.print(f"  {escape(str(base))}")

    console.print("\n[bold]Relocation:[/bold]")
    console.print(f"  Temp Folder: {escape(config.relocation.temp_folder)}")
    console.print(f"  Namespace: {escape(config.relocation.namespace)}")
    console.print(f"  Folder Name: {escape(config.relocation.folder_name)}")
    console.print(f"  Run Id Format: {escape(config.relocation.run_id_format)}")
    quarantine = relocator.quarantine_path(base, "<run-id>")
    console.print(f"  Quarantine: {escape(str(quarantine))}")

    console.print("\n[bold]Logging:[/bold]")
    console.print(f"  Level: {config.logging.level}")
    console.print(f"  Log Dir: {escape(str(config.logging.log_dir))}")
    console.print(f"  File Logging: {config.logging.file_enabled}")

    source = config_manager.config_path or "(defaults)"
    console.print(f"\n[dim]Config file: {escape(str(source))}[/dim]")


if __name__ == "__main__":
    cli()
