"""
Command line interface for the extension scaffolder.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import DEFAULT_CONFIG_FILENAME, ConfigError, ScaffoldConfig, get_settings, load_config
from .layout import PAGE_ORDER, ModuleDescriptor
from .scaffold import ScaffoldError, ScaffoldReport, Scaffolder, run_scaffold

console = Console()
app = typer.Typer(help="Generate HTML entry documents and mount scripts for an extension project.")
logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Optional[Path]) -> Optional[Path]:
    """Ensure an explicit config path exists; fall back to ./extscaffold.toml when omitted."""
    if value is None:
        default = Path.cwd() / DEFAULT_CONFIG_FILENAME
        return default if default.is_file() else None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _load_scaffolder_or_exit(path: Optional[Path]) -> Scaffolder:
    try:
        config = load_config(path) if path else ScaffoldConfig(root=Path.cwd())
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    return Scaffolder.from_config(config)


def _run_or_exit(scaffolder: Scaffolder, operation: Callable[[Scaffolder], Awaitable[T]]) -> T:
    try:
        return run_scaffold(scaffolder, operation)
    except (ScaffoldError, OSError) as exc:
        console.print(f"[bold red]Scaffolding failed:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _module_or_exit(scaffolder: Scaffolder, path: Path) -> ModuleDescriptor:
    source = scaffolder.layout.source_directory
    try:
        return ModuleDescriptor.from_path(path, source)
    except ValueError as exc:
        raise typer.BadParameter(f"{path} is not inside the source directory {source}") from exc


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


def _config_option():
    return typer.Option(
        None,
        "--config",
        "-c",
        help=f"Path to the scaffold config (defaults to ./{DEFAULT_CONFIG_FILENAME} if present).",
        callback=_resolve_config_path,
    )


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show extscaffold version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]extscaffold[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print("Run [cyan]extscaffold build[/] inside a project, or see [cyan]--help[/].")


@app.command()
def init(config: Optional[Path] = _config_option()) -> None:
    """
    Copy static assets and generate the popup, options, newtab and devtools pages.
    """
    scaffolder = _load_scaffolder_or_exit(config)
    flags = _run_or_exit(scaffolder, lambda s: s.init())

    table = Table(title="Pages")
    table.add_column("Page")
    table.add_column("Source")
    for kind, found in zip(PAGE_ORDER, flags):
        table.add_row(kind.value, "user module" if found else "default")
    console.print(table)


@app.command()
def build(config: Optional[Path] = _config_option()) -> None:
    """
    Generate the canonical pages plus mounts for every discovered tab page and UI content script.
    """
    scaffolder = _load_scaffolder_or_exit(config)
    report = _run_or_exit(scaffolder, lambda s: s.build())
    _print_scaffold_report(report)


@app.command("mount-page")
def mount_page(
    module: Path = typer.Argument(..., exists=True, dir_okay=False, resolve_path=True, help="Page module file."),
    config: Optional[Path] = _config_option(),
) -> None:
    """
    Generate the HTML document (and mount script, for UI modules) for one page module.
    """
    scaffolder = _load_scaffolder_or_exit(config)
    descriptor = _module_or_exit(scaffolder, module)
    html_path = _run_or_exit(scaffolder, lambda s: s.create_page_mount(descriptor))
    console.print(f"[bold green]Wrote[/] {html_path}")


@app.command("mount-content-script")
def mount_content_script(
    module: Path = typer.Argument(..., exists=True, dir_okay=False, resolve_path=True, help="Content script file."),
    config: Optional[Path] = _config_option(),
) -> None:
    """
    Generate the UI mount wrapper for one content script.
    """
    scaffolder = _load_scaffolder_or_exit(config)
    descriptor = _module_or_exit(scaffolder, module)
    mount_path = _run_or_exit(scaffolder, lambda s: s.create_content_script_mount(descriptor))
    console.print(f"[bold green]Wrote[/] {mount_path}")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
