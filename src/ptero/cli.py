"""
ptero CLI.

Usage:
    ptero servers list
    ptero backups list <server>
    ptero backups create <server> --wait --download backup.tar.gz
    ptero backups download <server> <backup> backup.tar.gz
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

import click
import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ptero import __version__
from ptero.config import MAX_POLL_INTERVAL, PanelSettings
from ptero.exceptions import ConfigurationError, PteroError
from ptero.logging import setup_logging

if TYPE_CHECKING:
    from ptero.api import PanelAPI
    from ptero.models import Backup

console = Console()
err_console = Console(stderr=True)


def fail(error: BaseException) -> SystemExit:
    """Print an error line and return the exit to raise."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return SystemExit(1)


@contextmanager
def open_api(ctx: click.Context, **kwargs) -> Iterator[PanelAPI]:
    """Open a PanelAPI from CLI settings; report failures and exit 1."""
    from ptero.api import PanelAPI

    settings: PanelSettings = ctx.obj["settings"]
    try:
        api = PanelAPI.from_settings(settings, **kwargs)
    except ConfigurationError as e:
        raise fail(e) from e

    try:
        with api:
            yield api
    except (PteroError, httpx.HTTPError, OSError) as e:
        raise fail(e) from e


def _backup_status(backup: Backup) -> str:
    if not backup.is_completed:
        return "[yellow]pending[/yellow]"
    if backup.attributes.is_successful:
        return "[green]completed[/green]"
    return "[red]failed[/red]"


def _format_size(size: int) -> str:
    return f"{size / 1024 / 1024:.1f} MB"


def _print_backup(backup: Backup) -> None:
    attrs = backup.attributes
    console.print(f"[dim]UUID:[/dim] {attrs.uuid}")
    console.print(f"[dim]Name:[/dim] {attrs.name}")
    console.print(f"[dim]Status:[/dim] {_backup_status(backup)}")
    console.print(f"[dim]Size:[/dim] {_format_size(attrs.size)}")
    if attrs.checksum:
        console.print(f"[dim]Checksum:[/dim] {attrs.checksum}")
    if attrs.created_at:
        console.print(f"[dim]Created:[/dim] {attrs.created_at.isoformat()}")
    if attrs.completed_at:
        console.print(f"[dim]Completed:[/dim] {attrs.completed_at.isoformat()}")


@click.group()
@click.option("--url", envvar="PTERO_PANEL_URL", help="Panel base URL")
@click.option("--api-key", envvar="PTERO_API_KEY", help="Panel client API key")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.version_option(version=__version__, prog_name="ptero")
@click.pass_context
def main(
    ctx: click.Context,
    url: str | None,
    api_key: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """ptero: Pterodactyl panel backup client."""
    overrides = {
        "panel_url": url,
        "api_key": api_key,
        "log_level": log_level.upper() if log_level else None,
        "log_json": json_logs or None,
    }
    try:
        settings = PanelSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        raise fail(e) from e
    setup_logging(settings.log_level, json_output=settings.log_json)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# =============================================================================
# Servers
# =============================================================================


@main.group()
def servers() -> None:
    """Server commands."""
    pass


@servers.command("list")
@click.pass_context
def servers_list(ctx: click.Context) -> None:
    """List servers visible to the API key."""
    with open_api(ctx) as api:
        result = api.servers.list()

    if not result:
        console.print("[yellow]No servers[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("UUID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Node")
    table.add_column("Status")

    for server in result:
        attrs = server.attributes
        status = "[red]suspended[/red]" if attrs.is_suspended else (attrs.status or "running")
        table.add_row(attrs.uuid, attrs.name[:28], attrs.node or "n/a", status)

    console.print(table)


@servers.command("get")
@click.argument("server_id")
@click.pass_context
def servers_get(ctx: click.Context, server_id: str) -> None:
    """Show one server."""
    with open_api(ctx) as api:
        server = api.servers.get(server_id)

    attrs = server.attributes
    console.print(f"[dim]UUID:[/dim] {attrs.uuid}")
    console.print(f"[dim]Name:[/dim] {attrs.name}")
    if attrs.identifier:
        console.print(f"[dim]Identifier:[/dim] {attrs.identifier}")
    if attrs.node:
        console.print(f"[dim]Node:[/dim] {attrs.node}")
    if attrs.description:
        console.print(f"[dim]Description:[/dim] {attrs.description}")


# =============================================================================
# Backups
# =============================================================================


@main.group()
def backups() -> None:
    """Backup commands."""
    pass


@backups.command("list")
@click.argument("server")
@click.pass_context
def backups_list(ctx: click.Context, server: str) -> None:
    """List backups of SERVER (UUID)."""
    with open_api(ctx) as api:
        result = api.backups.list(server)

    if not result:
        console.print("[yellow]No backups[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("UUID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Size", justify="right", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    for backup in result:
        attrs = backup.attributes
        table.add_row(
            attrs.uuid,
            attrs.name[:28],
            _format_size(attrs.size),
            _backup_status(backup),
        )

    console.print(table)


@backups.command("get")
@click.argument("server")
@click.argument("backup_id")
@click.pass_context
def backups_get(ctx: click.Context, server: str, backup_id: str) -> None:
    """Show one backup."""
    with open_api(ctx) as api:
        backup = api.backups.get(server, backup_id)
    _print_backup(backup)


@backups.command("delete")
@click.argument("server")
@click.argument("backup_id")
@click.pass_context
def backups_delete(ctx: click.Context, server: str, backup_id: str) -> None:
    """Delete one backup."""
    with open_api(ctx) as api:
        backup = api.backups.delete(server, backup_id)
    console.print(f"Deleted backup [cyan]{backup.uuid}[/cyan]")


@backups.command("create")
@click.argument("server")
@click.option("--name", help="Backup name")
@click.option("--locked", is_flag=True, help="Lock the backup against deletion")
@click.option("--wait", "-w", is_flag=True, help="Wait until the backup completes")
@click.option(
    "--poll-interval",
    type=click.FloatRange(0, MAX_POLL_INTERVAL),
    help="Seconds between completion checks",
)
@click.option(
    "--download",
    "download_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Download the archive once completed (implies --wait)",
)
@click.pass_context
def backups_create(
    ctx: click.Context,
    server: str,
    name: str | None,
    locked: bool,
    wait: bool,
    poll_interval: float | None,
    download_path: Path | None,
) -> None:
    """Request a new backup of SERVER.

    Examples:

        ptero backups create 1a2b3c4d-... --wait

        ptero backups create 1a2b3c4d-... --download ./backup.tar.gz
    """
    kwargs = {} if poll_interval is None else {"poll_interval": poll_interval}
    with open_api(ctx, **kwargs) as api:
        backup = api.backups.create(server, name=name, is_locked=True if locked else None)
        console.print(f"Requested backup [cyan]{backup.uuid}[/cyan]")

        if wait or download_path:
            with console.status("Waiting for backup to complete..."):
                backup = api.backups.wait(server, backup.uuid)
            console.print(f"Backup completed: {_backup_status(backup)}")

        if download_path:
            result = api.backups.download(server, backup.uuid, download_path)
            console.print(f"Downloaded {result}")


@backups.command("download")
@click.argument("server")
@click.argument("backup_id")
@click.argument("destination", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def backups_download(
    ctx: click.Context,
    server: str,
    backup_id: str,
    destination: Path,
) -> None:
    """Download backup BACKUP_ID of SERVER to DESTINATION."""
    with open_api(ctx) as api:
        result = api.backups.download(server, backup_id, destination)
    console.print(f"Downloaded {result}")


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    main()
