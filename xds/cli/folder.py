"""Folder Typer app factory: client commands for a running server."""

import typer

from xds.api.folder._client import DEFAULT_SERVER_URL
from xds.api.folder.cmd_add import cmd_add
from xds.api.folder.cmd_delete import cmd_delete
from xds.api.folder.cmd_list import cmd_list
from xds.api.folder.cmd_show import cmd_show
from xds.api.folder.cmd_sync import cmd_sync
from xds.api.folder.FolderType import FolderType
from xds.cli._handle_stage_result import handle_stage_result

_URL_HELP = "Base URL of the XDS server"


def folder() -> typer.Typer:
    """Create and configure the folder Typer app."""
    app = typer.Typer(
        name="folder",
        help="Folder operations on a running server",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd(
        ctx: typer.Context,
        url: str = typer.Option(DEFAULT_SERVER_URL, "--url", "-u", help=_URL_HELP),
    ) -> None:
        """List registered folders."""
        handle_stage_result(cmd_list, ctx)(url)

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        folder_id: str = typer.Argument(..., help="Folder ID"),
        url: str = typer.Option(DEFAULT_SERVER_URL, "--url", "-u", help=_URL_HELP),
    ) -> None:
        """Show one folder."""
        handle_stage_result(cmd_show, ctx)(folder_id, url)

    @app.command(name="add")
    def add_cmd(
        ctx: typer.Context,
        server_path: str = typer.Argument(..., help="Server directory, absolute or relative to the share root"),
        client_path: str = typer.Option("", "--client-path", "-p", help="Same directory as seen by the client"),
        label: str = typer.Option("", "--label", "-l", help="Human-readable name"),
        sdk: str = typer.Option("", "--sdk", help="Default SDK ID"),
        folder_type: str = typer.Option("pathmap", "--type", "-t", help="Folder type: pathmap or cloudsync"),
        url: str = typer.Option(DEFAULT_SERVER_URL, "--url", "-u", help=_URL_HELP),
    ) -> None:
        """Register a new folder."""
        try:
            parsed_type = FolderType[folder_type.upper()]
        except KeyError:
            typer.echo(f"Error: Unknown folder type '{folder_type}'. Supported: pathmap, cloudsync.", err=True)
            raise typer.Exit(1) from None
        handle_stage_result(cmd_add, ctx)(
            server_path,
            client_path=client_path,
            label=label,
            default_sdk=sdk,
            folder_type=parsed_type,
            server_url=url,
        )

    @app.command(name="sync")
    def sync_cmd(
        ctx: typer.Context,
        folder_id: str = typer.Argument(..., help="Folder ID"),
        url: str = typer.Option(DEFAULT_SERVER_URL, "--url", "-u", help=_URL_HELP),
    ) -> None:
        """Force a synchronization pass."""
        handle_stage_result(cmd_sync, ctx)(folder_id, url)

    @app.command(name="delete")
    def delete_cmd(
        ctx: typer.Context,
        folder_id: str = typer.Argument(..., help="Folder ID"),
        url: str = typer.Option(DEFAULT_SERVER_URL, "--url", "-u", help=_URL_HELP),
    ) -> None:
        """Delete a folder (files are kept)."""
        handle_stage_result(cmd_delete, ctx)(folder_id, url)

    return app
