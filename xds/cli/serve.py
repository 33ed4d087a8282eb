"""Serve command: run the XDS server in the foreground."""

import typer

from xds.api.config.ConfigError import ConfigError
from xds.api.folder.FolderError import FolderError


def serve(
    config_path: str | None = typer.Option(None, "--config", "-c", help="Config file (default: $XDS_HOME/config.json)"),
    port: int | None = typer.Option(None, "--port", "-p", min=1, max=65535, help="Override the configured HTTP port"),
    host: str = typer.Option("0.0.0.0", "--host", help="Interface to listen on"),
) -> None:
    """Start the XDS server."""
    from xds.api.server import run_server

    try:
        run_server(config_path, str(port) if port else None, host=host)
    except (ConfigError, FolderError) as e:
        typer.echo(f"Fatal: {e}", err=True)
        raise typer.Exit(2) from e
