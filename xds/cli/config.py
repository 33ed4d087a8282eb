"""Config Typer app factory."""

import typer

from xds.api.config.cmd_show import cmd_show
from xds.api.config.cmd_version import cmd_version
from xds.cli._handle_stage_result import handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
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

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        section: str = typer.Argument("", help="Config key (e.g. shareRootDir, log); empty shows everything"),
        config_path: str | None = typer.Option(None, "--config", "-c", help="Config file (default: $XDS_HOME/config.json)"),
    ) -> None:
        """Show the effective server configuration."""
        handle_stage_result(cmd_show, ctx)(section, config_path)

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show XDS version information."""
        handle_stage_result(cmd_version, ctx)()

    return app
