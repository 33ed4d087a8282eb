"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from xds.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from xds.api.config.cmd_version import cmd_version

        result = cmd_version().run()
        print(f"xdsd {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        rv = app(argv, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        return 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
