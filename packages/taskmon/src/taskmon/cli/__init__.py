"""taskmon CLI."""

import logging
from pathlib import Path

import typer

from taskmon.cli._console import setup_logging
from taskmon.cli.servers import servers as servers_cmd
from taskmon.config import load_settings

app = typer.Typer(
    name="taskmon",
    help="A monitoring tool to inspect worker servers and queues of a Redis task queue.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_output() -> str:
    from taskmon import __version__

    return f"taskmon version {__version__}"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(_version_output())
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file with default values (default is $HOME/.taskmon.env)",
        exists=True,
        dir_okay=False,
    ),
    uri: str | None = typer.Option(
        None,
        "--uri",
        "-u",
        help="Redis server URI (default is 127.0.0.1:6379)",
    ),
    db: int | None = typer.Option(
        None,
        "--db",
        "-n",
        help="Redis database number (default is 0)",
    ),
    password: str | None = typer.Option(
        None,
        "--password",
        "-p",
        help="Password to use when connecting to Redis",
    ),
    prefix: str | None = typer.Option(
        None,
        "--prefix",
        help="Key prefix used by the task queue (default is asynq)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version",
    ),
) -> None:
    """Inspect worker servers registered against a Redis task queue."""
    setup_logging(verbose=verbose)
    settings = load_settings(
        config,
        uri=uri,
        db=db,
        password=password,
        prefix=prefix,
    )
    if settings.debug:
        logging.getLogger("taskmon").setLevel(logging.DEBUG)
    ctx.obj = settings


@app.command(hidden=True)
def version() -> None:
    """Show version."""
    typer.echo(_version_output())


# Register commands
app.command("servers")(servers_cmd)
