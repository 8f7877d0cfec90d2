"""Servers command for listing running worker servers."""

import asyncio
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TextIO

import typer
from shared.contracts import ServerRecord

from taskmon.cli._console import error, error_panel
from taskmon.cli._format import format_queues, time_ago
from taskmon.cli._table import TabWriter, print_table
from taskmon.config import Settings
from taskmon.engine import (
    BackendUnavailableError,
    RedisServerSource,
    create_redis_client,
    sort_servers,
)

SERVER_COLUMNS = ["Host", "PID", "State", "Active Workers", "Queues", "Started"]

NO_SERVERS_MESSAGE = "No running servers"


def servers(ctx: typer.Context) -> None:
    """
    Show all running worker servers.

    Lists every worker server pulling tasks from the configured Redis
    instance with:

    * Host and PID of the process in which the server is running
    * Number of active workers out of the worker pool
    * Queue configuration, highest priority first
    * State of the server ("running" | "quiet")
    * Time the server was started

    A "running" server is pulling tasks from queues and processing them.
    A "quiet" server is no longer pulling new tasks from queues.
    """
    settings: Settings = ctx.obj

    try:
        records = asyncio.run(fetch_servers(settings))
    except ValueError as e:
        error_panel(str(e), title="Configuration error")
        raise typer.Exit(1)
    except BackendUnavailableError as e:
        error(e.message)
        raise typer.Exit(1)

    render_servers(records)


async def fetch_servers(settings: Settings) -> list[ServerRecord]:
    """Take one snapshot of the server registry and close the connection."""
    client = create_redis_client(settings)
    try:
        return await RedisServerSource(client, prefix=settings.prefix).list_servers()
    finally:
        await client.aclose()


def render_servers(
    records: Sequence[ServerRecord],
    out: TextIO | None = None,
    now: datetime | None = None,
) -> None:
    """Write the servers table, or a notice when nothing is registered."""
    if not records:
        typer.echo(NO_SERVERS_MESSAGE, file=out)
        return

    ordered = sort_servers(records)
    now = now or datetime.now(UTC)

    def print_rows(w: TabWriter, tmpl: str) -> None:
        for info in ordered:
            w.write(
                tmpl.format(
                    info.host,
                    info.pid,
                    info.status,
                    f"{info.active_worker_count}/{info.concurrency}",
                    format_queues(info.queues),
                    time_ago(info.started, now),
                )
            )

    print_table(SERVER_COLUMNS, print_rows, out=out)
