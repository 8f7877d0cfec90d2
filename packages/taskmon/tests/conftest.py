from __future__ import annotations

import json
import time
from collections.abc import AsyncIterator
from datetime import datetime
from typing import Any

import pytest
import pytest_asyncio
from fakeredis import FakeRedis as SyncFakeRedis
from fakeredis import FakeServer
from fakeredis.aioredis import FakeRedis
from shared.keys import DEFAULT_KEY_PREFIX, all_servers_key, server_info_key


@pytest.fixture
def fake_server() -> FakeServer:
    return FakeServer()


@pytest_asyncio.fixture
async def fake_redis(fake_server: FakeServer) -> AsyncIterator[FakeRedis]:
    client = FakeRedis(server=fake_server, decode_responses=True)
    try:
        yield client
    finally:
        await client.aclose()


def register_server(
    server: FakeServer,
    *,
    host: str,
    pid: int,
    started: datetime,
    server_id: str = "sid",
    status: str = "running",
    active_worker_count: int = 0,
    concurrency: int = 10,
    queues: dict[str, int] | None = None,
    expires_in: float = 30.0,
    prefix: str = DEFAULT_KEY_PREFIX,
    payload: Any = None,
) -> str:
    """Write a server heartbeat the way the queue backend does."""
    key = server_info_key(host, pid, server_id, prefix=prefix)
    if payload is None:
        payload = json.dumps(
            {
                "host": host,
                "pid": pid,
                "server_id": server_id,
                "concurrency": concurrency,
                "queues": queues if queues is not None else {"default": 1},
                "strict_priority": False,
                "status": status,
                "started": started.isoformat(),
                "active_worker_count": active_worker_count,
            }
        )
    client = SyncFakeRedis(server=server, decode_responses=True)
    client.set(key, payload)
    client.zadd(all_servers_key(prefix), {key: time.time() + expires_in})
    client.close()
    return key


@pytest.fixture
def seed_server(fake_server: FakeServer):
    def seed(**kwargs: Any) -> str:
        return register_server(fake_server, **kwargs)

    return seed
