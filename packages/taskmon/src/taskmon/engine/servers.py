"""Server snapshot source backed by the task-queue Redis registry."""

import json
import logging
import time
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError
from redis.exceptions import RedisError
from shared.contracts import ServerRecord
from shared.keys import DEFAULT_KEY_PREFIX, all_servers_key

from taskmon.engine.base import BackendUnavailableError

logger = logging.getLogger(__name__)


class RedisServerSource:
    """
    Reads registered servers from Redis.

    Servers heartbeat into a sorted set scored by expiry time; members with a
    score in the past are considered dead and are not reported.
    """

    def __init__(self, client: Any, prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._client = client
        self._prefix = prefix

    async def list_servers(self) -> list[ServerRecord]:
        """List all live servers. Raises BackendUnavailableError on any backend failure."""
        now = time.time()
        try:
            keys = await self._client.zrangebyscore(
                all_servers_key(self._prefix), f"({now}", "+inf"
            )
            if not keys:
                return []
            payloads = await self._client.mget(keys)
        except (RedisError, OSError) as e:
            raise BackendUnavailableError(str(e) or type(e).__name__) from e

        servers: list[ServerRecord] = []
        for key, data in zip(keys, payloads, strict=True):
            # Expired between ZRANGEBYSCORE and MGET
            if data is None:
                continue
            record = _decode_server(key, data)
            if record is not None:
                servers.append(record)

        logger.debug(f"Fetched {len(servers)} server(s) from {self._prefix}")
        return servers


def _decode_server(key: str | bytes, data: str | bytes) -> ServerRecord | None:
    try:
        return ServerRecord.model_validate(json.loads(data))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Skipping unreadable server info at {key!r}: {e}")
        return None


def sort_servers(servers: Iterable[ServerRecord]) -> list[ServerRecord]:
    """Order servers by hostname, then pid."""
    return sorted(servers, key=lambda s: (s.host, s.pid))
