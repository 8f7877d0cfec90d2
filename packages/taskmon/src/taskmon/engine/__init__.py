"""taskmon Engine - backend access for inspection commands."""

from taskmon.engine.base import BackendUnavailableError, ServerSource, TaskmonError
from taskmon.engine.redis import create_redis_client
from taskmon.engine.servers import RedisServerSource, sort_servers

__all__ = [
    # Sources
    "ServerSource",
    "RedisServerSource",
    "create_redis_client",
    # Ordering
    "sort_servers",
    # Errors
    "TaskmonError",
    "BackendUnavailableError",
]
