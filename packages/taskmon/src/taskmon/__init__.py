"""taskmon - Inspection CLI for Redis-backed task queues."""

from shared._version import __version__

from taskmon.engine import (
    BackendUnavailableError,
    RedisServerSource,
    ServerSource,
    TaskmonError,
    sort_servers,
)

__all__ = [
    "BackendUnavailableError",
    "RedisServerSource",
    "ServerSource",
    "TaskmonError",
    "__version__",
    "sort_servers",
]
