"""Server registry key layout shared between the queue backend and taskmon."""

# Default namespace used by the task-queue backend
DEFAULT_KEY_PREFIX = "asynq"


def all_servers_key(prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Sorted set of server-info keys scored by heartbeat expiry (unix seconds)."""
    return f"{prefix}:servers"


def server_info_key(
    host: str,
    pid: int,
    server_id: str,
    prefix: str = DEFAULT_KEY_PREFIX,
) -> str:
    """Build the key holding one server's JSON-encoded info."""
    return f"{prefix}:servers:{{{host}:{pid}:{server_id}}}"
