"""Redis key builders."""

from shared.keys.servers import (
    DEFAULT_KEY_PREFIX,
    all_servers_key,
    server_info_key,
)

__all__ = [
    "DEFAULT_KEY_PREFIX",
    "all_servers_key",
    "server_info_key",
]
