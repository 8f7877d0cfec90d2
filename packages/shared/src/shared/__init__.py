"""Shared models for taskmon packages."""

from shared._version import __version__
from shared.contracts import ServerRecord, ServerStatus
from shared.keys import DEFAULT_KEY_PREFIX, all_servers_key, server_info_key

__all__ = [
    "DEFAULT_KEY_PREFIX",
    "ServerRecord",
    "ServerStatus",
    "__version__",
    "all_servers_key",
    "server_info_key",
]
