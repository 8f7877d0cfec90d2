"""Contract payloads shared between the queue backend and taskmon."""

from shared.contracts.servers import ServerRecord, ServerStatus

__all__ = ["ServerRecord", "ServerStatus"]
