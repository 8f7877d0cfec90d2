"""Base protocol and errors for server snapshot sources."""

from typing import Protocol

from shared.contracts import ServerRecord


class ServerSource(Protocol):
    """
    Protocol for backends that report the currently registered servers.

    Implementations perform a single read per call and never mutate
    backend state.
    """

    async def list_servers(self) -> list[ServerRecord]:
        """Return one unordered snapshot of registered servers."""
        ...


class TaskmonError(Exception):
    """Base exception for taskmon errors."""

    pass


class BackendUnavailableError(TaskmonError):
    """Raised when the server snapshot cannot be retrieved from the backend."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
