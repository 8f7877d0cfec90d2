"""Server registry contract payloads."""

import re
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# RFC 3339 timestamps may carry up to nanosecond precision
_FRACTION = re.compile(r"(\.\d{6})\d+")


class ServerStatus(StrEnum):
    """Lifecycle state reported by a worker server."""

    RUNNING = "running"
    QUIET = "quiet"


class ServerRecord(BaseModel):
    """
    One running worker-server process, as last reported to the backend.

    Accepts both snake_case keys and the PascalCase keys written by Go
    servers (e.g. "Host", "PID", "ActiveWorkerCount").
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    host: str = Field(validation_alias=AliasChoices("host", "Host"))
    pid: int = Field(validation_alias=AliasChoices("pid", "PID"))
    server_id: str = Field(
        default="", validation_alias=AliasChoices("server_id", "ServerID")
    )
    status: str = Field(
        default=ServerStatus.RUNNING, validation_alias=AliasChoices("status", "Status")
    )
    active_worker_count: int = Field(
        default=0,
        validation_alias=AliasChoices("active_worker_count", "ActiveWorkerCount"),
    )
    concurrency: int = Field(
        default=1, validation_alias=AliasChoices("concurrency", "Concurrency")
    )
    queues: dict[str, int] = Field(
        default_factory=dict, validation_alias=AliasChoices("queues", "Queues")
    )
    strict_priority: bool = Field(
        default=False,
        validation_alias=AliasChoices("strict_priority", "StrictPriority"),
    )
    started: datetime = Field(validation_alias=AliasChoices("started", "Started"))

    @field_validator("queues", mode="before")
    @classmethod
    def _null_queues(cls, value: Any) -> Any:
        # Go encodes a nil map as null
        return {} if value is None else value

    @field_validator("started", mode="before")
    @classmethod
    def _trim_fraction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _FRACTION.sub(r"\1", value, count=1)
        return value

    @field_validator("started")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def identity(self) -> tuple[str, int]:
        """Display identity of the process."""
        return (self.host, self.pid)


__all__ = ["ServerRecord", "ServerStatus"]
