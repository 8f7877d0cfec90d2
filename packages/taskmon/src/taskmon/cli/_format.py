"""Cell formatters for inspection tables."""

import math
from datetime import UTC, datetime, timedelta


def format_queues(queues: dict[str, int]) -> str:
    """
    Render a queue priority map as "name:priority" pairs.

    Highest priority first; equal priorities are ordered by name.
    """
    ordered = sorted(queues.items(), key=lambda q: (-q[1], q[0]))
    return " ".join(f"{name}:{priority}" for name, priority in ordered)


def format_duration(delta: timedelta) -> str:
    """
    Render a duration in compact h/m/s notation, e.g. "3h12m5s".

    Rounds to the nearest whole second, halves away from zero. Hours are
    not folded into days.
    """
    total = delta.total_seconds()
    seconds = int(math.floor(abs(total) + 0.5))
    if seconds == 0:
        return "0s"

    sign = "-" if total < 0 else ""
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


def time_ago(started: datetime, now: datetime | None = None) -> str:
    """Render the time elapsed since `started` as "<duration> ago"."""
    if now is None:
        now = datetime.now(UTC)
    if started.tzinfo is None:
        started = started.replace(tzinfo=UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    # Clock skew between hosts can put `started` in the future
    elapsed = max(now - started, timedelta(0))
    return f"{format_duration(elapsed)} ago"
