"""Shared console and logging utilities."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Colors only on a terminal, and never when disabled (NO_COLOR standard)
no_color = os.environ.get("NO_COLOR", "").lower() in ("1", "true", "yes")

# Command results
console = Console(
    highlight=False,
    no_color=no_color,
)

# Log records, kept off stdout so piped output stays clean
err_console = Console(
    stderr=True,
    highlight=False,
    no_color=no_color,
)


def error(msg: str) -> None:
    """Print error message."""
    console.print(msg, style="red", markup=False, soft_wrap=True)


def error_panel(msg: str, *, title: str = "Failed") -> None:
    """Print a styled error panel."""
    from rich.box import ROUNDED
    from rich.panel import Panel
    from rich.text import Text

    lines: list[Text] = []
    line = Text()
    line.append("✗ ", style="red bold")
    line.append(title, style="red")
    lines.append(line)
    lines.append(Text())
    lines.append(Text(msg, style="dim"))

    panel = Panel(
        Text("\n").join(lines),
        border_style="red dim",
        box=ROUNDED,
        padding=(0, 1),
        expand=False,
    )
    console.print(panel)


def setup_logging(verbose: bool = False) -> None:
    """Configure clean logging for taskmon CLI."""
    # Suppress noisy loggers
    logging.getLogger("redis").setLevel(logging.WARNING)

    # Set up rich handler for clean output
    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
        keywords=[],
    )

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    logging.getLogger("taskmon").setLevel(level)
