"""Column-aligned plain-text tables.

TabWriter implements elastic tabstops: callers write lines whose cells are
terminated by a tab character, and on flush every cell is padded to the width
of the widest cell in its column. Output is plain text so it stays greppable
and is never wrapped to the terminal width.
"""

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from rich.cells import cell_len

RowPrinter = Callable[["TabWriter", str], None]


class TabWriter:
    """Buffering writer that aligns tab-terminated cells into columns."""

    def __init__(
        self,
        out: TextIO,
        *,
        minwidth: int = 0,
        padding: int = 2,
        padchar: str = " ",
    ) -> None:
        if len(padchar) != 1:
            raise ValueError("padchar must be a single character")
        self._out = out
        self._minwidth = minwidth
        self._padding = padding
        self._padchar = padchar
        self._buffer = ""

    def write(self, text: str) -> int:
        self._buffer += text
        return len(text)

    def flush(self) -> None:
        """Align and write all complete and partial buffered lines."""
        if not self._buffer:
            return
        text, self._buffer = self._buffer, ""

        lines = text.split("\n")
        trailing_newline = lines[-1] == ""
        if trailing_newline:
            lines.pop()

        # Each line: the tab-terminated cells, plus the unterminated remainder
        rows: list[tuple[list[str], str]] = []
        for line in lines:
            *cells, rest = line.split("\t")
            rows.append((cells, rest))

        widths: list[int] = []
        for cells, _ in rows:
            for idx, cell in enumerate(cells):
                width = max(self._minwidth, cell_len(cell) + self._padding)
                if idx == len(widths):
                    widths.append(width)
                elif width > widths[idx]:
                    widths[idx] = width

        rendered: list[str] = []
        for cells, rest in rows:
            parts = [
                cell + self._padchar * (widths[idx] - cell_len(cell))
                for idx, cell in enumerate(cells)
            ]
            parts.append(rest)
            rendered.append("".join(parts))

        self._out.write("\n".join(rendered) + ("\n" if trailing_newline else ""))
        self._out.flush()


def row_template(column_count: int) -> str:
    """Build a format template with one tab-terminated field per column."""
    return "{}\t" * column_count + "\n"


def print_table(
    columns: Sequence[str],
    print_rows: RowPrinter,
    out: TextIO | None = None,
) -> None:
    """
    Print a table with a header, a dashed separator, and caller-written rows.

    `print_rows` receives the writer and the row template and writes zero or
    more lines with `writer.write(template.format(*values))`.

    Example:
        users = [("user1", "addr1", 24), ("user2", "addr2", 42)]

        def print_users(w, tmpl):
            for name, addr, age in users:
                w.write(tmpl.format(name, addr, age))

        print_table(["Name", "Addr", "Age"], print_users)
    """
    writer = TabWriter(out if out is not None else sys.stdout)
    template = row_template(len(columns))
    writer.write(template.format(*columns))
    writer.write(template.format(*("-" * len(name) for name in columns)))
    print_rows(writer, template)
    writer.flush()
