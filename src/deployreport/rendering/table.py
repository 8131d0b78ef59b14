# topmark:header:start
#
#   project      : DeployReport
#   file         : table.py
#   file_relpath : src/deployreport/rendering/table.py
#   license      : MIT
#   copyright    : (c) 2026 DeployReport contributors
#
# topmark:header:end

"""Aligned, width-capped text tables.

`PrettyTable` renders rows of string cells into an ASCII-bordered table. Columns
may be given a maximum display width; a cell line wider than its column is split
onto continuation lines inside the same logical row. Splitting is a hard break at
the column boundary: no character is dropped, including whitespace, so joining
the continuation lines of a cell reproduces the original line.

Display width:
    East Asian wide and full-width characters count as two columns, combining
    marks as zero. Tabs are expanded to 8-column stops before measuring.

Example:
    ```python
    t = PrettyTable()
    t.add_row("Path", "Diff")
    t.add_row("spec.replicas", "-1\\n+2")
    print(t.render([None, 60]))
    ```
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from deployreport.constants import DIFF_COLUMN_MAX_WIDTH

if TYPE_CHECKING:
    from collections.abc import Sequence

    from deployreport.result.model import Change, ValidateResultEntry


def char_width(ch: str) -> int:
    """Return the number of terminal columns occupied by a single character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns occupied by ``text``."""
    return sum(char_width(ch) for ch in text)


def split_to_width(line: str, width: int) -> list[str]:
    """Split ``line`` into chunks of at most ``width`` display columns.

    A wide character that does not fit the remainder of a chunk starts the next
    chunk. A character wider than ``width`` itself gets a chunk of its own.

    Args:
        line (str): A single line of text (no line breaks).
        width (int): Maximum chunk width in display columns (``>= 1``).

    Returns:
        list[str]: The chunks, in order. An empty line yields ``[""]``.
    """
    chunks: list[str] = []
    current: list[str] = []
    used = 0
    for ch in line:
        w = char_width(ch)
        if current and used + w > width:
            chunks.append("".join(current))
            current = []
            used = 0
        current.append(ch)
        used += w
    chunks.append("".join(current))
    return chunks


def _cell_lines(cell: str) -> list[str]:
    # Only "\n" (or "\r\n") breaks a cell; other separators stay in the text.
    return cell.expandtabs(8).replace("\r\n", "\n").split("\n")


class PrettyTable:
    """Accumulate rows and render them as a bordered table.

    The first row is rendered as the header and separated from the body.
    Rows with fewer cells than the widest row are padded with empty cells.
    """

    def __init__(self) -> None:
        self._rows: list[list[str]] = []

    def add_row(self, *cells: str) -> None:
        """Append a row of cells."""
        self._rows.append(list(cells))

    def __len__(self) -> int:
        return len(self._rows)

    def render(self, limit_widths: Sequence[int | None] = ()) -> str:
        """Render the table.

        Args:
            limit_widths (Sequence[int | None]): Maximum display width per column,
                by column index. ``None`` or a missing entry means unlimited.

        Returns:
            str: The rendered table, one line per output row, ending with a newline.
                An empty table renders as an empty string.
        """
        if not self._rows:
            return ""

        ncols = max(len(r) for r in self._rows)
        rows = [r + [""] * (ncols - len(r)) for r in self._rows]
        cell_lines = [[_cell_lines(cell) for cell in row] for row in rows]

        widths = [0] * ncols
        for row in cell_lines:
            for i, lines in enumerate(row):
                widths[i] = max(widths[i], max(display_width(line) for line in lines))
        for i in range(ncols):
            limit = limit_widths[i] if i < len(limit_widths) else None
            if limit is not None and widths[i] > limit:
                widths[i] = max(1, limit)
        # A column never gets narrower than its widest single character.
        for row in cell_lines:
            for i, lines in enumerate(row):
                for line in lines:
                    widths[i] = max(widths[i], max((char_width(ch) for ch in line), default=0))

        border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
        out: list[str] = [border]
        for row in cell_lines:
            wrapped = [
                [chunk for line in lines for chunk in split_to_width(line, widths[i])]
                for i, lines in enumerate(row)
            ]
            height = max(len(c) for c in wrapped)
            for k in range(height):
                parts: list[str] = []
                for i, chunks in enumerate(wrapped):
                    text = chunks[k] if k < len(chunks) else ""
                    parts.append(" " + text + " " * (widths[i] - display_width(text)) + " ")
                out.append("|" + "|".join(parts) + "|")
            out.append(border)
        return "\n".join(out) + "\n"


def render_diff_table(changes: Sequence[Change]) -> str:
    """Render the changes of one object as a ``Path`` / ``Diff`` table."""
    t = PrettyTable()
    t.add_row("Path", "Diff")
    for c in changes:
        t.add_row(c.json_path, c.unified_diff)
    return t.render([None, DIFF_COLUMN_MAX_WIDTH])


def render_validation_table(entries: Sequence[ValidateResultEntry]) -> str:
    """Render validation findings as an ``Object`` / ``Message`` table."""
    t = PrettyTable()
    t.add_row("Object", "Message")
    for e in entries:
        t.add_row(str(e.ref), e.message)
    return t.render([None, DIFF_COLUMN_MAX_WIDTH])
