"""Soft-wrap layout: maps buffer offsets to visual rows and columns."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .validation import ensure_width

Position = Tuple[int, int]  # (column, row)

NEWLINE = "\n"
TAB = "\t"


def char_span(char: str, column: int, width: int, tab_width: int = 1) -> int:
    """Columns ``char`` occupies when placed at ``column`` on a row of ``width``."""

    if char == TAB:
        return min(tab_width - (column % tab_width), width - column)
    return 1


@dataclass(frozen=True, slots=True)
class WrapLayout:
    """Result of one wrap scan over ``text``.

    ``columns[i]``/``rows[i]`` give the caret cell for offset ``i`` (the end
    offset ``len(text)`` included). ``row_starts[r]`` is the first offset of
    visual row ``r``; every row start sits at column 0.
    """

    text: str
    width: int
    tab_width: int
    columns: Sequence[int]
    rows: Sequence[int]
    row_starts: Sequence[int]

    @classmethod
    def build(cls, text: str, width: int, *, tab_width: int = 1) -> "WrapLayout":
        width = ensure_width(width)
        columns: List[int] = []
        rows: List[int] = []
        row_starts: List[int] = [0]
        col = 0
        row = 0
        for offset, char in enumerate(text):
            columns.append(col)
            rows.append(row)
            if char == NEWLINE:
                col = 0
                row += 1
                row_starts.append(offset + 1)
                continue
            col += char_span(char, col, width, tab_width)
            if col >= width:
                col = 0
                row += 1
                row_starts.append(offset + 1)
        columns.append(col)
        rows.append(row)
        return cls(
            text=text,
            width=width,
            tab_width=tab_width,
            columns=tuple(columns),
            rows=tuple(rows),
            row_starts=tuple(row_starts),
        )

    @property
    def row_count(self) -> int:
        return len(self.row_starts)

    @property
    def last_row(self) -> int:
        return len(self.row_starts) - 1

    def position(self, offset: int) -> Position:
        return (self.columns[offset], self.rows[offset])

    def row_of(self, offset: int) -> int:
        return self.rows[offset]

    def row_start(self, row: int) -> int:
        return self.row_starts[row]

    def row_end(self, row: int) -> int:
        """Offset where the row after ``row`` begins, or the text end."""

        if row >= self.last_row:
            return len(self.text)
        return self.row_starts[row + 1]

    def last_caret(self, row: int) -> int:
        """Largest caret offset still drawn on ``row``.

        On a wrapped or newline-terminated row the end offset already belongs
        to the next row, so the caret stops one short of it.
        """

        if row >= self.last_row:
            return len(self.text)
        return self.row_starts[row + 1] - 1

    def offset_at(self, row: int, column: int) -> int:
        """Largest offset on ``row`` whose column is ``<= column``."""

        start = self.row_start(row)
        stop = self.last_caret(row) + 1
        # Columns strictly increase within a row, so the slice is sorted.
        index = bisect_right(self.columns, column, start, stop) - 1
        return max(index, start)

    def row_text(self, row: int) -> str:
        """Characters drawn on ``row`` with tabs expanded to their span."""

        start = self.row_start(row)
        end = self.row_end(row)
        cells: List[str] = []
        for offset in range(start, end):
            char = self.text[offset]
            if char == NEWLINE:
                break
            if char == TAB:
                if self.rows[offset + 1] == row:
                    span = self.columns[offset + 1] - self.columns[offset]
                else:
                    span = self.width - self.columns[offset]
                cells.append(" " * span)
            else:
                cells.append(char)
        return "".join(cells)

    def visual_rows(self) -> Tuple[str, ...]:
        return tuple(self.row_text(row) for row in range(self.row_count))


def cursor_position(text: str, offset: int, width: int, *, tab_width: int = 1) -> Position:
    """Caret cell for ``offset`` in ``text`` wrapped at ``width``."""

    return WrapLayout.build(text, width, tab_width=tab_width).position(offset)


__all__ = ["Position", "WrapLayout", "char_span", "cursor_position"]
