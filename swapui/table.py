"""Row-major grid table whose cells may span several logical columns."""
from __future__ import annotations

import logging
import re

from .html import classes

logger = logging.getLogger(__name__)

_COLSPAN = re.compile(r"""colspan=['"]?(\d*)""")


def parse_colspan(attrs: str) -> int:
    """Return the span declared by the first ``colspan=`` in a raw attribute string.

    Missing, unparsable or zero spans count as 1.
    """

    if not attrs:
        return 1
    match = _COLSPAN.search(attrs)
    if match is None or not match.group(1):
        return 1
    span = int(match.group(1))
    return span if span > 0 else 1


class SimpleTable:
    """Cells are added left to right; rows wrap after ``cols`` logical columns.

    ``attr()`` decorates the most recent cell, and a row whose spans fill the
    width is sealed so the next ``field()`` starts a new row. Short rows are
    padded with empty cells when rendered.
    """

    def __init__(self, cols: int, css: str = "") -> None:
        self.cols = cols
        self.css = css
        self.rows: list[list[str]] = []
        self.col_classes: list[str] = [""] * max(cols, 0)
        self.cell_attrs: list[list[str]] = []
        self.sealed: list[bool] = []

    def column_class(self, col: int, *values: str) -> SimpleTable:
        """Style every cell of column ``col``, including ones already added."""

        if 0 <= col < self.cols:
            self.col_classes[col] = classes(*values)
        else:
            logger.debug("ignoring class for column %d of a %d-column table", col, self.cols)
        return self

    def field(self, value: str, *values: str) -> SimpleTable:
        if not self.rows or self._row_full():
            self.rows.append([])
            self.cell_attrs.append([])
            self.sealed.append(False)
        css = classes(*values)
        if css:
            value = '<div class="' + css + '">' + value + "</div>"
        self.rows[-1].append(value)
        self.cell_attrs[-1].append("")
        return self

    def empty(self) -> SimpleTable:
        return self.field("")

    def attr(self, attrs: str) -> SimpleTable:
        """Append raw attributes (e.g. ``colspan="2"``) to the last cell."""

        if not self.cell_attrs or not self.cell_attrs[-1]:
            logger.debug("attr(%r) called before any cell was added", attrs)
            return self
        row = self.cell_attrs[-1]
        row[-1] = attrs if not row[-1] else row[-1] + " " + attrs
        if self._span(row) >= self.cols:
            self.sealed[-1] = True
        return self

    def _row_full(self) -> bool:
        if self.sealed[-1] or len(self.rows[-1]) >= self.cols:
            return True
        return self._span(self.cell_attrs[-1]) >= self.cols

    @staticmethod
    def _span(row_attrs: list[str]) -> int:
        return sum(parse_colspan(attrs) for attrs in row_attrs)

    def _column_css(self, index: int) -> str:
        if index < len(self.col_classes) and self.col_classes[index]:
            return ' class="' + self.col_classes[index] + '"'
        return ""

    def _render_row(self, row: list[str], row_attrs: list[str]) -> str:
        cells: list[str] = []
        for index, value in enumerate(row):
            attrs = row_attrs[index] if index < len(row_attrs) else ""
            extra = " " + attrs if attrs else ""
            cells.append("<td" + self._column_css(index) + extra + ' role="cell">' + value + "</td>")
        for index in range(self._span(row_attrs), self.cols):
            cells.append("<td" + self._column_css(index) + ' role="cell"></td>')
        return '<tr role="row">' + "".join(cells) + "</tr>"

    def render(self) -> str:
        body = "".join(
            self._render_row(row, row_attrs) for row, row_attrs in zip(self.rows, self.cell_attrs)
        )
        return (
            '<table class="'
            + classes("table-auto", self.css)
            + '" role="table" aria-label="Data table" aria-rowcount="'
            + str(len(self.rows))
            + '" aria-colcount="'
            + str(self.cols)
            + '"><tbody>'
            + body
            + "</tbody></table>"
        )


__all__ = ["SimpleTable", "parse_colspan"]
