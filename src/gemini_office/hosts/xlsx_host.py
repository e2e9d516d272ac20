"""Spreadsheet host backed by an ``.xlsx`` workbook (openpyxl)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from openpyxl import Workbook, load_workbook
from openpyxl.chart import BarChart, LineChart, PieChart, Reference
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from gemini_office.constants import MAX_COLUMN_WIDTH, MIN_COLUMN_PADDING
from gemini_office.core.types import ChartKind, DataGrid, HostKind, TextFormat
from gemini_office.exceptions import HostWriteError

from .addressing import bounds, is_single_cell, range_shape, top_left

log = logging.getLogger(__name__)

DEFAULT_CELL = "A1"


def coerce_cell_value(value: str) -> Any:
    """Store numeric-looking strings as numbers; everything else unchanged."""
    text = value.strip()
    # Keeps "nan", "inf" and similar words as text.
    if not any(ch.isdigit() for ch in text):
        return value
    # Digit separators and zero-padded codes would be silently rewritten.
    unsigned = text.lstrip("+-")
    zero_padded = len(unsigned) > 1 and unsigned[0] == "0" and unsigned[1].isdigit()
    if "_" in text or zero_padded:
        return value
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def _new_chart(kind: ChartKind) -> BarChart | LineChart | PieChart:
    if kind is ChartKind.LINE:
        return LineChart()
    if kind is ChartKind.PIE:
        return PieChart()
    chart = BarChart()
    chart.type = "bar" if kind is ChartKind.BAR else "col"
    return chart


class XlsxHost:
    """Writes into the active worksheet of a workbook.

    The selection comes from the sheet view saved in the file unless an
    explicit range is given.
    """

    def __init__(
        self,
        workbook: Workbook,
        path: Path | None = None,
        *,
        selection: str | None = None,
    ) -> None:
        self.workbook = workbook
        self.path = path
        self._selection = selection

    @classmethod
    def open(cls, path: str | Path, *, selection: str | None = None) -> XlsxHost:
        """Load an existing workbook, or start an empty one if it is missing."""
        path = Path(path)
        workbook = load_workbook(str(path)) if path.exists() else Workbook()
        return cls(workbook, path, selection=selection)

    @property
    def kind(self) -> HostKind:
        return HostKind.SPREADSHEET

    @property
    def sheet(self) -> Worksheet:
        return self.workbook.active

    @property
    def selection(self) -> str:
        if self._selection:
            return self._selection
        views = self.sheet.sheet_view.selection
        sqref = views[0].sqref if views else None
        # Multi-area selections keep only their first area.
        return sqref.split()[0] if sqref else DEFAULT_CELL

    @property
    def active_cell(self) -> str:
        if self._selection:
            return top_left(self._selection)
        views = self.sheet.sheet_view.selection
        active = views[0].activeCell if views else None
        return active or top_left(self.selection)

    async def insert_text(self, text: str, fmt: TextFormat) -> None:
        self.sheet[self.active_cell] = text

    async def insert_formula(self, formula: str, target_cell: str) -> None:
        if not formula.startswith("="):
            raise HostWriteError(f"Not a formula: {formula!r}")
        self.sheet[target_cell] = formula

    async def insert_grid(self, grid: DataGrid, target_range: str) -> None:
        min_col, min_row, _, _ = bounds(target_range)
        for r, row in enumerate(grid.rows):
            for c, value in enumerate(row):
                self.sheet.cell(
                    row=min_row + r, column=min_col + c, value=coerce_cell_value(value)
                )

    async def autofit_columns(self, target_range: str) -> None:
        min_col, min_row, max_col, max_row = bounds(target_range)
        for column in range(min_col, max_col + 1):
            lengths = [
                len(str(cell.value))
                for (cell,) in self.sheet.iter_rows(
                    min_row=min_row, max_row=max_row, min_col=column, max_col=column
                )
                if cell.value is not None
            ]
            if not lengths:
                continue
            width = min(max(lengths) + MIN_COLUMN_PADDING, MAX_COLUMN_WIDTH)
            self.sheet.column_dimensions[get_column_letter(column)].width = width

    async def insert_chart(self, kind: ChartKind, data_range: str, title: str) -> None:
        if is_single_cell(data_range):
            raise HostWriteError(
                f"Select a data range before creating a chart (got {data_range})"
            )
        min_col, min_row, max_col, max_row = bounds(data_range)
        rows, cols = range_shape(data_range)
        data_col = min_col + 1 if cols > 1 else min_col
        has_header = rows > 1 and isinstance(
            self.sheet.cell(row=min_row, column=data_col).value, str
        )
        first_row = min_row + 1 if has_header else min_row

        chart = _new_chart(kind)
        chart.title = title
        chart.add_data(
            Reference(
                self.sheet,
                min_col=data_col,
                min_row=min_row,
                max_col=max_col,
                max_row=max_row,
            ),
            titles_from_data=has_header,
        )
        if cols > 1:
            chart.set_categories(
                Reference(
                    self.sheet,
                    min_col=min_col,
                    min_row=first_row,
                    max_col=min_col,
                    max_row=max_row,
                )
            )
        anchor = f"{get_column_letter(max_col + 2)}{min_row}"
        self.sheet.add_chart(chart, anchor)
        log.debug("Added %s chart over %s at %s", kind.value, data_range, anchor)

    async def read_context(self, max_chars: int) -> str:
        min_col, min_row, max_col, max_row = bounds(self.selection)
        lines = [
            ",".join("" if v is None else str(v) for v in row)
            for row in self.sheet.iter_rows(
                min_row=min_row,
                max_row=max_row,
                min_col=min_col,
                max_col=max_col,
                values_only=True,
            )
        ]
        return "\n".join(lines)[:max_chars]

    def save(self, path: str | Path | None = None) -> Path:
        target = Path(path) if path is not None else self.path
        if target is None:
            raise HostWriteError("No path to save the workbook to")
        self.workbook.save(str(target))
        log.debug("Saved workbook to %s", target)
        return target
