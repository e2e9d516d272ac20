"""Delimited-text parsing into a `DataGrid`.

Handles the two shapes models tend to produce for tabular answers: CSV-like
lines and Markdown tables. Conversational preambles, code fences and
Markdown separator rows are discarded. Parsing is pure and never raises.
"""

from collections.abc import Iterable
import logging

from gemini_office.constants import DEFAULT_PREAMBLE_TOKENS
from gemini_office.core.types import DataGrid

from .text import drop_code_fences, drop_preamble, non_blank_lines

log = logging.getLogger(__name__)

PIPE = "|"
COMMA = ","


def is_separator_row(line: str) -> bool:
    """True for Markdown table separator rows such as ``|---|:---:|``."""
    stripped = line.strip()
    return bool(stripped) and not any(ch.isalnum() for ch in stripped)


def split_pipe_row(line: str) -> list[str]:
    """Split a Markdown table row, dropping the edge fields of outer pipes."""
    stripped = line.strip()
    cells = stripped.split(PIPE)
    if stripped.startswith(PIPE) and cells and not cells[0].strip():
        cells = cells[1:]
    if stripped.endswith(PIPE) and cells and not cells[-1].strip():
        cells = cells[:-1]
    return [cell.strip() for cell in cells]


def split_comma_row(line: str) -> list[str]:
    """Split one CSV-like line on every comma; quotes are ordinary characters."""
    return [cell.strip() for cell in line.split(COMMA)]


class TabularParser:
    """Turn a delimited-text response into rows of cells.

    The column count of the first row is authoritative for the grid; rows of
    a different length are preserved unpadded.
    """

    def __init__(self, preamble_tokens: Iterable[str] = DEFAULT_PREAMBLE_TOKENS) -> None:
        self.preamble_tokens = tuple(preamble_tokens)

    def parse(self, text: str) -> DataGrid:
        """Parse text into a `DataGrid`; an empty grid means nothing to write."""
        lines = drop_preamble(non_blank_lines(text), self.preamble_tokens)
        lines = drop_code_fences(lines)
        if not lines:
            return DataGrid()

        if any(PIPE in line for line in lines):
            rows = [split_pipe_row(line) for line in lines if not is_separator_row(line)]
            delimiter = PIPE
        else:
            rows = [split_comma_row(line) for line in lines]
            delimiter = COMMA

        grid = DataGrid.from_rows(row for row in rows if row)
        log.debug(
            "Parsed %d row(s) x %d column(s) using %r delimiter",
            grid.row_count,
            grid.column_count,
            delimiter,
        )
        return grid
