"""A1 range arithmetic for spreadsheet hosts."""

from openpyxl.utils import get_column_letter, range_boundaries

from gemini_office.exceptions import HostWriteError


def bounds(ref: str) -> tuple[int, int, int, int]:
    """Return (min_col, min_row, max_col, max_row) for a cell or range."""
    try:
        min_col, min_row, max_col, max_row = range_boundaries(ref.replace("$", ""))
    except (TypeError, ValueError) as e:
        raise HostWriteError(f"Invalid range reference: {ref!r}") from e
    if None in (min_col, min_row, max_col, max_row):
        raise HostWriteError(f"Whole row/column references are not supported: {ref!r}")
    return min_col, min_row, max_col, max_row


def top_left(ref: str) -> str:
    """First cell of a range, e.g. ``"B2:D5"`` -> ``"B2"``."""
    min_col, min_row, _, _ = bounds(ref)
    return f"{get_column_letter(min_col)}{min_row}"


def resize_range(anchor: str, rows: int, cols: int) -> str:
    """Range of exactly ``rows x cols`` cells starting at the anchor's top-left.

    Example:
        resize_range("B2:C3", 3, 4)  # "B2:E4"
    """
    if rows < 1 or cols < 1:
        raise HostWriteError(f"Cannot size a range to {rows}x{cols}")
    min_col, min_row, _, _ = bounds(anchor)
    end_col = get_column_letter(min_col + cols - 1)
    return f"{get_column_letter(min_col)}{min_row}:{end_col}{min_row + rows - 1}"


def range_shape(ref: str) -> tuple[int, int]:
    """Return (rows, cols) covered by a cell or range reference."""
    min_col, min_row, max_col, max_row = bounds(ref)
    return max_row - min_row + 1, max_col - min_col + 1


def is_single_cell(ref: str) -> bool:
    return range_shape(ref) == (1, 1)
