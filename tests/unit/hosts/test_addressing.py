import pytest

from gemini_office.exceptions import HostWriteError
from gemini_office.hosts.addressing import (
    bounds,
    is_single_cell,
    range_shape,
    resize_range,
    top_left,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("ref", "expected"),
    [("B2:D5", "B2"), ("C7", "C7"), ("$A$1:$B$2", "A1"), ("AA10:AB12", "AA10")],
)
def test_top_left(ref, expected):
    assert top_left(ref) == expected


@pytest.mark.parametrize(
    ("anchor", "rows", "cols", "expected"),
    [
        ("B2:C3", 3, 4, "B2:E4"),
        ("A1", 1, 1, "A1:A1"),
        ("Z5", 2, 3, "Z5:AB6"),
    ],
)
def test_resize_range(anchor, rows, cols, expected):
    assert resize_range(anchor, rows, cols) == expected


@pytest.mark.parametrize(("rows", "cols"), [(0, 1), (1, 0)])
def test_resize_range_rejects_empty_shapes(rows, cols):
    with pytest.raises(HostWriteError):
        resize_range("A1", rows, cols)


def test_range_shape_and_single_cell():
    assert range_shape("B2:D6") == (5, 3)
    assert is_single_cell("C3")
    assert not is_single_cell("C3:C4")


def test_bounds():
    assert bounds("B2:D6") == (2, 2, 4, 6)


@pytest.mark.parametrize("ref", ["not a range", "", "A:A", "1:3"])
def test_unsupported_references_raise_host_write_error(ref):
    with pytest.raises(HostWriteError):
        bounds(ref)
