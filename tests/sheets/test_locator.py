from __future__ import annotations

import pytest

from src.mess_attendance.mess_attendance.core.enums import HeaderLayoutKind
from src.mess_attendance.mess_attendance.core.exceptions import HeaderNotFoundError, MissingColumnError
from src.mess_attendance.mess_attendance.sheets.factory import HeaderLayoutFactory
from src.mess_attendance.mess_attendance.sheets.layouts.current_layout import CurrentLayout
from src.mess_attendance.mess_attendance.sheets.layouts.legacy_layout import LegacyLayout
from src.mess_attendance.mess_attendance.sheets.locator import locate_columns


def test_factory_recognises_both_layouts():
    factory = HeaderLayoutFactory()

    assert isinstance(factory.for_row(["s.no", "student name", "roll no."]), LegacyLayout)
    assert isinstance(factory.for_row(["name", "enrollment no"]), CurrentLayout)
    assert factory.for_row(["student name", "enrollment no"]) is None


def test_current_layout_with_total_in_sub_header(grid):
    layout = locate_columns(grid)

    assert layout.kind == HeaderLayoutKind.CURRENT
    assert layout.header_row == 2
    assert (layout.name, layout.roll, layout.present, layout.absent, layout.total_amount) == (0, 1, 2, 3, 4)
    assert layout.data_start == 4


def test_legacy_layout_with_total_in_header_row_only():
    grid = [
        ["S.No", " Student Name ", "ROLL NO.", "1", "2", "P", "A", "Total amount payable"],
        ["", "", "", "P", "A", "p", "a", ""],
        ["1", "Asha", "r01", "P", "P", "2", "0", "120"],
    ]

    layout = locate_columns(grid)

    assert layout.kind == HeaderLayoutKind.LEGACY
    assert (layout.name, layout.roll) == (1, 2)
    assert (layout.present, layout.absent) == (3, 4)
    assert layout.total_amount == 7


def test_total_amount_found_anywhere_in_sheet():
    grid = [
        ["Total Amount (Rs.)", "", "", ""],
        ["Name", "Enrollment No", "", ""],
        ["", "", "P", "A"],
    ]

    assert locate_columns(grid).total_amount == 0


def test_first_matching_row_is_the_header():
    grid = [
        ["Name", "Enrollment No", "", "", ""],
        ["", "", "P", "A", "Total Amount"],
        ["Student Name", "Roll No.", "", "", ""],
    ]

    assert locate_columns(grid).header_row == 0


def test_no_header_raises():
    grid = [["Roll", "Student"], ["1", "x"]]

    with pytest.raises(HeaderNotFoundError):
        locate_columns(grid)


@pytest.mark.parametrize(
    "sub_header, missing",
    [
        (["", "", "A", "Total Amount"], "present"),
        (["", "", "P", "Total Amount"], "absent"),
        (["", "", "P", "A"], "total-amount"),
    ],
)
def test_missing_column_is_named(sub_header, missing):
    grid = [["Name", "Enrollment No", "", ""], sub_header]

    with pytest.raises(MissingColumnError) as exc:
        locate_columns(grid)

    assert exc.value.column == missing


def test_header_on_last_row_has_no_present_column():
    grid = [["Total Amount"], ["Name", "Enrollment No"]]

    with pytest.raises(MissingColumnError) as exc:
        locate_columns(grid)

    assert exc.value.column == "present"
