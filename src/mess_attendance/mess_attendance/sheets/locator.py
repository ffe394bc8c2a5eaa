"""Locate the student data columns in an attendance sheet.

Total-amount policy: the column is the first cell, scanning the whole grid row
by row, whose trimmed lowercased text *contains* "total amount". The phrase
does not have to sit in the header or sub-header row and does not have to be
the whole cell, so "Total Amount (Rs.)" in a title block above the header is
picked up as well.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.cells import normalize_label
from ..core.constants import ABSENT_LABEL, PRESENT_LABEL, TOTAL_AMOUNT_PHRASE
from ..core.enums import SheetColumn
from ..core.exceptions import HeaderNotFoundError, MissingColumnError
from .factory import HeaderLayoutFactory
from .model import ColumnLayout, Grid


def _first_index(labels: Sequence[str], wanted: Iterable[str]) -> Optional[int]:
    wanted = set(wanted)
    for idx, label in enumerate(labels):
        if label in wanted:
            return idx
    return None


def find_total_amount_column(grid: Grid) -> Optional[int]:
    for row in grid:
        for idx, cell in enumerate(row):
            if TOTAL_AMOUNT_PHRASE in normalize_label(cell):
                return idx
    return None


def locate_columns(grid: Grid, *, factory: Optional[HeaderLayoutFactory] = None) -> ColumnLayout:
    factory = factory or HeaderLayoutFactory()

    header_row = -1
    layout = None
    header_labels: list[str] = []
    for idx, row in enumerate(grid):
        labels = [normalize_label(c) for c in row]
        layout = factory.for_row(labels)
        if layout is not None:
            header_row = idx
            header_labels = labels
            break

    if layout is None:
        raise HeaderNotFoundError(
            "Could not find a header row with 'Student Name'/'Roll No.' or 'Name'/'Enrollment No' columns"
        )

    sub_header = grid[header_row + 1] if header_row + 1 < len(grid) else []
    sub_labels = [normalize_label(c) for c in sub_header]

    resolved = {
        SheetColumn.NAME: _first_index(header_labels, factory.name_labels),
        SheetColumn.ROLL: _first_index(header_labels, factory.roll_labels),
        SheetColumn.PRESENT: _first_index(sub_labels, [PRESENT_LABEL]),
        SheetColumn.ABSENT: _first_index(sub_labels, [ABSENT_LABEL]),
        SheetColumn.TOTAL_AMOUNT: find_total_amount_column(grid),
    }
    for column, index in resolved.items():
        if index is None:
            raise MissingColumnError(column.value)

    return ColumnLayout(
        header_row=header_row,
        kind=layout.kind,
        name=resolved[SheetColumn.NAME],
        roll=resolved[SheetColumn.ROLL],
        present=resolved[SheetColumn.PRESENT],
        absent=resolved[SheetColumn.ABSENT],
        total_amount=resolved[SheetColumn.TOTAL_AMOUNT],
    )
