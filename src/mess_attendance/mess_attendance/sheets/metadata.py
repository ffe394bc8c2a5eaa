from __future__ import annotations

from typing import Optional, Sequence

from ..common.cells import normalize_label, parse_int
from ..common.datetime_utils import current_year
from ..core.constants import DEFAULT_MONTH, METADATA_SCAN_ROWS, MONTH_LABELS, YEAR_LABELS
from .model import Grid, SheetPeriod


def _month_right_of(row: Sequence[str], col: int) -> Optional[str]:
    for cell in row[col + 1:]:
        text = cell.strip()
        if text:
            return text
    return None


def _year_right_of(row: Sequence[str], col: int) -> Optional[int]:
    for cell in row[col + 1:]:
        value = parse_int(cell)
        if value is not None:
            return value
    return None


def extract_period(grid: Grid, *, default_year: Optional[int] = None) -> SheetPeriod:
    """Find the "Month" and "Year" labels in the top of the sheet.

    Only the first 100 rows are scanned. The first value found for each label
    wins. The month is taken verbatim, so any text next to the label is
    accepted.
    """
    month: Optional[str] = None
    year: Optional[int] = None

    for row in grid[:METADATA_SCAN_ROWS]:
        for col, cell in enumerate(row):
            label = normalize_label(cell)
            if month is None and label in MONTH_LABELS:
                month = _month_right_of(row, col)
            elif year is None and label in YEAR_LABELS:
                year = _year_right_of(row, col)

            if month is not None and year is not None:
                return SheetPeriod(month=month, year=year)

    return SheetPeriod(
        month=month if month is not None else DEFAULT_MONTH,
        year=year if year is not None else (default_year or current_year()),
    )
