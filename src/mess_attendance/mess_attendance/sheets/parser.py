from __future__ import annotations

from typing import Optional

from .factory import HeaderLayoutFactory
from .locator import locate_columns
from .metadata import extract_period
from .model import Grid, ParsedSheet
from .rows import iter_student_rows


def parse_grid(
    grid: Grid,
    *,
    factory: Optional[HeaderLayoutFactory] = None,
    default_year: Optional[int] = None,
) -> ParsedSheet:
    """Turn a sheet grid into its period and normalized student rows.

    Pure function: nothing here touches storage, so a sheet without a
    recognisable header fails before any row is written.
    """
    period = extract_period(grid, default_year=default_year)
    layout = locate_columns(grid, factory=factory)
    rows = list(iter_student_rows(grid, layout))
    return ParsedSheet(period=period, layout=layout, rows=rows)
