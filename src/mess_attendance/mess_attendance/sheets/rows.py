from __future__ import annotations

from typing import Iterator

from ..common.cells import parse_amount, parse_int
from .model import ColumnLayout, Grid, ParsedRow


def iter_student_rows(grid: Grid, layout: ColumnLayout) -> Iterator[ParsedRow]:
    """Yield one normalized row per student below the sub-header.

    Truncated rows and rows without a name or roll number (blank lines,
    summary lines) are skipped. Unparseable counts and amounts become 0.
    """
    for row in grid[layout.data_start:]:
        if len(row) <= layout.highest_required:
            continue

        name = row[layout.name].strip()
        roll_no = row[layout.roll].strip()
        if not name or not roll_no:
            continue

        days_present = parse_int(row[layout.present])
        total_amount = parse_amount(row[layout.total_amount])

        yield ParsedRow(
            roll_no=roll_no.upper(),
            student_name=name.upper(),
            days_present=days_present if days_present is not None else 0,
            total_amount=total_amount if total_amount is not None else 0.0,
        )
