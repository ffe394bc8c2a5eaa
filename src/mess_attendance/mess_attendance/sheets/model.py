from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.enums import HeaderLayoutKind

Grid = List[List[str]]


@dataclass(frozen=True)
class SheetPeriod:
    """Month label and year a sheet belongs to."""

    month: str
    year: int


@dataclass(frozen=True)
class ColumnLayout:
    """Resolved column indices for the student data block."""

    header_row: int
    kind: HeaderLayoutKind
    name: int
    roll: int
    present: int
    absent: int
    total_amount: int

    @property
    def data_start(self) -> int:
        # Skip the header and the sub-header rows.
        return self.header_row + 2

    @property
    def highest_required(self) -> int:
        return max(self.name, self.roll, self.present, self.total_amount)


@dataclass(frozen=True)
class ParsedRow:
    roll_no: str
    student_name: str
    days_present: int
    total_amount: float


@dataclass(frozen=True)
class ParsedSheet:
    period: SheetPeriod
    layout: ColumnLayout
    rows: list[ParsedRow] = field(default_factory=list)
