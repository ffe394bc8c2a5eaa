from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, SheetKey


class AttendanceRepository(Protocol):
    def upsert(self, record: AttendanceRecord) -> None:
        """Insert, or overwrite name/days/amount of the row with the same
        (roll_no, month, year, mess). ``created_at`` is kept from the first insert.
        """

        raise NotImplementedError

    def find(
        self,
        *,
        roll_no: Optional[str] = None,
        year: Optional[int] = None,
        mess: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Matching rows ordered by year DESC, then month text DESC."""

        raise NotImplementedError

    def list_sheets(self) -> Sequence[SheetKey]:
        raise NotImplementedError

    def delete_sheet(self, *, month: str, year: int, mess: str) -> int:
        raise NotImplementedError
