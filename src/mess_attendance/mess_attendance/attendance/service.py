from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..common.validators import require_non_empty, require_year
from ..core.constants import MONTH_ORDER
from ..core.exceptions import (
    DatabaseUnavailableError,
    InputMissingError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..sheets.factory import HeaderLayoutFactory
from ..sheets.model import Grid
from ..sheets.parser import parse_grid
from ..sheets.reader import read_grid
from .model import AttendanceRecord, AttendanceSummary, SheetKey, UploadResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    data: bytes


class AttendanceUploadService:
    """Use case: ingest monthly attendance spreadsheets for a mess."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        layout_factory: Optional[HeaderLayoutFactory] = None,
        reader: Callable[[str, bytes], Grid] = read_grid,
    ):
        self._attendance = attendance
        self._factory = layout_factory or HeaderLayoutFactory()
        self._reader = reader

    def ingest_file(self, *, filename: str, data: bytes, mess: str) -> UploadResult:
        mess = require_non_empty(mess, "Mess")
        grid = self._reader(filename, data)
        sheet = parse_grid(grid, factory=self._factory)

        processed = 0
        for row in sheet.rows:
            record = AttendanceRecord(
                roll_no=row.roll_no,
                student_name=row.student_name,
                month=sheet.period.month,
                year=sheet.period.year,
                mess=mess,
                days_present=row.days_present,
                total_amount=row.total_amount,
            )
            try:
                self._attendance.upsert(record)
            except DatabaseUnavailableError:
                raise
            except PersistenceError:
                logger.exception("Error inserting record for roll no %s", row.roll_no)
                continue
            processed += 1

        logger.info(
            "Processed %d/%d records from %s for %s %s (%s, %s layout)",
            processed,
            len(sheet.rows),
            filename,
            sheet.period.month,
            sheet.period.year,
            mess,
            sheet.layout.kind.value,
        )
        return UploadResult(
            filename=filename,
            success=True,
            records_processed=processed,
            month=sheet.period.month,
            year=sheet.period.year,
        )

    def ingest_batch(self, files: Sequence[UploadedFile], *, mess: Optional[str]) -> list[UploadResult]:
        """Process files one at a time; a bad file does not stop the others."""
        if not files:
            raise InputMissingError("No file provided")
        mess = require_non_empty(mess, "Mess")

        results: list[UploadResult] = []
        for f in files:
            try:
                results.append(self.ingest_file(filename=f.filename, data=f.data, mess=mess))
            except ValidationError as e:
                logger.warning("Rejected %s: %s", f.filename, e)
                results.append(UploadResult(filename=f.filename, success=False, error=str(e)))
        return results


class AttendanceQueryService:
    """Use case: look up a student's attendance and payment totals."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def query(
        self,
        *,
        roll_no: Optional[str] = None,
        year: Optional[int] = None,
        mess: Optional[str] = None,
    ) -> AttendanceSummary:
        roll_no = roll_no.strip().upper() if roll_no and roll_no.strip() else None
        mess = mess.strip() if mess and mess.strip() else None
        if roll_no is None and year is None:
            raise InputMissingError("Roll number or year is required")

        records = list(self._attendance.find(roll_no=roll_no, year=year, mess=mess))
        if not records:
            if roll_no:
                raise NotFoundError("No records found for this roll number")
            raise NotFoundError("No records found for the given filters")

        return AttendanceSummary(
            roll_no=roll_no,
            student_name=records[0].student_name,
            total_days_present=sum(int(r.days_present) for r in records),
            total_amount=sum(float(r.total_amount) for r in records),
            records=records,
        )


class SheetService:
    """Use case: list and remove uploaded monthly sheets."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_sheets(self) -> list[SheetKey]:
        sheets = self._attendance.list_sheets()
        return sorted(sheets, key=lambda s: (s.mess, -s.year, MONTH_ORDER.get(s.month, 0)))

    def delete_sheet(self, *, month: Optional[str], year, mess: Optional[str]) -> int:
        month = require_non_empty(month, "Month")
        year = require_year(year)
        mess = require_non_empty(mess, "Mess")

        deleted = self._attendance.delete_sheet(month=month, year=year, mess=mess)
        if deleted == 0:
            raise NotFoundError(f"No records found for {month} {year} ({mess}).")

        logger.info("Deleted %d records for %s %s (%s)", deleted, month, year, mess)
        return deleted
