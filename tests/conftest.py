from __future__ import annotations

import io
from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest
from openpyxl import Workbook

from src.mess_attendance.mess_attendance.attendance.model import AttendanceRecord, SheetKey
from src.mess_attendance.mess_attendance.core.exceptions import DatabaseUnavailableError, PersistenceError


class InMemoryAttendance:
    """Mirrors the MySQL repository: unique (roll_no, month, year, mess), upsert keeps created_at."""

    def __init__(self, *, fail_rolls=(), down=False):
        self._rows: dict[tuple[str, str, int, str], AttendanceRecord] = {}
        self._next_id = 1
        self.fail_rolls = set(fail_rolls)
        self.down = down
        self.now = datetime(2026, 1, 1, 9, 0, 0)

    def upsert(self, record: AttendanceRecord) -> None:
        if self.down:
            raise DatabaseUnavailableError("Database unavailable: connection refused")
        if record.roll_no in self.fail_rolls:
            raise PersistenceError(f"Duplicate entry for {record.roll_no}")

        key = (record.roll_no, record.month, record.year, record.mess)
        existing = self._rows.get(key)
        if existing:
            self._rows[key] = replace(
                existing,
                student_name=record.student_name,
                days_present=record.days_present,
                total_amount=record.total_amount,
            )
            return

        self._rows[key] = replace(record, record_id=self._next_id, created_at=self.now)
        self._next_id += 1

    def find(self, *, roll_no: Optional[str] = None, year: Optional[int] = None, mess: Optional[str] = None):
        rows = [
            r
            for r in self._rows.values()
            if (roll_no is None or r.roll_no == roll_no)
            and (year is None or r.year == year)
            and (mess is None or r.mess == mess)
        ]
        rows.sort(key=lambda r: (r.year, r.month), reverse=True)
        return rows

    def list_sheets(self):
        keys = {SheetKey(month=r.month, year=r.year, mess=r.mess) for r in self._rows.values()}
        return sorted(keys, key=lambda k: (-k.year, k.month))

    def delete_sheet(self, *, month: str, year: int, mess: str) -> int:
        doomed = [k for k, r in self._rows.items() if (r.month, r.year, r.mess) == (month, year, mess)]
        for k in doomed:
            del self._rows[k]
        return len(doomed)

    def all(self) -> list[AttendanceRecord]:
        return list(self._rows.values())


def example_grid(*, month: str = "March", year: str = "2025", present: str = "20", amount: str = "2500") -> list[list[str]]:
    return [
        ["Mess Attendance Register", "", "", "", ""],
        ["Month", month, "", "Year", year],
        ["Name", "Enrollment No", "", "", ""],
        ["", "", "P", "A", "Total Amount"],
        ["jane doe", "lit2024042", present, "", amount],
        ["  john smith ", " Lit2024007 ", "18", "2", "2250.50"],
        ["", "", "", "", ""],
        ["Total", "", "38", "", "4750.5"],
    ]


def xlsx_bytes(rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append([None if cell == "" else cell for cell in row])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def grid():
    return example_grid()


@pytest.fixture
def make_grid():
    return example_grid


@pytest.fixture
def make_xlsx():
    return xlsx_bytes


@pytest.fixture
def repo_factory():
    return InMemoryAttendance
