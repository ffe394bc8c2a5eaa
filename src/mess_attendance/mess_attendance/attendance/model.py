from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's attendance for one month of one mess."""

    roll_no: str
    student_name: str
    month: str
    year: int
    mess: str
    days_present: int
    total_amount: float
    record_id: Optional[int] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "roll_no": self.roll_no,
            "student_name": self.student_name,
            "month": self.month,
            "year": self.year,
            "mess": self.mess,
            "days_present": self.days_present,
            "total_amount": self.total_amount,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class SheetKey:
    """A distinct uploaded sheet: (month, year, mess)."""

    month: str
    year: int
    mess: str

    def to_dict(self) -> dict:
        return {"month": self.month, "year": self.year, "mess": self.mess}


@dataclass(frozen=True)
class AttendanceSummary:
    roll_no: Optional[str]
    student_name: str
    total_days_present: int
    total_amount: float
    records: list[AttendanceRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "roll_no": self.roll_no,
            "student_name": self.student_name,
            "total_days_present": self.total_days_present,
            "total_amount": self.total_amount,
            "months_data": [r.to_dict() for r in self.records],
        }


@dataclass(frozen=True)
class UploadResult:
    """Per-file outcome of an upload batch."""

    filename: str
    success: bool
    records_processed: int = 0
    month: Optional[str] = None
    year: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        if not self.success:
            return {"file": self.filename, "success": False, "error": self.error}
        return {
            "file": self.filename,
            "success": True,
            "recordsProcessed": self.records_processed,
            "month": self.month,
            "year": self.year,
        }
