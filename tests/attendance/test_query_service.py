from __future__ import annotations

import pytest

from src.mess_attendance.mess_attendance.attendance.model import AttendanceRecord
from src.mess_attendance.mess_attendance.attendance.service import AttendanceQueryService
from src.mess_attendance.mess_attendance.core.exceptions import InputMissingError, NotFoundError


def _record(roll_no, month, year, mess, days, amount, name="JANE DOE"):
    return AttendanceRecord(
        roll_no=roll_no,
        student_name=name,
        month=month,
        year=year,
        mess=mess,
        days_present=days,
        total_amount=amount,
    )


@pytest.fixture
def seeded_repo(attendance_repo):
    for rec in [
        _record("LIT2024042", "March", 2025, "North", 20, 2500.0),
        _record("LIT2024042", "April", 2025, "North", 22, 2750.0),
        _record("LIT2024042", "December", 2024, "South", 15, 1800.5),
        _record("LIT2024007", "March", 2025, "North", 18, 2250.0, name="JOHN SMITH"),
    ]:
        attendance_repo.upsert(rec)
    return attendance_repo


def test_query_by_roll_sums_every_month_and_mess(seeded_repo):
    summary = AttendanceQueryService(seeded_repo).query(roll_no="  lit2024042 ")

    assert summary.roll_no == "LIT2024042"
    assert summary.student_name == "JANE DOE"
    assert len(summary.records) == 3
    assert summary.total_days_present == 57
    assert summary.total_amount == pytest.approx(7050.5)


def test_records_ordered_by_year_desc_then_month_text_desc(seeded_repo):
    summary = AttendanceQueryService(seeded_repo).query(roll_no="LIT2024042")

    assert [(r.year, r.month) for r in summary.records] == [
        (2025, "March"),
        (2025, "April"),
        (2024, "December"),
    ]


def test_query_filters_by_year_and_mess(seeded_repo):
    svc = AttendanceQueryService(seeded_repo)

    assert len(svc.query(year=2025).records) == 3
    assert len(svc.query(roll_no="LIT2024042", mess="South").records) == 1
    assert svc.query(year=2025, mess="North").total_days_present == 60


def test_query_requires_roll_or_year(seeded_repo):
    with pytest.raises(InputMissingError):
        AttendanceQueryService(seeded_repo).query(mess="North")


def test_query_without_matches_raises(seeded_repo):
    with pytest.raises(NotFoundError):
        AttendanceQueryService(seeded_repo).query(roll_no="NOPE")


def test_summary_serialises_months_data(seeded_repo):
    body = AttendanceQueryService(seeded_repo).query(roll_no="LIT2024007").to_dict()

    assert body["total_days_present"] == 18
    assert body["months_data"][0]["mess"] == "North"
    assert body["months_data"][0]["created_at"] is not None
