from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, SheetKey
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(roll_no, student_name, month, year, mess, days_present, total_amount)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    student_name=VALUES(student_name),
                    days_present=VALUES(days_present),
                    total_amount=VALUES(total_amount)
                """,
                (
                    record.roll_no,
                    record.student_name,
                    record.month,
                    int(record.year),
                    record.mess,
                    int(record.days_present),
                    record.total_amount,
                ),
            )

    def find(
        self,
        *,
        roll_no: Optional[str] = None,
        year: Optional[int] = None,
        mess: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if roll_no is not None:
            clauses.append("roll_no=%s")
            params.append(roll_no)
        if year is not None:
            clauses.append("year=%s")
            params.append(int(year))
        if mess is not None:
            clauses.append("mess=%s")
            params.append(mess)

        where = " AND ".join(clauses) if clauses else "1=1"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, roll_no, student_name, month, year, mess, days_present, total_amount, created_at
                FROM attendance
                WHERE {where}
                ORDER BY year DESC, month DESC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    record_id=int(r["id"]),
                    roll_no=r["roll_no"],
                    student_name=r["student_name"],
                    month=r["month"],
                    year=int(r["year"]),
                    mess=r["mess"],
                    days_present=int(r["days_present"]),
                    total_amount=float(r["total_amount"]),
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]

    def list_sheets(self) -> Sequence[SheetKey]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT month, year, mess
                FROM attendance
                ORDER BY year DESC, month ASC
                """
            )
            return [
                SheetKey(month=r["month"], year=int(r["year"]), mess=r["mess"])
                for r in fetchall(cur)
            ]

    def delete_sheet(self, *, month: str, year: int, mess: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance WHERE month=%s AND year=%s AND mess=%s",
                (month, int(year), mess),
            )
            return int(cur.rowcount)
