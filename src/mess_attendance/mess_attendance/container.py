from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceQueryService, AttendanceUploadService, SheetService
from .database.connection import DBConfig, DatabaseConnection
from .sheets.factory import HeaderLayoutFactory
from .users.service import OperatorAuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    auth_service: OperatorAuthService
    upload_service: AttendanceUploadService
    query_service: AttendanceQueryService
    sheet_service: SheetService


def build_container(
    *,
    db_config: Optional[dict] = None,
    auth_username: Optional[str] = None,
    auth_password: Optional[str] = None,
    attendance_repo: Optional[AttendanceRepository] = None,
) -> Container:
    """Wire repositories and services.

    Pass ``attendance_repo`` to run the services over another store (tests use
    an in-memory one); otherwise ``db_config`` selects the MySQL database.
    """
    conn = None
    if attendance_repo is None:
        if db_config is None:
            raise ValueError("db_config is required when no attendance_repo is given")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        attendance_repo = MySQLAttendanceRepository(conn)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        auth_service=OperatorAuthService(auth_username, auth_password),
        upload_service=AttendanceUploadService(attendance_repo, layout_factory=HeaderLayoutFactory()),
        query_service=AttendanceQueryService(attendance_repo),
        sheet_service=SheetService(attendance_repo),
    )
