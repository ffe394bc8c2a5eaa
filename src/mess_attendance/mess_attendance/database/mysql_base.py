from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List

import mysql.connector

from ..core.exceptions import DatabaseUnavailableError, PersistenceError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` on a short-lived connection.

    Commits on success, rolls back on error. Driver errors surface as
    :class:`PersistenceError`; a failed connect raises
    :class:`DatabaseUnavailableError` so callers can tell an outage apart from
    a rejected statement.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise DatabaseUnavailableError(f"Database unavailable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise PersistenceError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
