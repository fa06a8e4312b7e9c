from __future__ import annotations

from datetime import date

import pytest
from mysql.connector import errors as mysql_errors

from src.internship_portal.internship_portal.attendance.model import MeetingEntry
from src.internship_portal.internship_portal.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.internship_portal.internship_portal.core.enums import AttendanceStatus
from src.internship_portal.internship_portal.core.exceptions import ConflictError, ValidationError
from src.internship_portal.internship_portal.interns.mysql_intern_repository import MySQLInternRepository
from tests.fakes import make_application


class RecordingCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = 42
        self.rowcount = 1

    def execute(self, sql, params=None):
        self._conn.statements.append((" ".join(sql.split()), params))
        if self._conn.fail_on and self._conn.fail_on in sql:
            raise mysql_errors.IntegrityError("Duplicate entry for key", errno=1062)

    def executemany(self, sql, rows):
        for params in rows:
            self.execute(sql, params)

    def close(self):
        pass


class RecordingConnection:
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.statements = []
        self.commits = 0
        self.rollbacks = 0
        self.connects = 0

    def connect(self, **kwargs):
        self.connects += 1
        return self

    def cursor(self, dictionary=True):
        return RecordingCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


def test_intern_insert_and_unique_id_share_one_transaction():
    conn = RecordingConnection()

    assert MySQLInternRepository(conn).create(make_application()) == 42

    assert conn.connects == 1
    assert conn.commits == 1
    assert [sql.split()[0] for sql, _ in conn.statements] == ["INSERT", "UPDATE"]
    assert conn.statements[1][1] == ("INT000042", 42)


def test_duplicate_intern_insert_is_a_validation_error():
    conn = RecordingConnection(fail_on="INSERT INTO interns")

    with pytest.raises(ValidationError, match="already exists"):
        MySQLInternRepository(conn).create(make_application())
    assert (conn.commits, conn.rollbacks) == (0, 1)


def test_duplicate_attendance_row_is_a_conflict():
    conn = RecordingConnection(fail_on="INSERT INTO attendance_records")
    entries = [MeetingEntry(intern_id=1, status=AttendanceStatus.PRESENT, remarks="")]

    with pytest.raises(ConflictError, match="2026-01-19"):
        MySQLAttendanceRepository(conn).create_meeting(meeting_date=date(2026, 1, 19), entries=entries)
    assert (conn.commits, conn.rollbacks) == (0, 1)
