from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause
from .model import AttendanceRecord, MeetingEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_records(
        self,
        *,
        intern_ids: Sequence[int],
        meeting_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        if not intern_ids:
            return []

        clauses = [f"intern_id IN ({in_clause(intern_ids)})"]
        params: list[Any] = [int(i) for i in intern_ids]
        if meeting_date is not None:
            clauses.append("meeting_date=%s")
            params.append(meeting_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, intern_id, meeting_date, status, remarks
                FROM attendance_records
                WHERE {" AND ".join(clauses)}
                ORDER BY meeting_date, attendance_id
                """,
                tuple(params),
            )
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    intern_id=int(r["intern_id"]),
                    meeting_date=r["meeting_date"],
                    status=AttendanceStatus(r["status"]),
                    remarks=r.get("remarks"),
                )
                for r in fetchall(cur)
            ]

    def interns_with_record_on(self, *, intern_ids: Sequence[int], meeting_date: date) -> set[int]:
        if not intern_ids:
            return set()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT intern_id
                FROM attendance_records
                WHERE meeting_date=%s AND intern_id IN ({in_clause(intern_ids)})
                """,
                tuple([meeting_date] + [int(i) for i in intern_ids]),
            )
            return {int(r["intern_id"]) for r in fetchall(cur)}

    def create_meeting(self, *, meeting_date: date, entries: Sequence[MeetingEntry]) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.executemany(
                    """
                    INSERT INTO attendance_records(intern_id, meeting_date, status, remarks)
                    VALUES(%s,%s,%s,%s)
                    """,
                    [(int(e.intern_id), meeting_date, e.status.value, e.remarks or None) for e in entries],
                )
                return len(entries)
        except mysql_errors.IntegrityError:
            raise ConflictError(f"Attendance already recorded on {meeting_date.isoformat()} for one of these interns")

    def list_meeting_rows(self, *, domains: Optional[Sequence[str]] = None) -> Sequence[dict]:
        clauses = ["1=1"]
        params: list[Any] = []
        if domains is not None:
            if not domains:
                return []
            clauses.append(f"i.domain IN ({in_clause(domains)})")
            params.extend(domains)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT i.domain, a.meeting_date, a.status
                FROM attendance_records a
                JOIN interns i ON i.intern_id = a.intern_id
                WHERE {" AND ".join(clauses)}
                """,
                tuple(params),
            )
            return [
                {
                    "domain": r["domain"],
                    "meeting_date": r["meeting_date"],
                    "status": AttendanceStatus(r["status"]),
                }
                for r in fetchall(cur)
            ]

    def list_meeting_details(self, *, department: str, meeting_date: date) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT i.intern_id, i.unique_id, i.full_name, i.email, i.mobile, i.gender, i.status,
                       a.status AS attendance_status, a.remarks, a.meeting_date
                FROM attendance_records a
                JOIN interns i ON i.intern_id = a.intern_id
                WHERE i.domain=%s AND a.meeting_date=%s
                ORDER BY i.full_name, i.intern_id
                """,
                (department, meeting_date),
            )
            return [
                {
                    "intern_id": int(r["intern_id"]),
                    "unique_id": r.get("unique_id"),
                    "intern_name": r["full_name"],
                    "email": r["email"],
                    "mobile": r["mobile"],
                    "gender": r.get("gender") or "",
                    "status": r["status"],
                    "attendance_status": r["attendance_status"],
                    "remarks": r.get("remarks") or "",
                    "meeting_date": r["meeting_date"],
                }
                for r in fetchall(cur)
            ]
