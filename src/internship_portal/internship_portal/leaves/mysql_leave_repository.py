from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Leave
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        intern_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        total_days: int,
        reason: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(intern_id, leave_type, start_date, end_date, total_days, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(intern_id),
                    leave_type.value,
                    start_date,
                    end_date,
                    int(total_days),
                    reason,
                    LeaveStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def get(self, leave_id: int) -> Optional[Leave]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_id, intern_id, leave_type, start_date, end_date, total_days, reason,
                       status, created_at, decided_by, decided_by_role, decided_at
                FROM leave_requests
                WHERE leave_id=%s
                """,
                (int(leave_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Leave(
                leave_id=int(r["leave_id"]),
                intern_id=int(r["intern_id"]),
                leave_type=LeaveType(r["leave_type"]),
                start_date=r["start_date"],
                end_date=r["end_date"],
                total_days=int(r["total_days"]),
                reason=r["reason"],
                status=LeaveStatus(r["status"]),
                created_at=r.get("created_at"),
                decided_by=r.get("decided_by"),
                decided_by_role=Role(r["decided_by_role"]) if r.get("decided_by_role") else None,
                decided_at=r.get("decided_at"),
            )

    def list_leaves(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        domains: Optional[Sequence[str]] = None,
        limit: int = 500,
    ) -> Sequence[dict]:
        clauses = ["1=1"]
        params: list[Any] = []

        if status is not None:
            clauses.append("l.status=%s")
            params.append(status.value)
        if domains is not None:
            if not domains:
                return []
            clauses.append(f"i.domain IN ({in_clause(domains)})")
            params.extend(domains)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT l.leave_id, l.intern_id, i.unique_id, i.full_name, i.email, i.domain,
                       l.leave_type, l.start_date, l.end_date, l.total_days, l.reason,
                       l.status, l.created_at, l.decided_at
                FROM leave_requests l
                JOIN interns i ON i.intern_id = l.intern_id
                WHERE {where}
                ORDER BY l.created_at DESC, l.leave_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [
                {
                    "leave_id": int(r["leave_id"]),
                    "intern_id": int(r["intern_id"]),
                    "unique_id": r.get("unique_id"),
                    "full_name": r["full_name"],
                    "email": r["email"],
                    "domain": r["domain"],
                    "leave_type": r["leave_type"],
                    "start_date": r["start_date"],
                    "end_date": r["end_date"],
                    "total_days": int(r["total_days"]),
                    "reason": r["reason"],
                    "status": r["status"],
                    "created_at": r["created_at"],
                    "decided_at": r.get("decided_at"),
                }
                for r in fetchall(cur)
            ]

    def count_by_status(self) -> dict[LeaveStatus, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT status, COUNT(*) AS n FROM leave_requests GROUP BY status")
            return {LeaveStatus(r["status"]): int(r["n"]) for r in fetchall(cur)}

    def decide(
        self,
        *,
        leave_id: int,
        status: LeaveStatus,
        decided_by: int,
        decided_by_role: Role,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, decided_by=%s, decided_by_role=%s, decided_at=NOW()
                WHERE leave_id=%s AND status=%s
                """,
                (
                    status.value,
                    int(decided_by),
                    decided_by_role.value,
                    int(leave_id),
                    LeaveStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0
