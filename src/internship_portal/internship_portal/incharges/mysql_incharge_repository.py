from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import InchargeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import InternIncharge
from .repository import InchargeRepository


class MySQLInchargeRepository(InchargeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _load_departments(cur, incharge_ids: Sequence[int]) -> dict[int, list[str]]:
        if not incharge_ids:
            return {}
        cur.execute(
            f"""
            SELECT incharge_id, department
            FROM incharge_departments
            WHERE incharge_id IN ({in_clause(incharge_ids)})
            ORDER BY department
            """,
            tuple(incharge_ids),
        )
        out: dict[int, list[str]] = {}
        for r in fetchall(cur):
            out.setdefault(int(r["incharge_id"]), []).append(r["department"])
        return out

    def _select(self, where: str = "1=1", params: tuple = ()) -> list[InternIncharge]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT incharge_id, full_name, email, mobile, status, created_at
                FROM intern_incharges
                WHERE {where}
                ORDER BY created_at DESC, incharge_id DESC
                """,
                params,
            )
            rows = fetchall(cur)
            departments = self._load_departments(cur, [int(r["incharge_id"]) for r in rows])
            return [
                InternIncharge(
                    incharge_id=int(r["incharge_id"]),
                    full_name=r["full_name"],
                    email=r["email"],
                    mobile=r["mobile"],
                    departments=tuple(departments.get(int(r["incharge_id"]), [])),
                    status=InchargeStatus(r["status"]),
                    created_at=r.get("created_at"),
                )
                for r in rows
            ]

    def get_by_id(self, incharge_id: int) -> Optional[InternIncharge]:
        found = self._select("incharge_id=%s", (int(incharge_id),))
        return found[0] if found else None

    def get_by_email(self, email: str) -> Optional[InternIncharge]:
        found = self._select("email=%s", (email,))
        return found[0] if found else None

    def list_all(self) -> Sequence[InternIncharge]:
        return self._select()

    def create(self, *, full_name: str, email: str, mobile: str, departments: Sequence[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO intern_incharges(full_name, email, mobile, status)
                VALUES(%s,%s,%s,%s)
                """,
                (full_name, email, mobile, InchargeStatus.ACTIVE.value),
            )
            incharge_id = int(cur.lastrowid)
            cur.executemany(
                "INSERT INTO incharge_departments(incharge_id, department) VALUES(%s,%s)",
                [(incharge_id, d) for d in departments],
            )
            return incharge_id

    def add_departments(self, incharge_id: int, departments: Sequence[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT IGNORE INTO incharge_departments(incharge_id, department) VALUES(%s,%s)",
                [(int(incharge_id), d) for d in departments],
            )

    def remove_department(self, incharge_id: int, department: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM incharge_departments WHERE incharge_id=%s AND department=%s",
                (int(incharge_id), department),
            )
            return cur.rowcount > 0

    def set_status(self, incharge_id: int, status: InchargeStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE intern_incharges SET status=%s WHERE incharge_id=%s",
                (status.value, int(incharge_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM intern_incharges WHERE incharge_id=%s", (int(incharge_id),))
            return fetchone(cur) is not None

    def delete(self, incharge_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM intern_incharges WHERE incharge_id=%s", (int(incharge_id),))
            return cur.rowcount > 0
