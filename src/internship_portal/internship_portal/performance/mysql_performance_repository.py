from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PerformanceMonth, Ratings
from .repository import PerformanceRepository


def row_to_month(r: dict) -> PerformanceMonth:
    # DECIMAL columns come back as decimal.Decimal
    return PerformanceMonth(
        performance_id=int(r["performance_id"]),
        intern_id=int(r["intern_id"]),
        month_number=int(r["month_number"]),
        month_label=r["month_label"],
        total_tasks=int(r["total_tasks"]),
        tasks_completed=int(r["tasks_completed"]),
        ratings=Ratings(
            initiative=float(r["initiative"]),
            communication=float(r["communication"]),
            behaviour=float(r["behaviour"]),
        ),
        overall_rating=float(r["overall_rating"]),
        completion_percentage=float(r["completion_percentage"]),
        remarks=r.get("remarks") or "",
        created_at=r.get("created_at"),
    )


class MySQLPerformanceRepository(PerformanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_months(self, intern_id: int) -> Sequence[PerformanceMonth]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT performance_id, intern_id, month_number, month_label, total_tasks, tasks_completed,
                       initiative, communication, behaviour, overall_rating, completion_percentage,
                       remarks, created_at
                FROM performance_months
                WHERE intern_id=%s
                ORDER BY month_number
                """,
                (int(intern_id),),
            )
            return [row_to_month(r) for r in fetchall(cur)]

    def append_month(
        self,
        *,
        intern_id: int,
        month_label: Optional[str],
        total_tasks: int,
        tasks_completed: int,
        ratings: Ratings,
        overall_rating: float,
        completion_percentage: float,
        remarks: str,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT COALESCE(MAX(month_number), 0) + 1 AS next_month FROM performance_months WHERE intern_id=%s",
                    (int(intern_id),),
                )
                month_number = int(cur.fetchone()["next_month"])
                cur.execute(
                    """
                    INSERT INTO performance_months(
                        intern_id, month_number, month_label, total_tasks, tasks_completed,
                        initiative, communication, behaviour, overall_rating, completion_percentage, remarks
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        int(intern_id),
                        month_number,
                        month_label or f"Month {month_number}",
                        int(total_tasks),
                        int(tasks_completed),
                        ratings.initiative,
                        ratings.communication,
                        ratings.behaviour,
                        overall_rating,
                        completion_percentage,
                        remarks or None,
                    ),
                )
                return month_number
        except mysql_errors.IntegrityError:
            raise ConflictError("Another entry for this month was saved at the same time, please retry")

    def delete_month(self, *, intern_id: int, month_number: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM performance_months WHERE intern_id=%s AND month_number=%s",
                (int(intern_id), int(month_number)),
            )
            return cur.rowcount > 0
