from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.enums import InternStatus, PerformanceTag
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, in_clause
from .model import Intern, InternApplication, make_unique_id
from .repository import InternRepository

_COLUMNS = """
    intern_id, unique_id, full_name, email, mobile, dob, gender, state, city, address,
    pin_code, college, course, education_level, domain, contact_method, resume_url,
    duration, prev_internship, prev_internship_desc, status, performance,
    joining_date, extended_days, created_at, updated_at
"""


def row_to_intern(r: dict) -> Intern:
    return Intern(
        intern_id=int(r["intern_id"]),
        unique_id=r.get("unique_id"),
        full_name=r["full_name"],
        email=r["email"],
        mobile=r["mobile"],
        domain=r["domain"],
        duration=r["duration"],
        status=InternStatus(r["status"]),
        performance=PerformanceTag(r["performance"]),
        college=r.get("college") or "",
        course=r.get("course") or "",
        gender=r.get("gender") or "",
        dob=r.get("dob") or "",
        state=r.get("state") or "",
        city=r.get("city") or "",
        address=r.get("address") or "",
        pin_code=r.get("pin_code") or "",
        education_level=r.get("education_level") or "",
        contact_method=r.get("contact_method") or "",
        resume_url=r.get("resume_url") or "",
        prev_internship=r.get("prev_internship") or "No",
        prev_internship_desc=r.get("prev_internship_desc") or "",
        joining_date=r.get("joining_date"),
        extended_days=int(r.get("extended_days") or 0),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLInternRepository(InternRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, params: tuple) -> Optional[Intern]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM interns WHERE {where}", params)
            r = fetchone(cur)
            return row_to_intern(r) if r else None

    def get_by_id(self, intern_id: int) -> Optional[Intern]:
        return self._get_one("intern_id=%s", (int(intern_id),))

    def get_by_unique_id(self, unique_id: str) -> Optional[Intern]:
        return self._get_one("unique_id=%s", (unique_id,))

    def find_by_email_or_mobile(self, *, email: str, mobile: str) -> Optional[Intern]:
        return self._get_one("email=%s OR mobile=%s LIMIT 1", (email, mobile))

    def create(self, application: InternApplication) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO interns(
                        full_name, email, mobile, dob, gender, state, city, address, pin_code,
                        college, course, education_level, domain, contact_method, resume_url,
                        duration, prev_internship, prev_internship_desc, status, performance
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        application.full_name,
                        application.email,
                        application.mobile,
                        application.dob,
                        application.gender,
                        application.state,
                        application.city,
                        application.address,
                        application.pin_code,
                        application.college,
                        application.course,
                        application.education_level,
                        application.domain,
                        application.contact_method,
                        application.resume_url,
                        application.duration,
                        application.prev_internship,
                        application.prev_internship_desc,
                        InternStatus.APPLIED.value,
                        PerformanceTag.AVERAGE.value,
                    ),
                )
                intern_id = int(cur.lastrowid)
                cur.execute(
                    "UPDATE interns SET unique_id=%s WHERE intern_id=%s",
                    (make_unique_id(intern_id), intern_id),
                )
                return intern_id
        except mysql_errors.IntegrityError:
            raise ValidationError("Intern with this email or mobile already exists")

    def search(
        self,
        *,
        search: str = "",
        status: Optional[InternStatus] = None,
        performance: Optional[PerformanceTag] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[Sequence[Intern], int]:
        clauses = ["1=1"]
        params: list[Any] = []

        term = (search or "").strip()
        if term:
            like = f"%{term.lower()}%"
            clauses.append("(LOWER(full_name) LIKE %s OR LOWER(email) LIKE %s OR LOWER(domain) LIKE %s)")
            params.extend([like, like, like])
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        if performance is not None:
            clauses.append("performance=%s")
            params.append(performance.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM interns WHERE {where}", tuple(params))
            total = int(fetchone(cur)["total"])

            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM interns
                WHERE {where}
                ORDER BY created_at DESC, intern_id DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params + [int(limit), int(offset)]),
            )
            return [row_to_intern(r) for r in fetchall(cur)], total

    def list_filtered(
        self,
        *,
        domains: Optional[Sequence[str]] = None,
        statuses: Optional[Sequence[InternStatus]] = None,
    ) -> Sequence[Intern]:
        clauses = ["1=1"]
        params: list[Any] = []

        if domains is not None:
            if not domains:
                return []
            clauses.append(f"domain IN ({in_clause(domains)})")
            params.extend(domains)
        if statuses is not None:
            if not statuses:
                return []
            clauses.append(f"status IN ({in_clause(statuses)})")
            params.extend(s.value for s in statuses)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM interns WHERE {where} ORDER BY updated_at DESC, intern_id DESC",
                tuple(params),
            )
            return [row_to_intern(r) for r in fetchall(cur)]

    def update(
        self,
        intern_id: int,
        *,
        status: Optional[InternStatus] = None,
        performance: Optional[PerformanceTag] = None,
        domain: Optional[str] = None,
        joining_date: Optional[date] = None,
        extended_days: Optional[int] = None,
    ) -> bool:
        sets: list[str] = []
        params: list[Any] = []

        if status is not None:
            sets.append("status=%s")
            params.append(status.value)
        if performance is not None:
            sets.append("performance=%s")
            params.append(performance.value)
        if domain is not None:
            sets.append("domain=%s")
            params.append(domain)
        if joining_date is not None:
            sets.append("joining_date=%s")
            params.append(joining_date)
        if extended_days is not None:
            sets.append("extended_days=%s")
            params.append(int(extended_days))

        with db_cursor(self._conn_factory) as (_, cur):
            if sets:
                cur.execute(
                    f"UPDATE interns SET {', '.join(sets)} WHERE intern_id=%s",
                    tuple(params + [int(intern_id)]),
                )
                if cur.rowcount > 0:
                    return True
            # MySQL reports 0 affected rows when the values did not change.
            cur.execute("SELECT 1 AS found FROM interns WHERE intern_id=%s", (int(intern_id),))
            return fetchone(cur) is not None
