from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional, Sequence

from ..common.numbers import mean, percentage
from ..core.enums import AttendanceStatus
from ..interns.model import Intern
from ..interns.repository import InternRepository
from .model import (
    AttendanceFilters,
    DepartmentAttendanceStats,
    DepartmentReport,
    InternAttendanceStats,
    OverallAttendanceStats,
)
from .repository import AttendanceRepository


def attendance_rate(present: int, absent: int, leave: int) -> float:
    """Present share of all logged meetings, in percent with one decimal. 0 when nothing is logged."""
    return percentage(present, present + absent + leave)


def _matches_search(intern: Intern, term: str) -> bool:
    term = term.casefold()
    return any(term in (value or "").casefold() for value in (intern.full_name, intern.email, intern.unique_id))


class AttendanceAggregator:
    """Read-only attendance statistics per intern and per department.

    Nothing here writes; the figures depend only on the intern and attendance
    snapshot, so repeated calls return identical results.
    """

    def __init__(self, attendance: AttendanceRepository, interns: InternRepository):
        self._attendance = attendance
        self._interns = interns

    def _matching_interns(self, filters: AttendanceFilters) -> list[Intern]:
        interns = self._interns.list_filtered(
            domains=[filters.department] if filters.department else None,
            statuses=[filters.status] if filters.status else None,
        )
        term = (filters.search or "").strip()
        if term:
            interns = [i for i in interns if _matches_search(i, term)]
        return sorted(interns, key=lambda i: (i.domain, i.full_name.casefold(), i.intern_id))

    def list_with_stats(self, filters: Optional[AttendanceFilters] = None) -> list[InternAttendanceStats]:
        filters = filters or AttendanceFilters()
        interns = self._matching_interns(filters)
        if not interns:
            return []

        records = self._attendance.list_records(
            intern_ids=[i.intern_id for i in interns],
            meeting_date=filters.date,
        )
        counts: dict[int, Counter] = {}
        for r in records:
            counts.setdefault(r.intern_id, Counter())[r.status] += 1

        out: list[InternAttendanceStats] = []
        for intern in interns:
            c = counts.get(intern.intern_id, Counter())
            present = c[AttendanceStatus.PRESENT]
            absent = c[AttendanceStatus.ABSENT]
            leave = c[AttendanceStatus.LEAVE]
            out.append(
                InternAttendanceStats(
                    intern_id=intern.intern_id,
                    unique_id=intern.unique_id,
                    full_name=intern.full_name,
                    email=intern.email,
                    mobile=intern.mobile,
                    domain=intern.domain,
                    status=intern.status,
                    performance=intern.performance,
                    joining_date=intern.joining_date,
                    total_meetings=present + absent + leave,
                    meetings_attended=present,
                    present_count=present,
                    absent_count=absent,
                    leave_count=leave,
                    leaves_taken=leave,
                    attendance_rate=attendance_rate(present, absent, leave),
                )
            )
        return out

    @staticmethod
    def summarize(rows: Sequence[InternAttendanceStats]) -> DepartmentReport:
        grouped: dict[str, list[InternAttendanceStats]] = {}
        for row in rows:
            grouped.setdefault(row.domain, []).append(row)

        departments: dict[str, DepartmentAttendanceStats] = {}
        for name in sorted(grouped):
            members = grouped[name]
            present = sum(m.present_count for m in members)
            absent = sum(m.absent_count for m in members)
            leave = sum(m.leave_count for m in members)
            departments[name] = DepartmentAttendanceStats(
                department=name,
                intern_count=len(members),
                total_meetings=present + absent + leave,
                present_count=present,
                absent_count=absent,
                leave_count=leave,
                attendance_rate=attendance_rate(present, absent, leave),
            )

        overall = OverallAttendanceStats(
            total_interns=len(rows),
            total_present=sum(r.present_count for r in rows),
            total_absent=sum(r.absent_count for r in rows),
            total_leave=sum(r.leave_count for r in rows),
            department_count=len(departments),
            average_attendance_rate=mean(r.attendance_rate for r in rows),
        )
        return DepartmentReport(departments=departments, overall=overall)

    def department_stats(self, filters: Optional[AttendanceFilters] = None) -> DepartmentReport:
        return self.summarize(self.list_with_stats(filters))


def tally(statuses: Iterable[AttendanceStatus]) -> tuple[int, int, int]:
    c = Counter(statuses)
    return c[AttendanceStatus.PRESENT], c[AttendanceStatus.ABSENT], c[AttendanceStatus.LEAVE]
