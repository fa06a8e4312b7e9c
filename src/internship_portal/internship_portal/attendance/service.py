from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Sequence

from ..common.principal import Principal
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..interns.repository import InternRepository
from .aggregator import attendance_rate, tally
from .model import MeetingEntry, MeetingSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_RECORDERS = {Role.ADMIN, Role.INCHARGE}


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, interns: InternRepository):
        self._attendance = attendance
        self._interns = interns

    def mark_meeting(
        self,
        *,
        principal: Principal,
        meeting_date: date,
        domain: str,
        entries: Sequence[MeetingEntry],
    ) -> int:
        """Log one meeting for a department. Either every entry is stored or none is."""

        if principal.role not in _RECORDERS:
            raise AuthorizationError("You do not have permission for this action")
        principal.require_department(domain)

        if meeting_date is None:
            raise ValidationError("Meeting date is required")
        if not entries:
            raise ValidationError("Attendance records are required")

        seen = Counter(int(e.intern_id) for e in entries)
        duplicates = sorted(i for i, n in seen.items() if n > 1)
        if duplicates:
            raise ValidationError(f"Duplicate attendance entries for interns: {duplicates}")

        for entry in entries:
            try:
                AttendanceStatus(entry.status)
            except ValueError:
                raise ValidationError(f"Unknown attendance status {entry.status!r}")
            intern = self._interns.get_by_id(int(entry.intern_id))
            if not intern:
                raise NotFoundError(f"Intern {entry.intern_id} not found")
            if intern.domain != domain:
                raise ValidationError(f"Intern {entry.intern_id} does not belong to {domain}")

        already = self._attendance.interns_with_record_on(intern_ids=list(seen), meeting_date=meeting_date)
        if already:
            raise ConflictError(f"Attendance already recorded on {meeting_date.isoformat()} for interns: {sorted(already)}")

        count = self._attendance.create_meeting(meeting_date=meeting_date, entries=list(entries))
        logger.info("Attendance for %s on %s recorded (%d interns)", domain, meeting_date, count)
        return count

    def meeting_dates_by_department(self, principal: Principal) -> dict[str, list[MeetingSummary]]:
        """Per-department meeting summaries, newest meeting first.

        Admins see every department, incharges only their own.
        """

        domains = None if principal.is_admin else list(principal.departments)
        grouped: dict[str, dict[date, list[AttendanceStatus]]] = {}
        for row in self._attendance.list_meeting_rows(domains=domains):
            grouped.setdefault(row["domain"], {}).setdefault(row["meeting_date"], []).append(row["status"])

        out: dict[str, list[MeetingSummary]] = {}
        for department in sorted(grouped):
            meetings = []
            for meeting_date in sorted(grouped[department], reverse=True):
                statuses = grouped[department][meeting_date]
                present, absent, leave = tally(statuses)
                meetings.append(
                    MeetingSummary(
                        date=meeting_date,
                        total_interns=len(statuses),
                        present_count=present,
                        absent_count=absent,
                        leave_count=leave,
                        attendance_rate=attendance_rate(present, absent, leave),
                    )
                )
            out[department] = meetings
        return out

    def meeting_details(self, *, principal: Principal, department: str, meeting_date: date) -> list[dict]:
        if not department or meeting_date is None:
            raise ValidationError("Department and date are required")
        principal.require_department(department)
        return list(self._attendance.list_meeting_details(department=department, meeting_date=meeting_date))
