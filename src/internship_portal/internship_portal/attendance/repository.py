from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, MeetingEntry


class AttendanceRepository(Protocol):
    def list_records(
        self,
        *,
        intern_ids: Sequence[int],
        meeting_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def interns_with_record_on(self, *, intern_ids: Sequence[int], meeting_date: date) -> set[int]:
        raise NotImplementedError

    def create_meeting(self, *, meeting_date: date, entries: Sequence[MeetingEntry]) -> int:
        """Insert all entries in one transaction; returns the number of rows written."""

        raise NotImplementedError

    def list_meeting_rows(self, *, domains: Optional[Sequence[str]] = None) -> Sequence[dict]:
        """Rows of (domain, meeting_date, status) for every attendance record."""

        raise NotImplementedError

    def list_meeting_details(self, *, department: str, meeting_date: date) -> Sequence[dict]:
        raise NotImplementedError
