from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field

from ..common.schemas import RequestSchema
from ..core.enums import AttendanceStatus, InternStatus
from .model import AttendanceFilters, MeetingEntry


class AttendanceEntryBody(RequestSchema):
    intern_id: int
    status: AttendanceStatus
    remarks: str = ""


class MeetingBody(RequestSchema):
    date: dt.date
    domain: str = Field(min_length=1)
    attendance_records: list[AttendanceEntryBody] = Field(default_factory=list)

    def to_entries(self) -> list[MeetingEntry]:
        return [MeetingEntry(intern_id=r.intern_id, status=r.status, remarks=r.remarks) for r in self.attendance_records]


class AttendanceQuery(RequestSchema):
    department: Optional[str] = None
    status: Optional[InternStatus] = None
    search: Optional[str] = None
    date: Optional[dt.date] = None

    def to_filters(self) -> AttendanceFilters:
        return AttendanceFilters(
            department=self.department,
            status=self.status,
            search=self.search,
            date=self.date,
        )


class MeetingDetailsQuery(RequestSchema):
    department: str = Field(min_length=1)
    date: dt.date
