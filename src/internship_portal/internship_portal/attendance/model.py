from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus, InternStatus, PerformanceTag


@dataclass(frozen=True)
class AttendanceRecord:
    """One intern's attendance at one meeting. Never updated after logging."""

    attendance_id: int
    intern_id: int
    meeting_date: date
    status: AttendanceStatus
    remarks: Optional[str] = None


@dataclass(frozen=True)
class MeetingEntry:
    intern_id: int
    status: AttendanceStatus
    remarks: str = ""


@dataclass(frozen=True)
class AttendanceFilters:
    department: Optional[str] = None
    status: Optional[InternStatus] = None
    search: Optional[str] = None
    date: Optional[date] = None


@dataclass(frozen=True)
class InternAttendanceStats:
    """Read-model: intern identity plus counts derived from attendance records."""

    intern_id: int
    unique_id: Optional[str]
    full_name: str
    email: str
    mobile: str
    domain: str
    status: InternStatus
    performance: PerformanceTag
    joining_date: Optional[date]
    total_meetings: int
    meetings_attended: int
    present_count: int
    absent_count: int
    leave_count: int
    leaves_taken: int
    attendance_rate: float


@dataclass(frozen=True)
class DepartmentAttendanceStats:
    department: str
    intern_count: int
    total_meetings: int
    present_count: int
    absent_count: int
    leave_count: int
    attendance_rate: float


@dataclass(frozen=True)
class OverallAttendanceStats:
    total_interns: int = 0
    total_present: int = 0
    total_absent: int = 0
    total_leave: int = 0
    department_count: int = 0
    average_attendance_rate: float = 0.0


@dataclass(frozen=True)
class DepartmentReport:
    departments: dict[str, DepartmentAttendanceStats] = field(default_factory=dict)
    overall: OverallAttendanceStats = field(default_factory=OverallAttendanceStats)


@dataclass(frozen=True)
class MeetingSummary:
    date: date
    total_interns: int
    present_count: int
    absent_count: int
    leave_count: int
    attendance_rate: float
