from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles carried by the authenticated principal."""

    ADMIN = "admin"
    HR = "hr"
    INCHARGE = "incharge"


class InternStatus(str, Enum):
    """Review states (Applied/Selected/Rejected) and internship states."""

    APPLIED = "Applied"
    SELECTED = "Selected"
    REJECTED = "Rejected"
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    COMPLETED = "Completed"


class PerformanceTag(str, Enum):
    AVERAGE = "Average"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    LEAVE = "Leave"


class LeaveStatus(str, Enum):
    """Leave request workflow. Approved and Rejected are terminal."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"

    @property
    def target_status(self) -> LeaveStatus:
        return LeaveStatus.APPROVED if self is LeaveDecision.APPROVE else LeaveStatus.REJECTED


class LeaveType(str, Enum):
    SICK = "Sick Leave"
    PERSONAL = "Personal Leave"
    FAMILY_EMERGENCY = "Family Emergency"
    VACATION = "Vacation"
    MEDICAL_APPOINTMENT = "Medical Appointment"
    WEDDING = "Wedding"
    PARENTAL = "Maternity/Paternity Leave"
    BEREAVEMENT = "Bereavement"
    RELIGIOUS = "Religious Observance"
    OTHER = "Other"


class InchargeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class CommentKind(str, Enum):
    """HR notes are taken during selection, incharge notes during the internship."""

    HR = "hr"
    INCHARGE = "incharge"


class ReviewStage(str, Enum):
    RESUME_SHORTLISTED = "Resume Shortlisted"
    INTERVIEWING = "Interviewing"
    TELEPHONIC = "Telephonic"
    EMAILING = "Emailing"
    SELECTED = "Selected"
