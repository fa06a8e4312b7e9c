from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import UNIQUE_ID_PREFIX
from ..core.enums import InternStatus, PerformanceTag


def make_unique_id(intern_id: int) -> str:
    return f"{UNIQUE_ID_PREFIX}{int(intern_id):06d}"


@dataclass(frozen=True)
class InternApplication:
    """Fields submitted by an applicant on the intake form."""

    full_name: str
    email: str
    mobile: str
    dob: str
    gender: str
    state: str
    city: str
    address: str
    pin_code: str
    college: str
    course: str
    education_level: str
    domain: str
    contact_method: str
    resume_url: str
    duration: str
    prev_internship: str = "No"
    prev_internship_desc: str = ""


@dataclass(frozen=True)
class Intern:
    intern_id: int
    unique_id: Optional[str]
    full_name: str
    email: str
    mobile: str
    domain: str
    duration: str
    status: InternStatus
    performance: PerformanceTag
    college: str = ""
    course: str = ""
    gender: str = ""
    dob: str = ""
    state: str = ""
    city: str = ""
    address: str = ""
    pin_code: str = ""
    education_level: str = ""
    contact_method: str = ""
    resume_url: str = ""
    prev_internship: str = "No"
    prev_internship_desc: str = ""
    joining_date: Optional[date] = None
    extended_days: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class InternPage:
    interns: list[Intern]
    total: int
    page: int
    pages: int


@dataclass(frozen=True)
class ExtensionResult:
    intern_id: int
    full_name: str
    extended_days: int
    status: InternStatus
    calculated_end_date: date


@dataclass(frozen=True)
class PublicInternProfile:
    """What anyone holding a completed intern's unique id may see."""

    unique_id: str
    full_name: str
    domain: str
    duration: str
    college: str
    course: str
    performance: PerformanceTag
    status: InternStatus
    joining_date: date
    extended_days: int
    end_date: date
