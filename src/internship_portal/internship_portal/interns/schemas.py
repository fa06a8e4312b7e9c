from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import EmailStr, Field

from ..common.schemas import RequestSchema
from ..core.constants import DEFAULT_PAGE_SIZE
from ..core.enums import InternStatus, PerformanceTag
from .model import InternApplication


class ApplicationBody(RequestSchema):
    full_name: str = Field(min_length=1)
    email: EmailStr
    mobile: str = Field(min_length=1)
    dob: str = Field(min_length=1)
    gender: str = Field(min_length=1)
    state: str = Field(min_length=1)
    city: str = Field(min_length=1)
    address: str = Field(min_length=1)
    pin_code: str = Field(min_length=1)
    college: str = Field(min_length=1)
    course: str = Field(min_length=1)
    education_level: str = Field(min_length=1)
    domain: str = Field(min_length=1)
    contact_method: str = Field(min_length=1)
    resume_url: str = Field(min_length=1)
    duration: str = Field(min_length=1)
    prev_internship: Literal["Yes", "No"] = "No"
    prev_internship_desc: str = ""

    def to_application(self) -> InternApplication:
        return InternApplication(**self.model_dump())


class InternQuery(RequestSchema):
    search: str = ""
    status: Optional[InternStatus] = None
    performance: Optional[PerformanceTag] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=100)


class StatusBody(RequestSchema):
    status: InternStatus


class PerformanceBody(RequestSchema):
    performance: PerformanceTag


class DomainBody(RequestSchema):
    domain: str = Field(min_length=1)


class JoiningDateBody(RequestSchema):
    joining_date: date


class ExtendBody(RequestSchema):
    extended_days: int = Field(gt=0)
