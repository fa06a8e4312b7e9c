from __future__ import annotations

from pydantic import EmailStr, Field

from ..common.schemas import RequestSchema
from ..core.enums import InchargeStatus


class InchargeBody(RequestSchema):
    full_name: str = Field(min_length=1)
    email: EmailStr
    mobile: str = Field(pattern=r"^[0-9]{10}$")
    departments: list[str] = Field(min_length=1)


class DepartmentsBody(RequestSchema):
    departments: list[str] = Field(min_length=1)


class RemoveDepartmentBody(RequestSchema):
    department: str = Field(min_length=1)


class InchargeStatusBody(RequestSchema):
    status: InchargeStatus
