from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from ..common.schemas import RequestSchema
from ..core.enums import LeaveStatus, LeaveType


class LeaveBody(RequestSchema):
    intern_id: str = Field(min_length=1, description="Intern unique id, e.g. INT000042")
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str = Field(min_length=1)


class LeaveQuery(RequestSchema):
    status: Optional[LeaveStatus] = None
