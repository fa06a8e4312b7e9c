from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType, Role


@dataclass(frozen=True)
class Leave:
    leave_id: int
    intern_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    total_days: int
    reason: str
    status: LeaveStatus
    created_at: Optional[datetime] = None
    decided_by: Optional[int] = None
    decided_by_role: Optional[Role] = None
    decided_at: Optional[datetime] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != LeaveStatus.PENDING


@dataclass(frozen=True)
class LeaveStats:
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0


@dataclass(frozen=True)
class LeaveListing:
    leaves: list[dict] = field(default_factory=list)
    stats: LeaveStats = field(default_factory=LeaveStats)
