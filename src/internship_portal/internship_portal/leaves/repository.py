from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType, Role
from .model import Leave


class LeaveRepository(Protocol):
    def create(
        self,
        *,
        intern_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        total_days: int,
        reason: str,
    ) -> int:
        raise NotImplementedError

    def get(self, leave_id: int) -> Optional[Leave]:
        raise NotImplementedError

    def list_leaves(
        self,
        *,
        status: Optional[LeaveStatus] = None,
        domains: Optional[Sequence[str]] = None,
        limit: int = 500,
    ) -> Sequence[dict]:
        """Return API rows (joined with intern), newest first."""

        raise NotImplementedError

    def count_by_status(self) -> dict[LeaveStatus, int]:
        raise NotImplementedError

    def decide(
        self,
        *,
        leave_id: int,
        status: LeaveStatus,
        decided_by: int,
        decided_by_role: Role,
    ) -> bool:
        """Atomically move a Pending leave to ``status``.

        Returns False when the leave does not exist or is no longer Pending.
        """

        raise NotImplementedError
