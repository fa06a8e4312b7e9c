from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import inclusive_days
from ..common.principal import Principal
from ..common.validators import require_min_length, require_non_empty, require_present
from ..core.constants import DEFAULT_LIST_LIMIT, MIN_LEAVE_REASON_LENGTH
from ..core.enums import LeaveDecision, LeaveStatus, LeaveType, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..interns.repository import InternRepository
from .model import Leave, LeaveListing, LeaveStats
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave request lifecycle: Pending -> Approved | Rejected.

    Every transition is an explicit decision by an admin or by the incharge of
    the intern's department; nothing moves a leave automatically.
    """

    def __init__(self, leaves: LeaveRepository, interns: InternRepository):
        self._leaves = leaves
        self._interns = interns

    @staticmethod
    def _parse_leave_type(value: Union[LeaveType, str, None]) -> LeaveType:
        require_present(value, "Leave type")
        try:
            return LeaveType(value)
        except ValueError:
            raise ValidationError(f"Unknown leave type {value!r}")

    def submit(
        self,
        *,
        unique_id: str,
        leave_type: Union[LeaveType, str],
        start_date: Optional[date],
        end_date: Optional[date],
        reason: str,
    ) -> Leave:
        unique_id = require_non_empty(unique_id, "Intern ID")
        leave_type = self._parse_leave_type(leave_type)
        require_present(start_date, "Start date")
        require_present(end_date, "End date")
        reason = require_non_empty(reason, "Reason")
        reason = require_min_length(reason, "Reason", MIN_LEAVE_REASON_LENGTH)

        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")
        total_days = inclusive_days(start_date, end_date)

        intern = self._interns.get_by_unique_id(unique_id)
        if not intern:
            raise NotFoundError("Intern not found")

        leave_id = self._leaves.create(
            intern_id=intern.intern_id,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            total_days=total_days,
            reason=reason,
        )
        logger.info("Leave %s submitted by intern %s (%s days)", leave_id, intern.intern_id, total_days)
        return self.get(leave_id)

    def get(self, leave_id: int) -> Leave:
        leave = self._leaves.get(int(leave_id))
        if not leave:
            raise NotFoundError("Leave request not found")
        return leave

    def decide(self, *, principal: Principal, leave_id: int, decision: LeaveDecision) -> Leave:
        if principal.role not in {Role.ADMIN, Role.INCHARGE}:
            raise AuthorizationError("You do not have permission for this action")

        leave = self.get(leave_id)
        if not principal.is_admin:
            intern = self._interns.get_by_id(leave.intern_id)
            principal.require_department(intern.domain if intern else None)

        if leave.is_terminal:
            raise ConflictError(f"Leave request is already {leave.status.value.lower()}")

        target = LeaveDecision(decision).target_status
        decided = self._leaves.decide(
            leave_id=leave.leave_id,
            status=target,
            decided_by=principal.user_id,
            decided_by_role=principal.role,
        )
        if not decided:
            # Lost a race with another decision, or the record vanished.
            current = self.get(leave.leave_id)
            raise ConflictError(f"Leave request is already {current.status.value.lower()}")

        logger.info("Leave %s %s by %s %s", leave.leave_id, target.value, principal.role.value, principal.user_id)
        return self.get(leave.leave_id)

    def approve(self, *, principal: Principal, leave_id: int) -> Leave:
        return self.decide(principal=principal, leave_id=leave_id, decision=LeaveDecision.APPROVE)

    def reject(self, *, principal: Principal, leave_id: int) -> Leave:
        return self.decide(principal=principal, leave_id=leave_id, decision=LeaveDecision.REJECT)

    def stats(self) -> LeaveStats:
        counts = self._leaves.count_by_status()
        return LeaveStats(
            total=sum(counts.values()),
            pending=counts.get(LeaveStatus.PENDING, 0),
            approved=counts.get(LeaveStatus.APPROVED, 0),
            rejected=counts.get(LeaveStatus.REJECTED, 0),
        )

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> LeaveListing:
        leaves = self._leaves.list_leaves(status=status, limit=DEFAULT_LIST_LIMIT)
        return LeaveListing(leaves=list(leaves), stats=self.stats())

    def list_pending_for_incharge(self, principal: Principal) -> list[dict]:
        if principal.role != Role.INCHARGE:
            raise AuthorizationError("Only intern incharges have department leave queues")
        return list(
            self._leaves.list_leaves(
                status=LeaveStatus.PENDING,
                domains=list(principal.departments),
                limit=DEFAULT_LIST_LIMIT,
            )
        )
