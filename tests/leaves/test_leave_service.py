from __future__ import annotations

from datetime import date

import pytest

from src.internship_portal.internship_portal.common.principal import Principal
from src.internship_portal.internship_portal.core.enums import LeaveDecision, LeaveStatus, LeaveType, Role
from src.internship_portal.internship_portal.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.internship_portal.internship_portal.leaves.service import LeaveService
from tests.fakes import FakeInternsRepo, FakeLeavesRepo, make_intern

ADMIN = Principal(user_id=1, role=Role.ADMIN)
WEB_INCHARGE = Principal(user_id=7, role=Role.INCHARGE, departments=("Web Development",))
HR_INCHARGE = Principal(user_id=8, role=Role.INCHARGE, departments=("Human Resources",))


@pytest.fixture()
def svc():
    interns = FakeInternsRepo([make_intern(1), make_intern(2, domain="Marketing")])
    return LeaveService(FakeLeavesRepo(interns), interns)


def _submit(svc, **overrides):
    data = dict(
        unique_id="INT000001",
        leave_type=LeaveType.SICK,
        start_date=date(2025, 1, 10),
        end_date=date(2025, 1, 12),
        reason="Fever and cold",
    )
    data.update(overrides)
    return svc.submit(**data)


def test_submit_counts_days_inclusively_and_starts_pending(svc):
    leave = _submit(svc, reason="a" * 12)

    assert leave.total_days == 3
    assert leave.status == LeaveStatus.PENDING
    assert leave.intern_id == 1


def test_single_day_leave_is_one_day(svc):
    leave = _submit(svc, start_date=date(2025, 3, 1), end_date=date(2025, 3, 1))
    assert leave.total_days == 1


def test_end_before_start_is_rejected(svc):
    with pytest.raises(ValidationError):
        _submit(svc, start_date=date(2025, 1, 12), end_date=date(2025, 1, 10))


def test_short_reason_is_rejected(svc):
    with pytest.raises(ValidationError, match="at least 10"):
        _submit(svc, reason="  too short ")


def test_unknown_leave_type_is_rejected(svc):
    with pytest.raises(ValidationError):
        _submit(svc, leave_type="Holiday trip")


def test_unknown_intern_is_not_found(svc):
    with pytest.raises(NotFoundError):
        _submit(svc, unique_id="INT999999")


def test_second_decision_conflicts_and_first_one_sticks(svc):
    leave = _submit(svc)

    approved = svc.approve(principal=ADMIN, leave_id=leave.leave_id)
    assert approved.status == LeaveStatus.APPROVED
    assert approved.decided_by == ADMIN.user_id

    with pytest.raises(ConflictError):
        svc.reject(principal=ADMIN, leave_id=leave.leave_id)
    assert svc.get(leave.leave_id).status == LeaveStatus.APPROVED


class RacingLeavesRepo(FakeLeavesRepo):
    """Another admin rejects the leave between our read and our write."""

    def decide(self, **kwargs):
        super().decide(leave_id=kwargs["leave_id"], status=LeaveStatus.REJECTED, decided_by=99, decided_by_role=Role.ADMIN)
        return super().decide(**kwargs)


def test_lost_race_is_reported_as_conflict():
    interns = FakeInternsRepo([make_intern(1)])
    repo = RacingLeavesRepo(interns)
    svc = LeaveService(repo, interns)
    leave = _submit(svc)

    with pytest.raises(ConflictError, match="rejected"):
        svc.decide(principal=ADMIN, leave_id=leave.leave_id, decision=LeaveDecision.APPROVE)
    assert repo.get(leave.leave_id).status == LeaveStatus.REJECTED
    assert repo.get(leave.leave_id).decided_by == 99


def test_decide_unknown_leave_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.approve(principal=ADMIN, leave_id=404)


def test_incharge_decides_only_own_department(svc):
    leave = _submit(svc)

    with pytest.raises(AuthorizationError):
        svc.approve(principal=HR_INCHARGE, leave_id=leave.leave_id)

    decided = svc.reject(principal=WEB_INCHARGE, leave_id=leave.leave_id)
    assert decided.status == LeaveStatus.REJECTED
    assert decided.decided_by_role == Role.INCHARGE


def test_hr_cannot_decide(svc):
    leave = _submit(svc)
    with pytest.raises(AuthorizationError):
        svc.approve(principal=Principal(user_id=3, role=Role.HR), leave_id=leave.leave_id)


def test_list_all_carries_stats(svc):
    first = _submit(svc)
    _submit(svc, unique_id="INT000002")
    svc.approve(principal=ADMIN, leave_id=first.leave_id)

    listing = svc.list_all()
    assert len(listing.leaves) == 2
    assert (listing.stats.total, listing.stats.pending, listing.stats.approved, listing.stats.rejected) == (2, 1, 1, 0)

    pending = svc.list_all(status=LeaveStatus.PENDING)
    assert [row["intern_id"] for row in pending.leaves] == [2]


def test_incharge_pending_queue_is_scoped(svc):
    _submit(svc)
    _submit(svc, unique_id="INT000002")

    rows = svc.list_pending_for_incharge(WEB_INCHARGE)
    assert [row["domain"] for row in rows] == ["Web Development"]
