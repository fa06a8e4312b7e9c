from __future__ import annotations

from datetime import date

import pytest

from src.internship_portal.internship_portal.attendance.model import MeetingEntry
from src.internship_portal.internship_portal.attendance.service import AttendanceService
from src.internship_portal.internship_portal.common.principal import Principal
from src.internship_portal.internship_portal.core.enums import AttendanceStatus, Role
from src.internship_portal.internship_portal.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from tests.fakes import FakeAttendanceRepo, FakeInternsRepo, make_intern

WEB = "Web Development"
INCHARGE = Principal(user_id=7, role=Role.INCHARGE, departments=(WEB,))
MEETING = date(2026, 2, 2)


@pytest.fixture()
def repos():
    interns = FakeInternsRepo([make_intern(1), make_intern(2), make_intern(3, domain="Finance")])
    return interns, FakeAttendanceRepo(interns)


@pytest.fixture()
def svc(repos):
    interns, attendance = repos
    return AttendanceService(attendance, interns)


def entry(intern_id, status=AttendanceStatus.PRESENT, remarks=""):
    return MeetingEntry(intern_id=intern_id, status=status, remarks=remarks)


def test_mark_meeting_stores_every_entry(svc, repos):
    _, attendance = repos
    count = svc.mark_meeting(
        principal=INCHARGE,
        meeting_date=MEETING,
        domain=WEB,
        entries=[entry(1), entry(2, AttendanceStatus.LEAVE, "travelling")],
    )

    assert count == 2
    assert {(r.intern_id, r.status) for r in attendance.records} == {
        (1, AttendanceStatus.PRESENT),
        (2, AttendanceStatus.LEAVE),
    }


def test_second_meeting_same_day_conflicts_and_writes_nothing(svc, repos):
    _, attendance = repos
    svc.mark_meeting(principal=INCHARGE, meeting_date=MEETING, domain=WEB, entries=[entry(1)])

    with pytest.raises(ConflictError):
        svc.mark_meeting(principal=INCHARGE, meeting_date=MEETING, domain=WEB, entries=[entry(2), entry(1)])
    assert len(attendance.records) == 1


@pytest.mark.parametrize(
    "entries, error",
    [
        ([], ValidationError),
        ([entry(1), entry(1)], ValidationError),
        ([entry(3)], ValidationError),
        ([entry(1, "Late")], ValidationError),
        ([entry(42)], NotFoundError),
    ],
)
def test_bad_batches_are_rejected(svc, repos, entries, error):
    _, attendance = repos
    with pytest.raises(error):
        svc.mark_meeting(principal=INCHARGE, meeting_date=MEETING, domain=WEB, entries=entries)
    assert attendance.records == []


def test_incharge_cannot_mark_other_department(svc):
    with pytest.raises(AuthorizationError):
        svc.mark_meeting(principal=INCHARGE, meeting_date=MEETING, domain="Finance", entries=[entry(3)])


def test_hr_cannot_mark_attendance(svc):
    with pytest.raises(AuthorizationError):
        svc.mark_meeting(
            principal=Principal(user_id=2, role=Role.HR),
            meeting_date=MEETING,
            domain=WEB,
            entries=[entry(1)],
        )


def test_meeting_dates_are_grouped_newest_first_and_scoped(svc):
    admin = Principal(user_id=1, role=Role.ADMIN)
    svc.mark_meeting(principal=admin, meeting_date=date(2026, 2, 2), domain=WEB, entries=[entry(1), entry(2, AttendanceStatus.ABSENT)])
    svc.mark_meeting(principal=admin, meeting_date=date(2026, 2, 9), domain=WEB, entries=[entry(1)])
    svc.mark_meeting(principal=admin, meeting_date=date(2026, 2, 9), domain="Finance", entries=[entry(3)])

    scoped = svc.meeting_dates_by_department(INCHARGE)
    assert list(scoped) == [WEB]
    latest, earliest = scoped[WEB]
    assert latest.date == date(2026, 2, 9)
    assert (earliest.total_interns, earliest.present_count, earliest.absent_count) == (2, 1, 1)
    assert earliest.attendance_rate == 50.0

    assert sorted(svc.meeting_dates_by_department(admin)) == ["Finance", WEB]


def test_meeting_details_require_department_ownership(svc):
    svc.mark_meeting(principal=INCHARGE, meeting_date=MEETING, domain=WEB, entries=[entry(1)])

    rows = svc.meeting_details(principal=INCHARGE, department=WEB, meeting_date=MEETING)
    assert [r["intern_id"] for r in rows] == [1]

    with pytest.raises(AuthorizationError):
        svc.meeting_details(principal=INCHARGE, department="Finance", meeting_date=MEETING)
