from __future__ import annotations

from datetime import date, datetime

import pytest

from src.internship_portal.internship_portal.common.principal import Principal
from src.internship_portal.internship_portal.core.enums import InternStatus, PerformanceTag, Role
from src.internship_portal.internship_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.internship_portal.internship_portal.interns.service import InternService, internship_end_date
from tests.fakes import FakeInternsRepo, make_application, make_intern

ADMIN = Principal(user_id=1, role=Role.ADMIN)
WEB_INCHARGE = Principal(user_id=7, role=Role.INCHARGE, departments=("Web Development",))


def clock_at(day: date):
    return lambda: datetime(day.year, day.month, day.day, 9, 0, 0)


def test_apply_assigns_unique_id_and_applied_status():
    svc = InternService(FakeInternsRepo())
    intern = svc.apply(make_application())

    assert intern.unique_id == f"INT{intern.intern_id:06d}"
    assert intern.status == InternStatus.APPLIED


def test_apply_rejects_duplicate_contact():
    svc = InternService(FakeInternsRepo())
    svc.apply(make_application())

    with pytest.raises(ValidationError, match="already exists"):
        svc.apply(make_application(email="other@example.com"))


def test_apply_rejects_unknown_domain():
    with pytest.raises(ValidationError):
        InternService(FakeInternsRepo()).apply(make_application(domain="Astrology"))


def test_search_paginates():
    svc = InternService(FakeInternsRepo([make_intern(i) for i in range(1, 13)]))

    page = svc.search(page=2, limit=5)
    assert page.total == 12
    assert page.pages == 3
    assert [i.intern_id for i in page.interns] == [7, 6, 5, 4, 3]


def test_updates_are_for_admin_and_hr_only():
    svc = InternService(FakeInternsRepo([make_intern(1, status=InternStatus.SELECTED)]))

    updated = svc.update_status(current_role=Role.HR, intern_id=1, status=InternStatus.ACTIVE)
    assert updated.status == InternStatus.ACTIVE
    updated = svc.update_performance(current_role=Role.ADMIN, intern_id=1, performance=PerformanceTag.EXCELLENT)
    assert updated.performance == PerformanceTag.EXCELLENT

    with pytest.raises(AuthorizationError):
        svc.update_domain(current_role=Role.INCHARGE, intern_id=1, domain="Finance")
    with pytest.raises(NotFoundError):
        svc.update_joining_date(current_role=Role.ADMIN, intern_id=9, joining_date=date(2026, 1, 1))


def test_end_date_adds_months_then_extension():
    intern = make_intern(1, joining_date=date(2025, 11, 30), duration="3 Months", extended_days=5)
    # Nov 30 + 3 months clamps to Feb 28, then +5 days
    assert internship_end_date(intern) == date(2026, 3, 5)
    assert internship_end_date(make_intern(2)) is None


def test_extend_reopens_a_completed_internship():
    repo = FakeInternsRepo(
        [make_intern(1, status=InternStatus.COMPLETED, joining_date=date(2026, 1, 1), duration="1 Month")]
    )
    svc = InternService(repo, clock=clock_at(date(2026, 2, 10)))

    result = svc.extend(principal=WEB_INCHARGE, intern_id=1, extra_days=15)

    assert result.calculated_end_date == date(2026, 2, 16)
    assert result.status == InternStatus.ACTIVE
    assert repo.get_by_id(1).extended_days == 15


def test_extend_validation():
    repo = FakeInternsRepo([make_intern(1), make_intern(2, domain="Finance", joining_date=date(2026, 1, 1))])
    svc = InternService(repo)

    with pytest.raises(ValidationError):
        svc.extend(principal=ADMIN, intern_id=1, extra_days=0)
    with pytest.raises(ValidationError, match="joining date"):
        svc.extend(principal=ADMIN, intern_id=1, extra_days=3)
    with pytest.raises(AuthorizationError):
        svc.extend(principal=WEB_INCHARGE, intern_id=2, extra_days=3)


def test_complete_expired_only_touches_active_interns_past_their_end():
    repo = FakeInternsRepo(
        [
            make_intern(1, joining_date=date(2026, 1, 1), duration="1 Month"),
            make_intern(2, joining_date=date(2026, 1, 1), duration="1 Month", extended_days=30),
            make_intern(3, joining_date=date(2026, 1, 1), duration="1 Month", status=InternStatus.INACTIVE),
            make_intern(4),
        ]
    )
    svc = InternService(repo, clock=clock_at(date(2026, 2, 1)))

    assert svc.complete_expired() == [1]
    assert repo.get_by_id(1).status == InternStatus.COMPLETED
    assert repo.get_by_id(2).status == InternStatus.ACTIVE
    assert repo.get_by_id(3).status == InternStatus.INACTIVE


def test_public_profile_shows_completed_intern_with_end_date():
    repo = FakeInternsRepo(
        [make_intern(5, status=InternStatus.COMPLETED, joining_date=date(2026, 1, 10), extended_days=5)]
    )

    profile = InternService(repo).public_profile(" int000005 ")

    assert profile.unique_id == "INT000005"
    assert profile.end_date == date(2026, 4, 15)
    assert not hasattr(profile, "mobile")


def test_public_profile_hides_interns_that_have_not_completed():
    repo = FakeInternsRepo([make_intern(5, joining_date=date(2026, 1, 10))])

    with pytest.raises(NotFoundError, match="Completed intern not found"):
        InternService(repo).public_profile("INT000005")
    with pytest.raises(NotFoundError):
        InternService(repo).public_profile("INT999999")


def test_public_profile_needs_a_joining_date():
    repo = FakeInternsRepo([make_intern(5, status=InternStatus.COMPLETED)])

    with pytest.raises(ValidationError, match="Joining date"):
        InternService(repo).public_profile("INT000005")
