from __future__ import annotations

from datetime import date

import pytest

from src.internship_portal.internship_portal.attendance.aggregator import AttendanceAggregator
from src.internship_portal.internship_portal.attendance.model import AttendanceFilters
from src.internship_portal.internship_portal.core.enums import AttendanceStatus, InternStatus
from tests.fakes import FakeAttendanceRepo, FakeInternsRepo, make_intern

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LEAVE
D1, D2, D3 = date(2026, 1, 5), date(2026, 1, 12), date(2026, 1, 19)


@pytest.fixture()
def aggregator():
    interns = FakeInternsRepo(
        [
            make_intern(1, name="Asha Rao"),
            make_intern(2, name="bala Kumar"),
            make_intern(3, name="Chitra", status=InternStatus.COMPLETED),
            make_intern(4, name="Dev", domain="Marketing"),
            make_intern(5, name="Esha", domain="Marketing", email="esha@college.edu"),
        ]
    )
    attendance = FakeAttendanceRepo(interns)
    for intern_id, day, status in [
        (1, D1, P), (1, D2, P), (1, D3, A),
        (2, D1, P), (2, D2, L),
        (3, D1, A),
        (4, D1, P), (4, D2, P),
    ]:
        attendance.add(intern_id, day, status)
    return AttendanceAggregator(attendance, interns)


def test_counts_and_rate_per_intern(aggregator):
    rows = {r.intern_id: r for r in aggregator.list_with_stats()}

    asha = rows[1]
    assert (asha.total_meetings, asha.present_count, asha.absent_count, asha.leave_count) == (3, 2, 1, 0)
    assert asha.meetings_attended == asha.present_count
    assert asha.attendance_rate == 66.7

    assert rows[2].leaves_taken == rows[2].leave_count == 1
    assert rows[2].attendance_rate == 50.0


def test_intern_without_meetings_has_zero_rate(aggregator):
    esha = next(r for r in aggregator.list_with_stats() if r.intern_id == 5)

    assert esha.total_meetings == 0
    assert esha.attendance_rate == 0


def test_department_and_status_filters_are_conjunctive(aggregator):
    rows = aggregator.list_with_stats(AttendanceFilters(department="Web Development", status=InternStatus.ACTIVE))

    assert [r.intern_id for r in rows] == [1, 2]
    for r in rows:
        assert r.domain == "Web Development"
        assert r.status == InternStatus.ACTIVE
        assert isinstance(r.attendance_rate, float)
        assert isinstance(r.total_meetings, int)


def test_search_matches_name_email_or_unique_id_case_insensitively(aggregator):
    assert [r.intern_id for r in aggregator.list_with_stats(AttendanceFilters(search="BALA"))] == [2]
    assert [r.intern_id for r in aggregator.list_with_stats(AttendanceFilters(search="college.EDU"))] == [5]
    assert [r.intern_id for r in aggregator.list_with_stats(AttendanceFilters(search="int000004"))] == [4]


def test_date_restricts_counted_records(aggregator):
    rows = {r.intern_id: r for r in aggregator.list_with_stats(AttendanceFilters(date=D2))}

    assert rows[1].total_meetings == 1
    assert rows[1].attendance_rate == 100.0
    assert rows[3].total_meetings == 0


def test_output_is_ordered_by_domain_then_name(aggregator):
    rows = aggregator.list_with_stats()
    assert [r.intern_id for r in rows] == [4, 5, 1, 2, 3]


def test_department_stats_and_overall(aggregator):
    report = aggregator.department_stats()

    web = report.departments["Web Development"]
    assert web.intern_count == 3
    assert (web.present_count, web.absent_count, web.leave_count) == (3, 2, 1)
    assert web.total_meetings == 6
    assert web.attendance_rate == 50.0

    marketing = report.departments["Marketing"]
    assert marketing.attendance_rate == 100.0

    overall = report.overall
    assert overall.total_interns == 5
    assert (overall.total_present, overall.total_absent, overall.total_leave) == (5, 2, 1)
    assert overall.department_count == 2
    # (66.7 + 50 + 0 + 100 + 0) / 5
    assert overall.average_attendance_rate == 43.3


def test_empty_snapshot_gives_empty_report():
    interns = FakeInternsRepo()
    report = AttendanceAggregator(FakeAttendanceRepo(interns), interns).department_stats()

    assert report.departments == {}
    assert report.overall.total_interns == 0
    assert report.overall.average_attendance_rate == 0


def test_repeated_reads_are_identical(aggregator):
    filters = AttendanceFilters(department="Marketing")
    assert aggregator.list_with_stats(filters) == aggregator.list_with_stats(filters)
    assert aggregator.department_stats(filters) == aggregator.department_stats(filters)
