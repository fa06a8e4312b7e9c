from __future__ import annotations

from flask import Flask

from ..common.web import current_principal, json_endpoint, ok, parse_body, parse_query, role_guard
from ..container import Container
from ..core.enums import Role
from .schemas import AttendanceQuery, MeetingBody, MeetingDetailsQuery


def register(app: Flask, container: Container) -> None:
    role_required = role_guard(container.incharges_repo)
    service = container.attendance_service
    aggregator = container.attendance_aggregator

    @app.route("/api/incharge/attendance", methods=["POST"], endpoint="mark_attendance")
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def mark_attendance():
        body = parse_body(MeetingBody)
        count = service.mark_meeting(
            principal=current_principal(),
            meeting_date=body.date,
            domain=body.domain,
            entries=body.to_entries(),
        )
        return ok({"message": f"Attendance marked for {count} interns", "count": count}, status=201)

    @app.route("/api/admin/attendance/interns", methods=["GET"], endpoint="attendance_interns")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def attendance_interns():
        filters = parse_query(AttendanceQuery).to_filters()
        rows = aggregator.list_with_stats(filters)
        report = aggregator.summarize(rows)
        return ok(
            {
                "interns": rows,
                "department_stats": report.departments,
                "overall_stats": report.overall,
            }
        )

    @app.route("/api/admin/attendance/departments", methods=["GET"], endpoint="attendance_departments")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def attendance_departments():
        filters = parse_query(AttendanceQuery).to_filters()
        report = aggregator.department_stats(filters)
        return ok({"departments": report.departments, "overall": report.overall})

    @app.route(
        "/api/intern-incharge/department-meeting-dates",
        methods=["GET"],
        endpoint="department_meeting_dates",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def department_meeting_dates():
        return ok({"departments": service.meeting_dates_by_department(current_principal())})

    @app.route(
        "/api/intern-incharge/department-meeting-details",
        methods=["GET"],
        endpoint="department_meeting_details",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def department_meeting_details():
        q = parse_query(MeetingDetailsQuery)
        records = service.meeting_details(
            principal=current_principal(),
            department=q.department,
            meeting_date=q.date,
        )
        return ok({"department": q.department, "date": q.date, "records": records})
