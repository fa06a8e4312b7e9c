from __future__ import annotations

import click
from flask import Flask

from ..common.web import current_principal, json_endpoint, ok, parse_body, parse_query, role_guard
from ..container import Container
from ..core.enums import Role
from .schemas import (
    ApplicationBody,
    DomainBody,
    ExtendBody,
    InternQuery,
    JoiningDateBody,
    PerformanceBody,
    StatusBody,
)


def register(app: Flask, container: Container) -> None:
    role_required = role_guard(container.incharges_repo)
    service = container.intern_service

    @app.route("/api/intern/apply", methods=["POST"], endpoint="apply_internship")
    @json_endpoint
    def apply_internship():
        body = parse_body(ApplicationBody)
        intern = service.apply(body.to_application())
        return ok({"message": "Intern created successfully", "intern": intern}, status=201)

    @app.route("/api/interns/<unique_id>", methods=["GET"], endpoint="public_intern_profile")
    @json_endpoint
    def public_intern_profile(unique_id: str):
        return ok({"intern": service.public_profile(unique_id)})

    @app.route("/api/admin/interns", methods=["GET"], endpoint="list_interns")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def list_interns():
        q = parse_query(InternQuery)
        page = service.search(
            search=q.search,
            status=q.status,
            performance=q.performance,
            page=q.page,
            limit=q.limit,
        )
        return ok(page)

    @app.route("/api/admin/interns/<int:intern_id>", methods=["GET"], endpoint="get_intern")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def get_intern(intern_id: int):
        return ok({"intern": service.get(intern_id)})

    @app.route("/api/admin/interns/<int:intern_id>/status", methods=["PUT"], endpoint="update_intern_status")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def update_intern_status(intern_id: int):
        body = parse_body(StatusBody)
        intern = service.update_status(
            current_role=current_principal().role,
            intern_id=intern_id,
            status=body.status,
        )
        return ok({"message": "Status updated successfully", "intern": intern})

    @app.route(
        "/api/admin/interns/<int:intern_id>/performance",
        methods=["PUT"],
        endpoint="update_intern_performance",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def update_intern_performance(intern_id: int):
        body = parse_body(PerformanceBody)
        intern = service.update_performance(
            current_role=current_principal().role,
            intern_id=intern_id,
            performance=body.performance,
        )
        return ok({"message": "Performance updated successfully", "intern": intern})

    @app.route("/api/admin/interns/<int:intern_id>/domain", methods=["PUT"], endpoint="update_intern_domain")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def update_intern_domain(intern_id: int):
        body = parse_body(DomainBody)
        intern = service.update_domain(
            current_role=current_principal().role,
            intern_id=intern_id,
            domain=body.domain,
        )
        return ok({"message": "Domain updated successfully", "intern": intern})

    @app.route(
        "/api/admin/interns/<int:intern_id>/joining-date",
        methods=["PUT"],
        endpoint="update_intern_joining_date",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def update_intern_joining_date(intern_id: int):
        body = parse_body(JoiningDateBody)
        intern = service.update_joining_date(
            current_role=current_principal().role,
            intern_id=intern_id,
            joining_date=body.joining_date,
        )
        return ok({"message": "Joining date updated successfully", "intern": intern})

    @app.route("/api/intern-incharge/interns/<int:intern_id>/extend", methods=["POST"], endpoint="extend_internship")
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def extend_internship(intern_id: int):
        body = parse_body(ExtendBody)
        result = service.extend(
            principal=current_principal(),
            intern_id=intern_id,
            extra_days=body.extended_days,
        )
        return ok(
            {
                "message": f"Internship extended by {body.extended_days} days. "
                f"End date: {result.calculated_end_date.isoformat()}",
                "intern": result,
            }
        )

    @app.cli.command("complete-internships")
    def complete_internships():
        """Mark Active interns whose internship has ended as Completed."""
        completed = service.complete_expired()
        click.echo(f"Completed {len(completed)} internship(s)")
