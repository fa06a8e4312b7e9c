from __future__ import annotations

from flask import Flask

from ..common.web import current_principal, json_endpoint, ok, parse_body, role_guard
from ..container import Container
from ..core.constants import DEPARTMENTS
from ..core.enums import Role
from .schemas import DepartmentsBody, InchargeBody, InchargeStatusBody, RemoveDepartmentBody


def register(app: Flask, container: Container) -> None:
    role_required = role_guard(container.incharges_repo)
    service = container.incharge_service

    @app.route("/api/admin/departments", methods=["GET"], endpoint="list_departments")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR, Role.INCHARGE)
    def list_departments():
        return ok({"departments": list(DEPARTMENTS)})

    @app.route("/api/admin/department-incharges", methods=["GET"], endpoint="list_incharges")
    @json_endpoint
    @role_required(Role.ADMIN)
    def list_incharges():
        return ok({"incharges": service.list_all()})

    @app.route("/api/admin/department-incharges", methods=["POST"], endpoint="create_incharge")
    @json_endpoint
    @role_required(Role.ADMIN)
    def create_incharge():
        body = parse_body(InchargeBody)
        incharge = service.create(
            current_role=current_principal().role,
            full_name=body.full_name,
            email=str(body.email),
            mobile=body.mobile,
            departments=body.departments,
        )
        return ok({"message": "Intern incharge created", "incharge": incharge}, status=201)

    @app.route("/api/admin/intern-incharge/<int:incharge_id>/profile", methods=["GET"], endpoint="incharge_profile")
    @json_endpoint
    @role_required(Role.ADMIN)
    def incharge_profile(incharge_id: int):
        return ok(service.profile(incharge_id))

    @app.route(
        "/api/admin/intern-incharge/<int:incharge_id>/add/departments",
        methods=["PUT"],
        endpoint="add_incharge_departments",
    )
    @json_endpoint
    @role_required(Role.ADMIN)
    def add_incharge_departments(incharge_id: int):
        body = parse_body(DepartmentsBody)
        incharge = service.add_departments(
            current_role=current_principal().role,
            incharge_id=incharge_id,
            departments=body.departments,
        )
        return ok({"message": "Departments updated", "incharge": incharge})

    @app.route(
        "/api/admin/intern-incharge/<int:incharge_id>/remove/departments",
        methods=["PUT"],
        endpoint="remove_incharge_department",
    )
    @json_endpoint
    @role_required(Role.ADMIN)
    def remove_incharge_department(incharge_id: int):
        body = parse_body(RemoveDepartmentBody)
        incharge = service.remove_department(
            current_role=current_principal().role,
            incharge_id=incharge_id,
            department=body.department,
        )
        return ok({"message": "Department removed", "incharge": incharge})

    @app.route(
        "/api/admin/intern-incharge/<int:incharge_id>/status",
        methods=["PUT"],
        endpoint="set_incharge_status",
    )
    @json_endpoint
    @role_required(Role.ADMIN)
    def set_incharge_status(incharge_id: int):
        body = parse_body(InchargeStatusBody)
        incharge = service.set_status(
            current_role=current_principal().role,
            incharge_id=incharge_id,
            status=body.status,
        )
        return ok({"message": f"Incharge is now {incharge.status.value}", "incharge": incharge})

    @app.route("/api/admin/department-incharges/<int:incharge_id>", methods=["DELETE"], endpoint="delete_incharge")
    @json_endpoint
    @role_required(Role.ADMIN)
    def delete_incharge(incharge_id: int):
        service.delete(current_role=current_principal().role, incharge_id=incharge_id)
        return ok({"message": "Intern incharge deleted"})

    @app.route("/api/intern-incharge/assigned-interns", methods=["GET"], endpoint="assigned_interns")
    @json_endpoint
    @role_required(Role.INCHARGE)
    def assigned_interns():
        return ok({"interns": service.assigned_interns(current_principal())})
