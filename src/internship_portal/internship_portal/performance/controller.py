from __future__ import annotations

from flask import Flask

from ..common.web import current_principal, json_endpoint, ok, parse_body, role_guard
from ..container import Container
from ..core.enums import Role
from .schemas import MonthBody


def register(app: Flask, container: Container) -> None:
    role_required = role_guard(container.incharges_repo)
    service = container.performance_service

    @app.route("/api/intern-incharge/interns/<int:intern_id>/performance", methods=["GET"], endpoint="get_performance")
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def get_performance(intern_id: int):
        return ok({"performance": service.get_for(principal=current_principal(), intern_id=intern_id)})

    @app.route(
        "/api/intern-incharge/interns/<int:intern_id>/performance",
        methods=["PUT"],
        endpoint="record_performance",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def record_performance(intern_id: int):
        body = parse_body(MonthBody)
        summary = service.record_month(principal=current_principal(), intern_id=intern_id, entry=body.to_entry())
        return ok({"message": "Performance updated successfully", "performance": summary})

    @app.route(
        "/api/intern-incharge/interns/<int:intern_id>/performance/<int:month_number>",
        methods=["DELETE"],
        endpoint="remove_performance_month",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def remove_performance_month(intern_id: int, month_number: int):
        summary = service.remove_month(principal=current_principal(), intern_id=intern_id, month_number=month_number)
        return ok({"message": f"Month {month_number} removed", "performance": summary})
