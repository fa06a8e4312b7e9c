from __future__ import annotations

from flask import Flask

from ..common.web import current_principal, json_endpoint, ok, parse_body, parse_query, role_guard
from ..container import Container
from ..core.enums import LeaveDecision, Role
from .schemas import LeaveBody, LeaveQuery


def register(app: Flask, container: Container) -> None:
    role_required = role_guard(container.incharges_repo)
    service = container.leave_service

    _messages = {
        LeaveDecision.APPROVE: "Leave request approved",
        LeaveDecision.REJECT: "Leave request rejected",
    }

    def _decide(leave_id: int, action: str):
        decision = LeaveDecision(action)
        leave = service.decide(principal=current_principal(), leave_id=leave_id, decision=decision)
        return ok({"message": _messages[decision], "leave": leave})

    @app.route("/api/intern/leaves", methods=["POST"], endpoint="submit_leave")
    @json_endpoint
    def submit_leave():
        body = parse_body(LeaveBody)
        leave = service.submit(
            unique_id=body.intern_id,
            leave_type=body.leave_type,
            start_date=body.start_date,
            end_date=body.end_date,
            reason=body.reason,
        )
        return ok({"message": "Leave application submitted successfully", "leave": leave}, status=201)

    @app.route("/api/admin/leaves", methods=["GET"], endpoint="admin_leaves")
    @json_endpoint
    @role_required(Role.ADMIN)
    def admin_leaves():
        q = parse_query(LeaveQuery)
        return ok(service.list_all(status=q.status))

    @app.route(
        "/api/admin/leaves/<int:leave_id>/<any(approve, reject):action>",
        methods=["POST"],
        endpoint="admin_decide_leave",
    )
    @json_endpoint
    @role_required(Role.ADMIN)
    def admin_decide_leave(leave_id: int, action: str):
        return _decide(leave_id, action)

    @app.route("/api/intern-incharge/pending-leaves", methods=["GET"], endpoint="incharge_pending_leaves")
    @json_endpoint
    @role_required(Role.INCHARGE)
    def incharge_pending_leaves():
        return ok({"leaves": service.list_pending_for_incharge(current_principal())})

    @app.route(
        "/api/intern-incharge/leaves/<int:leave_id>/<any(approve, reject):action>",
        methods=["POST"],
        endpoint="incharge_decide_leave",
    )
    @json_endpoint
    @role_required(Role.INCHARGE)
    def incharge_decide_leave(leave_id: int, action: str):
        return _decide(leave_id, action)
