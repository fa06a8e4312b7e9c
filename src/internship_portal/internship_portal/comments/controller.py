from __future__ import annotations

from flask import Flask

from ..common.web import current_principal, json_endpoint, ok, parse_body, role_guard
from ..container import Container
from ..core.enums import Role
from .schemas import HrCommentBody, InchargeCommentBody


def register(app: Flask, container: Container) -> None:
    role_required = role_guard(container.incharges_repo)
    service = container.comment_service

    @app.route("/api/hr/interns/<int:intern_id>/hr-comments", methods=["GET"], endpoint="hr_comments")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def hr_comments(intern_id: int):
        comments = service.list_hr_comments(principal=current_principal(), intern_id=intern_id)
        return ok({"hr_comments": comments})

    @app.route("/api/hr/interns/<int:intern_id>/hr-comments", methods=["POST"], endpoint="add_hr_comment")
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def add_hr_comment(intern_id: int):
        body = parse_body(HrCommentBody)
        comment = service.add_hr_comment(
            principal=current_principal(),
            intern_id=intern_id,
            stage=body.stage,
            text=body.text,
        )
        return ok({"message": "HR comment added successfully", "comment": comment}, status=201)

    @app.route(
        "/api/hr/interns/<int:intern_id>/hr-comments/<int:comment_id>",
        methods=["DELETE"],
        endpoint="delete_hr_comment",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.HR)
    def delete_hr_comment(intern_id: int, comment_id: int):
        service.delete_hr_comment(principal=current_principal(), intern_id=intern_id, comment_id=comment_id)
        return ok({"message": "HR comment deleted successfully"})

    @app.route("/api/intern-incharge/interns/<int:intern_id>/comments", methods=["GET"], endpoint="incharge_comments")
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def incharge_comments(intern_id: int):
        comments = service.list_incharge_comments(principal=current_principal(), intern_id=intern_id)
        return ok({"comments": comments})

    @app.route(
        "/api/intern-incharge/interns/<int:intern_id>/comments",
        methods=["POST"],
        endpoint="add_incharge_comment",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def add_incharge_comment(intern_id: int):
        body = parse_body(InchargeCommentBody)
        comment = service.add_incharge_comment(principal=current_principal(), intern_id=intern_id, text=body.comment)
        return ok({"message": "Comment added successfully", "comment": comment}, status=201)

    @app.route(
        "/api/intern-incharge/interns/<int:intern_id>/comments/<int:comment_id>",
        methods=["DELETE"],
        endpoint="delete_incharge_comment",
    )
    @json_endpoint
    @role_required(Role.ADMIN, Role.INCHARGE)
    def delete_incharge_comment(intern_id: int, comment_id: int):
        service.delete_incharge_comment(principal=current_principal(), intern_id=intern_id, comment_id=comment_id)
        return ok({"message": "Comment deleted successfully"})
