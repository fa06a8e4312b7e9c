from __future__ import annotations

import logging
from typing import Optional

from ..common.principal import Principal
from ..common.validators import require_non_empty, require_present
from ..core.enums import CommentKind, ReviewStage, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..interns.model import Intern
from ..interns.repository import InternRepository
from .model import InternComment
from .repository import CommentRepository

logger = logging.getLogger(__name__)

_AUTHORS = {
    CommentKind.HR: {Role.ADMIN, Role.HR},
    CommentKind.INCHARGE: {Role.ADMIN, Role.INCHARGE},
}

_LABELS = {CommentKind.HR: "HR comment", CommentKind.INCHARGE: "Comment"}


class CommentService:
    """Notes kept on an intern.

    HR comments follow the selection stages and can only be removed by their
    author (or an admin). Incharge comments are limited to interns of the
    incharge's departments, and any incharge of that department may remove one.
    """

    def __init__(self, comments: CommentRepository, interns: InternRepository):
        self._comments = comments
        self._interns = interns

    def _intern_for(self, principal: Principal, intern_id: int, kind: CommentKind) -> Intern:
        if principal.role not in _AUTHORS[kind]:
            raise AuthorizationError("You do not have permission for this action")
        intern = self._interns.get_by_id(int(intern_id))
        if not intern:
            raise NotFoundError("Intern not found")
        if kind == CommentKind.INCHARGE:
            principal.require_department(intern.domain)
        return intern

    def _add(
        self,
        principal: Principal,
        intern_id: int,
        kind: CommentKind,
        text: str,
        stage: Optional[ReviewStage] = None,
    ) -> InternComment:
        intern = self._intern_for(principal, intern_id, kind)
        text = require_non_empty(text, "Comment text")
        comment_id = self._comments.add(
            intern_id=intern.intern_id,
            kind=kind,
            text=text,
            author_id=principal.user_id,
            author_role=principal.role,
            stage=stage,
        )
        logger.info(
            "%s %s added to intern %s by %s %s",
            _LABELS[kind],
            comment_id,
            intern.intern_id,
            principal.role.value,
            principal.user_id,
        )
        return self._comments.get(comment_id)

    def _list(self, principal: Principal, intern_id: int, kind: CommentKind) -> list[InternComment]:
        intern = self._intern_for(principal, intern_id, kind)
        return list(self._comments.list_for(intern_id=intern.intern_id, kind=kind))

    def _delete(self, principal: Principal, intern_id: int, comment_id: int, kind: CommentKind) -> None:
        intern = self._intern_for(principal, intern_id, kind)
        comment = self._comments.get(int(comment_id))
        if not comment or comment.intern_id != intern.intern_id or comment.kind != kind:
            raise NotFoundError(f"{_LABELS[kind]} not found")
        if kind == CommentKind.HR and not principal.is_admin and comment.author_id != principal.user_id:
            raise AuthorizationError("Not authorized to delete this comment")
        if not self._comments.delete(comment.comment_id):
            raise NotFoundError(f"{_LABELS[kind]} not found")
        logger.info("%s %s removed from intern %s", _LABELS[kind], comment.comment_id, intern.intern_id)

    def add_hr_comment(self, *, principal: Principal, intern_id: int, stage: ReviewStage, text: str) -> InternComment:
        require_present(stage, "Stage")
        try:
            stage = ReviewStage(stage)
        except ValueError:
            raise ValidationError(f"Unknown review stage {stage!r}")
        return self._add(principal, intern_id, CommentKind.HR, text, stage)

    def list_hr_comments(self, *, principal: Principal, intern_id: int) -> list[InternComment]:
        return self._list(principal, intern_id, CommentKind.HR)

    def delete_hr_comment(self, *, principal: Principal, intern_id: int, comment_id: int) -> None:
        self._delete(principal, intern_id, comment_id, CommentKind.HR)

    def add_incharge_comment(self, *, principal: Principal, intern_id: int, text: str) -> InternComment:
        return self._add(principal, intern_id, CommentKind.INCHARGE, text)

    def list_incharge_comments(self, *, principal: Principal, intern_id: int) -> list[InternComment]:
        return self._list(principal, intern_id, CommentKind.INCHARGE)

    def delete_incharge_comment(self, *, principal: Principal, intern_id: int, comment_id: int) -> None:
        self._delete(principal, intern_id, comment_id, CommentKind.INCHARGE)
