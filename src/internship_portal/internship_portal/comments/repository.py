from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import CommentKind, ReviewStage, Role
from .model import InternComment


class CommentRepository(Protocol):
    def add(
        self,
        *,
        intern_id: int,
        kind: CommentKind,
        text: str,
        author_id: int,
        author_role: Role,
        stage: Optional[ReviewStage] = None,
    ) -> int:
        raise NotImplementedError

    def get(self, comment_id: int) -> Optional[InternComment]:
        raise NotImplementedError

    def list_for(self, *, intern_id: int, kind: CommentKind) -> Sequence[InternComment]:
        """Comments of one kind on an intern, oldest first."""

        raise NotImplementedError

    def delete(self, comment_id: int) -> bool:
        raise NotImplementedError
