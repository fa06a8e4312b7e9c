from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import CommentKind, ReviewStage, Role


@dataclass(frozen=True)
class InternComment:
    comment_id: int
    intern_id: int
    kind: CommentKind
    text: str
    author_id: int
    author_role: Role
    stage: Optional[ReviewStage] = None
    created_at: Optional[datetime] = None
