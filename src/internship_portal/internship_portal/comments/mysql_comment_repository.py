from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import CommentKind, ReviewStage, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import InternComment
from .repository import CommentRepository

_COLUMNS = "comment_id, intern_id, kind, stage, text, author_id, author_role, created_at"


def row_to_comment(r: dict) -> InternComment:
    return InternComment(
        comment_id=int(r["comment_id"]),
        intern_id=int(r["intern_id"]),
        kind=CommentKind(r["kind"]),
        text=r["text"],
        author_id=int(r["author_id"]),
        author_role=Role(r["author_role"]),
        stage=ReviewStage(r["stage"]) if r.get("stage") else None,
        created_at=r.get("created_at"),
    )


class MySQLCommentRepository(CommentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO intern_comments(intern_id, kind, stage, text, author_id, author_role)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(intern_id),
                    kind.value,
                    stage.value if stage else None,
                    text,
                    int(author_id),
                    author_role.value,
                ),
            )
            return int(cur.lastrowid)

    def get(self, comment_id: int) -> Optional[InternComment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM intern_comments WHERE comment_id=%s", (int(comment_id),))
            r = fetchone(cur)
            return row_to_comment(r) if r else None

    def list_for(self, *, intern_id: int, kind: CommentKind) -> Sequence[InternComment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM intern_comments
                WHERE intern_id=%s AND kind=%s
                ORDER BY created_at, comment_id
                """,
                (int(intern_id), kind.value),
            )
            return [row_to_comment(r) for r in fetchall(cur)]

    def delete(self, comment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM intern_comments WHERE comment_id=%s", (int(comment_id),))
            return cur.rowcount > 0
