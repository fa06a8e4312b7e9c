from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import InternStatus, PerformanceTag
from .model import Intern, InternApplication


class InternRepository(Protocol):
    """Repository interface for Intern.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, intern_id: int) -> Optional[Intern]:
        raise NotImplementedError

    def get_by_unique_id(self, unique_id: str) -> Optional[Intern]:
        raise NotImplementedError

    def find_by_email_or_mobile(self, *, email: str, mobile: str) -> Optional[Intern]:
        raise NotImplementedError

    def create(self, application: InternApplication) -> int:
        """Insert an Applied intern and give it its unique id in the same transaction."""

        raise NotImplementedError

    def search(
        self,
        *,
        search: str = "",
        status: Optional[InternStatus] = None,
        performance: Optional[PerformanceTag] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[Sequence[Intern], int]:
        """Return one page of interns (newest first) and the total match count."""

        raise NotImplementedError

    def list_filtered(
        self,
        *,
        domains: Optional[Sequence[str]] = None,
        statuses: Optional[Sequence[InternStatus]] = None,
    ) -> Sequence[Intern]:
        raise NotImplementedError

    def update(
        self,
        intern_id: int,
        *,
        status: Optional[InternStatus] = None,
        performance: Optional[PerformanceTag] = None,
        domain: Optional[str] = None,
        joining_date: Optional[date] = None,
        extended_days: Optional[int] = None,
    ) -> bool:
        """Update only the given fields. Returns False when the intern does not exist."""

        raise NotImplementedError
