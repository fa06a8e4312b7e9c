from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PerformanceMonth, Ratings


class PerformanceRepository(Protocol):
    def list_months(self, intern_id: int) -> Sequence[PerformanceMonth]:
        """All monthly entries of one intern ordered by month number."""

        raise NotImplementedError

    def append_month(
        self,
        *,
        intern_id: int,
        month_label: Optional[str],
        total_tasks: int,
        tasks_completed: int,
        ratings: Ratings,
        overall_rating: float,
        completion_percentage: float,
        remarks: str,
    ) -> int:
        """Store the entry as month ``max(existing) + 1`` and return that month number.

        ``month_label`` defaults to ``"Month <n>"``. Raises ConflictError if the
        month number was taken concurrently.
        """

        raise NotImplementedError

    def delete_month(self, *, intern_id: int, month_number: int) -> bool:
        raise NotImplementedError
