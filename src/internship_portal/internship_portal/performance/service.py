from __future__ import annotations

import logging

from ..common.numbers import mean, percentage
from ..common.principal import Principal
from ..common.validators import require_decimal_places, require_range
from ..core.constants import MAX_RATING, RATING_DECIMAL_PLACES
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..interns.model import Intern
from ..interns.repository import InternRepository
from .model import MonthEntry, PerformanceMonth, PerformanceSummary, Ratings
from .repository import PerformanceRepository

logger = logging.getLogger(__name__)

_EVALUATORS = {Role.ADMIN, Role.INCHARGE}


def overall_rating(ratings: Ratings) -> float:
    return mean((ratings.initiative, ratings.communication, ratings.behaviour))


def completion_percentage(tasks_completed: int, total_tasks: int) -> float:
    return percentage(tasks_completed, total_tasks)


class PerformanceService:
    """Monthly performance entries of an intern.

    Month numbers are assigned once, at creation, as one past the highest
    existing number. Removing a month leaves a gap; later months keep their
    numbers.
    """

    def __init__(self, performance: PerformanceRepository, interns: InternRepository):
        self._performance = performance
        self._interns = interns

    def _intern(self, intern_id: int) -> Intern:
        intern = self._interns.get_by_id(int(intern_id))
        if not intern:
            raise NotFoundError("Intern not found")
        return intern

    def _authorize(self, principal: Principal, intern: Intern) -> None:
        if principal.role not in _EVALUATORS:
            raise AuthorizationError("You do not have permission for this action")
        principal.require_department(intern.domain)

    @staticmethod
    def _validate(entry: MonthEntry) -> None:
        for name in ("initiative", "communication", "behaviour"):
            value = getattr(entry.ratings, name)
            require_range(value, name.capitalize(), low=0, high=MAX_RATING)
            require_decimal_places(value, name.capitalize(), RATING_DECIMAL_PLACES)
        if entry.total_tasks is None or entry.total_tasks < 0:
            raise ValidationError("Total tasks cannot be negative")
        if entry.tasks_completed is None or entry.tasks_completed < 0:
            raise ValidationError("Tasks completed cannot be negative")
        if entry.tasks_completed > entry.total_tasks:
            raise ValidationError("Tasks completed cannot exceed total tasks")

    def record_month(self, *, principal: Principal, intern_id: int, entry: MonthEntry) -> PerformanceSummary:
        intern = self._intern(intern_id)
        self._authorize(principal, intern)
        self._validate(entry)
        month_number = self._performance.append_month(
            intern_id=intern.intern_id,
            month_label=(entry.month_label or "").strip() or None,
            total_tasks=int(entry.total_tasks),
            tasks_completed=int(entry.tasks_completed),
            ratings=entry.ratings,
            overall_rating=overall_rating(entry.ratings),
            completion_percentage=completion_percentage(entry.tasks_completed, entry.total_tasks),
            remarks=(entry.remarks or "").strip(),
        )
        logger.info("Performance month %s recorded for intern %s", month_number, intern.intern_id)
        return self.summary(intern.intern_id)

    def list_months(self, intern_id: int) -> list[PerformanceMonth]:
        return sorted(self._performance.list_months(int(intern_id)), key=lambda m: m.month_number)

    def remove_month(self, *, principal: Principal, intern_id: int, month_number: int) -> PerformanceSummary:
        intern = self._intern(intern_id)
        self._authorize(principal, intern)
        if not self._performance.delete_month(intern_id=intern.intern_id, month_number=int(month_number)):
            raise NotFoundError(f"Month {month_number} not found")
        logger.info("Performance month %s removed for intern %s", month_number, intern.intern_id)
        return self.summary(intern.intern_id)

    def summary(self, intern_id: int) -> PerformanceSummary:
        months = self.list_months(intern_id)
        return PerformanceSummary(
            intern_id=int(intern_id),
            current_rating=months[-1].overall_rating if months else None,
            average_rating=mean(m.overall_rating for m in months),
            months=months,
        )

    def get_for(self, *, principal: Principal, intern_id: int) -> PerformanceSummary:
        intern = self._intern(intern_id)
        self._authorize(principal, intern)
        return self.summary(intern.intern_id)
