from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Ratings:
    initiative: float
    communication: float
    behaviour: float


@dataclass(frozen=True)
class MonthEntry:
    """What an evaluator submits for one month. Derived scores are never part of it."""

    total_tasks: int
    tasks_completed: int
    ratings: Ratings
    remarks: str = ""
    month_label: Optional[str] = None


@dataclass(frozen=True)
class PerformanceMonth:
    performance_id: int
    intern_id: int
    month_number: int
    month_label: str
    total_tasks: int
    tasks_completed: int
    ratings: Ratings
    overall_rating: float
    completion_percentage: float
    remarks: str = ""
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PerformanceSummary:
    intern_id: int
    current_rating: Optional[float]
    average_rating: float
    months: list[PerformanceMonth] = field(default_factory=list)
