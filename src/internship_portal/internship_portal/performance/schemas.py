from __future__ import annotations

from typing import Optional

from pydantic import Field

from ..common.schemas import RequestSchema
from .model import MonthEntry, Ratings


class RatingsBody(RequestSchema):
    initiative: float
    communication: float
    behaviour: float


class MonthBody(RequestSchema):
    # overallRating and completionPercentage are not accepted: unknown fields fail validation.
    total_tasks: int = Field(ge=0)
    tasks_completed: int = Field(ge=0)
    ratings: RatingsBody
    remarks: str = ""
    month_label: Optional[str] = None

    def to_entry(self) -> MonthEntry:
        return MonthEntry(
            total_tasks=self.total_tasks,
            tasks_completed=self.tasks_completed,
            ratings=Ratings(
                initiative=self.ratings.initiative,
                communication=self.ratings.communication,
                behaviour=self.ratings.behaviour,
            ),
            remarks=self.remarks,
            month_label=self.month_label,
        )
