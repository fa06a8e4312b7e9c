from __future__ import annotations

from pydantic import Field

from ..common.schemas import RequestSchema
from ..core.enums import ReviewStage


class HrCommentBody(RequestSchema):
    stage: ReviewStage
    text: str = Field(min_length=1)


class InchargeCommentBody(RequestSchema):
    comment: str = Field(min_length=1)
