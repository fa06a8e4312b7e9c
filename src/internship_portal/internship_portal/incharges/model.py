from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import InchargeStatus
from ..interns.model import Intern


@dataclass(frozen=True)
class InternIncharge:
    """Staff account responsible for one or more departments.

    Its interns are not stored on the record: they are the interns whose
    domain is one of ``departments``.
    """

    incharge_id: int
    full_name: str
    email: str
    mobile: str
    departments: tuple[str, ...]
    status: InchargeStatus = InchargeStatus.ACTIVE
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class InchargeProfile:
    incharge: InternIncharge
    interns: list[Intern] = field(default_factory=list)
