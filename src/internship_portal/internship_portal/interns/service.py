from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import add_months, now_local
from ..common.principal import Principal
from ..common.validators import require_non_empty, require_one_of
from ..core.constants import DEFAULT_PAGE_SIZE, DEPARTMENTS, DURATION_MONTHS
from ..core.enums import InternStatus, PerformanceTag, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import ExtensionResult, Intern, InternApplication, InternPage, PublicInternProfile
from .repository import InternRepository

logger = logging.getLogger(__name__)

_MANAGERS = {Role.ADMIN, Role.HR}


def internship_end_date(intern: Intern) -> Optional[date]:
    """Joining date + duration months + extended days; None until the intern joins."""

    if not intern.joining_date:
        return None
    months = DURATION_MONTHS.get(intern.duration, 0)
    return add_months(intern.joining_date, months) + timedelta(days=int(intern.extended_days or 0))


class InternService:
    """Use cases: application intake and admin/HR management of interns."""

    def __init__(self, interns: InternRepository, *, clock: Callable[[], datetime] = now_local):
        self._interns = interns
        self._clock = clock

    def apply(self, application: InternApplication) -> Intern:
        require_non_empty(application.full_name, "Full name")
        require_non_empty(application.email, "Email")
        require_non_empty(application.mobile, "Mobile")
        require_one_of(application.domain, DEPARTMENTS, "Domain")
        require_one_of(application.duration, DURATION_MONTHS, "Duration")
        require_one_of(application.prev_internship, ("Yes", "No"), "Previous internship")

        if self._interns.find_by_email_or_mobile(email=application.email, mobile=application.mobile):
            raise ValidationError("Intern with this email or mobile already exists")

        intern_id = self._interns.create(application)
        logger.info("Intern application %s received for %s", intern_id, application.domain)
        return self.get(intern_id)

    def get(self, intern_id: int) -> Intern:
        intern = self._interns.get_by_id(int(intern_id))
        if not intern:
            raise NotFoundError("Intern not found")
        return intern

    def public_profile(self, unique_id: str) -> PublicInternProfile:
        """Look up a Completed intern by unique id; other statuses are not visible."""

        intern = self._interns.get_by_unique_id((unique_id or "").strip().upper())
        if not intern or intern.status != InternStatus.COMPLETED:
            raise NotFoundError("Completed intern not found")
        if not intern.joining_date:
            raise ValidationError("Joining date is missing")
        return PublicInternProfile(
            unique_id=intern.unique_id,
            full_name=intern.full_name,
            domain=intern.domain,
            duration=intern.duration,
            college=intern.college,
            course=intern.course,
            performance=intern.performance,
            status=intern.status,
            joining_date=intern.joining_date,
            extended_days=int(intern.extended_days or 0),
            end_date=internship_end_date(intern),
        )

    def search(
        self,
        *,
        search: str = "",
        status: Optional[InternStatus] = None,
        performance: Optional[PerformanceTag] = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> InternPage:
        page = max(int(page), 1)
        limit = max(int(limit), 1)
        interns, total = self._interns.search(
            search=search,
            status=status,
            performance=performance,
            offset=(page - 1) * limit,
            limit=limit,
        )
        return InternPage(interns=list(interns), total=total, page=page, pages=math.ceil(total / limit))

    def _update(self, current_role: Role, intern_id: int, **fields) -> Intern:
        if current_role not in _MANAGERS:
            raise AuthorizationError("You do not have permission for this action")
        if not self._interns.update(int(intern_id), **fields):
            raise NotFoundError("Intern not found")
        logger.info("Intern %s updated: %s", intern_id, ", ".join(sorted(fields)))
        return self.get(intern_id)

    def update_status(self, *, current_role: Role, intern_id: int, status: InternStatus) -> Intern:
        return self._update(current_role, intern_id, status=InternStatus(status))

    def update_performance(self, *, current_role: Role, intern_id: int, performance: PerformanceTag) -> Intern:
        return self._update(current_role, intern_id, performance=PerformanceTag(performance))

    def update_domain(self, *, current_role: Role, intern_id: int, domain: str) -> Intern:
        require_one_of(domain, DEPARTMENTS, "Domain")
        return self._update(current_role, intern_id, domain=domain)

    def update_joining_date(self, *, current_role: Role, intern_id: int, joining_date: date) -> Intern:
        if joining_date is None:
            raise ValidationError("Joining date is required")
        return self._update(current_role, intern_id, joining_date=joining_date)

    def extend(self, *, principal: Principal, intern_id: int, extra_days: int) -> ExtensionResult:
        if extra_days is None or int(extra_days) <= 0:
            raise ValidationError("Extended days must be a positive number")

        intern = self.get(intern_id)
        principal.require_department(intern.domain)
        if not intern.joining_date:
            raise ValidationError("Intern joining date is required")

        total_extended = int(intern.extended_days or 0) + int(extra_days)
        extended = replace(intern, extended_days=total_extended)
        end_date = internship_end_date(extended)
        today = self._clock().date()

        status = intern.status
        if status == InternStatus.COMPLETED and today < end_date:
            status = InternStatus.ACTIVE
        elif status == InternStatus.ACTIVE and today >= end_date:
            status = InternStatus.COMPLETED

        self._interns.update(intern.intern_id, extended_days=total_extended, status=status)
        logger.info("Intern %s extended by %s days (status=%s)", intern.intern_id, extra_days, status.value)

        return ExtensionResult(
            intern_id=intern.intern_id,
            full_name=intern.full_name,
            extended_days=total_extended,
            status=status,
            calculated_end_date=end_date,
        )

    def complete_expired(self) -> list[int]:
        """Mark Active interns whose internship has ended as Completed."""

        today = self._clock().date()
        completed: list[int] = []
        for intern in self._interns.list_filtered(statuses=[InternStatus.ACTIVE]):
            end_date = internship_end_date(intern)
            if end_date is None or today < end_date:
                continue
            self._interns.update(intern.intern_id, status=InternStatus.COMPLETED)
            completed.append(intern.intern_id)

        if completed:
            logger.info("Completed %d internships", len(completed))
        return completed
