from __future__ import annotations

import logging
import re
from typing import Sequence

from ..common.principal import Principal
from ..common.validators import require_non_empty, require_one_of
from ..core.constants import DEPARTMENTS
from ..core.enums import InchargeStatus, InternStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..interns.model import Intern
from ..interns.repository import InternRepository
from .model import InchargeProfile, InternIncharge
from .repository import InchargeRepository

logger = logging.getLogger(__name__)

_MOBILE_RE = re.compile(r"^[0-9]{10}$")

# Interns an incharge works with: everyone past the selection stage.
ASSIGNED_STATUSES = (InternStatus.ACTIVE, InternStatus.INACTIVE, InternStatus.COMPLETED)


def _require_admin(current_role: Role) -> None:
    if current_role != Role.ADMIN:
        raise AuthorizationError("You do not have permission for this action")


def _clean_departments(departments: Sequence[str]) -> list[str]:
    cleaned: list[str] = []
    for d in departments or []:
        d = require_non_empty(d, "Department")
        require_one_of(d, DEPARTMENTS, "Department")
        if d not in cleaned:
            cleaned.append(d)
    if not cleaned:
        raise ValidationError("At least one department is required")
    return cleaned


class InchargeService:
    """Use cases: admin management of incharge accounts and their departments."""

    def __init__(self, incharges: InchargeRepository, interns: InternRepository):
        self._incharges = incharges
        self._interns = interns

    def create(
        self,
        *,
        current_role: Role,
        full_name: str,
        email: str,
        mobile: str,
        departments: Sequence[str],
    ) -> InternIncharge:
        _require_admin(current_role)
        full_name = require_non_empty(full_name, "Full name")
        email = require_non_empty(email, "Email").lower()
        mobile = require_non_empty(mobile, "Mobile")
        if not _MOBILE_RE.match(mobile):
            raise ValidationError("Please enter a valid 10-digit mobile number")
        departments = _clean_departments(departments)

        if self._incharges.get_by_email(email):
            raise ValidationError("Intern incharge with this email already exists")

        incharge_id = self._incharges.create(
            full_name=full_name,
            email=email,
            mobile=mobile,
            departments=departments,
        )
        logger.info("Incharge %s created for %s", incharge_id, ", ".join(departments))
        return self.get(incharge_id)

    def get(self, incharge_id: int) -> InternIncharge:
        incharge = self._incharges.get_by_id(int(incharge_id))
        if not incharge:
            raise NotFoundError("Intern incharge not found")
        return incharge

    def list_all(self) -> list[InternIncharge]:
        return list(self._incharges.list_all())

    def _interns_for(self, departments: Sequence[str]) -> list[Intern]:
        return list(self._interns.list_filtered(domains=list(departments), statuses=list(ASSIGNED_STATUSES)))

    def profile(self, incharge_id: int) -> InchargeProfile:
        incharge = self.get(incharge_id)
        return InchargeProfile(incharge=incharge, interns=self._interns_for(incharge.departments))

    def add_departments(self, *, current_role: Role, incharge_id: int, departments: Sequence[str]) -> InternIncharge:
        _require_admin(current_role)
        departments = _clean_departments(departments)
        self.get(incharge_id)
        self._incharges.add_departments(int(incharge_id), departments)
        return self.get(incharge_id)

    def remove_department(self, *, current_role: Role, incharge_id: int, department: str) -> InternIncharge:
        _require_admin(current_role)
        incharge = self.get(incharge_id)
        if department not in incharge.departments:
            raise ValidationError("Department is not assigned to this incharge")
        if len(incharge.departments) == 1:
            raise ValidationError("An incharge must keep at least one department")
        self._incharges.remove_department(incharge.incharge_id, department)
        return self.get(incharge_id)

    def set_status(self, *, current_role: Role, incharge_id: int, status: InchargeStatus) -> InternIncharge:
        _require_admin(current_role)
        if not self._incharges.set_status(int(incharge_id), InchargeStatus(status)):
            raise NotFoundError("Intern incharge not found")
        logger.info("Incharge %s set to %s", incharge_id, InchargeStatus(status).value)
        return self.get(incharge_id)

    def delete(self, *, current_role: Role, incharge_id: int) -> None:
        _require_admin(current_role)
        if not self._incharges.delete(int(incharge_id)):
            raise NotFoundError("Intern incharge not found")
        logger.info("Incharge %s deleted", incharge_id)

    def assigned_interns(self, principal: Principal) -> list[Intern]:
        if principal.role != Role.INCHARGE:
            raise AuthorizationError("Only intern incharges have assigned interns")
        return self._interns_for(principal.departments)
