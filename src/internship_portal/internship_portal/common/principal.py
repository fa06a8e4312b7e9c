from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol

from ..core.enums import InchargeStatus, Role
from ..core.exceptions import AuthenticationError, AuthorizationError


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of one request.

    Sessions are issued by the external auth service; this object is rebuilt per
    request from the signed session cookie. For incharges the departments and
    active flag are read from the database, never from the cookie.
    """

    user_id: int
    role: Role
    departments: tuple[str, ...] = field(default_factory=tuple)
    is_active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def owns_department(self, department: Optional[str]) -> bool:
        if self.is_admin:
            return True
        return self.role == Role.INCHARGE and self.is_active and department in self.departments

    def require_department(self, department: Optional[str]) -> None:
        if not self.owns_department(department):
            raise AuthorizationError("You are not in charge of this department")


class InchargeLookup(Protocol):
    def get_by_id(self, incharge_id: int):
        raise NotImplementedError


def principal_from_session(session: Mapping, incharges: InchargeLookup) -> Principal:
    if "user_id" not in session or "role" not in session:
        raise AuthenticationError("Not authorized, session missing")

    try:
        user_id = int(session["user_id"])
        role = Role(session["role"])
    except (TypeError, ValueError):
        raise AuthenticationError("Not authorized, session invalid")

    if role != Role.INCHARGE:
        return Principal(user_id=user_id, role=role)

    incharge = incharges.get_by_id(user_id)
    if not incharge:
        raise AuthenticationError("Intern incharge not found")
    if incharge.status != InchargeStatus.ACTIVE:
        raise AuthorizationError("Your account is inactive")

    return Principal(
        user_id=user_id,
        role=role,
        departments=tuple(incharge.departments),
        is_active=True,
    )
