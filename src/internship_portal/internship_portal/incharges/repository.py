from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import InchargeStatus
from .model import InternIncharge


class InchargeRepository(Protocol):
    def get_by_id(self, incharge_id: int) -> Optional[InternIncharge]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[InternIncharge]:
        raise NotImplementedError

    def list_all(self) -> Sequence[InternIncharge]:
        raise NotImplementedError

    def create(self, *, full_name: str, email: str, mobile: str, departments: Sequence[str]) -> int:
        raise NotImplementedError

    def add_departments(self, incharge_id: int, departments: Sequence[str]) -> None:
        """Add departments, ignoring ones already assigned."""

        raise NotImplementedError

    def remove_department(self, incharge_id: int, department: str) -> bool:
        raise NotImplementedError

    def set_status(self, incharge_id: int, status: InchargeStatus) -> bool:
        raise NotImplementedError

    def delete(self, incharge_id: int) -> bool:
        raise NotImplementedError
