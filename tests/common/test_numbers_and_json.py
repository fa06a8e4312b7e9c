from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from src.internship_portal.internship_portal.common.numbers import mean, percentage, round_one
from src.internship_portal.internship_portal.common.web import error_status, to_json
from src.internship_portal.internship_portal.core.enums import LeaveStatus
from src.internship_portal.internship_portal.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


@pytest.mark.parametrize("value, expected", [(8.25, 8.3), (8.35, 8.4), (7.0, 7.0), (66.666, 66.7), (0.05, 0.1)])
def test_round_one_is_half_up(value, expected):
    assert round_one(value) == expected


def test_percentage_and_mean_handle_empty_input():
    assert percentage(3, 0) == 0
    assert mean([]) == 0
    assert mean([66.7, 50.0, 0.0]) == 38.9


@dataclass(frozen=True)
class _Row:
    leave_id: int
    start_date: date
    status: LeaveStatus
    departments: tuple


def test_to_json_camel_cases_snake_keys_only():
    row = _Row(leave_id=3, start_date=date(2025, 1, 10), status=LeaveStatus.PENDING, departments=("Web Development",))

    assert to_json({"leave": row, "Web Development": {"intern_count": 2}}) == {
        "leave": {"leaveId": 3, "startDate": "2025-01-10", "status": "Pending", "departments": ["Web Development"]},
        "Web Development": {"internCount": 2},
    }


@pytest.mark.parametrize(
    "exc, status",
    [
        (ValidationError("x"), 400),
        (AuthenticationError("x"), 401),
        (AuthorizationError("x"), 403),
        (NotFoundError("x"), 404),
        (ConflictError("x"), 409),
    ],
)
def test_error_status(exc, status):
    assert error_status(exc) == status
