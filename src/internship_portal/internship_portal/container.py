from __future__ import annotations

from dataclasses import dataclass

from .attendance.aggregator import AttendanceAggregator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .comments.mysql_comment_repository import MySQLCommentRepository
from .comments.repository import CommentRepository
from .comments.service import CommentService
from .database.connection import DBConfig, DatabaseConnection
from .incharges.mysql_incharge_repository import MySQLInchargeRepository
from .incharges.repository import InchargeRepository
from .incharges.service import InchargeService
from .interns.mysql_intern_repository import MySQLInternRepository
from .interns.repository import InternRepository
from .interns.service import InternService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .performance.mysql_performance_repository import MySQLPerformanceRepository
from .performance.repository import PerformanceRepository
from .performance.service import PerformanceService


@dataclass(frozen=True)
class Container:
    interns_repo: InternRepository
    incharges_repo: InchargeRepository
    leaves_repo: LeaveRepository
    attendance_repo: AttendanceRepository
    performance_repo: PerformanceRepository
    comments_repo: CommentRepository

    intern_service: InternService
    incharge_service: InchargeService
    leave_service: LeaveService
    attendance_service: AttendanceService
    attendance_aggregator: AttendanceAggregator
    performance_service: PerformanceService
    comment_service: CommentService


def wire(
    *,
    interns_repo: InternRepository,
    incharges_repo: InchargeRepository,
    leaves_repo: LeaveRepository,
    attendance_repo: AttendanceRepository,
    performance_repo: PerformanceRepository,
    comments_repo: CommentRepository,
) -> Container:
    """Build the services on top of the given repositories (MySQL or in-memory)."""

    return Container(
        interns_repo=interns_repo,
        incharges_repo=incharges_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        performance_repo=performance_repo,
        comments_repo=comments_repo,
        intern_service=InternService(interns_repo),
        incharge_service=InchargeService(incharges_repo, interns_repo),
        leave_service=LeaveService(leaves_repo, interns_repo),
        attendance_service=AttendanceService(attendance_repo, interns_repo),
        attendance_aggregator=AttendanceAggregator(attendance_repo, interns_repo),
        performance_service=PerformanceService(performance_repo, interns_repo),
        comment_service=CommentService(comments_repo, interns_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    return wire(
        interns_repo=MySQLInternRepository(conn),
        incharges_repo=MySQLInchargeRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        performance_repo=MySQLPerformanceRepository(conn),
        comments_repo=MySQLCommentRepository(conn),
    )
