from __future__ import annotations

import pytest

from src.internship_portal.internship_portal.comments.service import CommentService
from src.internship_portal.internship_portal.common.principal import Principal
from src.internship_portal.internship_portal.core.enums import CommentKind, ReviewStage, Role
from src.internship_portal.internship_portal.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from tests.fakes import FakeCommentsRepo, FakeInternsRepo, make_intern

ADMIN = Principal(user_id=1, role=Role.ADMIN)
HR = Principal(user_id=3, role=Role.HR)
OTHER_HR = Principal(user_id=4, role=Role.HR)
WEB_INCHARGE = Principal(user_id=7, role=Role.INCHARGE, departments=("Web Development",))
OTHER_WEB_INCHARGE = Principal(user_id=9, role=Role.INCHARGE, departments=("Web Development",))
FINANCE_INCHARGE = Principal(user_id=8, role=Role.INCHARGE, departments=("Finance",))


@pytest.fixture()
def repo():
    return FakeCommentsRepo()


@pytest.fixture()
def svc(repo):
    interns = FakeInternsRepo([make_intern(1), make_intern(2, domain="Finance")])
    return CommentService(repo, interns)


def test_hr_comment_records_stage_and_author(svc):
    comment = svc.add_hr_comment(principal=HR, intern_id=1, stage=ReviewStage.INTERVIEWING, text="  Strong portfolio ")

    assert comment.kind == CommentKind.HR
    assert comment.stage == ReviewStage.INTERVIEWING
    assert comment.text == "Strong portfolio"
    assert (comment.author_id, comment.author_role) == (3, Role.HR)
    assert [c.comment_id for c in svc.list_hr_comments(principal=HR, intern_id=1)] == [comment.comment_id]


def test_hr_comment_needs_stage_and_text(svc):
    with pytest.raises(ValidationError):
        svc.add_hr_comment(principal=HR, intern_id=1, stage=None, text="Called back")
    with pytest.raises(ValidationError):
        svc.add_hr_comment(principal=HR, intern_id=1, stage="Hired on the spot", text="Called back")
    with pytest.raises(ValidationError):
        svc.add_hr_comment(principal=HR, intern_id=1, stage=ReviewStage.TELEPHONIC, text="   ")


def test_incharges_cannot_read_or_write_hr_comments(svc):
    with pytest.raises(AuthorizationError):
        svc.add_hr_comment(principal=WEB_INCHARGE, intern_id=1, stage=ReviewStage.SELECTED, text="ok")
    with pytest.raises(AuthorizationError):
        svc.list_hr_comments(principal=WEB_INCHARGE, intern_id=1)


def test_only_the_author_or_an_admin_deletes_an_hr_comment(svc, repo):
    first = svc.add_hr_comment(principal=HR, intern_id=1, stage=ReviewStage.EMAILING, text="Sent offer mail")
    second = svc.add_hr_comment(principal=HR, intern_id=1, stage=ReviewStage.SELECTED, text="Accepted")

    with pytest.raises(AuthorizationError, match="delete this comment"):
        svc.delete_hr_comment(principal=OTHER_HR, intern_id=1, comment_id=first.comment_id)

    svc.delete_hr_comment(principal=HR, intern_id=1, comment_id=first.comment_id)
    svc.delete_hr_comment(principal=ADMIN, intern_id=1, comment_id=second.comment_id)
    assert repo.rows == {}


def test_hr_comment_is_not_found_through_another_intern(svc):
    comment = svc.add_hr_comment(principal=HR, intern_id=1, stage=ReviewStage.EMAILING, text="Sent offer mail")

    with pytest.raises(NotFoundError, match="HR comment not found"):
        svc.delete_hr_comment(principal=HR, intern_id=2, comment_id=comment.comment_id)
    with pytest.raises(NotFoundError):
        svc.delete_hr_comment(principal=HR, intern_id=1, comment_id=404)


def test_incharge_comments_are_scoped_to_own_department(svc):
    comment = svc.add_incharge_comment(principal=WEB_INCHARGE, intern_id=1, text="Finished the login page")
    assert comment.kind == CommentKind.INCHARGE
    assert comment.stage is None

    with pytest.raises(AuthorizationError):
        svc.add_incharge_comment(principal=FINANCE_INCHARGE, intern_id=1, text="Looks good")
    with pytest.raises(AuthorizationError):
        svc.list_incharge_comments(principal=FINANCE_INCHARGE, intern_id=1)
    with pytest.raises(AuthorizationError):
        svc.add_incharge_comment(principal=HR, intern_id=1, text="Looks good")


def test_any_incharge_of_the_department_can_delete_a_comment(svc, repo):
    comment = svc.add_incharge_comment(principal=WEB_INCHARGE, intern_id=1, text="Late twice this week")

    with pytest.raises(AuthorizationError):
        svc.delete_incharge_comment(principal=FINANCE_INCHARGE, intern_id=1, comment_id=comment.comment_id)

    svc.delete_incharge_comment(principal=OTHER_WEB_INCHARGE, intern_id=1, comment_id=comment.comment_id)
    assert svc.list_incharge_comments(principal=WEB_INCHARGE, intern_id=1) == []


def test_hr_and_incharge_comments_are_kept_apart(svc):
    hr_note = svc.add_hr_comment(principal=HR, intern_id=1, stage=ReviewStage.SELECTED, text="Selected")
    svc.add_incharge_comment(principal=WEB_INCHARGE, intern_id=1, text="Onboarded")

    assert [c.text for c in svc.list_hr_comments(principal=ADMIN, intern_id=1)] == ["Selected"]
    assert [c.text for c in svc.list_incharge_comments(principal=ADMIN, intern_id=1)] == ["Onboarded"]
    with pytest.raises(NotFoundError):
        svc.delete_incharge_comment(principal=WEB_INCHARGE, intern_id=1, comment_id=hr_note.comment_id)


def test_comment_on_unknown_intern_is_not_found(svc):
    with pytest.raises(NotFoundError, match="Intern not found"):
        svc.add_incharge_comment(principal=ADMIN, intern_id=99, text="Hello")
