from types import SimpleNamespace

import pytest

from ..access import Action, Actor, Role, authorize, can_access
from ..exceptions import AuthorizationError, NotFoundError

OWNER = Actor(id=1, username="warga1", role=Role.USER)
STRANGER = Actor(id=2, username="warga2", role=Role.USER)
ADMIN = Actor(id=3, username="admin", role=Role.ADMIN)


@pytest.mark.parametrize("action", list(Action))
def test_owner_and_admin_always_allowed(action):
    assert can_access(OWNER, 1, action) is True
    assert can_access(ADMIN, 1, action) is True
    assert can_access(ADMIN, None, action) is True


@pytest.mark.parametrize("action", list(Action))
def test_non_owner_denied(action):
    assert can_access(STRANGER, 1, action) is False
    # Records without an owner are admin-only.
    assert can_access(OWNER, None, action) is False


def test_unknown_role_is_rejected():
    intruder = Actor(id=1, username="x", role="superuser")
    with pytest.raises(ValueError):
        can_access(intruder, 1, Action.READ)


def test_authorize_missing_record_is_not_found_first():
    with pytest.raises(NotFoundError) as exc_info:
        authorize(STRANGER, None, Action.DELETE, label="Report")
    assert exc_info.value.detail == "Report not found."


def test_authorize_denied():
    record = SimpleNamespace(user_id=1)
    with pytest.raises(AuthorizationError) as exc_info:
        authorize(STRANGER, record, Action.EDIT, label="Report")
    assert exc_info.value.status_code == 403
    assert exc_info.value.code == "forbidden"


def test_authorize_returns_record():
    record = SimpleNamespace(user_id=1)
    assert authorize(OWNER, record, Action.READ) is record
    assert authorize(ADMIN, record, Action.DELETE) is record


def test_authorize_without_owner_attribute():
    record = SimpleNamespace(order_id=10)
    assert authorize(ADMIN, record, Action.EDIT, owner_attr=None) is record
    with pytest.raises(AuthorizationError):
        authorize(OWNER, record, Action.EDIT, owner_attr=None)
