# tests/test_policy.py
from types import SimpleNamespace

import pytest

from creche.core.errors import Forbidden
from creche.core.policy import ACTIONS, authorize, is_allowed

ADMIN = SimpleNamespace(id=1, role="admin")
PARENT = SimpleNamespace(id=2, role="parent")


@pytest.mark.parametrize("action", sorted(a for a, rule in ACTIONS.items() if rule != "participant"))
def test_admin_allowed_everything_but_participant_rules(action):
    assert is_allowed("admin", 1, action, 99)


@pytest.mark.parametrize("action,owners,expected", [
    ("application.read", (2,), True),
    ("application.read", (3,), False),
    ("application.decide", (2,), False),
    ("fee.pay", (2,), True),
    ("fee.pay", (None,), False),
    ("fee.set_status", (2,), False),
    ("class.read", (), True),
    ("stats.read", (), False),
    ("message.read", (5, 2), True),
    ("message.read", (5, 6), False),
    ("no.such.action", (2,), False),
])
def test_parent_rules(action, owners, expected):
    assert is_allowed("parent", 2, action, *owners) is expected


def test_participant_rule_ignores_admin_role():
    assert not is_allowed("admin", 1, "notification.update", 7)
    assert is_allowed("admin", 1, "notification.update", 1)


def test_unknown_role_is_denied():
    assert not is_allowed("teacher", 2, "class.read")
    assert not is_allowed(None, None, "application.list")


def test_authorize_raises_forbidden_with_message():
    authorize(ADMIN, "fee.create")
    with pytest.raises(Forbidden) as ei:
        authorize(PARENT, "fee.create", message="admins only")
    assert ei.value.message == "admins only"
    assert ei.value.status_code == 403
