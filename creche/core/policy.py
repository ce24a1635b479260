# creche/core/policy.py
"""
Authorization policy.

Every service asks ``authorize(user, action, *owner_ids)`` before it reads or
writes; routes never compare roles themselves.

Rules per action:

* ``admin``       - admins only.
* ``owner``       - admins, or a parent listed in ``owner_ids``.
* ``any``         - any signed-in user.
* ``participant`` - only a user listed in ``owner_ids``, whatever the role
                    (messages, notifications).
"""
from typing import Optional

from .errors import Forbidden

ROLE_ADMIN = "admin"
ROLE_PARENT = "parent"

ADMIN, OWNER, ANY, PARTICIPANT = "admin", "owner", "any", "participant"

ACTIONS = {
    "application.submit": ANY,
    "application.list": ANY,
    "application.read": OWNER,
    "application.decide": ADMIN,

    "child.list": ANY,
    "child.read": OWNER,
    "child.create": ADMIN,

    "student.list": ADMIN,
    "student.read": OWNER,
    "student.update": ADMIN,

    "class.read": ANY,
    "class.create": ADMIN,

    "fee.list": ANY,
    "fee.read": OWNER,
    "fee.create": ADMIN,
    "fee.pay": OWNER,
    "fee.set_status": ADMIN,
    "fee.remind": ADMIN,
    "fee.export": ADMIN,

    "attendance.read": ADMIN,
    "attendance.write": ADMIN,
    "attendance.export": ADMIN,

    "message.list": ANY,
    "message.send": ANY,
    "message.read": PARTICIPANT,
    "contact.list": ANY,

    "notification.list": ANY,
    "notification.update": PARTICIPANT,

    "activity.read": ADMIN,
    "stats.read": ADMIN,

    "teacher.read": ADMIN,
    "teacher.write": ADMIN,

    "announcement.list": ANY,
    "announcement.read": ANY,
    "announcement.write": ADMIN,

    "document.attach": OWNER,
}


def is_allowed(role: str, caller_id: Optional[int], action: str, *owner_ids: Optional[int]) -> bool:
    rule = ACTIONS.get(action)
    if rule is None:
        return False
    if rule == PARTICIPANT:
        return caller_id is not None and caller_id in owner_ids
    if role == ROLE_ADMIN:
        return True
    if rule == ANY:
        return role == ROLE_PARENT
    if rule == OWNER:
        return role == ROLE_PARENT and caller_id is not None and caller_id in owner_ids
    return False


def authorize(user, action: str, *owner_ids: Optional[int], message: Optional[str] = None) -> None:
    if not is_allowed(getattr(user, "role", None), getattr(user, "id", None), action, *owner_ids):
        raise Forbidden(message)


def is_admin(user) -> bool:
    return getattr(user, "role", None) == ROLE_ADMIN
