# creche/services/users.py
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from creche.core.errors import ValidationFailed
from creche.core.policy import ROLE_ADMIN, ROLE_PARENT, authorize, is_admin
from creche.core.security import hash_password, try_rehash_on_success, verify_password
from creche.db.session import atomic
from creche.models import User
from creche.utils.datetime import utcnow

log = logging.getLogger("creche.auth")


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(func.lower(User.email) == (email or "").strip().lower()).first()


def register_parent(db: Session, data) -> User:
    """Self-signup. The role is always parent, whatever the client sends."""
    email = str(data.email).strip().lower()
    if find_by_email(db, email):
        raise ValidationFailed.field("email", "Email already exists")

    u = User(
        name=data.name.strip(),
        email=email,
        phone=data.phone,
        role=ROLE_PARENT,
        password_hash=hash_password(data.password),
        password_changed_at=utcnow(),
    )
    try:
        with atomic(db):
            db.add(u)
    except IntegrityError:
        # lost a race with another signup for the same address
        raise ValidationFailed.field("email", "Email already exists")
    log.info("parent registered id=%s", u.id)
    return u


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """Return the user for valid credentials, else None. Upgrades stale hashes."""
    u = find_by_email(db, email)
    if not u or not verify_password(password, u.password_hash):
        log.info("login failed for %r", email)
        return None

    new_hash = try_rehash_on_success(password, u.password_hash)
    if new_hash:
        u.password_hash = new_hash
    u.last_login_at = utcnow()
    db.commit()
    return u


def update_profile(db: Session, me: User, data) -> User:
    changes = data.model_dump(exclude_unset=True)
    if "name" in changes and changes["name"]:
        me.name = changes["name"].strip()
    if "phone" in changes:
        me.phone = changes["phone"]
    db.commit()
    return me


def change_password(db: Session, me: User, data) -> None:
    if not verify_password(data.old_password, me.password_hash):
        raise ValidationFailed.field("oldPassword", "Current password is incorrect")
    me.password_hash = hash_password(data.new_password)
    me.password_changed_at = utcnow()
    db.commit()
    log.info("password changed for user %s", me.id)


def list_contacts(db: Session, me: User) -> List[User]:
    """People ``me`` can write to: parents see admins, admins see parents."""
    authorize(me, "contact.list")
    role = ROLE_PARENT if is_admin(me) else ROLE_ADMIN
    return db.query(User).filter(User.role == role).order_by(User.name.asc()).all()
