# creche/routers/auth.py
import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from creche.core.config import settings
from creche.core.errors import Unauthenticated
from creche.db.session import get_db
from creche.models import User
from creche.schemas.common import Ack
from creche.schemas.user import ChangePasswordIn, LoginIn, ProfileUpdate, RegisterIn, UserOut
from creche.services import users

router = APIRouter()
log = logging.getLogger("creche.auth")

IDLE_TIMEOUT_SEC = settings.IDLE_TIMEOUT_SEC


def get_current_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    sess = request.session
    now = int(time.time())
    last = int(sess.get("_last_seen") or 0)
    if last and (now - last) > IDLE_TIMEOUT_SEC:
        sess.clear()
        return None
    uid = sess.get("uid")
    if not uid:
        return None
    sess["_last_seen"] = now
    return db.get(User, uid)


def require_user(user: Optional[User] = Depends(get_current_user)) -> User:
    if not user:
        raise Unauthenticated()
    return user




def _start_session(request: Request, user: User) -> None:
    request.session.clear()
    request.session["uid"] = user.id
    request.session["role"] = user.role
    request.session["_last_seen"] = int(time.time())


@router.post("/register", response_model=UserOut, status_code=201)
def register(payload: RegisterIn, request: Request, db: Session = Depends(get_db)):
    user = users.register_parent(db, payload)
    _start_session(request, user)
    return user


@router.post("/login", response_model=UserOut)
def login(payload: LoginIn, request: Request, db: Session = Depends(get_db)):
    user = users.authenticate(db, payload.email, payload.password)
    if not user:
        raise Unauthenticated("Invalid email or password")
    _start_session(request, user)
    log.info("login user=%s role=%s", user.id, user.role)
    return user


@router.post("/logout", response_model=Ack)
def logout(request: Request):
    request.session.clear()
    return Ack()


@router.get("/user", response_model=UserOut)
def me(user: User = Depends(require_user)):
    return user


@router.patch("/user", response_model=UserOut)
def update_me(payload: ProfileUpdate, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return users.update_profile(db, user, payload)


@router.post("/user/change-password", response_model=Ack)
def change_password(payload: ChangePasswordIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    users.change_password(db, user, payload)
    return Ack()
