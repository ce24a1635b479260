# creche/routers/messages.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from creche.db.session import get_db
from creche.models import User
from creche.routers.auth import require_user
from creche.schemas.message import MessageIn, MessageOut
from creche.schemas.user import ContactOut
from creche.services import messages as svc
from creche.services.users import list_contacts

router = APIRouter(tags=["Messages"])


@router.get("/messages", response_model=List[MessageOut])
def list_messages(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.list_messages(db, user)


@router.post("/messages", response_model=MessageOut, status_code=201)
def send_message(payload: MessageIn, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.send_message(db, user, payload)


@router.get("/messages/{message_id}", response_model=MessageOut)
def open_message(message_id: int, user: User = Depends(require_user), db: Session = Depends(get_db)):
    return svc.open_message(db, user, message_id)


@router.get("/contacts", response_model=List[ContactOut])
def contacts(user: User = Depends(require_user), db: Session = Depends(get_db)):
    return list_contacts(db, user)
