# creche/services/messages.py
from __future__ import annotations

import logging
from typing import List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from creche.core.errors import NotFound
from creche.core.policy import authorize
from creche.db.session import atomic
from creche.models import Message, User
from creche.services.activity import notify

log = logging.getLogger("creche.messages")


def send_message(db: Session, me: User, data) -> Message:
    authorize(me, "message.send")
    receiver = db.get(User, data.receiver_id)
    if not receiver:
        raise NotFound("Receiver not found")

    with atomic(db):
        msg = Message(
            sender_id=me.id,
            receiver_id=receiver.id,
            subject=data.subject.strip(),
            content=data.content,
            status="unread",
        )
        db.add(msg)
        notify(
            db,
            user_id=receiver.id,
            title="New Message",
            message=f"You have received a new message: {msg.subject}",
        )
    log.info("message %s from %s to %s", msg.id, me.id, receiver.id)
    return msg


def list_messages(db: Session, me: User) -> List[Message]:
    authorize(me, "message.list")
    return (
        db.query(Message)
        .filter(or_(Message.sender_id == me.id, Message.receiver_id == me.id))
        .order_by(Message.created_at.desc(), Message.id.desc())
        .all()
    )


def open_message(db: Session, me: User, message_id: int) -> Message:
    """Fetch a message; the receiver opening an unread one marks it read."""
    msg = db.get(Message, message_id)
    if not msg:
        raise NotFound("Message not found")
    authorize(me, "message.read", msg.sender_id, msg.receiver_id,
              message="Forbidden - you can only view your own messages")

    if msg.receiver_id == me.id and msg.status == "unread":
        msg.status = "read"
        db.commit()
    return msg
