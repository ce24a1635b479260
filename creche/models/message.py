# creche/models/message.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from creche.db.base import Base
from creche.utils.datetime import utcnow

class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)

    # "unread" -> "read", flipped only when the receiver opens it
    status = Column(String(16), nullable=False, default="unread")
    created_at = Column(DateTime, nullable=False, default=utcnow)

    sender = relationship("User", foreign_keys=[sender_id], lazy="joined")
    receiver = relationship("User", foreign_keys=[receiver_id], lazy="joined")

    @property
    def sender_name(self) -> str:
        return self.sender.name if self.sender else "Unknown"

    @property
    def sender_role(self) -> str:
        return self.sender.role if self.sender else "unknown"

    @property
    def receiver_name(self) -> str:
        return self.receiver.name if self.receiver else "Unknown"
