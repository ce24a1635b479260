# creche/models/announcement.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from creche.db.base import Base
from creche.utils.datetime import utcnow

# audiences a parent is allowed to see
PARENT_AUDIENCES = ("all", "parents")

class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    target_audience = Column(String(16), nullable=False, default="all")
    publish_date = Column(DateTime, nullable=False, default=utcnow)
    expiry_date = Column(DateTime, nullable=True)
    status = Column(String(16), nullable=False, default="active")
    created_at = Column(DateTime, nullable=False, default=utcnow)

    author = relationship("User", lazy="joined")

    @property
    def author_name(self):
        return self.author.name if self.author else None

    def visible_to_parents(self) -> bool:
        return self.status == "active" and self.target_audience in PARENT_AUDIENCES
