# creche/models/application.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from creche.db.base import Base
from creche.utils.datetime import utcnow

APPLICATION_STATUSES = ("pending", "approved", "rejected")

class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)

    child_first_name = Column(String(128), nullable=False)
    child_last_name = Column(String(128), nullable=False)
    child_dob = Column(Date, nullable=False)
    child_gender = Column(String(16), nullable=False)
    child_age = Column(Integer, nullable=True)

    parent_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # NULL = not provided; never stored as ""
    allergies = Column(Text, nullable=True)
    medical_conditions = Column(Text, nullable=True)
    medications = Column(Text, nullable=True)

    emergency_name = Column(String(128), nullable=False)
    emergency_relationship = Column(String(64), nullable=False)
    emergency_phone = Column(String(16), nullable=False)
    emergency_email = Column(String(255), nullable=True)

    status = Column(String(16), nullable=False, default="pending")
    applied_date = Column(DateTime, nullable=False, default=utcnow)

    parent = relationship("User", lazy="joined")
    documents = relationship(
        "Document",
        primaryjoin="and_(Document.owner_kind=='application', "
                    "foreign(Document.owner_id)==Application.id)",
        viewonly=True,
        lazy="selectin",
    )

    @property
    def parent_name(self):
        return self.parent.name if self.parent else None

    @property
    def child_name(self) -> str:
        return f"{self.child_first_name} {self.child_last_name}"

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, child='{self.child_name}', status='{self.status}')>"
