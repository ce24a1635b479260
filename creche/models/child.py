# creche/models/child.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from creche.db.base import Base
from creche.utils.datetime import utcnow

class Class(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(128), nullable=False)
    description = Column(Text, nullable=True)
    age_range = Column(String(64), nullable=True)
    capacity = Column(Integer, nullable=True)
    # teachers.class_id points back here; use_alter breaks the create/drop cycle
    teacher_id = Column(Integer, ForeignKey("teachers.id", use_alter=True, name="fk_classes_teacher_id"), nullable=True)

    def __repr__(self) -> str:
        return f"<Class(id={self.id}, name='{self.name}')>"


class Child(Base):
    __tablename__ = "children"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    dob = Column(Date, nullable=False)
    gender = Column(String(16), nullable=False)
    age = Column(Integer, nullable=True)

    parent_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True)

    status = Column(String(16), nullable=False, default="active")
    enrollment_date = Column(DateTime, nullable=False, default=utcnow)

    allergies = Column(Text, nullable=True)
    medical_conditions = Column(Text, nullable=True)
    medications = Column(Text, nullable=True)

    emergency_name = Column(String(128), nullable=True)
    emergency_relationship = Column(String(64), nullable=True)
    emergency_phone = Column(String(16), nullable=True)

    parent = relationship("User", lazy="joined")
    klass = relationship("Class", foreign_keys=[class_id], lazy="joined")
    documents = relationship(
        "Document",
        primaryjoin="and_(Document.owner_kind=='child', "
                    "foreign(Document.owner_id)==Child.id)",
        viewonly=True,
        lazy="selectin",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def parent_name(self):
        return self.parent.name if self.parent else None

    @property
    def parent_email(self):
        return self.parent.email if self.parent else None

    @property
    def parent_phone(self):
        return self.parent.phone if self.parent else None

    @property
    def class_name(self):
        return self.klass.name if self.klass else None

    def __repr__(self) -> str:
        return f"<Child(id={self.id}, name='{self.full_name}', parent={self.parent_id})>"
