# creche/models/teacher.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from creche.db.base import Base
from creche.utils.datetime import utcnow

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(128), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(32), nullable=True)
    qualification = Column(String(255), nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True)
    status = Column(String(16), nullable=False, default="active")
    hire_date = Column(DateTime, nullable=False, default=utcnow)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    klass = relationship("Class", foreign_keys=[class_id], lazy="joined")

    @property
    def class_name(self):
        return self.klass.name if self.klass else None

    def __repr__(self) -> str:
        return f"<Teacher(id={self.id}, name='{self.name}', status='{self.status}')>"
