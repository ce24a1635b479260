# creche/models/attendance.py
from sqlalchemy import Column, Integer, Date, Boolean, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from creche.db.base import Base

class Attendance(Base):
    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("children.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    present = Column(Boolean, nullable=False)
    notes = Column(Text, nullable=True)

    student = relationship("Child", lazy="joined")

    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    def __repr__(self) -> str:
        return f"<Attendance(student={self.student_id}, date={self.date}, present={self.present})>"
