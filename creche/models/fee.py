# creche/models/fee.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Numeric, Text
from sqlalchemy.orm import relationship

from creche.db.base import Base
from creche.utils.datetime import utcnow

FEE_STATUSES = ("pending", "paid", "overdue")

class Fee(Base):
    __tablename__ = "fees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("children.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String(16), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False, default=utcnow)

    # set only while status == "paid"
    paid_date = Column(DateTime, nullable=True)

    student = relationship("Child", lazy="joined")

    @property
    def student_name(self):
        return self.student.full_name if self.student else None

    @property
    def parent_id(self):
        return self.student.parent_id if self.student else None

    def __repr__(self) -> str:
        return f"<Fee(id={self.id}, student={self.student_id}, amount={self.amount}, status='{self.status}')>"
