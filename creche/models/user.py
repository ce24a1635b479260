# creche/models/user.py
from sqlalchemy import Column, Integer, String, DateTime

from creche.db.base import Base
from creche.utils.datetime import utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(128), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(32), nullable=True)

    # "admin" | "parent"; fixed at creation
    role = Column(String(16), nullable=False, default="parent")

    last_login_at = Column(DateTime, nullable=True)
    password_changed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
