# Aggregator: "from creche.models import Application, Child, Fee, ..."

from creche.db.base import Base

from .user import User
from .application import Application
from .child import Child, Class
from .fee import Fee
from .attendance import Attendance
from .message import Message
from .notification import Notification, Activity
from .teacher import Teacher
from .announcement import Announcement
from .document import Document

__all__ = [
    "Base",
    "User",
    "Application",
    "Child",
    "Class",
    "Fee",
    "Attendance",
    "Message",
    "Notification",
    "Activity",
    "Teacher",
    "Announcement",
    "Document",
]
