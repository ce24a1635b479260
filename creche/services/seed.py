# creche/services/seed.py
"""Demo data and the admin bootstrap used by scripts/ and SEED_ON_STARTUP."""
from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from creche.core.policy import ROLE_ADMIN, ROLE_PARENT
from creche.core.security import hash_password
from creche.models import Application, Child, Class, Fee, Message, User
from creche.utils.datetime import utcnow
from creche.utils.validators import normalize_phone

log = logging.getLogger("creche.seed")

ADMIN = ("Admin User", "admin@littlestars.co.za", "@Admin123", "+27 12 555 1234")

PARENTS = [
    ("Sarah Johnson", "parent@example.com", "password123", "+27 82 555 1234"),
    ("Michael Parker", "michael@example.com", "password123", "+27 83 444 5678"),
    ("Jennifer Lee", "jennifer@example.com", "password123", "+27 71 333 9876"),
]

CLASSES = [
    ("Infant Group", "For babies between 3 months and 1 year", "3-12 months", 10),
    ("Toddler Group", "For children between 1 and 2 years", "1-2 years", 15),
    ("Preschool I", "For children between 2 and 3 years", "2-3 years", 20),
    ("Preschool II", "For children between 3 and 5 years", "3-5 years", 25),
]


def upsert_user(db: Session, name: str, email: str, password: str, role: str, phone: str = None):
    """Create the account, or reset its password/role if it exists. No commit."""
    u = db.query(User).filter(User.email == email.lower()).first()
    if u:
        u.password_hash = hash_password(password)
        u.role = role
        if name:
            u.name = name
        msg = f"UPDATED {email}"
    else:
        u = User(
            name=name,
            email=email.lower(),
            password_hash=hash_password(password),
            phone=normalize_phone(phone),
            role=role,
            password_changed_at=utcnow(),
        )
        db.add(u)
        msg = f"CREATED {email}"
    db.flush()
    return u, msg


def ensure_admin(db: Session, name: str = ADMIN[0], email: str = ADMIN[1],
                 password: str = ADMIN[2], phone: str = ADMIN[3]) -> str:
    _, msg = upsert_user(db, name, email, password, ROLE_ADMIN, phone)
    db.commit()
    log.info(msg)
    return msg


def seed_demo(db: Session) -> bool:
    """Load the demo data set into an empty database. Returns False if users already exist."""
    if db.query(User).count() > 0:
        log.info("database already seeded, skipping")
        return False

    admin, _ = upsert_user(db, ADMIN[0], ADMIN[1], ADMIN[2], ROLE_ADMIN, ADMIN[3])
    sarah, michael, jennifer = [
        upsert_user(db, n, e, p, ROLE_PARENT, ph)[0] for (n, e, p, ph) in PARENTS
    ]

    classes = [Class(name=n, description=d, age_range=a, capacity=c) for (n, d, a, c) in CLASSES]
    db.add_all(classes)
    db.flush()

    emma = Child(first_name="Emma", last_name="Johnson", dob=date(2020, 5, 15), gender="female", age=3,
                 parent_id=sarah.id, class_id=classes[2].id, status="active",
                 enrollment_date=datetime(2022, 9, 1), allergies="Peanuts")
    noah = Child(first_name="Noah", last_name="Johnson", dob=date(2021, 3, 10), gender="male", age=2,
                 parent_id=sarah.id, class_id=classes[1].id, status="active",
                 enrollment_date=datetime(2022, 9, 15))
    olivia = Child(first_name="Olivia", last_name="Parker", dob=date(2020, 7, 22), gender="female", age=3,
                   parent_id=michael.id, class_id=classes[2].id, status="active",
                   enrollment_date=datetime(2022, 8, 1))
    db.add_all([emma, noah, olivia])
    db.flush()

    db.add_all([
        Application(child_first_name="Sophia", child_last_name="Lee", child_dob=date(2021, 11, 5),
                    child_gender="female", child_age=1, parent_id=jennifer.id,
                    emergency_name="David Lee", emergency_relationship="Father",
                    emergency_phone="+27712223344", emergency_email="david@example.com",
                    status="pending", applied_date=datetime(2023, 6, 15)),
        Application(child_first_name="Liam", child_last_name="Parker", child_dob=date(2022, 1, 18),
                    child_gender="male", child_age=1, parent_id=michael.id,
                    allergies="Milk", medical_conditions="Eczema",
                    emergency_name="Jessica Parker", emergency_relationship="Mother",
                    emergency_phone="+27834567890", emergency_email="jessica@example.com",
                    status="pending", applied_date=datetime(2023, 6, 20)),
    ])

    db.add_all([
        Fee(student_id=emma.id, amount=Decimal("2500.00"), description="Monthly tuition fee - June 2023",
            due_date=date(2023, 6, 15), status="paid", paid_date=datetime(2023, 6, 10)),
        Fee(student_id=emma.id, amount=Decimal("2500.00"), description="Monthly tuition fee - July 2023",
            due_date=date(2023, 7, 15), status="pending"),
        Fee(student_id=noah.id, amount=Decimal("2100.00"), description="Monthly tuition fee - June 2023",
            due_date=date(2023, 6, 15), status="paid", paid_date=datetime(2023, 6, 12)),
        Fee(student_id=olivia.id, amount=Decimal("2500.00"), description="Monthly tuition fee - June 2023",
            due_date=date(2023, 6, 15), status="overdue"),
    ])

    db.add(Message(
        sender_id=admin.id, receiver_id=sarah.id, subject="Welcome to our Creche",
        content="Dear Sarah,\n\nWelcome to our creche. We're excited to have Emma and Noah join us.\n\nBest regards,\nAdmin Team",
        status="read", created_at=datetime(2023, 6, 1),
    ))

    db.commit()
    log.info("demo data loaded: 1 admin, %d parents, %d classes", len(PARENTS), len(classes))
    return True
