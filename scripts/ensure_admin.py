# scripts/ensure_admin.py
# usage: python -m scripts.ensure_admin [email] [password] [name]
import sys

from creche.db.session import SessionLocal, engine, init_db
from creche.models import User
from creche.services.seed import ADMIN, ensure_admin


def main(argv):
    email = argv[1] if len(argv) > 1 else ADMIN[1]
    password = argv[2] if len(argv) > 2 else ADMIN[2]
    name = argv[3] if len(argv) > 3 else ADMIN[0]

    print("DB =", engine.url.render_as_string(hide_password=True))
    init_db()
    db = SessionLocal()
    try:
        print(ensure_admin(db, name=name, email=email, password=password))
        admins = db.query(User).filter(User.role == "admin").all()
        print("Admins in DB:", [(x.id, x.email) for x in admins])
    finally:
        db.close()


if __name__ == "__main__":
    main(sys.argv)
