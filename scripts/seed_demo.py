# scripts/seed_demo.py
from creche.core.logging import setup_logging
from creche.db.session import SessionLocal, engine, init_db
from creche.services.seed import seed_demo


def main():
    setup_logging()
    print("DB =", engine.url.render_as_string(hide_password=True))
    init_db()
    db = SessionLocal()
    try:
        print("SEEDED" if seed_demo(db) else "SKIPPED (users already exist)")
    finally:
        db.close()


if __name__ == "__main__":
    main()
