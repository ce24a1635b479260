# creche/db/session.py
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .base import Base
from ..core.config import settings

log = logging.getLogger("creche.db")

DB_URL = settings.DB_URL

def make_engine(url_str: str):
    url = make_url(url_str)
    connect_args = {}
    kwargs = {}
    backend = url.get_backend_name()
    if backend.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if url.database in (None, "", ":memory:"):
            # one shared connection, otherwise every checkout sees an empty db
            kwargs["poolclass"] = StaticPool
    elif backend.startswith("mysql"):
        connect_args["charset"] = "utf8mb4"
        kwargs.update(pool_pre_ping=True, pool_recycle=3600)

    return create_engine(url_str, connect_args=connect_args, future=True, **kwargs)

engine = make_engine(DB_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

def init_db(bind=None):
    """Create missing tables."""
    # models must be imported so they register on Base.metadata
    from .. import models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    log.info("DB init OK with %s", bind.url.render_as_string(hide_password=True))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def atomic(db: Session):
    """
    Unit of work for one domain operation: everything flushed inside the block
    commits together, any exception rolls all of it back.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
