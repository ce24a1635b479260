# creche/core/logging.py
import logging
import sys
from contextvars import ContextVar

from .config import settings

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="-")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Stamp every record with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get()
        return True


def setup_logging(level: str = None) -> None:
    root = logging.getLogger("creche")
    if any(getattr(h, "_creche", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    handler._creche = True

    root.addHandler(handler)
    root.setLevel((level or settings.LOG_LEVEL).upper())
    root.propagate = False
