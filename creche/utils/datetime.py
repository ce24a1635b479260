# creche/utils/datetime.py
import re
from datetime import date, datetime, timezone
from typing import Optional

DATE_DMY = re.compile(r"^(\d{1,2})[\/\-](\d{1,2})[\/\-](\d{4})$")
DATE_YMD = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

def today() -> date:
    return utcnow().date()

def parse_date_flexible(v: Optional[object]) -> Optional[date]:
    """
    Accept a date, a datetime, 'YYYY-MM-DD', 'dd/MM/YYYY' or a full ISO
    timestamp (what browsers send for a Date). Returns None for blanks and the
    original value when it cannot be read, so the field validator reports it.
    """
    if v in (None, ""):
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    s = str(v).strip()
    if not s:
        return None
    m = DATE_YMD.match(s)
    if m:
        y, mth, d = map(int, m.groups())
        try:
            return date(y, mth, d)
        except ValueError:
            return v
    m = DATE_DMY.match(s)
    if m:
        d, mth, y = map(int, m.groups())
        try:
            return date(y, mth, d)
        except ValueError:
            return v
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        return v

def fmt_dmy(v) -> str:
    if not v:
        return ""
    if isinstance(v, (datetime, date)):
        return v.strftime("%d/%m/%Y")
    return str(v)
