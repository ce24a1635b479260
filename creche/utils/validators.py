# creche/utils/validators.py
import re
from typing import Optional

# South African numbers: +27XXXXXXXXX or 0XXXXXXXXX
SA_PHONE_REGEX = re.compile(r"^(\+27|0)[1-9][0-9]{8}$")
PHONE_MESSAGE = "Please enter a valid South African phone number (e.g., 0XX XXX XXXX or +27 XX XXX XXXX)"

def normalize_phone(v: Optional[str]) -> Optional[str]:
    """Remove whitespace; the stored form never contains spaces."""
    if v is None:
        return None
    return re.sub(r"\s+", "", str(v))

def check_phone(v: str) -> str:
    s = normalize_phone(v) or ""
    if len(s) < 10:
        raise ValueError("Phone number must be at least 10 digits")
    if len(s) > 12:
        raise ValueError("Phone number must not exceed 12 characters")
    if not SA_PHONE_REGEX.fullmatch(s):
        raise ValueError(PHONE_MESSAGE)
    return s

def blank_to_none(v):
    """Empty or whitespace-only strings mean "not provided"."""
    if v is None:
        return None
    if isinstance(v, str) and v.strip() == "":
        return None
    return v
