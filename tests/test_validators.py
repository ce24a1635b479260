# tests/test_validators.py
from datetime import date, datetime

import pytest

from creche.core.errors import ValidationFailed
from creche.utils.datetime import fmt_dmy, parse_date_flexible
from creche.utils.validators import blank_to_none, check_phone


@pytest.mark.parametrize("raw,expected", [
    ("0821234567", "0821234567"),
    ("082 123 4567", "0821234567"),
    ("+27 82 123 4567", "+27821234567"),
])
def test_valid_phones(raw, expected):
    assert check_phone(raw) == expected


@pytest.mark.parametrize("raw,msg", [
    ("082123", "at least 10"),
    ("+278212345678", "must not exceed 12"),
    ("0021234567", "South African"),
    ("+44821234567", "South African"),
])
def test_invalid_phones(raw, msg):
    with pytest.raises(ValueError) as ei:
        check_phone(raw)
    assert msg in str(ei.value)


@pytest.mark.parametrize("raw,expected", [
    ("2020-05-15", date(2020, 5, 15)),
    ("15/05/2020", date(2020, 5, 15)),
    ("15-05-2020", date(2020, 5, 15)),
    ("2020-05-15T00:00:00.000Z", date(2020, 5, 15)),
    (datetime(2020, 5, 15, 8, 30), date(2020, 5, 15)),
    ("", None),
    (None, None),
])
def test_parse_date_flexible(raw, expected):
    assert parse_date_flexible(raw) == expected


def test_parse_date_flexible_returns_garbage_unchanged():
    assert parse_date_flexible("31/02/2020") == "31/02/2020"
    assert parse_date_flexible("soon") == "soon"


def test_fmt_dmy_and_blanks():
    assert fmt_dmy(date(2026, 6, 15)) == "15/06/2026"
    assert fmt_dmy(None) == ""
    assert blank_to_none("  ") is None
    assert blank_to_none("Peanuts") == "Peanuts"


def test_validation_failed_from_pydantic_strips_prefixes():
    err = ValidationFailed.from_pydantic([
        {"loc": ("body", "emergencyPhone"), "msg": "Value error, Phone number must be at least 10 digits"},
    ])
    assert err.to_body()["errors"] == [
        {"path": ["emergencyPhone"], "message": "Phone number must be at least 10 digits"},
    ]
