"""Разбор даты рождения"""
import re
from datetime import date

from .exceptions import InvalidDateFormat
from .models import DateOfBirth

# MM/DD/YYYY или MM-DD-YYYY
US_DATE_RE = re.compile(r'^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})$', re.ASCII)
# YYYY-MM-DD
ISO_DATE_RE = re.compile(r'^(\d{4})-(\d{1,2})-(\d{1,2})$', re.ASCII)

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]


def parse_date(raw: str) -> DateOfBirth:
    """Преобразует строку даты в DateOfBirth"""
    cleaned = (raw or '').strip()

    match = US_DATE_RE.match(cleaned)
    if match:
        month, day, year = (int(group) for group in match.groups())
    else:
        match = ISO_DATE_RE.match(cleaned)
        if not match:
            raise InvalidDateFormat(raw)
        year, month, day = (int(group) for group in match.groups())

    # Проверяем, что такой день существует в календаре
    try:
        date(year, month, day)
    except ValueError as e:
        raise InvalidDateFormat(raw, str(e)) from e

    return DateOfBirth(month=month, day=day, year=year)


def format_date(dob: DateOfBirth) -> str:
    """Дата в виде 'March 15, 1985'"""
    return f"{MONTH_NAMES[dob.month - 1]} {dob.day}, {dob.year}"
