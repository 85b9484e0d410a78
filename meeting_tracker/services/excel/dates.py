"""
Date normalization for spreadsheet cells.

Cells may hold canonical strings, real dates (openpyxl converts cells with a
date number format), bare serial numbers or free-form text. Everything is
brought to ``YYYY-MM-DD``; anything unreadable becomes an empty string.
"""
import re
from datetime import date, datetime, time, timezone

from openpyxl.utils.datetime import from_excel

CANONICAL_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# Tried in order after datetime.fromisoformat
DATE_FORMATS = [
    '%Y-%m-%d',
    '%Y/%m/%d',
    '%m/%d/%Y',
    '%m-%d-%Y',
    '%d-%b-%Y',
    '%d %b %Y',
    '%d %B %Y',
    '%b %d, %Y',
    '%B %d, %Y',
    '%b %d %Y',
    '%B %d %Y',
    '%a %b %d %Y',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%m/%d/%Y %H:%M',
    '%m/%d/%Y %H:%M:%S',
]


def format_date(value):
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def from_serial(value):
    """Converts a spreadsheet serial day number (1900 date system)."""
    converted = from_excel(value)
    if not isinstance(converted, datetime):
        # fractions of a single day are times, not dates
        return ''
    return format_date(converted)


def parse_date_text(text):
    text = text.strip()
    if not text:
        return ''
    try:
        parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
        # Timestamps with an offset are dated in UTC
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        parsed = None
    if parsed is not None:
        return format_date(parsed)
    for fmt in DATE_FORMATS:
        try:
            return format_date(datetime.strptime(text, fmt))
        except ValueError:
            continue
    return ''


def normalize_date(value):
    """Returns ``value`` as a ``YYYY-MM-DD`` string, or '' when it is not a date."""
    if not value:
        return ''
    if isinstance(value, str) and CANONICAL_DATE_RE.match(value):
        return value
    if isinstance(value, (datetime, date)):
        return format_date(value)
    if isinstance(value, time) or isinstance(value, bool):
        return ''
    if isinstance(value, (int, float)):
        try:
            return from_serial(value)
        except (ValueError, OverflowError):
            return ''
    return parse_date_text(str(value))
