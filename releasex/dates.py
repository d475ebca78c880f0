"""
Date helpers shared by trend accumulation and search.

Release files carry dates in whatever shape the export produced
("2025-10-02", "10/02/2025", "Oct 2 2025"), so parsing is free-form.
Components missing from the text are filled from January 1st of the
current year, which makes "2025-10" mean the first of October.
"""

import datetime
from typing import Optional

from dateutil import parser as dateutil_parser


def _default_anchor() -> datetime.datetime:
    today = datetime.date.today()
    return datetime.datetime(today.year, 1, 1)


def parse_date(value: str, default: Optional[datetime.datetime] = None) -> Optional[datetime.date]:
    """
    Parse a free-form date string.
    
    Args:
        value: Date text
        default: Datetime supplying components absent from the text
        
    Returns:
        Calendar date, or None if the text is not a date
    """
    value = (value or "").strip()
    if not value:
        return None

    try:
        parsed = dateutil_parser.parse(value, default=default or _default_anchor())
    except (ValueError, OverflowError):
        return None

    return parsed.date()


def derive_month(value: str) -> Optional[str]:
    """Return the "YYYY-MM" month of a date string, or None if unparsable."""
    parsed = parse_date(value)
    if parsed is None:
        return None
    return f"{parsed.year:04d}-{parsed.month:02d}"


def same_day(left: str, right: str) -> bool:
    """Check whether two date strings parse to the same calendar day."""
    left_date = parse_date(left)
    if left_date is None:
        return False
    right_date = parse_date(right)
    return right_date is not None and left_date == right_date
