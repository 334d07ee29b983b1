# lexilabel/shared/dates.py
"""
Timestamp helpers for label data and rendered messages.

Timestamps are exchanged as "yyyy-MM-dd HH:mm:ss" in GMT. Parsing is
strict: the whole input must match the format and the year must fall in
the supported window, so malformed data never yields a partial date.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from lexilabel.core.domain.exceptions import DateParseError

NLS_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EARLIEST = datetime(1700, 1, 1, tzinfo=timezone.utc)
LATEST = datetime(4000, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

# Two-digit years below this map to 20xx, the rest to 19xx.
TWO_DIGIT_YEAR_PIVOT = 60

_FOUR_DIGIT_YEAR = re.compile(r"%Y")


def format_timestamp(value: datetime) -> str:
    """Format `value` in GMT. Naive datetimes are taken to be GMT already."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(NLS_DATE_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Inverse of `format_timestamp`; returns an aware UTC datetime."""
    return parse_date(text, NLS_DATE_FORMAT)


def parse_date(text: str, fmt: str = NLS_DATE_FORMAT) -> datetime:
    """
    Parse `text` with a strptime format, consuming the whole input.

    A four-digit-year format also accepts a two-digit year ("19-03-01"),
    mapped through `TWO_DIGIT_YEAR_PIVOT`. The result is an aware datetime
    in UTC unless the format carries its own offset.

    Raises:
        DateParseError: text does not match, has trailing content, or the
            year is outside 1700..4000.
    """
    if text is None:
        raise DateParseError("None", "no input")
    stripped = text.strip()

    try:
        parsed = datetime.strptime(stripped, fmt)
    except ValueError as first_error:
        parsed = _parse_two_digit_year(stripped, fmt)
        if parsed is None:
            raise DateParseError(text, str(first_error)) from first_error
    else:
        # strptime reads "19" under %Y as the year 19.
        if parsed.year < 100:
            parsed = _parse_two_digit_year(stripped, fmt) or parsed

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    if not (EARLIEST <= parsed <= LATEST):
        raise DateParseError(text, f"year {parsed.year} outside {EARLIEST.year}..{LATEST.year}")
    return parsed


def _parse_two_digit_year(text: str, fmt: str):
    if not _FOUR_DIGIT_YEAR.search(fmt):
        return None
    try:
        parsed = datetime.strptime(text, _FOUR_DIGIT_YEAR.sub("%y", fmt))
    except ValueError:
        return None
    two_digits = parsed.year % 100
    century = 2000 if two_digits < TWO_DIGIT_YEAR_PIVOT else 1900
    return parsed.replace(year=century + two_digits)
