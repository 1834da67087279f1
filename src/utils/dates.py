"""Date coercion helpers for spreadsheet cells and query parameters.

Release dates arrive in three shapes depending on how the workbook was
authored: real date cells (openpyxl hands back ``datetime``/``date``),
raw serial numbers from the legacy spreadsheet format, and free text.
Everything is normalised to timezone-aware UTC ``datetime`` objects, and
anything that cannot be interpreted becomes ``None``.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any

from dateutil import parser as dateutil_parser

# Day 0 of the legacy spreadsheet calendar sits this many days before the
# Unix epoch, so serial 25569 is 1970-01-01.
_SERIAL_EPOCH_OFFSET_DAYS = 25569
_SECONDS_PER_DAY = 86400
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Source of the date parts partial text leaves out; dateutil uses today otherwise.
_PARSE_DEFAULT = datetime(1970, 1, 1)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def excel_serial_to_datetime(serial: float) -> datetime | None:
    """Convert a spreadsheet serial day count into a UTC datetime.

    ``epoch + round((serial - 25569) * 86400)`` seconds.  Returns ``None``
    for NaN/infinite values and serials outside the representable range.
    """
    if not math.isfinite(serial):
        return None
    seconds = round((serial - _SERIAL_EPOCH_OFFSET_DAYS) * _SECONDS_PER_DAY)
    try:
        return _UNIX_EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


def parse_date_text(text: str) -> datetime | None:
    """Parse free-form date text with python-dateutil.

    Missing parts are taken from 1970-01-01, so ``"2023"`` is 2023-01-01
    and ``"March 2023"`` is 2023-03-01.  Naive results are treated as UTC.
    Empty or unparseable text yields ``None``.
    """
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        parsed = dateutil_parser.parse(cleaned, default=_PARSE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    return ensure_utc(parsed)


def coerce_datetime(value: Any) -> datetime | None:
    """Interpret a raw cell value as a point in time.

    Order of precedence:

    1. ``datetime`` -- used as-is (naive means UTC); a bare ``date``
       becomes midnight UTC.
    2. ``int``/``float`` -- legacy spreadsheet serial number.
    3. anything else -- stringified and parsed as text.

    ``bool`` is deliberately not numeric here even though Python treats it
    as an ``int`` subclass.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return excel_serial_to_datetime(float(value))
    return parse_date_text(str(value))


def to_iso_z(value: datetime | None) -> str | None:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (millisecond precision)."""
    if value is None:
        return None
    utc = ensure_utc(value)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
