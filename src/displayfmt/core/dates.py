"""Date input parsing.

Turns the loosely typed values handed to format_date into datetimes that
sit in the requested time zone. Anything that cannot be interpreted comes
back as None so callers can degrade to an "Invalid Date" rendering instead
of raising.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime, time, tzinfo

from dateutil import parser as date_parser


logger = logging.getLogger(__name__)

# ISO forms without a time component are read as UTC midnight
_ISO_DATE_ONLY = re.compile(r"^\d{4}(?:-\d{2}(?:-\d{2})?|\d{4})?$")

# Free-form text is parsed against both; a differing date means the text
# left the year, month or day to the default
_SENTINEL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))

DateInput = str | datetime | date | int | float | None


def parse_date_input(value: DateInput, tz: tzinfo | None = None) -> datetime | None:
    """Parse a date-like value into a datetime in the given zone.

    Accepted inputs:
    - str: ISO 8601 first, then free-form text (e.g., "March 15, 2024 2:30 PM").
      Date-only ISO strings are UTC midnight; other strings without an offset
      are wall-clock time in ``tz``. Free-form text must name a full
      calendar date ("10:30" or "May" alone are rejected).
    - int/float: milliseconds since the Unix epoch.
    - datetime: naive values are wall-clock time in ``tz``, aware values are
      converted into it.
    - date: midnight wall-clock time in ``tz``.

    Args:
        value: The value to parse.
        tz: Target zone. None means the host's local time zone.

    Returns:
        The parsed datetime, or None if the value cannot be interpreted.
        With ``tz=None`` and no offset in the input the result is naive.
    """
    try:
        parsed = _parse(value)
        if parsed is None:
            return None
        return _to_zone(parsed, tz)
    except (OverflowError, OSError, ValueError) as e:
        logger.debug("Date value %r out of range: %s", value, e)
        return None


def _parse(value: DateInput) -> datetime | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value / 1000, tz=UTC)
    if isinstance(value, str):
        return _parse_text(value.strip())
    return None


def _parse_text(text: str) -> datetime | None:
    if not text:
        return None
    try:
        parsed = date_parser.isoparse(text)
    except ValueError:
        pass
    else:
        if _ISO_DATE_ONLY.match(text):
            return parsed.replace(tzinfo=UTC)
        return parsed

    try:
        first, second = (
            date_parser.parse(text, default=default) for default in _SENTINEL_DEFAULTS
        )
    except (date_parser.ParserError, ValueError, OverflowError):
        logger.debug("Could not parse date text %r", text)
        return None

    if first.date() != second.date():
        logger.debug("Date text %r has no full calendar date", text)
        return None
    return first


def _to_zone(dt: datetime, tz: tzinfo | None) -> datetime:
    if dt.tzinfo is None:
        return dt if tz is None else dt.replace(tzinfo=tz)
    # astimezone(None) converts to host local time
    return dt.astimezone(tz)
