"""Formatting utilities for presentation code."""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

from babel.dates import format_datetime

from displayfmt.core.dates import parse_date_input
from displayfmt.core.models import DEFAULT_CONFIG


if TYPE_CHECKING:
    from displayfmt.core.dates import DateInput
    from displayfmt.core.models import FormatConfig


logger = logging.getLogger(__name__)

# CLDR pattern: full month name, numeric day and year, 2-digit 12-hour time
DATE_PATTERN = "MMMM d, y 'at' hh:mm a"
INVALID_DATE = "Invalid Date"

_WHITESPACE_RUN = re.compile(r"\s+")


def format_date(value: DateInput, config: FormatConfig | None = None) -> str:
    """Render a date-like value as a human-readable string.

    Args:
        value: ISO or free-form date string, datetime, date, or epoch
            milliseconds. Falsy values (None, "", 0) and NaN are treated
            as absent.
        config: Locale and time zone to render with. Defaults to "en-US"
            in the host's local time zone.

    Returns:
        - falsy value -> empty string
        - "2024-03-15T14:30:00" -> "March 15, 2024 at 02:30 PM"
        - unparseable value -> "Invalid Date"

    Example:
        >>> from displayfmt import FormatConfig
        >>> format_date("2024-03-15T14:30:00", FormatConfig(time_zone="UTC"))
        'March 15, 2024 at 02:30 PM'
    """
    if not value or (isinstance(value, float) and math.isnan(value)):
        return ""
    config = config or DEFAULT_CONFIG

    parsed = parse_date_input(value, config.tzinfo)
    if parsed is None:
        logger.debug("Rendering %r as %s", value, INVALID_DATE)
        return INVALID_DATE

    return format_datetime(parsed, DATE_PATTERN, locale=config.babel_locale)


def get_status_class(status: str | None) -> str:
    """Normalize a status label into a CSS-class-safe token.

    Lowercases the label and replaces each run of whitespace with a single
    hyphen. Surrounding whitespace is not trimmed, so it becomes a leading
    or trailing hyphen.

    Args:
        status: Status label such as "In Progress".

    Returns:
        - "In Progress" -> "in-progress"
        - "  Needs   Review " -> "-needs-review-"
        - falsy value -> empty string
    """
    if not status:
        return ""
    return _WHITESPACE_RUN.sub("-", status.lower())
