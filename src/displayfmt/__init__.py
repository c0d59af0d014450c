"""displayfmt - Formatting helpers for presentation code.

This library renders date-like values as readable US-English strings and
turns status labels into CSS-class-safe tokens.

Example:
    >>> from displayfmt import FormatConfig, format_date, get_status_class
    >>> format_date("2024-03-15T14:30:00", FormatConfig(time_zone="UTC"))
    'March 15, 2024 at 02:30 PM'
    >>> get_status_class("In Progress")
    'in-progress'
"""

import logging

from displayfmt.core.exceptions import (
    ConfigurationError,
    DisplayfmtError,
    UnknownTimeZoneError,
    UnsupportedLocaleError,
)
from displayfmt.core.formatting import INVALID_DATE, format_date, get_status_class
from displayfmt.core.models import DEFAULT_CONFIG, SUPPORTED_LOCALES, FormatConfig


logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "INVALID_DATE",
    "SUPPORTED_LOCALES",
    "ConfigurationError",
    "DisplayfmtError",
    "FormatConfig",
    "UnknownTimeZoneError",
    "UnsupportedLocaleError",
    "__version__",
    "format_date",
    "get_status_class",
]
