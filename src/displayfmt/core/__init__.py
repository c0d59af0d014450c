"""Core domain module for displayfmt.

This module contains the pure formatting functions and their models.
It has no I/O dependencies and can be tested in isolation.
"""

from displayfmt.core.formatting import format_date, get_status_class
from displayfmt.core.models import DEFAULT_CONFIG, SUPPORTED_LOCALES, FormatConfig


__all__ = [
    "DEFAULT_CONFIG",
    "SUPPORTED_LOCALES",
    "FormatConfig",
    "format_date",
    "get_status_class",
]
