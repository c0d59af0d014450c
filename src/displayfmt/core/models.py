"""Core domain models for displayfmt.

These models are pure Python dataclasses with no I/O dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from displayfmt.core.exceptions import UnknownTimeZoneError, UnsupportedLocaleError


SUPPORTED_LOCALES = frozenset({"en-US"})


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Explicit rendering settings for date formatting.

    Passing a config instead of relying on the host's ambient settings
    makes format_date reproducible across machines.

    Attributes:
        locale: BCP 47 locale tag. Only "en-US" is supported.
        time_zone: IANA time zone name (e.g., "America/New_York"). None
            renders in the host's local time zone.

    Example:
        >>> config = FormatConfig(time_zone="UTC")
        >>> config.tzinfo
        zoneinfo.ZoneInfo(key='UTC')
    """

    locale: str = "en-US"
    time_zone: str | None = None

    def __post_init__(self) -> None:
        """Validate locale and time zone after initialization."""
        if self.locale not in SUPPORTED_LOCALES:
            raise UnsupportedLocaleError(self.locale, sorted(SUPPORTED_LOCALES))
        if self.time_zone is not None:
            _load_zone(self.time_zone)

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """The configured zone, or None for host local time."""
        if self.time_zone is None:
            return None
        return _load_zone(self.time_zone)

    @property
    def babel_locale(self) -> str:
        """Locale identifier in Babel's underscore form ("en_US")."""
        return self.locale.replace("-", "_")

    def with_time_zone(self, time_zone: str | None) -> Self:
        """Return a new FormatConfig rendering in the given zone."""
        return replace(self, time_zone=time_zone)


def _load_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimeZoneError(name) from e


DEFAULT_CONFIG = FormatConfig()
