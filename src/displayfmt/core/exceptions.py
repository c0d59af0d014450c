"""Domain exceptions for displayfmt.

All library errors inherit from DisplayfmtError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.

The formatting functions themselves never raise for input values; these
exceptions are only raised while building configuration.
"""

from __future__ import annotations

from typing import Any


class DisplayfmtError(Exception):
    """Base class for all displayfmt exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(DisplayfmtError):
    """Raised for invalid formatting configuration.

    Attributes:
        option: Name of the offending option (e.g., "time_zone").
        value: The rejected value.
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: Any = None,
    ) -> None:
        self.option = option
        self.value = value
        super().__init__(message)


class UnsupportedLocaleError(ConfigurationError):
    """Raised when a locale other than the supported ones is requested.

    Attributes:
        supported: Locales that can be used instead.
    """

    def __init__(self, locale: str, supported: list[str]) -> None:
        self.supported = supported
        super().__init__(
            f"Unsupported locale '{locale}'", option="locale", value=locale
        )

    @property
    def recovery_hint(self) -> str:
        """List the supported locales."""
        return f"Supported locales: {', '.join(self.supported)}"


class UnknownTimeZoneError(ConfigurationError):
    """Raised when a time zone name is not a known IANA key."""

    def __init__(self, time_zone: str) -> None:
        super().__init__(
            f"Unknown time zone '{time_zone}'", option="time_zone", value=time_zone
        )

    @property
    def recovery_hint(self) -> str:
        """Suggest a valid IANA name."""
        return "Use an IANA time zone name such as 'UTC' or 'America/New_York'"
