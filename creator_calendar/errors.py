"""Errors raised by the Creator calendar engine."""

from typing import Any, Dict, Optional


class CalendarError(ValueError):
    """Base exception for calendar input errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class DomainRangeError(CalendarError):
    """Raised when a Creator day lies outside the cycle."""

    def __init__(self, creator_day: Any, max_day: int):
        super().__init__(
            message=f"Creator day {creator_day!r} out of range 1..{max_day}",
            error_code="DAY_OUT_OF_RANGE",
            details={"creator_day": creator_day, "max_day": max_day},
        )


class ConfigurationError(CalendarError):
    """Raised for an invalid Tequfah selector or settings value."""

    def __init__(self, message: str, setting: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            error_code="INVALID_CONFIGURATION",
            details={"setting": setting, "value": value},
        )
