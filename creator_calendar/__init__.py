"""Creator calendar: 364-day cycle, Man's count, feasts and Days Out of Time."""

from .daypart import DayPartAdapter, FixedDayPart, SkyfieldDayPart
from .epoch import TEQUFAH_EPOCH, CyclePosition, moment_of, position_at, resolve_moment
from .errors import CalendarError, ConfigurationError, DomainRangeError
from .model import DayDescriptor, Feast, LocationConfig, PartOfDay
from .resolver import generate_year, resolve_day

__all__ = [
    "CalendarError",
    "ConfigurationError",
    "CyclePosition",
    "DayDescriptor",
    "DayPartAdapter",
    "DomainRangeError",
    "Feast",
    "FixedDayPart",
    "LocationConfig",
    "PartOfDay",
    "SkyfieldDayPart",
    "TEQUFAH_EPOCH",
    "generate_year",
    "moment_of",
    "position_at",
    "resolve_day",
    "resolve_moment",
]
