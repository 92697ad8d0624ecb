"""termcal - Business-date term arithmetic with holiday overrides."""

from termcal.calendar import Calendar, DateCalendar, WorkDayCalendar
from termcal.config import (
    CalendarConfig,
    configure_calendar,
    get_calendar_config,
    reset_calendar_config,
)
from termcal.errors import (
    InvalidCount,
    InvalidDate,
    MalformedRange,
    OverlapError,
    StorageCapabilityError,
    TermCalError,
    UnknownPeriod,
)
from termcal.logging import configure_logging, get_logger
from termcal.parser import parse_day, parse_days
from termcal.periods import PeriodUnit
from termcal.registry import (
    CalendarSnapshot,
    HolidayRegistry,
    configure_storage,
    get_registry,
    holidays,
    is_holiday,
    reset,
    reset_registry,
    set_holidays,
    set_work_days,
    work_days,
)
from termcal.storage import MemoryStore, Store
from termcal.term import TermCalculator
from termcal.walker import after_work_days, next_work_day

__all__ = [
    # Primary API
    "TermCalculator",
    "PeriodUnit",
    # Registry
    "HolidayRegistry",
    "CalendarSnapshot",
    "get_registry",
    "reset_registry",
    "set_holidays",
    "set_work_days",
    "holidays",
    "work_days",
    "is_holiday",
    "reset",
    "configure_storage",
    # Storage
    "Store",
    "MemoryStore",
    # Parsing
    "parse_day",
    "parse_days",
    # Walking
    "next_work_day",
    "after_work_days",
    # Calendar
    "Calendar",
    "DateCalendar",
    "WorkDayCalendar",
    # Config
    "CalendarConfig",
    "configure_calendar",
    "get_calendar_config",
    "reset_calendar_config",
    # Logging
    "configure_logging",
    "get_logger",
    # Errors
    "TermCalError",
    "InvalidCount",
    "UnknownPeriod",
    "MalformedRange",
    "InvalidDate",
    "OverlapError",
    "StorageCapabilityError",
]
__version__ = "0.1.0"
