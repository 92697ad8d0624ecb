"""Module-level configuration for termcal defaults."""

import threading
from dataclasses import dataclass
from typing import Iterable

from termcal.logging import get_logger

_log = get_logger(__name__)

SATURDAY = 5
SUNDAY = 6


@dataclass
class CalendarConfig:
    """Configuration for the default weekend rule."""

    weekend_days: tuple[int, ...] = (SATURDAY, SUNDAY)  # date.weekday() numbering


# Module-level singleton
_calendar_config: CalendarConfig | None = None
_config_lock = threading.Lock()


def get_calendar_config() -> CalendarConfig:
    """Get the global calendar configuration singleton."""
    global _calendar_config
    if _calendar_config is None:
        with _config_lock:
            if _calendar_config is None:
                _calendar_config = CalendarConfig()
    return _calendar_config


def _validate_weekend_days(weekend_days: Iterable[int]) -> tuple[int, ...]:
    days = tuple(sorted(set(weekend_days)))
    for day in days:
        if not isinstance(day, int) or isinstance(day, bool) or not 0 <= day <= 6:
            raise ValueError(f"Weekend days must be integers in 0..6; got {day!r}")
    if len(days) >= 7:
        raise ValueError("At least one weekday must remain a working day")
    return days


def configure_calendar(weekend_days: Iterable[int] | None = None) -> None:
    """Configure default calendar settings.

    Args:
        weekend_days: Weekdays (Monday=0 ... Sunday=6) that are holidays
            unless forced to be work days. Pass None to leave unchanged.

    Example:
        from termcal import configure_calendar

        # Friday/Saturday weekend
        configure_calendar(weekend_days=[4, 5])
    """
    config = get_calendar_config()
    with _config_lock:
        if weekend_days is not None:
            config.weekend_days = _validate_weekend_days(weekend_days)
    _log.info("calendar_configured", weekend_days=list(config.weekend_days))


def reset_calendar_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calendar_config
    with _config_lock:
        _calendar_config = CalendarConfig()
