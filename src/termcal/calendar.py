"""Calendar views over dates and working days."""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterator

from termcal.registry import HolidayRegistry, get_registry
from termcal.utils import to_date
from termcal.walker import after_work_days


class Calendar(ABC):
    """Abstract base class for calendars."""

    @abstractmethod
    def dt_range(self, start_dt: date, end_dt: date) -> Iterator[date]:
        """Generate valid dates in range [start_dt, end_dt]."""
        pass

    @abstractmethod
    def dt_offset(self, dt: date, periods: int) -> date:
        """Shift date by N calendar periods."""
        pass


class DateCalendar(Calendar):
    """Calendar that includes all dates."""

    def dt_range(self, start_dt: date, end_dt: date) -> Iterator[date]:
        current = to_date(start_dt)
        end_dt = to_date(end_dt)
        while current <= end_dt:
            yield current
            current += timedelta(days=1)

    def dt_offset(self, dt: date, periods: int) -> date:
        return to_date(dt) + timedelta(days=periods)


class WorkDayCalendar(Calendar):
    """Working-day calendar backed by a HolidayRegistry.

    Weekends are skipped unless forced to be work days; forced holidays are
    always skipped.
    """

    def __init__(self, registry: HolidayRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> HolidayRegistry:
        return self._registry or get_registry()

    def dt_range(self, start_dt: date, end_dt: date) -> Iterator[date]:
        snapshot = self.registry.snapshot()
        current = to_date(start_dt)
        end_dt = to_date(end_dt)
        while current <= end_dt:
            if not snapshot.is_holiday(current):
                yield current
            current += timedelta(days=1)

    def dt_offset(self, dt: date, periods: int) -> date:
        dt = to_date(dt)
        if periods == 0:
            return dt
        if periods > 0:
            return after_work_days(dt, periods, self.registry)
        snapshot = self.registry.snapshot()
        remaining = -periods
        current = dt
        while remaining > 0:
            current -= timedelta(days=1)
            if not snapshot.is_holiday(current):
                remaining -= 1
        return current

    def count(self, start_dt: date, end_dt: date) -> int:
        """Number of working days in [start_dt, end_dt]."""
        return sum(1 for _ in self.dt_range(start_dt, end_dt))
