"""End-of-term calculation from a base date."""

from datetime import date
from typing import Callable

from termcal.periods import (
    PeriodUnit,
    after_calendar_days,
    after_months,
    after_quarters,
    after_weeks,
    after_years,
)
from termcal.registry import HolidayRegistry, get_registry
from termcal.utils import check_count, to_date
from termcal.walker import after_work_days, next_work_day

_ARITHMETIC: dict[PeriodUnit, Callable[[date, int], date]] = {
    PeriodUnit.CALENDAR_DAYS: after_calendar_days,
    PeriodUnit.WEEKS: after_weeks,
    PeriodUnit.MONTHS: after_months,
    PeriodUnit.QUARTERS: after_quarters,
    PeriodUnit.YEARS: after_years,
}


class TermCalculator:
    """Computes term end dates and the next working day from a base date.

    Work-day terms consult a HolidayRegistry; every other unit is plain
    calendar arithmetic and ignores holidays.

    Example:
        calc = TermCalculator(date(2018, 9, 3))
        calc.end_of_term(5, "work_days")  # date(2018, 9, 10)
    """

    PERIODS = tuple(unit.value for unit in PeriodUnit)

    def __init__(
        self,
        base_date: date | None = None,
        registry: HolidayRegistry | None = None,
    ) -> None:
        """Initialize a TermCalculator.

        Args:
            base_date: Date terms are counted from. Defaults to today.
            registry: Holiday registry for work-day terms. Defaults to the
                process-wide registry.
        """
        self.base_date = to_date(base_date) if base_date is not None else date.today()
        self._registry = registry

    @property
    def registry(self) -> HolidayRegistry:
        return self._registry or get_registry()

    def next_work_day(self) -> date:
        return next_work_day(self.base_date, self.registry)

    def end_of_term(self, count: int, unit: PeriodUnit | str) -> date:
        """End date of a term of ``count`` units.

        Args:
            count: Term length, a positive integer.
            unit: A PeriodUnit or its name ("calendar_days", "work_days",
                "weeks", "months", "quarters", "years").

        Raises:
            InvalidCount: If count is not a positive integer.
            UnknownPeriod: If unit is not recognized.
        """
        check_count(count)
        unit = PeriodUnit.parse(unit)
        if unit is PeriodUnit.WORK_DAYS:
            return after_work_days(self.base_date, count, self.registry)
        return _ARITHMETIC[unit](self.base_date, count)

    eot = end_of_term

    def __repr__(self) -> str:
        return f"TermCalculator(base_date={self.base_date!r})"
