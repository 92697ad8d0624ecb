"""Period units and calendar arithmetic for terms."""

from datetime import date, timedelta
from enum import Enum

from dateutil.relativedelta import relativedelta

from termcal.errors import UnknownPeriod


class PeriodUnit(Enum):
    """Units a term can be expressed in."""

    CALENDAR_DAYS = "calendar_days"
    WORK_DAYS = "work_days"
    WEEKS = "weeks"
    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"

    @classmethod
    def parse(cls, value: "PeriodUnit | str") -> "PeriodUnit":
        """Convert a unit name such as ``"months"`` or ``"month"`` to a PeriodUnit.

        Raises:
            UnknownPeriod: If the name is not a recognized unit.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownPeriod(f"Unknown period {value!r}")
        name = value.strip().lower()
        try:
            return cls(name)
        except ValueError:
            pass
        try:
            return cls(name + "s")  # singular alias
        except ValueError:
            raise UnknownPeriod(f"Unknown period {value!r}") from None


# Calendar arithmetic. Callers guarantee count >= 1.

def after_calendar_days(base: date, count: int) -> date:
    return base + timedelta(days=count)


def after_weeks(base: date, count: int) -> date:
    return base + timedelta(days=count * 7)


def after_months(base: date, count: int) -> date:
    """Advance by ``count`` months, clamping to the last day of the month."""
    return base + relativedelta(months=count)


def after_quarters(base: date, count: int) -> date:
    return after_months(base, count * 3)


def after_years(base: date, count: int) -> date:
    """Advance by ``count`` years; 29 February clamps to 28 February."""
    return base + relativedelta(years=count)
