"""Forward scans over working days."""

from datetime import date, timedelta

from termcal.logging import get_logger, timed_block
from termcal.registry import HolidayRegistry, get_registry
from termcal.utils import check_count, to_date

_log = get_logger(__name__)

_ONE_DAY = timedelta(days=1)


def next_work_day(day: date, registry: HolidayRegistry | None = None) -> date:
    """Return the first working day strictly after ``day``."""
    snapshot = (registry or get_registry()).snapshot()
    target = to_date(day) + _ONE_DAY
    while snapshot.is_holiday(target):
        target += _ONE_DAY
    return target


def after_work_days(
    base: date,
    count: int,
    registry: HolidayRegistry | None = None,
) -> date:
    """Return the date ``count`` working days after ``base``.

    ``after_work_days(base, 1)`` equals ``next_work_day(base)``.

    Raises:
        InvalidCount: If count is not a positive integer.
    """
    check_count(count, "Work day count")
    base = to_date(base)
    snapshot = (registry or get_registry()).snapshot()
    with timed_block(_log, "work_days_walked", base=base.isoformat(), count=count):
        counter = 0
        target = base + _ONE_DAY
        while counter < count - 1:
            if not snapshot.is_holiday(target):
                counter += 1
            target += _ONE_DAY
        # land on a working day
        while snapshot.is_holiday(target):
            target += _ONE_DAY
    return target
