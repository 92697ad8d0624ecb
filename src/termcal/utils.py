"""Common utility functions for termcal."""

from datetime import date, datetime
from typing import Any

import pandas as pd

from termcal.errors import InvalidCount


def to_date(value: Any) -> date:
    """Coerce a date-like value to a plain date, dropping any time of day."""
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def check_count(count: Any, what: str = "Term count") -> int:
    """Return ``count`` if it is a positive integer, else raise InvalidCount."""
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidCount(f"{what} must be a positive integer; got {count!r}")
    return count
