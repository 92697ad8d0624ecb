"""Parser for the override day-list syntax.

An override specification maps a year to a comma-separated list of day
tokens for that year::

    {
        2018: "01.01-08.01, 23.02, 8.3",
        2019: "01.01-08.01, 08.03, 01.05-04.05",
    }

A token is either a single ``D.M`` date or an inclusive ``D.M-D.M`` range.
Whitespace anywhere in the value is ignored.
"""

import re
from datetime import date, timedelta
from typing import Mapping

from termcal.errors import InvalidDate, MalformedRange

OverrideSpec = Mapping[int | str, str]

_WHITESPACE = re.compile(r"\s+")
_DAY_MONTH = re.compile(r"(\d{1,2})\.(\d{1,2})")


def parse_day(year: int, token: str) -> date:
    """Parse a single ``D.M`` token against ``year``.

    Raises:
        InvalidDate: If the token is not a valid day.month for that year.
    """
    match = _DAY_MONTH.fullmatch(token)
    if match is None:
        raise InvalidDate(f"Invalid day {token!r} for year {year}: expected D.M")
    day, month = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDate(f"Invalid day {token!r} for year {year}: {e}") from e


def _parse_range(year: int, token: str) -> list[date]:
    parts = token.split("-")
    if len(parts) != 2:
        raise MalformedRange(
            f"Range {token!r} for year {year} must have exactly two endpoints"
        )
    start = parse_day(year, parts[0])
    end = parse_day(year, parts[1])
    if start > end:
        raise MalformedRange(
            f"Range {token!r} for year {year} starts after it ends"
        )
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def _parse_year(year: int | str, text: str) -> list[date]:
    try:
        year = int(year)
    except (TypeError, ValueError) as e:
        raise InvalidDate(f"Invalid year {year!r}") from e
    if not date.min.year <= year <= date.max.year:
        raise InvalidDate(f"Invalid year {year!r}")

    text = _WHITESPACE.sub("", text)
    if not text:
        return []

    days = []
    for token in text.split(","):
        if not token:  # trailing or doubled comma
            continue
        if "-" in token:
            days.extend(_parse_range(year, token))
        else:
            days.append(parse_day(year, token))
    return days


def parse_days(spec: OverrideSpec) -> list[date]:
    """Parse an override specification into sorted, unique dates.

    Args:
        spec: Mapping of year to day-token list.

    Returns:
        Ascending list of dates with duplicates removed.

    Raises:
        InvalidDate: If any token is not a valid date in its year.
        MalformedRange: If a range token is malformed or reversed.
    """
    days: set[date] = set()
    for year, text in spec.items():
        days.update(_parse_year(year, text))
    return sorted(days)
