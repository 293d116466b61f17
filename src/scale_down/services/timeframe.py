"""Resolution of date query parameters into a time window."""

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from scale_down.errors import (
    ConflictingDateParametersError,
    InvalidDateParameterError,
)

_DATE_PARAM = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})", re.ASCII)

MIN_YEAR = 2000
MAX_YEAR = 3000
MONTHS_END = 13
DAYS_END = 32


@dataclass(frozen=True)
class Timeframe:
    """A half-open ``[start, end)`` window in UTC."""

    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        """Return whether a moment falls within the window."""
        return self.start <= moment < self.end


def is_valid_date_param(value: str) -> bool:
    """Check a YYYY-MM-DD parameter loosely.

    Month and day are range-checked but not against the calendar, so
    ``2021-02-31`` passes.
    """
    match = _DATE_PARAM.fullmatch(value)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    if not MIN_YEAR < year < MAX_YEAR:
        return False
    if not 1 <= month < MONTHS_END:
        return False
    return 1 <= day < DAYS_END


def parse_date_param(value: str) -> date:
    """Parse a checked date parameter, rolling overflowing days forward."""
    if not is_valid_date_param(value):
        raise InvalidDateParameterError
    year, month, day = (int(part) for part in value.split("-"))
    return date(year, month, 1) + timedelta(days=day - 1)


def resolve_timeframe(
    date_param: str | None,
    start_date: str | None,
    end_date: str | None,
    timezone_name: str,
    now: datetime | None = None,
) -> Timeframe:
    """Turn the optional ``date``/``startDate``/``endDate`` parameters into a window.

    A single date covers that whole local day. A start/end pair runs from the
    start of ``start_date`` to the start of ``end_date``. With no parameters
    the window is today.
    """
    if date_param is not None and start_date is not None and end_date is not None:
        raise ConflictingDateParametersError

    for value in (date_param, start_date, end_date):
        if value is not None and not is_valid_date_param(value):
            raise InvalidDateParameterError

    tz = ZoneInfo(timezone_name)
    if date_param is not None:
        start = _local_midnight(parse_date_param(date_param), tz)
        end = start + timedelta(days=1)
    elif start_date is not None and end_date is not None:
        start = _local_midnight(parse_date_param(start_date), tz)
        end = _local_midnight(parse_date_param(end_date), tz)
    elif start_date is not None or end_date is not None:
        raise ConflictingDateParametersError(
            "You only specified either startDate or endDate. You must send both. "
            "For 1 date use 'date' instead"
        )
    else:
        current = now.astimezone(tz) if now else datetime.now(tz=tz)
        start = _local_midnight(current.date(), tz)
        end = start + timedelta(days=1)
    return Timeframe(start=start.astimezone(UTC), end=end.astimezone(UTC))


def _local_midnight(day: date, tz: ZoneInfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)
