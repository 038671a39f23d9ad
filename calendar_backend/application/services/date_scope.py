"""
Date scope resolution for event reads.

A read request carries an optional free-form ``date`` plus optional ``month``
and ``year`` query values. The resolver picks exactly one mode:

- ``all``:   no date, or a date that does not parse -> no range
- ``month``: valid date and both month and year given -> whole month
- ``day``:   valid date otherwise -> the calendar day of that date

Months are zero-indexed (0-11) at the API boundary. All boundaries are
computed in the application timezone and returned as UTC instants; the end
boundary is the last representable instant so ranges are inclusive.
"""

# Standard library imports
import calendar
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional, Tuple, Union

# Local application imports
from ...domain.exceptions import BadScopeError
from ...utils.datetime_utils import ensure_utc, get_app_timezone, parse_datetime

logger = logging.getLogger(__name__)

RawInt = Union[str, int, None]

_LAST_INSTANT = timedelta(microseconds=1)

# Keeps boundary arithmetic clear of datetime.min/max in any zone
MIN_YEAR = 2
MAX_YEAR = 9998


class ScopeMode(str, Enum):
    ALL = "all"
    MONTH = "month"
    DAY = "day"


@dataclass(frozen=True)
class DateScope:
    mode: ScopeMode
    start_utc: Optional[datetime] = None
    end_utc: Optional[datetime] = None

    @property
    def has_range(self) -> bool:
        return self.start_utc is not None and self.end_utc is not None


def _is_blank(value: RawInt) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_optional_int(value: RawInt, name: str) -> Optional[int]:
    """
    Parse an optional integer query value.

    Returns None for missing/blank values.

    Raises:
        BadScopeError: If a non-blank value is not an integer
    """
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise BadScopeError()
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        logger.warning("Rejected non-numeric %s: %r", name, value)
        raise BadScopeError()


def parse_month_year(month: RawInt, year: RawInt) -> Tuple[int, int]:
    """
    Parse a required (zero-indexed month, year) pair into (1-12 month, year).

    Raises:
        BadScopeError: If either value is missing, non-numeric or out of range
    """
    month_index = parse_optional_int(month, "month")
    year_value = parse_optional_int(year, "year")
    if month_index is None or year_value is None:
        raise BadScopeError()
    return to_calendar_month(month_index, year_value)


def to_calendar_month(month_index: int, year: int) -> Tuple[int, int]:
    """Validate a zero-indexed month and return the 1-12 month with its year."""
    if not 0 <= month_index <= 11 or not MIN_YEAR <= year <= MAX_YEAR:
        logger.warning("Rejected out-of-range month/year: %s/%s", month_index, year)
        raise BadScopeError(
            f"month must be between 0 and 11 and year between {MIN_YEAR} and {MAX_YEAR}"
        )
    return month_index + 1, year


def days_in_month(month: int, year: int) -> int:
    """Number of days in a 1-12 month, accounting for leap years."""
    return calendar.monthrange(year, month)[1]


def month_bounds(month: int, year: int, tz: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    """First and last instant (UTC) of a 1-12 month in the given zone."""
    zone = tz or get_app_timezone()
    start_local = datetime(year, month, 1, tzinfo=zone)
    if month == 12:
        next_local = datetime(year + 1, 1, 1, tzinfo=zone)
    else:
        next_local = datetime(year, month + 1, 1, tzinfo=zone)
    return ensure_utc(start_local), ensure_utc(next_local) - _LAST_INSTANT


def day_bounds(moment: datetime, tz: Optional[tzinfo] = None) -> Tuple[datetime, datetime]:
    """First and last instant (UTC) of the calendar day containing ``moment``."""
    zone = tz or get_app_timezone()
    local_day = moment.astimezone(zone).date()
    start_local = datetime(local_day.year, local_day.month, local_day.day, tzinfo=zone)
    next_day = local_day + timedelta(days=1)
    next_local = datetime(next_day.year, next_day.month, next_day.day, tzinfo=zone)
    return ensure_utc(start_local), ensure_utc(next_local) - _LAST_INSTANT


class DateScopeResolver:
    """Turns raw date/month/year query values into a DateScope."""

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz

    def resolve(
        self,
        date_str: Optional[str] = None,
        month: RawInt = None,
        year: RawInt = None,
    ) -> DateScope:
        """
        Resolve the read scope.

        Raises:
            BadScopeError: If month or year is supplied but not an integer
        """
        month_index = parse_optional_int(month, "month")
        year_value = parse_optional_int(year, "year")

        parsed = parse_datetime(date_str)
        if parsed is None:
            return DateScope(mode=ScopeMode.ALL)

        # Boundaries computed once, in a single zone, for both ends
        zone = self._tz or get_app_timezone()

        if month_index is not None and year_value is not None:
            calendar_month, calendar_year = to_calendar_month(month_index, year_value)
            start_utc, end_utc = month_bounds(calendar_month, calendar_year, zone)
            return DateScope(mode=ScopeMode.MONTH, start_utc=start_utc, end_utc=end_utc)

        try:
            start_utc, end_utc = day_bounds(parsed, zone)
        except OverflowError:
            # Dates at the edge of the representable range have no usable day
            return DateScope(mode=ScopeMode.ALL)
        return DateScope(mode=ScopeMode.DAY, start_utc=start_utc, end_utc=end_utc)
