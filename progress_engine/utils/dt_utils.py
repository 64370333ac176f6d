# File: utils/dt_utils.py
"""Date and time utilities for the progress engine.

Pure Python date/time functions with no imports from the rest of the package.
All functions here can be unit tested in isolation.

⚠️ UTILS PURITY: NO imports from `progress_engine.const` or `engines`.
   Uses standard library: datetime, zoneinfo, plus dateutil.

Functions:
    - set_default_timezone / get_default_timezone: Zone for naive inputs
    - dt_now_utc: Single clock read used by time-dependent engines
    - as_utc: Convert a datetime to UTC
    - dt_parse_date: Parse ISO date strings
    - dt_to_utc: Parse datetimes / ISO strings into aware UTC datetimes
    - dt_days_between: Whole calendar days between two dates
    - dt_format_clock: Format a timedelta as HH:MM:SS
    - dt_format_distance: Human phrase for the gap between two instants
    - dt_format_relative: dt_format_distance with "in ..." / "... ago"
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
import logging
from zoneinfo import ZoneInfo

# Third-party date utilities
from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# ==============================================================================

# Default timezone for naive inputs - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600

# Distance phrasing breakpoints, in minutes
_MINUTES_PER_HOUR = 60
_MINUTES_PER_DAY = 1440
_MINUTES_PER_MONTH = 43200
_DISTANCE_ABOUT_ONE_HOUR = 45
_DISTANCE_ONE_HOUR_MAX = 90
_DISTANCE_ONE_DAY_MAX = 2520  # 42 hours
_DISTANCE_ABOUT_MONTHS_MAX = 86400  # 60 days


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the timezone used to interpret naive datetimes and strings.

    Call this once during application setup with the institution's timezone.

    Args:
        tz: ZoneInfo object representing the default timezone
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone.

    Returns:
        The configured default timezone (ZoneInfo object)
    """
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware).

    Returns:
        Current UTC datetime.
    """
    return datetime.now(UTC)


def as_utc(dt_obj: datetime) -> datetime:
    """Convert a datetime to UTC timezone.

    Args:
        dt_obj: Datetime object; naive values are taken as DEFAULT_TIME_ZONE

    Returns:
        Datetime in UTC timezone
    """
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=DEFAULT_TIME_ZONE)
    return dt_obj.astimezone(UTC)


# ==============================================================================
# Date/Time Parsing
# ==============================================================================


def dt_parse_date(date_input: str | date | None) -> date | None:
    """Safely parse an ISO date string into a `datetime.date`.

    Datetime strings are accepted and truncated to their date part, so a
    stored "2026-01-18T23:10:00+00:00" parses as 2026-01-18.

    Args:
        date_input: ISO date string, date, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if isinstance(date_input, datetime):
        return date_input.date()
    if isinstance(date_input, date):
        return date_input
    if not date_input or not isinstance(date_input, str):
        return None

    try:
        return date.fromisoformat(date_input)
    except ValueError:
        pass

    try:
        return isoparse(date_input).date()
    except ValueError:
        _LOGGER.debug("Unparseable date string: %s", date_input)
        return None


def dt_to_utc(dt_input: str | datetime | None) -> datetime | None:
    """Parse a datetime or ISO 8601 string, apply timezone if naive, convert to UTC.

    Accepts the forms storage layers emit: "2026-01-18T12:30:00Z",
    "2026-01-18T12:30:00.123+00:00", "2026-01-18 12:30:00" and bare dates.

    Args:
        dt_input: Datetime, ISO string, or None

    Returns:
        UTC-aware datetime object, or None if parsing fails.

    Example:
        "2026-01-18T14:30:00+02:00" → datetime.datetime(2026, 1, 18, 12, 30, tzinfo=UTC)
    """
    if isinstance(dt_input, datetime):
        return as_utc(dt_input)
    if not dt_input or not isinstance(dt_input, str):
        return None

    try:
        parsed = isoparse(dt_input.strip().replace(" ", "T", 1))
    except ValueError:
        _LOGGER.debug("Unparseable datetime string: %s", dt_input)
        return None

    return as_utc(parsed)


def dt_days_between(date_a: str | date, date_b: str | date) -> int | None:
    """Return the absolute number of calendar days between two dates.

    Args:
        date_a: ISO date string or date
        date_b: ISO date string or date

    Returns:
        Whole days between the two dates, or None if either fails to parse.

    Examples:
        dt_days_between("2026-01-01", "2026-01-02") → 1
        dt_days_between("2026-01-05", "2026-01-01") → 4
    """
    parsed_a = dt_parse_date(date_a)
    parsed_b = dt_parse_date(date_b)
    if parsed_a is None or parsed_b is None:
        return None
    return abs((parsed_a - parsed_b).days)


# ==============================================================================
# Duration Formatting
# ==============================================================================


def dt_format_clock(td: timedelta | None) -> str:
    """Format a timedelta as a zero-padded HH:MM:SS countdown.

    Hours are not wrapped at 24, so a three-day event shows "72:00:00".
    Negative or missing durations format as "00:00:00".

    Examples:
        dt_format_clock(timedelta(hours=1, minutes=5, seconds=9)) → "01:05:09"
        dt_format_clock(timedelta(days=2)) → "48:00:00"
    """
    if td is None or td <= timedelta():
        return "00:00:00"

    total_seconds = int(td.total_seconds())
    hours, remainder = divmod(total_seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def dt_format_distance(start: datetime, end: datetime) -> str:
    """Describe the gap between two instants in words.

    Short gaps are bucketed by minutes; gaps past two months use calendar
    months and years from relativedelta, so month lengths are respected.

    Args:
        start: One instant (aware)
        end: The other instant (aware); order does not matter

    Returns:
        Phrase such as "less than a minute", "about 3 hours", "5 days",
        "about 1 month", "4 months", "over 1 year"
    """
    earlier, later = (start, end) if start <= end else (end, start)
    seconds = (later - earlier).total_seconds()
    minutes = round(seconds / SECONDS_PER_MINUTE)

    if minutes < 1:
        return "less than a minute"
    if minutes < _DISTANCE_ABOUT_ONE_HOUR:
        return _plural(minutes, "minute")
    if minutes < _DISTANCE_ONE_HOUR_MAX:
        return "about 1 hour"
    if minutes < _MINUTES_PER_DAY:
        return f"about {_plural(round(minutes / _MINUTES_PER_HOUR), 'hour')}"
    if minutes < _DISTANCE_ONE_DAY_MAX:
        return "1 day"
    if minutes < _MINUTES_PER_MONTH:
        return _plural(round(minutes / _MINUTES_PER_DAY), "day")
    if minutes < _DISTANCE_ABOUT_MONTHS_MAX:
        return f"about {_plural(round(minutes / _MINUTES_PER_MONTH), 'month')}"

    delta = relativedelta(later, earlier)
    total_months = delta.years * 12 + delta.months
    if total_months < 12:
        return _plural(max(total_months, 2), "month")

    years, months_over = divmod(total_months, 12)
    if months_over < 3:
        return f"about {_plural(years, 'year')}"
    if months_over < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def dt_format_relative(target: datetime, now: datetime) -> str:
    """Describe `target` relative to `now` with a direction suffix.

    Examples:
        dt_format_relative(now + timedelta(hours=2), now) → "in about 2 hours"
        dt_format_relative(now - timedelta(days=3), now) → "3 days ago"
    """
    distance = dt_format_distance(now, target)
    if target > now:
        return f"in {distance}"
    return f"{distance} ago"
