"""Tests for dt_utils parsing and formatting helpers."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from progress_engine.utils.dt_utils import (
    dt_days_between,
    dt_format_clock,
    dt_format_distance,
    dt_format_relative,
    dt_parse_date,
    dt_to_utc,
    get_default_timezone,
    set_default_timezone,
)

BASE = datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture
def restore_default_timezone() -> Iterator[None]:
    """Put the default timezone back after a test changes it."""
    original = get_default_timezone()
    yield
    set_default_timezone(original)


# ==============================================================================
# Timezone Configuration
# ==============================================================================


class TestDefaultTimezone:
    """Tests for the configurable zone used for naive inputs."""

    def test_default_is_utc(self) -> None:
        """Test naive strings are read as UTC out of the box."""
        assert get_default_timezone() == ZoneInfo("UTC")
        assert dt_to_utc("2026-05-10T09:00:00") == datetime(2026, 5, 10, 9, tzinfo=UTC)

    @pytest.mark.usefixtures("restore_default_timezone")
    def test_set_default_timezone(self) -> None:
        """Test a configured zone changes how naive strings convert."""
        set_default_timezone(ZoneInfo("Asia/Karachi"))

        assert get_default_timezone() == ZoneInfo("Asia/Karachi")
        assert dt_to_utc("2026-05-10T09:00:00") == datetime(2026, 5, 10, 4, tzinfo=UTC)

    @pytest.mark.usefixtures("restore_default_timezone")
    def test_aware_strings_ignore_default(self) -> None:
        """Test an explicit offset wins over the configured zone."""
        set_default_timezone(ZoneInfo("Asia/Karachi"))

        assert dt_to_utc("2026-05-10T09:00:00+00:00") == datetime(
            2026, 5, 10, 9, tzinfo=UTC
        )

# ==============================================================================
# Parsing
# ==============================================================================


class TestParsing:
    """Tests for date and datetime parsing."""

    def test_parse_date(self) -> None:
        """Test ISO dates and datetime strings parse to dates."""
        assert dt_parse_date("2026-01-18") == date(2026, 1, 18)
        assert dt_parse_date("2026-01-18T23:10:00+00:00") == date(2026, 1, 18)

    def test_parse_date_invalid(self) -> None:
        """Test bad input returns None."""
        assert dt_parse_date("soon") is None
        assert dt_parse_date(None) is None
        assert dt_parse_date("") is None

    def test_to_utc_offset(self) -> None:
        """Test offsets are converted to UTC."""
        assert dt_to_utc("2026-01-18T14:30:00+02:00") == datetime(
            2026, 1, 18, 12, 30, tzinfo=UTC
        )

    def test_to_utc_fractional_seconds(self) -> None:
        """Test fractional seconds are accepted."""
        parsed = dt_to_utc("2026-01-18T12:30:00.123+00:00")
        assert parsed is not None
        assert parsed.microsecond == 123000

    def test_to_utc_invalid(self) -> None:
        """Test bad input returns None."""
        assert dt_to_utc("whenever") is None
        assert dt_to_utc(None) is None

    def test_days_between(self) -> None:
        """Test absolute calendar day gaps."""
        assert dt_days_between("2026-01-01", "2026-01-02") == 1
        assert dt_days_between("2026-01-05", "2026-01-01") == 4
        assert dt_days_between("bad", "2026-01-01") is None


# ==============================================================================
# Formatting
# ==============================================================================


class TestFormatClock:
    """Tests for HH:MM:SS countdowns."""

    def test_clock(self) -> None:
        """Test zero padding."""
        assert dt_format_clock(timedelta(hours=1, minutes=5, seconds=9)) == "01:05:09"

    def test_hours_not_wrapped(self) -> None:
        """Test multi-day durations keep counting hours."""
        assert dt_format_clock(timedelta(days=3)) == "72:00:00"

    def test_non_positive(self) -> None:
        """Test expired durations show zeros."""
        assert dt_format_clock(timedelta(seconds=-5)) == "00:00:00"
        assert dt_format_clock(None) == "00:00:00"


class TestFormatDistance:
    """Tests for worded distances."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=20), "less than a minute"),
            (timedelta(minutes=1), "1 minute"),
            (timedelta(minutes=30), "30 minutes"),
            (timedelta(minutes=60), "about 1 hour"),
            (timedelta(hours=5), "about 5 hours"),
            (timedelta(hours=30), "1 day"),
            (timedelta(days=5), "5 days"),
            (timedelta(days=40), "about 1 month"),
        ],
    )
    def test_short_buckets(self, delta: timedelta, expected: str) -> None:
        """Test minute-bucketed phrases."""
        assert dt_format_distance(BASE, BASE + delta) == expected

    def test_calendar_months(self) -> None:
        """Test long gaps count calendar months."""
        assert dt_format_distance(BASE, datetime(2026, 4, 1, tzinfo=UTC)) == "3 months"

    def test_years(self) -> None:
        """Test year phrasing by leftover months."""
        assert dt_format_distance(BASE, datetime(2027, 3, 1, tzinfo=UTC)) == "about 1 year"
        assert dt_format_distance(BASE, datetime(2027, 7, 1, tzinfo=UTC)) == "over 1 year"
        assert dt_format_distance(BASE, datetime(2027, 11, 1, tzinfo=UTC)) == "almost 2 years"

    def test_order_does_not_matter(self) -> None:
        """Test the distance is symmetric."""
        later = BASE + timedelta(days=5)
        assert dt_format_distance(later, BASE) == dt_format_distance(BASE, later)

    def test_relative(self) -> None:
        """Test direction suffixes."""
        assert dt_format_relative(BASE + timedelta(hours=2), BASE) == "in about 2 hours"
        assert dt_format_relative(BASE - timedelta(days=3), BASE) == "3 days ago"
