"""Streak Engine - Pure logic for login streak milestones and daily updates.

This engine provides stateless, pure Python functions for:
- Next milestone lookup and progress toward it (display)
- Milestone detection and milestone XP
- The daily login streak update rule (increment, freeze, reset)

ARCHITECTURE: This is a pure logic engine with NO storage access.
All functions are static methods that operate on passed-in data.
The milestone helpers never change a streak; the daily-login trigger
calls calculate_streak_update() and persists the returned count itself.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING

from .. import const
from ..exceptions import InvalidTimestampError
from ..utils.dt_utils import dt_days_between, dt_parse_date
from ..utils.math_utils import calculate_percentage

if TYPE_CHECKING:
    from ..type_defs import ISODate, StreakLoginState, StreakUpdate


def _check_ascending(milestones: Sequence[int]) -> None:
    """Log a warning when a milestone list is not ascending."""
    if any(later < earlier for earlier, later in zip(milestones, milestones[1:])):
        const.LOGGER.warning(
            "Streak milestones are not ascending: %s", list(milestones)
        )


class StreakEngine:
    """Pure logic engine for streaks.

    All methods are static - no instance state.

    Milestones default to const.STREAK_MILESTONES (7, 14, 30, 60, 100) and
    must be ascending; callers may pass their own sequence.
    """

    # =========================================================================
    # MILESTONE TRACKING
    # =========================================================================

    @staticmethod
    def get_next_milestone(
        streak_count: int,
        milestones: Sequence[int] = const.STREAK_MILESTONES,
    ) -> int | None:
        """Return the smallest milestone strictly greater than streak_count.

        Returns:
            The next milestone, or None once every milestone has been reached
        """
        for milestone in milestones:
            if streak_count < milestone:
                return milestone
        return None

    @staticmethod
    def get_milestone_progress(
        streak_count: int,
        milestones: Sequence[int] = const.STREAK_MILESTONES,
    ) -> int:
        """Return whole-percent progress from the previous milestone to the next.

        The band starts at the previous milestone (0 before the first one):
        round((count - prev) / (next - prev) * 100). Once every milestone is
        passed progress is 100. A zero-width band (duplicate milestones) also
        reports 100.

        Examples (default milestones):
            get_milestone_progress(3) → 43     # 3/7
            get_milestone_progress(45) → 50    # 15/30 into the 30-60 band
            get_milestone_progress(100) → 100
        """
        _check_ascending(milestones)
        next_milestone = StreakEngine.get_next_milestone(streak_count, milestones)
        if next_milestone is None:
            return 100

        next_index = list(milestones).index(next_milestone)
        previous = milestones[next_index - 1] if next_index > 0 else 0
        return calculate_percentage(streak_count - previous, next_milestone - previous)

    @staticmethod
    def check_milestone(
        streak_count: int,
        milestones: Sequence[int] = const.STREAK_MILESTONES,
    ) -> int | None:
        """Return streak_count if it lands exactly on a milestone, else None."""
        return streak_count if streak_count in milestones else None

    @staticmethod
    def get_milestone_xp(
        milestone: int,
        milestone_xp: dict[int, int] | None = None,
    ) -> int:
        """Return the XP reward for reaching a milestone (0 if none defined)."""
        rewards = const.MILESTONE_XP if milestone_xp is None else milestone_xp
        return rewards.get(milestone, 0)

    # =========================================================================
    # DAILY UPDATE
    # =========================================================================

    @staticmethod
    def days_between(date_a: ISODate | date, date_b: ISODate | date) -> int:
        """Return whole calendar days between two dates.

        Raises:
            InvalidTimestampError: If either date cannot be parsed
        """
        for field, value in (("date_a", date_a), ("date_b", date_b)):
            if dt_parse_date(value) is None:
                raise InvalidTimestampError(field, value)
        return dt_days_between(date_a, date_b) or 0

    @staticmethod
    def calculate_streak_update(
        state: StreakLoginState | None,
        today: ISODate | date,
        milestones: Sequence[int] = const.STREAK_MILESTONES,
    ) -> StreakUpdate:
        """Apply one login day to a stored streak.

        Rules:
        - No record, or no previous login → streak of 1
        - Same day → no change (is_new_day False)
        - Previous day → streak + 1
        - Exactly one missed day with a freeze available → streak + 1,
          one freeze consumed
        - Anything else → reset to 1

        Args:
            state: Stored streak row, or None for a first login
            today: Today's date (UTC) as ISO string or date
            milestones: Milestones checked after an increment

        Returns:
            StreakUpdate for the trigger to persist

        Raises:
            InvalidTimestampError: If a date cannot be parsed
        """
        if not state or not state.get("last_login_date"):
            return StreakEngine._make_update(new_streak_count=1)

        current_count = state.get("streak_count", 0)
        day_gap = StreakEngine.days_between(state["last_login_date"], today)  # type: ignore[arg-type]

        if day_gap == 0:
            return StreakEngine._make_update(
                new_streak_count=current_count, is_new_day=False
            )

        if day_gap == 1:
            new_count = current_count + 1
            return StreakEngine._make_update(
                new_streak_count=new_count,
                milestone_reached=StreakEngine.check_milestone(new_count, milestones),
            )

        if (
            day_gap == const.STREAK_FREEZE_DAY_GAP
            and state.get("streak_freezes_available", 0) > 0
        ):
            new_count = current_count + 1
            const.LOGGER.debug(
                "Streak freeze consumed: one missed day bridged at count %d",
                new_count,
            )
            return StreakEngine._make_update(
                new_streak_count=new_count,
                streak_frozen=True,
                freeze_consumed=True,
                milestone_reached=StreakEngine.check_milestone(new_count, milestones),
            )

        const.LOGGER.debug(
            "Streak reset after %d-day gap (was %d)", day_gap, current_count
        )
        return StreakEngine._make_update(new_streak_count=1, should_reset=True)

    # =========================================================================
    # HELPER METHODS
    # =========================================================================

    @staticmethod
    def _make_update(
        *,
        new_streak_count: int,
        streak_frozen: bool = False,
        freeze_consumed: bool = False,
        milestone_reached: int | None = None,
        should_reset: bool = False,
        is_new_day: bool = True,
    ) -> StreakUpdate:
        """Build a StreakUpdate dict."""
        return {
            "new_streak_count": new_streak_count,
            "streak_frozen": streak_frozen,
            "freeze_consumed": freeze_consumed,
            "milestone_reached": milestone_reached,
            "should_reset": should_reset,
            "is_new_day": is_new_day,
        }
