"""Deadline Engine - Pure logic for assignment submission windows.

This engine provides stateless, pure Python functions for:
- Submission window state (open, late_window, closed) at an instant
- Human-readable time remaining toward the next boundary
- Submission XP for the resolved window

ARCHITECTURE: This is a pure logic engine with NO storage access.
The window is never stored; it is recomputed from `now` on every call.

Window timeline (late_deadline = due_at + late_window_hours):

    ---- open ----|---- late_window ----|---- closed ---->
               due_at             late_deadline

    now <= due_at                   → open        (can submit, not late)
    due_at < now <= late_deadline   → late_window (can submit, late)
    now > late_deadline             → closed      (cannot submit)

A zero-hour late window still passes through the same states; the late
window simply has no width.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from .. import const
from ..exceptions import InvalidTimestampError
from ..utils.dt_utils import as_utc, dt_format_relative, dt_now_utc, dt_to_utc

if TYPE_CHECKING:
    from ..type_defs import DeadlineStatus, DeadlineWindow, Timestamp


class DeadlineEngine:
    """Pure logic engine for submission deadlines.

    All methods are static - no instance state.
    """

    @staticmethod
    def get_late_deadline(due_at: datetime, late_window_hours: int) -> datetime:
        """Return the last instant a late submission is accepted."""
        return due_at + timedelta(hours=late_window_hours)

    @staticmethod
    def get_deadline_status(
        due_at: Timestamp,
        late_window_hours: int = const.DEFAULT_LATE_WINDOW_HOURS,
        now: datetime | None = None,
    ) -> DeadlineStatus:
        """Compute the submission window for an assignment.

        Reads the clock at most once; the window and time_remaining are both
        derived from that single instant.

        Args:
            due_at: Due date as datetime or ISO string (naive values use the
                default timezone from dt_utils)
            late_window_hours: Grace period after due_at (>= 0)
            now: Instant to evaluate (defaults to a single clock read)

        Returns:
            DeadlineStatus with window, is_late, can_submit, both boundaries
            (UTC) and time_remaining

        Raises:
            InvalidTimestampError: If due_at cannot be parsed
        """
        due = dt_to_utc(due_at)
        if due is None:
            raise InvalidTimestampError("due_at", due_at)

        current = as_utc(now or dt_now_utc())
        late_deadline = DeadlineEngine.get_late_deadline(due, late_window_hours)

        window: DeadlineWindow
        if current <= due:
            window = const.DEADLINE_WINDOW_OPEN
            time_remaining = dt_format_relative(due, current)
        elif current <= late_deadline:
            window = const.DEADLINE_WINDOW_LATE
            time_remaining = dt_format_relative(late_deadline, current)
        else:
            window = const.DEADLINE_WINDOW_CLOSED
            time_remaining = const.DISPLAY_DEADLINE_CLOSED

        return {
            "window": window,
            "is_late": window == const.DEADLINE_WINDOW_LATE,
            "can_submit": window != const.DEADLINE_WINDOW_CLOSED,
            "due_at": due,
            "late_deadline": late_deadline,
            "time_remaining": time_remaining,
        }

    @staticmethod
    def get_submission_xp(
        status: DeadlineStatus,
        on_time_xp: int | None = None,
        late_xp: int = const.LATE_SUBMISSION_XP,
    ) -> int:
        """Return the base XP a submission earns in the resolved window.

        Args:
            status: Result of get_deadline_status() for the submission instant
            on_time_xp: Override for on-time XP (defaults to the submission
                entry of const.XP_SCHEDULE)
            late_xp: XP for a late-window submission

        Returns:
            Base XP before any bonus multiplier; 0 when the window is closed
        """
        if not status["can_submit"]:
            return 0
        if status["is_late"]:
            return late_xp
        if on_time_xp is None:
            return const.XP_SCHEDULE[const.XP_SOURCE_SUBMISSION]
        return on_time_xp
