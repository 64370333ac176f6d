"""Type definitions for progress engine inputs and results.

ARCHITECTURE DECISION: RECORDS vs RESULTS
=========================================

1. **Frozen dataclasses for STATIC records** (generated or declared once,
   shared for the process lifetime):
   - LevelThreshold rows of the level table
   - BadgeDef entries of the badge catalog and their PublicBadge projection
   Frozen so a cached table or catalog entry cannot be edited by a caller.

2. **TypedDict for COMPUTED results and caller-supplied rows**:
   - LevelProgress, XPAward, BonusCountdown, DeadlineStatus, StreakUpdate
   - BonusEvent, ScoredItem, StreakLoginState (plain data read from storage)
   Results are fresh dicts built on every call and never cached.

IMPORTANT: This file must NOT import from engines/ or badge_catalog.py to
avoid circular dependencies. Only import from typing and datetime.

NOTE: TypedDict is STATIC ANALYSIS ONLY. Runtime checks stay in the engines.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

BadgeId = str
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00+00:00"
ISODate = str  # ISO 8601 date string (no time) "2026-01-18"
Timestamp = datetime | ISODatetime

AttainmentBand = Literal[
    "Excellent",
    "Satisfactory",
    "Developing",
    "Not_Yet",
]

DeadlineWindow = Literal[
    "open",
    "late_window",
    "closed",
]

BadgeCategory = Literal[
    "streak",
    "academic",
    "engagement",
    "mystery",
]


# =============================================================================
# Static Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class LevelThreshold:
    """One row of the level table: cumulative XP needed to reach `level`."""

    level: int
    xp_required: int
    title: str


@dataclass(frozen=True, slots=True)
class BadgeDef:
    """Full badge definition, including the server-side award condition.

    `condition` documents the award rule in prose. It must only reach the
    award/trigger layer; client code gets a PublicBadge instead.
    """

    id: BadgeId
    name: str
    description: str
    icon: str
    category: BadgeCategory
    is_mystery: bool
    condition: str
    xp_reward: int


@dataclass(frozen=True, slots=True)
class PublicBadge:
    """Client-safe view of a badge: no condition, masked mystery description."""

    id: BadgeId
    name: str
    description: str
    icon: str
    category: BadgeCategory
    is_mystery: bool
    xp_reward: int


# =============================================================================
# Caller-supplied Rows
# =============================================================================


class ScoredItem(TypedDict):
    """A percent score with its rollup weight (rubric criterion, assignment)."""

    percent: float  # 0-100
    weight: float  # >= 0


class BonusEvent(TypedDict):
    """A time-boxed XP multiplier window, as read from storage.

    Lifecycle (creation, deactivation) is owned by an admin workflow; the
    engine only reads these rows.
    """

    title: str
    multiplier: float  # > 0
    starts_at: Timestamp
    ends_at: Timestamp
    is_active: bool
    id: NotRequired[str]


class StreakLoginState(TypedDict):
    """Stored login-streak row used by the daily streak update."""

    streak_count: int
    last_login_date: ISODate | None
    streak_freezes_available: int


# =============================================================================
# Computed Results
# =============================================================================


class LevelProgress(TypedDict):
    """Level data derived from an XP total for progress displays."""

    level: int
    title: str
    xp_total: int
    xp_for_current_level: int
    xp_for_next_level: int  # Equals xp_for_current_level at max level
    progress_percent: int  # 0-100


class XPAward(TypedDict):
    """XP granted for one trigger after any bonus multiplier."""

    base_xp: int
    multiplier: float
    xp_awarded: int
    bonus_event_title: str | None  # None when no bonus event was in effect


class BonusCountdown(TypedDict):
    """Countdown to the end of a bonus event, from a single `now`."""

    ended: bool
    remaining_seconds: int  # Clamped at 0 once ended
    display: str  # "HH:MM:SS" or "Ended"


class StreakUpdate(TypedDict):
    """Outcome of applying one login day to a stored streak."""

    new_streak_count: int
    streak_frozen: bool
    freeze_consumed: bool
    milestone_reached: int | None
    should_reset: bool
    is_new_day: bool


class DeadlineStatus(TypedDict):
    """Submission window state for an assignment at one instant."""

    window: DeadlineWindow
    is_late: bool
    can_submit: bool
    due_at: datetime
    late_deadline: datetime
    time_remaining: str  # Relative phrase, or "Closed"
