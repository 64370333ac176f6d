"""Badge catalog - static registry of achievement definitions.

Single source of truth for every badge the platform can award. Entries are
flat, frozen records tagged with a category; the catalog is built at import
time and never changes at runtime.

CONFIDENTIALITY CONTRACT:
    `condition` is the server-side award rule. Mystery badge conditions must
    never reach an untrusted client. Anything that renders badges for a
    client goes through to_public_badge() / get_public_catalog(), which drop
    `condition` entirely and mask mystery descriptions as "???".

Award decisioning (checking a student's event history against `condition`)
is NOT done here. It runs in the privileged award/trigger layer against
authoritative event logs; conditions below are prose, not predicates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import const
from .type_defs import BadgeDef, PublicBadge

if TYPE_CHECKING:
    from .type_defs import BadgeCategory, BadgeId


BADGE_DEFINITIONS: tuple[BadgeDef, ...] = (
    # ── Streak badges ────────────────────────────────────────────────────────
    BadgeDef(
        id="streak_7",
        name="7-Day Warrior",
        description="7-day login streak",
        icon="🔥",
        category=const.BADGE_CATEGORY_STREAK,
        is_mystery=False,
        condition="Login for 7 consecutive days",
        xp_reward=50,
    ),
    BadgeDef(
        id="streak_14",
        name="Fortnight Fighter",
        description="14-day login streak",
        icon="🔥",
        category=const.BADGE_CATEGORY_STREAK,
        is_mystery=False,
        condition="Login for 14 consecutive days",
        xp_reward=75,
    ),
    BadgeDef(
        id="streak_30",
        name="30-Day Legend",
        description="30-day login streak",
        icon="🔥",
        category=const.BADGE_CATEGORY_STREAK,
        is_mystery=False,
        condition="Login for 30 consecutive days",
        xp_reward=100,
    ),
    BadgeDef(
        id="streak_60",
        name="Dedication King",
        description="60-day login streak",
        icon="👑",
        category=const.BADGE_CATEGORY_STREAK,
        is_mystery=False,
        condition="Login for 60 consecutive days",
        xp_reward=150,
    ),
    BadgeDef(
        id="streak_100",
        name="Century Legend",
        description="100-day login streak",
        icon="🏆",
        category=const.BADGE_CATEGORY_STREAK,
        is_mystery=False,
        condition="Login for 100 consecutive days",
        xp_reward=250,
    ),
    # ── Academic badges ──────────────────────────────────────────────────────
    BadgeDef(
        id="first_submission",
        name="First Steps",
        description="Submit your first assignment",
        icon="📝",
        category=const.BADGE_CATEGORY_ACADEMIC,
        is_mystery=False,
        condition="Submit 1 assignment",
        xp_reward=25,
    ),
    BadgeDef(
        id="perfect_score",
        name="Flawless",
        description="Score 100% on a rubric",
        icon="💯",
        category=const.BADGE_CATEGORY_ACADEMIC,
        is_mystery=False,
        condition="Score 100% on all rubric criteria",
        xp_reward=75,
    ),
    BadgeDef(
        id="all_clos_met",
        name="Outcome Achiever",
        description="Meet all CLOs in a course",
        icon="🎯",
        category=const.BADGE_CATEGORY_ACADEMIC,
        is_mystery=False,
        condition="Achieve ≥70% on all CLOs in a course",
        xp_reward=100,
    ),
    # ── Engagement badges ────────────────────────────────────────────────────
    BadgeDef(
        id="journal_10",
        name="Reflective Mind",
        description="Write 10 journal entries",
        icon="📖",
        category=const.BADGE_CATEGORY_ENGAGEMENT,
        is_mystery=False,
        condition="Write 10 journal entries",
        xp_reward=50,
    ),
    BadgeDef(
        id="perfect_week",
        name="Perfect Week",
        description="Complete all habits for 7 days",
        icon="⭐",
        category=const.BADGE_CATEGORY_ENGAGEMENT,
        is_mystery=False,
        condition="Complete all 4 daily habits for 7 consecutive days",
        xp_reward=100,
    ),
    # ── Mystery badges (hidden conditions) ───────────────────────────────────
    BadgeDef(
        id="speed_demon",
        name="Speed Demon",
        description=const.DISPLAY_MYSTERY_DESCRIPTION,
        icon="⚡",
        category=const.BADGE_CATEGORY_MYSTERY,
        is_mystery=True,
        condition="Submit an assignment within 1 hour of it being published",
        xp_reward=75,
    ),
    BadgeDef(
        id="night_owl",
        name="Night Owl",
        description=const.DISPLAY_MYSTERY_DESCRIPTION,
        icon="🦉",
        category=const.BADGE_CATEGORY_MYSTERY,
        is_mystery=True,
        condition="Submit 3 assignments between midnight and 5 AM",
        xp_reward=75,
    ),
    BadgeDef(
        id="perfectionist",
        name="Perfectionist",
        description=const.DISPLAY_MYSTERY_DESCRIPTION,
        icon="💎",
        category=const.BADGE_CATEGORY_MYSTERY,
        is_mystery=True,
        condition="Score 100% on 5 different assignments",
        xp_reward=100,
    ),
)

_BADGES_BY_ID: dict[BadgeId, BadgeDef] = {badge.id: badge for badge in BADGE_DEFINITIONS}


# =============================================================================
# Server-side lookups (full records, conditions included)
# =============================================================================


def get_badge_by_id(badge_id: BadgeId) -> BadgeDef | None:
    """Return a badge definition by id, or None if unknown."""
    return _BADGES_BY_ID.get(badge_id)


def get_all_badge_ids() -> list[BadgeId]:
    """Return every badge id in catalog order."""
    return [badge.id for badge in BADGE_DEFINITIONS]


def get_badges_by_category(category: BadgeCategory) -> list[BadgeDef]:
    """Return the badges in one category, in catalog order."""
    return [badge for badge in BADGE_DEFINITIONS if badge.category == category]


def get_mystery_badges() -> list[BadgeDef]:
    """Return only mystery badges."""
    return [badge for badge in BADGE_DEFINITIONS if badge.is_mystery]


def get_visible_badges() -> list[BadgeDef]:
    """Return only non-mystery badges."""
    return [badge for badge in BADGE_DEFINITIONS if not badge.is_mystery]


def get_streak_badge_for_milestone(milestone: int) -> BadgeDef | None:
    """Return the streak badge awarded at a streak milestone, if any.

    Example:
        get_streak_badge_for_milestone(30) → the "streak_30" badge
    """
    return get_badge_by_id(f"{const.BADGE_ID_STREAK_PREFIX}{milestone}")


# =============================================================================
# Client-facing projections (no conditions, masked mystery descriptions)
# =============================================================================


def to_public_badge(badge: BadgeDef) -> PublicBadge:
    """Project a badge definition into its client-safe view.

    The public view has no `condition` attribute at all, and mystery badges
    always carry the masked description.
    """
    return PublicBadge(
        id=badge.id,
        name=badge.name,
        description=(
            const.DISPLAY_MYSTERY_DESCRIPTION if badge.is_mystery else badge.description
        ),
        icon=badge.icon,
        category=badge.category,
        is_mystery=badge.is_mystery,
        xp_reward=badge.xp_reward,
    )


def get_public_catalog() -> list[PublicBadge]:
    """Return the whole catalog as client-safe views, in catalog order."""
    return [to_public_badge(badge) for badge in BADGE_DEFINITIONS]


def get_public_badge_by_id(badge_id: BadgeId) -> PublicBadge | None:
    """Return the client-safe view of one badge, or None if unknown."""
    badge = get_badge_by_id(badge_id)
    return to_public_badge(badge) if badge is not None else None
