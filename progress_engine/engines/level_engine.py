"""Level Engine - Pure logic for the XP level table and level lookup.

This engine provides stateless, pure Python functions for:
- Level threshold table generation (hand-tuned early levels + smooth curve)
- Level resolution from a cumulative XP total
- Progress toward the next level for dashboards
- Level-up detection for award triggers

ARCHITECTURE: This is a pure logic engine with NO storage access.
All functions are static methods that operate on passed-in data.
Callers read the XP total from storage and write any level change back.

Level curve:
    Level 1: 0 XP, Level 2: 100 XP, Level 3: 250 XP
    Level N (N >= 4): floor(50 * N^1.5)
"""

from __future__ import annotations

from functools import cache
import math
from typing import TYPE_CHECKING

from .. import const
from ..type_defs import LevelThreshold
from ..utils.math_utils import clamp, round_half_up

if TYPE_CHECKING:
    from ..type_defs import LevelProgress


def _level_title(level: int) -> str:
    """Return the display title for a level."""
    early_title = const.LEVEL_EARLY_TITLES.get(level)
    if early_title is not None:
        return early_title

    for band_max, title in const.LEVEL_TITLE_BANDS:
        if level <= band_max:
            return title
    return const.LEVEL_TITLE_TOP


def _xp_required(level: int) -> int:
    """Return the cumulative XP needed to reach a level."""
    early_xp = const.LEVEL_EARLY_THRESHOLDS.get(level)
    if early_xp is not None:
        return early_xp
    return math.floor(
        const.LEVEL_CURVE_COEFFICIENT * level**const.LEVEL_CURVE_EXPONENT
    )


@cache
def _build_table(max_level: int) -> tuple[LevelThreshold, ...]:
    table = tuple(
        LevelThreshold(
            level=level,
            xp_required=_xp_required(level),
            title=_level_title(level),
        )
        for level in range(const.MIN_LEVEL, max_level + 1)
    )
    const.LOGGER.debug(
        "Generated level table: %d levels, top threshold %d XP",
        len(table),
        table[-1].xp_required if table else 0,
    )
    return table


class LevelEngine:
    """Pure logic engine for levels.

    All methods are static - no instance state. The default table is built
    once per process and shared; every table row is a frozen LevelThreshold,
    so sharing it is safe.

    Resolution rules (calculate_level):
        - XP <= 0 (including negative) → level 1
        - XP exactly at a threshold → that level (inclusive lower bound)
        - XP between thresholds → the lower level
        - XP at or above the top threshold → MAX_LEVEL (no unbounded leveling)
    """

    @staticmethod
    def generate_level_thresholds(
        max_level: int = const.MAX_LEVEL,
    ) -> tuple[LevelThreshold, ...]:
        """Return the ordered level table for levels 1..max_level.

        Deterministic: repeated calls with the same max_level return the same
        (cached) tuple.

        Args:
            max_level: Highest level in the table

        Returns:
            Tuple of LevelThreshold ordered by level
        """
        return _build_table(max_level)

    @staticmethod
    def get_threshold(
        level: int, max_level: int = const.MAX_LEVEL
    ) -> LevelThreshold | None:
        """Return the table row for a level, or None if out of range."""
        if level < const.MIN_LEVEL or level > max_level:
            return None
        return _build_table(max_level)[level - const.MIN_LEVEL]

    @staticmethod
    def calculate_level(xp_total: int, max_level: int = const.MAX_LEVEL) -> int:
        """Return the highest level whose xp_required <= xp_total.

        Args:
            xp_total: Cumulative XP (any integer; negatives floor to level 1)
            max_level: Highest level in the table

        Returns:
            Current level, between 1 and max_level
        """
        level = const.MIN_LEVEL
        if xp_total <= 0:
            return level

        for threshold in _build_table(max_level):
            if xp_total >= threshold.xp_required:
                level = threshold.level
            else:
                break
        return level

    @staticmethod
    def compute_level_progress(
        xp_total: int, max_level: int = const.MAX_LEVEL
    ) -> LevelProgress:
        """Compute level data and progress toward the next level.

        Progress is measured from the current level's threshold to the next
        one and capped at 100. At max level there is no next threshold, so
        xp_for_next_level equals xp_for_current_level and progress is 100.

        Args:
            xp_total: Cumulative XP
            max_level: Highest level in the table

        Returns:
            LevelProgress for display
        """
        level = LevelEngine.calculate_level(xp_total, max_level)
        current = LevelEngine.get_threshold(level, max_level)
        upcoming = LevelEngine.get_threshold(level + 1, max_level)

        xp_for_current = current.xp_required if current else 0
        xp_for_next = upcoming.xp_required if upcoming else xp_for_current
        span = xp_for_next - xp_for_current

        if span > 0:
            raw_progress = (xp_total - xp_for_current) / span * 100
            progress = int(round_half_up(clamp(raw_progress, 0, 100)))
        else:
            progress = 100

        return {
            "level": level,
            "title": current.title if current else const.LEVEL_EARLY_TITLES[1],
            "xp_total": xp_total,
            "xp_for_current_level": xp_for_current,
            "xp_for_next_level": xp_for_next,
            "progress_percent": progress,
        }

    @staticmethod
    def xp_to_next_level(
        xp_total: int, max_level: int = const.MAX_LEVEL
    ) -> int | None:
        """Return XP still needed for the next level, or None at max level."""
        level = LevelEngine.calculate_level(xp_total, max_level)
        upcoming = LevelEngine.get_threshold(level + 1, max_level)
        if upcoming is None:
            return None
        return upcoming.xp_required - max(xp_total, 0)

    @staticmethod
    def levels_gained(
        xp_before: int, xp_after: int, max_level: int = const.MAX_LEVEL
    ) -> int:
        """Return how many levels an XP change crossed (0 if none).

        Award triggers use this to decide whether to emit a level-up event.
        XP is never decremented by the engine, so a lower xp_after yields 0.
        """
        gained = LevelEngine.calculate_level(
            xp_after, max_level
        ) - LevelEngine.calculate_level(xp_before, max_level)
        if gained > 0:
            const.LOGGER.debug(
                "Level up: %d -> %d XP crossed %d level(s)", xp_before, xp_after, gained
            )
        return max(gained, 0)


# Cached default table for repeated lookups
LEVEL_THRESHOLDS: tuple[LevelThreshold, ...] = LevelEngine.generate_level_thresholds()
