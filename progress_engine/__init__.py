"""Progress & scoring engine for an outcomes-based learning platform.

Pure, stateless computations that turn stored inputs (XP totals, login
streaks, rubric scores, bonus events, due dates) into derived states:
levels, milestone progress, attainment bands, submission windows and
bonus-multiplied XP. Callers read inputs from storage and write results back.
"""

from . import badge_catalog, const
from .engines import (
    ATTAINMENT_BANDS,
    LEVEL_THRESHOLDS,
    AttainmentEngine,
    DeadlineEngine,
    EconomyEngine,
    LevelEngine,
    StreakEngine,
    UnknownXPSourceError,
)
from .exceptions import InvalidTimestampError
from .type_defs import BadgeDef, LevelThreshold, PublicBadge

__all__ = [
    "ATTAINMENT_BANDS",
    "LEVEL_THRESHOLDS",
    "AttainmentEngine",
    "BadgeDef",
    "DeadlineEngine",
    "EconomyEngine",
    "InvalidTimestampError",
    "LevelEngine",
    "LevelThreshold",
    "PublicBadge",
    "StreakEngine",
    "UnknownXPSourceError",
    "badge_catalog",
    "const",
]
