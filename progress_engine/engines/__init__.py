"""Engine modules for the progress engine.

Contains specialized computation engines:
- level_engine: Level threshold table, level lookup and level progress
- economy_engine: Bonus multipliers, bonus event windows and XP awards
- streak_engine: Streak milestones and the daily login streak update
- attainment_engine: Attainment bands and score rollups
- deadline_engine: Submission windows around due dates
"""

# Use relative imports within package to avoid mypy module resolution issues
from .attainment_engine import ATTAINMENT_BANDS, AttainmentEngine
from .deadline_engine import DeadlineEngine
from .economy_engine import EconomyEngine, UnknownXPSourceError
from .level_engine import LEVEL_THRESHOLDS, LevelEngine
from .streak_engine import StreakEngine

__all__ = [
    "ATTAINMENT_BANDS",
    "LEVEL_THRESHOLDS",
    "AttainmentEngine",
    "DeadlineEngine",
    "EconomyEngine",
    "LevelEngine",
    "StreakEngine",
    "UnknownXPSourceError",
]
