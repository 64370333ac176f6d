# File: const.py
"""Constants for the progress & scoring engine.

This file centralizes level curve coefficients, streak milestones, XP amounts,
attainment band thresholds, deadline window names and display literals so that
every engine reads the same values. Engines take these as keyword defaults;
callers override them per call instead of mutating this module.
"""

import logging

# ------------------------------------------------------------------------------------------------
# General / Package Information
# ------------------------------------------------------------------------------------------------
# Logger
LOGGER = logging.getLogger(__package__)

# Float precision for score rounding (weighted averages, percentages)
DATA_FLOAT_PRECISION = 2

# ------------------------------------------------------------------------------------------------
# Levels
# ------------------------------------------------------------------------------------------------
MAX_LEVEL = 50
MIN_LEVEL = 1

# Hand-tuned early-game thresholds (level -> cumulative XP)
LEVEL_EARLY_THRESHOLDS: dict[int, int] = {
    1: 0,
    2: 100,
    3: 250,
}

# Smooth curve for levels without an early threshold: floor(COEFFICIENT * level ** EXPONENT)
LEVEL_CURVE_COEFFICIENT = 50
LEVEL_CURVE_EXPONENT = 1.5

# Fixed titles for the hand-tuned levels
LEVEL_EARLY_TITLES: dict[int, str] = {
    1: "Newcomer",
    2: "Beginner",
    3: "Learner",
}

# Title bands for curve levels: (highest level in band, title), ascending
LEVEL_TITLE_BANDS: tuple[tuple[int, str], ...] = (
    (5, "Apprentice"),
    (10, "Scholar"),
    (15, "Adept"),
    (20, "Expert"),
    (30, "Master"),
    (40, "Grandmaster"),
)
LEVEL_TITLE_TOP = "Legend"

# ------------------------------------------------------------------------------------------------
# XP Sources & Schedule
# ------------------------------------------------------------------------------------------------
XP_SOURCE_LOGIN = "login"
XP_SOURCE_SUBMISSION = "submission"
XP_SOURCE_GRADE = "grade"
XP_SOURCE_JOURNAL = "journal"
XP_SOURCE_STREAK_MILESTONE = "streak_milestone"
XP_SOURCE_PERFECT_DAY = "perfect_day"
XP_SOURCE_FIRST_ATTEMPT_BONUS = "first_attempt_bonus"
XP_SOURCE_PERFECT_RUBRIC = "perfect_rubric"
XP_SOURCE_BADGE_EARNED = "badge_earned"
XP_SOURCE_LEVEL_UP = "level_up"
XP_SOURCE_STREAK_FREEZE_PURCHASE = "streak_freeze_purchase"
XP_SOURCE_DISCUSSION_QUESTION = "discussion_question"
XP_SOURCE_DISCUSSION_ANSWER = "discussion_answer"
XP_SOURCE_SURVEY_COMPLETION = "survey_completion"
XP_SOURCE_QUIZ_COMPLETION = "quiz_completion"

# Base XP per source. Sources with 0 have variable amounts set at call time
# (badge xp_reward, level-up bonus, freeze purchase cost).
XP_SCHEDULE: dict[str, int] = {
    XP_SOURCE_LOGIN: 10,
    XP_SOURCE_SUBMISSION: 50,
    XP_SOURCE_GRADE: 25,
    XP_SOURCE_JOURNAL: 20,
    XP_SOURCE_STREAK_MILESTONE: 100,
    XP_SOURCE_PERFECT_DAY: 50,
    XP_SOURCE_FIRST_ATTEMPT_BONUS: 25,
    XP_SOURCE_PERFECT_RUBRIC: 75,
    XP_SOURCE_BADGE_EARNED: 0,
    XP_SOURCE_LEVEL_UP: 0,
    XP_SOURCE_STREAK_FREEZE_PURCHASE: 0,
    XP_SOURCE_DISCUSSION_QUESTION: 10,
    XP_SOURCE_DISCUSSION_ANSWER: 15,
    XP_SOURCE_SURVEY_COMPLETION: 15,
    XP_SOURCE_QUIZ_COMPLETION: 50,
}

# XP for submissions accepted inside the late window
LATE_SUBMISSION_XP = 25
LATE_QUIZ_XP = 25

# Multiplier used when no bonus event is in effect
DEFAULT_BONUS_MULTIPLIER = 1.0

# ------------------------------------------------------------------------------------------------
# Streaks
# ------------------------------------------------------------------------------------------------
STREAK_MILESTONES: tuple[int, ...] = (7, 14, 30, 60, 100)

MILESTONE_XP: dict[int, int] = {
    7: 100,
    14: 100,
    30: 250,
    60: 250,
    100: 500,
}

# Day gap that a single streak freeze can bridge (one missed day)
STREAK_FREEZE_DAY_GAP = 2

# ------------------------------------------------------------------------------------------------
# Attainment
# ------------------------------------------------------------------------------------------------
ATTAINMENT_EXCELLENT = "Excellent"
ATTAINMENT_SATISFACTORY = "Satisfactory"
ATTAINMENT_DEVELOPING = "Developing"
ATTAINMENT_NOT_YET = "Not_Yet"

# Inclusive lower bounds, highest band first
ATTAINMENT_THRESHOLD_EXCELLENT = 85.0
ATTAINMENT_THRESHOLD_SATISFACTORY = 70.0
ATTAINMENT_THRESHOLD_DEVELOPING = 50.0

# Percent at which an outcome counts as met
OUTCOME_MET_THRESHOLD = 70.0

# ------------------------------------------------------------------------------------------------
# Deadlines
# ------------------------------------------------------------------------------------------------
DEADLINE_WINDOW_OPEN = "open"
DEADLINE_WINDOW_LATE = "late_window"
DEADLINE_WINDOW_CLOSED = "closed"

DEFAULT_LATE_WINDOW_HOURS = 0

# ------------------------------------------------------------------------------------------------
# Badges
# ------------------------------------------------------------------------------------------------
BADGE_CATEGORY_STREAK = "streak"
BADGE_CATEGORY_ACADEMIC = "academic"
BADGE_CATEGORY_ENGAGEMENT = "engagement"
BADGE_CATEGORY_MYSTERY = "mystery"

BADGE_CATEGORIES: tuple[str, ...] = (
    BADGE_CATEGORY_STREAK,
    BADGE_CATEGORY_ACADEMIC,
    BADGE_CATEGORY_ENGAGEMENT,
    BADGE_CATEGORY_MYSTERY,
)

# Streak badge ids follow "streak_<milestone>"
BADGE_ID_STREAK_PREFIX = "streak_"

# ------------------------------------------------------------------------------------------------
# Display Literals
# ------------------------------------------------------------------------------------------------
DISPLAY_MYSTERY_DESCRIPTION = "???"
DISPLAY_DEADLINE_CLOSED = "Closed"
DISPLAY_BONUS_ENDED = "Ended"
