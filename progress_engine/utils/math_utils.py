# File: utils/math_utils.py
"""Math and calculation utilities for the progress engine.

Pure Python math functions with no imports from the rest of the package.
All functions here can be unit tested in isolation.

⚠️ UTILS PURITY: NO imports from `progress_engine.const` or `engines`.

Functions:
    - round_half_up: Rounding that sends .5 away from zero (not banker's rounding)
    - round_score: round_half_up at the configured score precision
    - floor_multiply: Multiplier arithmetic truncated to a whole number
    - calculate_percentage: Progress percentage as a whole number
    - clamp: Bound a value to a range
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
import math

# ==============================================================================
# Constants (local copies to avoid circular imports)
# ==============================================================================

# Default float precision for score rounding
DATA_FLOAT_PRECISION = 2


# ==============================================================================
# Rounding
# ==============================================================================


def round_half_up(value: float, precision: int = 0) -> float:
    """Round a value to `precision` decimals with halves going up.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    makes progress bars and averages disagree with what users compute by
    hand. The float is converted through its shortest repr, so 84.125 is
    quantized as the literal 84.125 rather than its binary approximation.

    Magnitude is unbounded: the decimal context grows to fit the digits the
    result needs. Non-finite values (inf, nan) are returned unchanged.

    Args:
        value: The float value to round
        precision: Number of decimal places (0 for whole numbers)

    Returns:
        Rounded float value

    Examples:
        round_half_up(42.5) → 43.0
        round_half_up(84.125, 2) → 84.13
        round_half_up(-2.5) → -3.0
        round_half_up(1e30) → 1e30
    """
    if not math.isfinite(value):
        return value

    decimal_value = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-precision)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + precision + 2)
        return float(decimal_value.quantize(quantum, rounding=ROUND_HALF_UP))


def round_score(value: float, precision: int = DATA_FLOAT_PRECISION) -> float:
    """Round a score to the configured precision.

    Examples:
        round_score(84.456) → 84.46
        round_score(84.0) → 84.0
    """
    return round_half_up(value, precision)


# ==============================================================================
# Arithmetic
# ==============================================================================


def floor_multiply(base: int, multiplier: float) -> int:
    """Apply a multiplier to a whole-number base, truncating the product.

    Fractions are dropped toward zero, never rounded: a 1.5x bonus on 7 XP is
    10, not 11.

    Args:
        base: Base amount (non-negative)
        multiplier: Multiplier to apply (e.g., 1.5 for a 50% bonus)

    Returns:
        Whole-number product

    Examples:
        floor_multiply(25, 2) → 50
        floor_multiply(7, 1.5) → 10
        floor_multiply(0, 5) → 0
    """
    return math.floor(base * multiplier)


def calculate_percentage(current: float, target: float) -> int:
    """Calculate a whole-number progress percentage.

    Args:
        current: Progress made within the range
        target: Size of the range

    Returns:
        round_half_up(current / target * 100), or 100 when target <= 0 (an
        empty range is already complete)

    Examples:
        calculate_percentage(3, 7) → 43
        calculate_percentage(15, 30) → 50
        calculate_percentage(0, 0) → 100
    """
    if target <= 0:
        return 100
    return int(round_half_up((current / target) * 100))


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(150, 0, 100) → 100
        clamp(-10, 0, 100) → 0
        clamp(50, 0, 100) → 50
    """
    return max(min_val, min(value, max_val))
