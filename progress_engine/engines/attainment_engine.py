"""Attainment Engine - Pure logic for outcome attainment bands and rollups.

This engine provides stateless, pure Python functions for:
- Classifying a percent score into an attainment band
- Weighted rollups (rubric criteria, assignment weights, CLO -> PLO -> ILO)
- Simple (unweighted) averages
- Band distributions and "all outcomes met" checks for dashboards

ARCHITECTURE: This is a pure logic engine with NO storage access.
Bands are always recomputed from the percent they describe; nothing here
caches a classification, so callers must re-run it whenever a score changes.

Rounding asymmetry:
    weighted_average() rounds to DATA_FLOAT_PRECISION decimals while
    simple_average() returns the raw mean.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from .. import const
from ..utils.math_utils import round_score

if TYPE_CHECKING:
    from ..type_defs import AttainmentBand, ScoredItem


# Highest band first; each bound is inclusive
_BAND_THRESHOLDS: tuple[tuple[float, AttainmentBand], ...] = (
    (const.ATTAINMENT_THRESHOLD_EXCELLENT, const.ATTAINMENT_EXCELLENT),
    (const.ATTAINMENT_THRESHOLD_SATISFACTORY, const.ATTAINMENT_SATISFACTORY),
    (const.ATTAINMENT_THRESHOLD_DEVELOPING, const.ATTAINMENT_DEVELOPING),
)

# Band order for reports, best first
ATTAINMENT_BANDS: tuple[AttainmentBand, ...] = (
    const.ATTAINMENT_EXCELLENT,
    const.ATTAINMENT_SATISFACTORY,
    const.ATTAINMENT_DEVELOPING,
    const.ATTAINMENT_NOT_YET,
)


class AttainmentEngine:
    """Pure logic engine for attainment classification.

    All methods are static - no instance state.

    Bands (lower bound inclusive, boundary values belong to the higher band):
        percent >= 85        → Excellent
        70 <= percent < 85   → Satisfactory
        50 <= percent < 70   → Developing
        percent < 50         → Not_Yet
    """

    @staticmethod
    def classify(percent: float) -> AttainmentBand:
        """Classify a percent score into an attainment band."""
        for lower_bound, band in _BAND_THRESHOLDS:
            if percent >= lower_bound:
                return band
        return const.ATTAINMENT_NOT_YET

    @staticmethod
    def weighted_average(
        items: Iterable[ScoredItem],
        precision: int = const.DATA_FLOAT_PRECISION,
    ) -> float | None:
        """Return sum(percent * weight) / sum(weight), rounded.

        Args:
            items: Scored items with non-negative weights
            precision: Decimal places (default const.DATA_FLOAT_PRECISION)

        Returns:
            Rounded weighted mean, or None when there are no items or the
            weights sum to 0. None means "no data", never a score of 0.
        """
        weighted_sum = 0.0
        total_weight = 0.0
        for item in items:
            weighted_sum += item["percent"] * item["weight"]
            total_weight += item["weight"]

        if total_weight == 0:
            return None
        return round_score(weighted_sum / total_weight, precision)

    @staticmethod
    def simple_average(scores: Sequence[float]) -> float | None:
        """Return the arithmetic mean of scores, unrounded (None when empty)."""
        if not scores:
            return None
        return sum(scores) / len(scores)

    @staticmethod
    def summarize_bands(percents: Iterable[float]) -> dict[AttainmentBand, int]:
        """Count scores per band.

        Every band is present in the result (zero counts included), in
        ATTAINMENT_BANDS order.
        """
        counts: dict[AttainmentBand, int] = dict.fromkeys(ATTAINMENT_BANDS, 0)
        for percent in percents:
            counts[AttainmentEngine.classify(percent)] += 1
        return counts

    @staticmethod
    def all_outcomes_met(
        percents: Sequence[float],
        threshold: float = const.OUTCOME_MET_THRESHOLD,
    ) -> bool:
        """Return True if every outcome percent reaches the threshold.

        An empty sequence is not "all met": a course with no scored outcomes
        has nothing to recognise.
        """
        if not percents:
            return False
        return all(percent >= threshold for percent in percents)
