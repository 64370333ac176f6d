"""Tests for the badge catalog registry and its client-safe projections."""

from __future__ import annotations

import dataclasses

import pytest

from progress_engine import badge_catalog, const
from progress_engine.type_defs import PublicBadge

# =============================================================================
# Test: catalog integrity
# =============================================================================


class TestCatalogIntegrity:
    """Tests for the static badge registry."""

    def test_catalog_size(self) -> None:
        """Test the catalog carries all thirteen badges."""
        assert len(badge_catalog.BADGE_DEFINITIONS) == 13

    def test_ids_are_unique(self) -> None:
        """Test no two badges share an id."""
        ids = badge_catalog.get_all_badge_ids()
        assert len(ids) == len(set(ids))

    def test_mystery_flag_matches_category(self) -> None:
        """Test is_mystery is set exactly for the mystery category."""
        for badge in badge_catalog.BADGE_DEFINITIONS:
            assert badge.is_mystery == (badge.category == const.BADGE_CATEGORY_MYSTERY)

    def test_categories_are_known(self) -> None:
        """Test every badge uses a defined category."""
        for badge in badge_catalog.BADGE_DEFINITIONS:
            assert badge.category in const.BADGE_CATEGORIES

    def test_every_badge_has_condition_and_reward(self) -> None:
        """Test server-side records carry a rule and a positive reward."""
        for badge in badge_catalog.BADGE_DEFINITIONS:
            assert badge.condition
            assert badge.xp_reward > 0

    def test_records_are_frozen(self) -> None:
        """Test catalog entries cannot be edited at runtime."""
        badge = badge_catalog.get_badge_by_id("streak_7")
        assert badge is not None
        with pytest.raises(dataclasses.FrozenInstanceError):
            badge.xp_reward = 1  # type: ignore[misc]


# =============================================================================
# Test: lookups
# =============================================================================


class TestLookups:
    """Tests for server-side catalog queries."""

    def test_get_badge_by_id(self) -> None:
        """Test a known id returns its record."""
        badge = badge_catalog.get_badge_by_id("perfect_score")
        assert badge is not None
        assert badge.name == "Flawless"
        assert badge.xp_reward == 75

    def test_unknown_id(self) -> None:
        """Test an unknown id returns None."""
        assert badge_catalog.get_badge_by_id("does_not_exist") is None

    def test_mystery_and_visible_partition(self) -> None:
        """Test mystery and visible badges split the catalog."""
        mystery = badge_catalog.get_mystery_badges()
        visible = badge_catalog.get_visible_badges()
        assert len(mystery) == 3
        assert len(mystery) + len(visible) == len(badge_catalog.BADGE_DEFINITIONS)
        assert not {b.id for b in mystery} & {b.id for b in visible}

    def test_by_category(self) -> None:
        """Test per-category counts."""
        counts = {
            category: len(badge_catalog.get_badges_by_category(category))
            for category in const.BADGE_CATEGORIES
        }
        assert counts == {
            const.BADGE_CATEGORY_STREAK: 5,
            const.BADGE_CATEGORY_ACADEMIC: 3,
            const.BADGE_CATEGORY_ENGAGEMENT: 2,
            const.BADGE_CATEGORY_MYSTERY: 3,
        }

    def test_streak_badge_for_every_milestone(self) -> None:
        """Test each streak milestone has a matching badge."""
        for milestone in const.STREAK_MILESTONES:
            badge = badge_catalog.get_streak_badge_for_milestone(milestone)
            assert badge is not None
            assert badge.category == const.BADGE_CATEGORY_STREAK

    def test_no_streak_badge_off_milestone(self) -> None:
        """Test non-milestone counts have no badge."""
        assert badge_catalog.get_streak_badge_for_milestone(8) is None


# =============================================================================
# Test: public projections
# =============================================================================


class TestPublicProjection:
    """Tests for the client-safe badge views."""

    def test_public_view_has_no_condition(self) -> None:
        """Test public views never expose the award rule."""
        for badge in badge_catalog.get_public_catalog():
            assert isinstance(badge, PublicBadge)
            assert not hasattr(badge, "condition")

    def test_mystery_descriptions_masked(self) -> None:
        """Test mystery badges show the masked description."""
        for badge in badge_catalog.get_public_catalog():
            if badge.is_mystery:
                assert badge.description == "???"

    def test_visible_description_kept(self) -> None:
        """Test non-mystery badges keep their description."""
        badge = badge_catalog.get_public_badge_by_id("journal_10")
        assert badge is not None
        assert badge.description == "Write 10 journal entries"

    def test_public_catalog_order(self) -> None:
        """Test the public catalog follows catalog order."""
        public_ids = [badge.id for badge in badge_catalog.get_public_catalog()]
        assert public_ids == badge_catalog.get_all_badge_ids()

    def test_public_lookup_unknown(self) -> None:
        """Test an unknown id has no public view."""
        assert badge_catalog.get_public_badge_by_id("nope") is None
