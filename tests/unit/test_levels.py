"""Unit tests for the level catalog."""

import math

import pytest

from stepmaster.progress import LEVELS, get_level, lifetime_steps


class TestLevelCatalog:
    """Test the shape of the level catalog."""

    def test_seven_tiers(self):
        assert [tier.level for tier in LEVELS] == [1, 2, 3, 4, 5, 6, 7]

    def test_tiers_are_contiguous(self):
        assert LEVELS[0].min_steps == 0
        for lower, upper in zip(LEVELS, LEVELS[1:]):
            assert lower.max_steps == upper.min_steps
        assert math.isinf(LEVELS[-1].max_steps)

    def test_tiers_are_immutable(self):
        with pytest.raises(Exception):
            LEVELS[0].title = "Changed"


class TestGetLevel:
    """Test resolving lifetime totals to tiers."""

    def test_zero_steps(self):
        result = get_level(0)
        assert result.tier.level == 1
        assert result.tier.title == "Beginner"
        assert result.progress == 0

    def test_walker_progress(self):
        result = get_level(30000)
        assert result.tier.title == "Walker"
        assert result.progress == pytest.approx(0.5)

    def test_jogger(self):
        result = get_level(75000)
        assert result.tier.level == 3
        assert result.tier.title == "Jogger"

    def test_legend_is_max_level(self):
        result = get_level(1_500_000)
        assert result.tier.level == 7
        assert result.tier.title == "Legend"
        assert result.progress == 1
        assert result.is_max_level is True

    @pytest.mark.parametrize(
        "total,level",
        [(9_999, 1), (10_000, 2), (49_999, 2), (50_000, 3), (999_999, 6), (1_000_000, 7)],
    )
    def test_boundaries(self, total, level):
        assert get_level(total).tier.level == level

    def test_progress_resets_at_boundary(self):
        assert get_level(9_999).progress == pytest.approx(0.9999)
        assert get_level(10_000).progress == 0

    @pytest.mark.parametrize("total", [-1, -50_000, math.nan, -math.inf])
    def test_degenerate_totals(self, total):
        result = get_level(total)
        assert result.tier.level == 1
        assert result.progress == 0

    def test_every_total_resolves_to_containing_tier(self):
        for total in range(0, 1_200_000, 997):
            result = get_level(total)
            assert result.tier.min_steps <= total < result.tier.max_steps
            assert 0 <= result.progress <= 1

    def test_progress_monotonic_within_tier(self):
        previous = get_level(10_000)
        for total in range(10_000, 50_000, 1_000):
            current = get_level(total)
            assert current.tier == previous.tier
            assert current.progress >= previous.progress
            previous = current


class TestLifetimeSteps:
    def test_sum_of_history(self):
        assert lifetime_steps({"2024-01-10": 15000, "2024-01-11": 20000}) == 35000

    def test_empty_history(self):
        assert lifetime_steps({}) == 0
