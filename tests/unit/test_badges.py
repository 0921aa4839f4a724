"""Unit tests for badges."""

import pytest

from stepmaster.progress import get_badges, has_weekend_activity
from tests.conftest import days_ago

BADGE_IDS = [
    "streak_7",
    "club_10k",
    "lifetime_50k",
    "early_bird",
    "night_owl",
    "weekend_warrior",
]


def by_id(badges):
    return {badge.id: badge for badge in badges}


class TestGetBadges:
    """Test badge unlock state and progress."""

    def test_empty_history(self, today):
        badges = get_badges({}, today)
        assert [badge.id for badge in badges] == BADGE_IDS
        assert all(badge.unlocked is False for badge in badges)
        assert all(badge.progress == 0 for badge in badges)

        badges = by_id(badges)
        assert badges["streak_7"].progress_text == "0/7 Days"
        assert badges["club_10k"].progress_text == "0.0k/10k"
        assert badges["lifetime_50k"].progress_text == "0k/50k"
        assert badges["weekend_warrior"].progress_text == "Walk Sat/Sun"

    def test_club_10k_unlocked(self, today):
        badge = by_id(get_badges({today.isoformat(): 12000}, today))["club_10k"]
        assert badge.unlocked is True
        assert badge.progress == 1
        assert badge.progress_text == "Unlocked!"

    def test_club_10k_progress(self, today):
        badge = by_id(get_badges({today.isoformat(): 7500}, today))["club_10k"]
        assert badge.unlocked is False
        assert badge.progress == pytest.approx(0.75)
        assert badge.progress_text == "7.5k/10k"

    def test_marathoner_unlocked(self, today):
        history = {"2024-01-10": 15000, "2024-01-11": 20000, "2024-01-12": 20000}
        badge = by_id(get_badges(history, today))["lifetime_50k"]
        assert badge.unlocked is True
        assert badge.progress == 1
        assert badge.progress_text == "55k/50k"

    def test_hot_streak(self, today):
        history = {days_ago(n): 3000 for n in range(7)}
        badge = by_id(get_badges(history, today))["streak_7"]
        assert badge.unlocked is True
        assert badge.progress_text == "7/7 Days"

    def test_hot_streak_progress(self, today):
        history = {days_ago(n): 3000 for n in range(3)}
        badge = by_id(get_badges(history, today))["streak_7"]
        assert badge.unlocked is False
        assert badge.progress == pytest.approx(3 / 7)

    def test_weekend_warrior_saturday(self, today):
        badge = by_id(get_badges({"2024-03-09": 6000}, today))["weekend_warrior"]
        assert badge.unlocked is True
        assert badge.progress == 1
        assert badge.progress_text == "Unlocked!"

    def test_time_of_day_badges_always_locked(self, today):
        history = {days_ago(n): 30000 for n in range(60)}
        badges = by_id(get_badges(history, today))
        for badge_id, text in (("early_bird", "Walk early!"), ("night_owl", "Walk late!")):
            assert badges[badge_id].unlocked is False
            assert badges[badge_id].progress == 0
            assert badges[badge_id].progress_text == text

    @pytest.mark.parametrize(
        "history",
        [
            {},
            {"2024-03-15": 0},
            {"2024-03-15": 2_000_000},
            {"bad-date": 80000, "2024-03-10": 10000},
            {"2024-03-15": -500},
        ],
    )
    def test_always_six_badges_in_range(self, today, history):
        badges = get_badges(history, today)
        assert len(badges) == 6
        assert all(0 <= badge.progress <= 1 for badge in badges)


class TestWeekendActivity:
    def test_sunday_counts(self):
        assert has_weekend_activity({"2024-03-17": 5000}) is True

    def test_below_threshold(self):
        assert has_weekend_activity({"2024-03-16": 4999}) is False

    def test_weekday_does_not_count(self):
        assert has_weekend_activity({"2024-03-15": 20000}) is False

    def test_unparseable_dates_skipped(self):
        assert has_weekend_activity({"someday": 9000}) is False
