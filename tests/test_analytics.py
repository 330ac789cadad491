"""Tests for the analytics summary and habit rankings."""

from __future__ import annotations

from datetime import datetime

import pytest

from consisttracker.models.habit import Habit
from consisttracker.services.analytics import (
    AnalyticsSummary,
    consistency_message,
    insights,
    summarize,
    top_habits,
)
from consisttracker.services.dates import subtract_days


def _habit(habit_id: str, archived: bool = False) -> Habit:
    return Habit(
        id=habit_id,
        name=habit_id.title(),
        created_at=datetime(2024, 1, 1, 8, 0),
        archived_at=datetime(2024, 2, 1) if archived else None,
    )


@pytest.fixture
def sample(today, make_logs):
    """Habit a logged the last 10 days, habit b only today."""
    habits = [_habit("a"), _habit("b")]
    logs = make_logs("a", [subtract_days(today, i) for i in range(10)]) + make_logs("b", [today])
    return habits, logs


class TestSummarize:
    def test_figures(self, sample, today):
        habits, logs = sample

        result = summarize(habits, logs, today=today)

        assert result == AnalyticsSummary(
            total_habits=2,
            total_logs=11,
            average_completion=18,  # (33 + 3) / 2
            best_streak=10,
            current_streaks=11,
            weekly_progress=57,  # (100 + 6 * 50) / 7
            monthly_progress=18,  # (100 + 9 * 50) / 30
            consistency_score=33,  # 10 of 30 days active
        )

    def test_archived_habits_not_tracked(self, sample, today):
        habits, logs = sample
        result = summarize(habits + [_habit("old", archived=True)], logs, today=today)
        assert result.total_habits == 2

    def test_empty(self, today):
        result = summarize([], [], today=today)

        assert result.total_habits == 0
        assert result.average_completion == 0
        assert result.best_streak == 0
        assert result.current_streaks == 0
        assert result.weekly_progress == 0
        assert result.consistency_score == 0

    def test_short_calendar(self, sample, today):
        habits, logs = sample
        result = summarize(habits, logs, calendar_days=1, today=today)
        assert result.weekly_progress == 100
        assert result.consistency_score == 100


class TestTopHabits:
    def test_ranked_by_completion_rate(self, today, make_logs):
        habits = [_habit("low"), _habit("high"), _habit("mid"), _habit("none")]
        logs = (
            make_logs("low", [today])
            + make_logs("high", [subtract_days(today, i) for i in range(6)])
            + make_logs("mid", [subtract_days(today, i) for i in range(3)])
        )

        ranked = top_habits(habits, logs, today=today)

        assert [r.habit.id for r in ranked] == ["high", "mid", "low"]
        assert ranked[0].current_streak == 6
        assert ranked[0].completion_rate == 20

    def test_limit_and_archived(self, today, make_logs):
        habits = [_habit("a"), _habit("old", archived=True)]
        ranked = top_habits(habits, make_logs("old", [today]), limit=5, today=today)
        assert [r.habit.id for r in ranked] == ["a"]


@pytest.mark.parametrize(
    "score, fragment",
    [(95, "Exceptional"), (80, "Great"), (60, "Good"), (45, "Keep building"), (10, "getting started")],
)
def test_consistency_message(score, fragment):
    assert fragment in consistency_message(score)


class TestInsights:
    def _summary(self, **overrides) -> AnalyticsSummary:
        values = dict(
            total_habits=1,
            total_logs=0,
            average_completion=0,
            best_streak=0,
            current_streaks=0,
            weekly_progress=0,
            monthly_progress=0,
            consistency_score=0,
        )
        values.update(overrides)
        return AnalyticsSummary(**values)

    def test_fallback_line(self):
        assert insights(self._summary()) == ["🌱 Keep building your habits - every day counts!"]

    def test_combined_lines(self):
        lines = insights(
            self._summary(best_streak=40, weekly_progress=80, monthly_progress=50, consistency_score=85, total_habits=6)
        )
        assert len(lines) == 4
        assert any("upward trend" in line for line in lines)
