"""Streak milestone policy."""

from __future__ import annotations

from ..constants import MILESTONES


def is_milestone(streak: int) -> bool:
    return streak in MILESTONES


def milestone_message(streak: int) -> str:
    """Celebration text for a streak, tiered by length."""

    if streak >= 365:
        return f"🎉 Amazing! {streak} days strong!"
    if streak >= 100:
        return f"🔥 Incredible! {streak} day streak!"
    if streak >= 30:
        return f"⭐ Fantastic! {streak} days in a row!"
    if streak >= 14:
        return f"💪 Great job! {streak} day streak!"
    if streak >= 7:
        return "🎯 One week streak! Keep going!"
    return f"Day {streak} - You're building momentum!"


__all__ = ["is_milestone", "milestone_message"]
