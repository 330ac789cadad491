"""
Centralized constants shared by the models, services and CLI.
"""

# Streak lengths that earn a celebration notice
MILESTONES = (7, 14, 30, 50, 100, 200, 365)

# Trailing windows used by the analytics summary
WEEK_DAYS = 7
MONTH_DAYS = 30

# Weekly habits target between 1 and 7 completions per week
MIN_TARGET_FREQUENCY = 1
MAX_TARGET_FREQUENCY = 7

DEFAULT_HABIT_COLOR = "#6366F1"
DEFAULT_HABIT_ICON = "target"

# Key/value storage keys
ONBOARDING_COMPLETED_KEY = "onboarding_completed"

ACHIEVEMENT_STREAK_MILESTONE = "streak_milestone"
