"""Command-line front end for ConsistTracker."""

from __future__ import annotations

from functools import wraps

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .errors import ConsistTrackerError
from .logging_config import setup_logging
from .models.habit import Habit, HabitCategory, HabitLog, HabitType
from .services.analytics import consistency_message, insights, summarize, top_habits
from .services.calendar import generate_calendar
from .services.dates import is_day_id, today_id
from .services.habits import calculate_streak, completion_rate, is_completed_today
from .services.tracking import toggle_today


def _handle_errors(func):
    """Report application errors as click failures instead of tracebacks."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConsistTrackerError as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _validate_day(ctx, param, value):
    if value is not None and not is_day_id(value):
        raise click.BadParameter("expected a YYYY-MM-DD date")
    return value


def _get_habit(app: AppContext, habit_id: str) -> Habit:
    habit = app.habit_repo.get_habit(habit_id)
    if habit is None:
        raise click.ClickException(f"Habit {habit_id!r} not found")
    return habit


@click.group()
@click.pass_context
@_handle_errors
def main(ctx: click.Context) -> None:
    """Track habits, streaks and consistency."""

    config = BaseConfig()
    setup_logging(config)
    app = create_app_context(config)
    if not app.settings_repo.onboarding_completed():
        click.echo("Welcome to ConsistTracker! Add a habit with `consisttracker add NAME`.", err=True)
        app.settings_repo.mark_onboarding_completed()
    ctx.obj = app


@main.command("add")
@click.argument("name")
@click.option("--description", default=None)
@click.option(
    "--category",
    type=click.Choice([c.value for c in HabitCategory]),
    default=HabitCategory.HEALTH.value,
    show_default=True,
)
@click.option(
    "--type",
    "habit_type",
    type=click.Choice([t.value for t in HabitType]),
    default=HabitType.DAILY.value,
    show_default=True,
)
@click.option("--target-value", type=float, default=None, help="Goal per day for quantity habits")
@click.option("--target-frequency", type=int, default=None, help="Days per week for weekly habits")
@click.option("--color", default=None)
@click.option("--icon", default=None)
@click.pass_obj
@_handle_errors
def add_habit(
    app: AppContext,
    name: str,
    description: str | None,
    category: str,
    habit_type: str,
    target_value: float | None,
    target_frequency: int | None,
    color: str | None,
    icon: str | None,
) -> None:
    """Create a new habit."""

    habit = Habit(
        name=name,
        description=description,
        category=HabitCategory(category),
        habit_type=HabitType(habit_type),
        target_value=target_value,
        target_frequency=target_frequency,
    )
    if color:
        habit.color = color
    if icon:
        habit.icon = icon
    saved = app.habit_repo.upsert_habit(habit)
    click.echo(f"Created habit {saved.name} ({saved.id})")


@main.command("list")
@click.option("--all", "show_all", is_flag=True, default=False, help="Include archived habits")
@click.pass_obj
@_handle_errors
def list_habits(app: AppContext, show_all: bool) -> None:
    """List habits with today's status."""

    habits = app.habit_repo.list_habits(include_archived=show_all)
    if not habits:
        click.echo("No habits yet. Add one with `consisttracker add NAME`.")
        return

    logs = app.habit_repo.list_habit_logs()
    window = app.config.COMPLETION_WINDOW
    for habit in habits:
        mark = "x" if is_completed_today(habit.id, logs) else " "
        rate = completion_rate(habit.id, logs, window)
        suffix = " [archived]" if habit.is_archived else ""
        click.echo(f"[{mark}] {habit.id}  {habit.name} ({habit.category.value}) {rate}%{suffix}")


@main.command("log")
@click.argument("habit_id")
@click.option("--date", "log_date", default=None, callback=_validate_day, help="Day as YYYY-MM-DD")
@click.option("--value", type=float, default=1.0, show_default=True)
@click.option("--notes", default=None)
@click.pass_obj
@_handle_errors
def log_habit(
    app: AppContext, habit_id: str, log_date: str | None, value: float, notes: str | None
) -> None:
    """Record a completion, replacing any log for the same day."""

    habit = _get_habit(app, habit_id)
    day = log_date or today_id()
    app.habit_repo.upsert_habit_log(HabitLog(habit_id=habit.id, log_date=day, value=value, notes=notes))
    click.echo(f"Logged {habit.name} on {day}")


@main.command("toggle")
@click.argument("habit_id")
@click.pass_obj
@_handle_errors
def toggle(app: AppContext, habit_id: str) -> None:
    """Mark a habit done for today, or undo it."""

    result = toggle_today(app.habit_repo, habit_id)
    state = "done" if result.completed else "not done"
    click.echo(f"{habit_id} is {state} today (streak {result.streak.current_streak})")
    if result.milestone_message:
        click.echo(result.milestone_message)


@main.command("archive")
@click.argument("habit_id")
@click.pass_obj
@_handle_errors
def archive(app: AppContext, habit_id: str) -> None:
    """Archive a habit so it no longer counts toward analytics."""

    habit = app.habit_repo.archive_habit(habit_id)
    click.echo(f"Archived {habit.name}")


@main.command("delete")
@click.argument("habit_id")
@click.confirmation_option(prompt="Delete this habit and all of its logs?")
@click.pass_obj
@_handle_errors
def delete(app: AppContext, habit_id: str) -> None:
    """Permanently delete a habit and its logs."""

    habit = _get_habit(app, habit_id)
    app.habit_repo.delete_habit(habit_id)
    click.echo(f"Deleted {habit.name}")


@main.command("streaks")
@click.pass_obj
@_handle_errors
def streaks(app: AppContext) -> None:
    """Show current and longest streaks for active habits."""

    logs = app.habit_repo.list_habit_logs()
    for habit in app.habit_repo.list_active():
        streak = calculate_streak(habit.id, logs)
        click.echo(
            f"{habit.name}: current {streak.current_streak}, longest {streak.longest_streak}"
        )


@main.command("calendar")
@click.option("--days", type=click.IntRange(min=1), default=None, help="Defaults to the configured window")
@click.pass_obj
@_handle_errors
def calendar(app: AppContext, days: int | None) -> None:
    """Print the per-day completion percentages, oldest first."""

    data = generate_calendar(
        app.habit_repo.list_active(),
        app.habit_repo.list_habit_logs(),
        days or app.config.CALENDAR_DAYS,
    )
    for day in data:
        click.echo(
            f"{day.date}  {day.completion_percentage:3d}%  {day.habits_completed}/{day.total_habits}"
        )


@main.command("summary")
@click.pass_obj
@_handle_errors
def summary(app: AppContext) -> None:
    """Show the analytics overview."""

    habits = app.habit_repo.list_active()
    logs = app.habit_repo.list_habit_logs()
    result = summarize(
        habits,
        logs,
        calendar_days=app.config.CALENDAR_DAYS,
        window_days=app.config.COMPLETION_WINDOW,
    )

    click.echo(f"Habits tracked:     {result.total_habits}")
    click.echo(f"Total logs:         {result.total_logs}")
    click.echo(f"Average completion: {result.average_completion}%")
    click.echo(f"Best streak:        {result.best_streak}")
    click.echo(f"Current streaks:    {result.current_streaks}")
    click.echo(f"This week:          {result.weekly_progress}%")
    click.echo(f"This month:         {result.monthly_progress}%")
    click.echo(
        f"Consistency:        {result.consistency_score}% - "
        f"{consistency_message(result.consistency_score)}"
    )

    ranked = top_habits(habits, logs, window_days=app.config.COMPLETION_WINDOW)
    if ranked:
        click.echo("Top habits:")
        for entry in ranked:
            click.echo(
                f"  {entry.habit.name}: {entry.completion_rate}% (streak {entry.current_streak})"
            )
    for line in insights(result):
        click.echo(line)


if __name__ == "__main__":  # pragma: no cover
    main()
