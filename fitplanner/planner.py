# fitplanner/planner.py
from datetime import date, timedelta
from typing import List, Optional, Sequence

from .models.workout import DayWorkout, WeeklyPlan

DEFAULT_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


def current_week_start(today: Optional[date] = None) -> str:
    """ISO date of the Monday of today's week."""
    today = today or date.today()
    return (today - timedelta(days=today.weekday())).isoformat()


def next_week(week_of: str) -> str:
    return (date.fromisoformat(week_of) + timedelta(days=7)).isoformat()


def previous_week(week_of: str) -> str:
    return (date.fromisoformat(week_of) - timedelta(days=7)).isoformat()


def empty_plan(week_of: str, weekdays: Sequence[str] = DEFAULT_WEEKDAYS) -> WeeklyPlan:
    return WeeklyPlan(week_of=week_of, workouts=[DayWorkout(day=d) for d in weekdays])


def plan_for_week(
    plans: List[WeeklyPlan], week_of: str, weekdays: Sequence[str] = DEFAULT_WEEKDAYS
) -> WeeklyPlan:
    for plan in plans:
        if plan.week_of == week_of:
            return plan
    return empty_plan(week_of, weekdays)


def _with_day(plan: WeeklyPlan, day_workout: DayWorkout) -> WeeklyPlan:
    workouts = [day_workout if w.day == day_workout.day else w for w in plan.workouts]
    if plan.day(day_workout.day) is None:
        workouts.append(day_workout)
    return WeeklyPlan(week_of=plan.week_of, workouts=workouts)


def save_day_workout(
    plans: List[WeeklyPlan],
    week_of: str,
    day_workout: DayWorkout,
    weekdays: Sequence[str] = DEFAULT_WEEKDAYS,
) -> List[WeeklyPlan]:
    """
    Return plans with `day_workout` stored under `week_of`.

    Replaces that day in an existing plan for the week, or creates the
    week's plan with every other configured day left empty.
    """
    if not any(p.week_of == week_of for p in plans):
        return list(plans) + [_with_day(empty_plan(week_of, weekdays), day_workout)]
    return [_with_day(p, day_workout) if p.week_of == week_of else p for p in plans]
