# tests/test_planner.py
from datetime import date

from fitplanner.catalog import new_exercise
from fitplanner.history import history_summary, sorted_history
from fitplanner.models.profile import UserProfile
from fitplanner.models.workout import DayWorkout, WorkoutRecord
from fitplanner.planner import (
    current_week_start,
    next_week,
    plan_for_week,
    previous_week,
    save_day_workout,
)


def test_current_week_start_is_monday():
    # 2024-05-08 is a Wednesday
    assert current_week_start(date(2024, 5, 8)) == "2024-05-06"
    assert current_week_start(date(2024, 5, 6)) == "2024-05-06"
    assert current_week_start(date(2024, 5, 12)) == "2024-05-06"


def test_week_navigation():
    assert next_week("2024-05-06") == "2024-05-13"
    assert previous_week("2024-05-06") == "2024-04-29"


def test_plan_for_unknown_week_is_empty():
    plan = plan_for_week([], "2024-05-06")
    assert plan.week_of == "2024-05-06"
    assert [w.day for w in plan.workouts] == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert all(w.exercises == [] for w in plan.workouts)


def test_save_day_workout_creates_then_replaces():
    squats = new_exercise("Squats")
    plans = save_day_workout([], "2024-05-06", DayWorkout(day="Monday", exercises=[squats]))
    assert len(plans) == 1
    assert plan_for_week(plans, "2024-05-06").day("Monday").exercises == [squats]

    plank = new_exercise("Plank")
    plans = save_day_workout(plans, "2024-05-06", DayWorkout(day="Monday", exercises=[plank]))
    assert len(plans) == 1
    assert plan_for_week(plans, "2024-05-06").day("Monday").exercises == [plank]


def test_save_day_workout_with_seven_weekdays():
    week = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
    plans = save_day_workout([], "2024-05-06", DayWorkout(day="Sunday"), weekdays=week)
    assert len(plans[0].workouts) == 7


def test_new_exercise_defaults():
    exercise = new_exercise("Push-ups")
    assert exercise.reps == 10
    assert exercise.weight == 0
    assert exercise.mets == 3.8
    assert new_exercise("Push-ups").id != exercise.id
    assert new_exercise("Juggling") is None


def test_history_sorted_most_recent_first():
    older = WorkoutRecord(date="2024-05-01T08:00:00+00:00", duration=20, calories_burned=100)
    newer = WorkoutRecord(date="2024-05-03T08:00:00+00:00", duration=30, calories_burned=None)
    profile = UserProfile(name="A", email="a@example.com", workout_history=[older, newer])

    assert sorted_history(profile) == [newer, older]
    assert history_summary(profile) == {
        "total_workouts": 2,
        "total_duration_minutes": 50,
        "total_calories_burned": 100,
        "average_calories_per_workout": 50,
    }
