# fitplanner/history.py
from typing import Any, Dict, List

from .models.profile import UserProfile
from .models.workout import WorkoutRecord


def sorted_history(profile: UserProfile) -> List[WorkoutRecord]:
    """Most recent workout first (ISO timestamps sort lexically)."""
    return sorted(profile.workout_history, key=lambda r: r.date, reverse=True)


def history_summary(profile: UserProfile) -> Dict[str, Any]:
    records = profile.workout_history
    total_sessions = len(records)
    total_minutes = sum(r.duration or 0 for r in records)
    total_calories = sum(r.calories_burned or 0 for r in records)

    return {
        "total_workouts": total_sessions,
        "total_duration_minutes": total_minutes,
        "total_calories_burned": total_calories,
        "average_calories_per_workout": int(total_calories / total_sessions) if total_sessions else 0,
    }
