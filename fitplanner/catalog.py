# fitplanner/catalog.py
import uuid
from typing import Optional

from .models.workout import Exercise

DEFAULT_REPS = 10
DEFAULT_WEIGHT_KG = 0

# Exercises the planner can add to a day.
# mets drives the calorie estimate; entries without it count as 0 kcal.
EXERCISES = {
    "Push-ups": {
        "name": "Push-ups",
        "category": "Chest",
        "mets": 3.8,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Squats": {
        "name": "Squats",
        "category": "Legs",
        "mets": 5.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Bench Press": {
        "name": "Bench Press",
        "category": "Chest",
        "mets": 6.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Deadlift": {
        "name": "Deadlift",
        "category": "Back",
        "mets": 6.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Pull-ups": {
        "name": "Pull-ups",
        "category": "Back",
        "mets": 8.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Bicep Curls": {
        "name": "Bicep Curls",
        "category": "Arms",
        "mets": 3.5,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Shoulder Press": {
        "name": "Shoulder Press",
        "category": "Shoulders",
        "mets": 5.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Lunges": {
        "name": "Lunges",
        "category": "Legs",
        "mets": 4.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Plank": {
        "name": "Plank",
        "category": "Core",
        "mets": 3.0,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
    "Leg Press": {
        "name": "Leg Press",
        "category": "Legs",
        "mets": None,
        "video_url": "/placeholder.svg?height=200&width=300",
    },
}


def list_exercises():
    return [
        {
            "name": e["name"],
            "category": e["category"],
            "mets": e["mets"],
            "videoUrl": e["video_url"],
        }
        for e in EXERCISES.values()
    ]


def new_exercise(name: str, reps: int = DEFAULT_REPS, weight: float = DEFAULT_WEIGHT_KG) -> Optional[Exercise]:
    """Fresh plan entry for a catalog exercise, or None for unknown names."""
    entry = EXERCISES.get(name)
    if not entry:
        return None
    return Exercise(
        id=uuid.uuid4().hex,
        name=entry["name"],
        category=entry["category"],
        mets=entry["mets"],
        video_url=entry["video_url"],
        reps=reps,
        weight=weight,
    )
