# fitplanner/models/workout.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _safe_int(v: Any, default: int = 0) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _safe_float(v: Any, default: float = 0) -> float:
    try:
        return float(v)
    except (TypeError, ValueError):
        return default


def _optional_float(v: Any) -> Optional[float]:
    if v is None:
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


@dataclass
class Exercise:
    """Catalog entry placed into a day of the plan."""

    id: str
    name: str
    category: str = ""
    mets: Optional[float] = None
    video_url: Optional[str] = None
    reps: int = 10
    weight: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "mets": self.mets,
            "videoUrl": self.video_url,
            "reps": self.reps,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Exercise":
        mets = data.get("mets", data.get("metsValue"))
        return cls(
            id=str(data.get("id") or ""),
            name=data.get("name") or "",
            category=data.get("category") or "",
            mets=_optional_float(mets),
            video_url=data.get("videoUrl") or data.get("youtubeUrl"),
            reps=_safe_int(data.get("reps")),
            weight=_safe_float(data.get("weight")),
        )


@dataclass
class DayWorkout:
    day: str
    exercises: List[Exercise] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"day": self.day, "exercises": [e.to_dict() for e in self.exercises]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DayWorkout":
        return cls(
            day=data.get("day") or "",
            exercises=[Exercise.from_dict(e) for e in data.get("exercises") or []],
        )


@dataclass
class WeeklyPlan:
    week_of: str  # ISO date of the week's Monday
    workouts: List[DayWorkout] = field(default_factory=list)

    def day(self, name: str) -> Optional[DayWorkout]:
        for w in self.workouts:
            if w.day == name:
                return w
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"weekOf": self.week_of, "workouts": [w.to_dict() for w in self.workouts]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeeklyPlan":
        return cls(
            week_of=data.get("weekOf") or "",
            workouts=[DayWorkout.from_dict(w) for w in data.get("workouts") or []],
        )


@dataclass(frozen=True)
class PerformedExercise:
    """Snapshot of an exercise as executed inside one session."""

    id: str
    name: str
    category: str
    reps: int
    weight: float
    duration: float  # minutes
    calories_burned: int
    mets: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "reps": self.reps,
            "weight": self.weight,
            "duration": self.duration,
            "caloriesBurned": self.calories_burned,
            "mets": self.mets,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PerformedExercise":
        return cls(
            id=str(data.get("id") or ""),
            name=data.get("name") or "",
            category=data.get("category") or "",
            reps=_safe_int(data.get("reps")),
            weight=_safe_float(data.get("weight")),
            duration=_safe_float(data.get("duration")),
            calories_burned=_safe_int(data.get("caloriesBurned")),
            mets=data.get("mets"),
        )


@dataclass(frozen=True)
class WorkoutRecord:
    date: str  # ISO-8601
    duration: int  # whole minutes of wall-clock time
    exercises_performed: List[PerformedExercise] = field(default_factory=list)
    calories_burned: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "duration": self.duration,
            "exercisesPerformed": [e.to_dict() for e in self.exercises_performed],
            "caloriesBurned": self.calories_burned,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkoutRecord":
        calories = data.get("caloriesBurned")
        return cls(
            date=data.get("date") or "",
            duration=_safe_int(data.get("duration")),
            exercises_performed=[
                PerformedExercise.from_dict(e) for e in data.get("exercisesPerformed") or []
            ],
            calories_burned=int(calories) if calories is not None else None,
        )
