# fitplanner/session_core.py
import logging
import math
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional, Set

from .calories import _round_half_up, estimate_calories, estimate_duration_minutes
from .models.workout import DayWorkout, Exercise, PerformedExercise, WorkoutRecord

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
    ABANDONED = "abandoned"


TERMINAL_STATES = (SessionState.FINISHED, SessionState.ABANDONED)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def perform_exercise(exercise: Exercise, body_weight_kg: float) -> PerformedExercise:
    duration = estimate_duration_minutes(exercise.reps)
    return PerformedExercise(
        id=exercise.id,
        name=exercise.name,
        category=exercise.category,
        reps=exercise.reps,
        weight=exercise.weight,
        duration=duration,
        calories_burned=estimate_calories(exercise.mets, body_weight_kg, duration),
        mets=exercise.mets,
    )


class WorkoutSession:
    """
    One timed run through a day's exercises.

    NOT_STARTED -> IN_PROGRESS -> FINISHED | ABANDONED. Both terminal
    states produce exactly one WorkoutRecord. Nothing here raises:
    invalid actions leave the state untouched.
    """

    def __init__(
        self,
        workout: DayWorkout,
        body_weight_kg: float,
        ticker=None,
        clock: Callable[[], str] = _now_iso,
    ):
        self.day = workout.day
        self.exercises: List[Exercise] = list(workout.exercises)
        self.body_weight_kg = body_weight_kg
        self.ticker = ticker
        self.clock = clock

        self.state = SessionState.NOT_STARTED
        self.completed_ids: Set[str] = set()
        self.current_index = 0
        self.record: Optional[WorkoutRecord] = None

        self._elapsed_seconds = 0
        self._tick_handle = None
        self._lock = threading.Lock()

    # ------------------------------
    # clock
    # ------------------------------
    @property
    def elapsed_seconds(self) -> int:
        with self._lock:
            return self._elapsed_seconds

    def tick(self) -> None:
        with self._lock:
            if self.state == SessionState.IN_PROGRESS:
                self._elapsed_seconds += 1

    def start(self) -> "WorkoutSession":
        if self.state != SessionState.NOT_STARTED:
            return self
        self.state = SessionState.IN_PROGRESS
        self.current_index = 0
        if self.ticker is not None:
            self._tick_handle = self.ticker.start(self.tick)
        logger.info("[session] started %s with %d exercises", self.day, len(self.exercises))
        return self

    def _stop_clock(self) -> None:
        if self._tick_handle is not None:
            self.ticker.cancel(self._tick_handle)
            self._tick_handle = None

    # ------------------------------
    # progress
    # ------------------------------
    @property
    def is_active(self) -> bool:
        return self.state == SessionState.IN_PROGRESS

    @property
    def current_exercise(self) -> Optional[Exercise]:
        if 0 <= self.current_index < len(self.exercises):
            return self.exercises[self.current_index]
        return None

    @property
    def all_completed(self) -> bool:
        return all(e.id in self.completed_ids for e in self.exercises)

    @property
    def progress_percent(self) -> int:
        if not self.exercises:
            return 0
        done = sum(1 for e in self.exercises if e.id in self.completed_ids)
        return _round_half_up(done / len(self.exercises) * 100)

    def mark_exercise_complete(self, exercise_id: str) -> bool:
        """
        Add exercise_id to the completed set. Idempotent.

        Auto-advances the display pointer when the current exercise was the
        one completed and another one follows.
        """
        if not self.is_active or exercise_id in self.completed_ids:
            return False
        if not any(e.id == exercise_id for e in self.exercises):
            return False

        self.completed_ids.add(exercise_id)
        current = self.current_exercise
        if (
            current is not None
            and current.id == exercise_id
            and self.current_index < len(self.exercises) - 1
        ):
            self.current_index += 1
        return True

    def navigate_to_exercise(self, index: int) -> bool:
        # out-of-range indices are ignored
        if not 0 <= index < len(self.exercises):
            return False
        self.current_index = index
        return True

    def calories_for(self, exercise: Exercise) -> int:
        return perform_exercise(exercise, self.body_weight_kg).calories_burned

    def displayed_total_calories(self) -> int:
        return sum(
            self.calories_for(e) for e in self.exercises if e.id in self.completed_ids
        )

    # ------------------------------
    # termination
    # ------------------------------
    def finish(self, fully_completed: bool) -> WorkoutRecord:
        """
        Stop the clock and build the session's WorkoutRecord.

        fully_completed credits every exercise of the session; an early exit
        credits only the exercises marked complete. Calling finish again
        returns the record already produced.
        """
        if self.record is not None:
            return self.record

        self._stop_clock()
        with self._lock:
            self.state = SessionState.FINISHED if fully_completed else SessionState.ABANDONED
            elapsed = self._elapsed_seconds

        if fully_completed:
            included = self.exercises
        else:
            included = [e for e in self.exercises if e.id in self.completed_ids]

        performed = [perform_exercise(e, self.body_weight_kg) for e in included]
        self.record = WorkoutRecord(
            date=self.clock(),
            duration=math.floor(elapsed / 60),
            exercises_performed=performed,
            calories_burned=sum(p.calories_burned for p in performed),
        )
        logger.info(
            "[session] %s %s: %d exercises, %s kcal, %d min",
            self.day,
            self.state.value,
            len(performed),
            self.record.calories_burned,
            self.record.duration,
        )
        return self.record

    def to_dict(self):
        current = self.current_exercise
        return {
            "day": self.day,
            "state": self.state.value,
            "elapsedSeconds": self.elapsed_seconds,
            "currentIndex": self.current_index,
            "currentExercise": current.to_dict() if current else None,
            "completedExerciseIds": [e.id for e in self.exercises if e.id in self.completed_ids],
            "progressPercent": self.progress_percent,
            "allCompleted": self.all_completed,
            "totalCalories": self.displayed_total_calories(),
            "exercises": [
                {**e.to_dict(), "calories": self.calories_for(e), "completed": e.id in self.completed_ids}
                for e in self.exercises
            ],
        }
