# fitplanner/controller.py
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from flask import current_app

from .directory import (
    apply_profile_edit,
    apply_workout_completion,
    authenticate as authenticate_user,
    find_user,
    reconcile_on_load,
    register as register_user,
)
from .errors import (
    InvalidNavigationError,
    NoActiveWorkoutError,
    NotLoggedInError,
    PermissionDeniedError,
    UserNotFoundError,
    WorkoutInProgressError,
)
from .models.profile import UserProfile
from .models.store import DIRECTORY_KEY, SESSION_PROFILE_KEY, KeyValueStore
from .models.workout import DayWorkout, WeeklyPlan, WorkoutRecord
from . import planner
from .session_core import WorkoutSession
from .ticker import IntervalTicker

logger = logging.getLogger(__name__)


class ScreenName(str, Enum):
    LOGIN = "login"
    REGISTRATION = "registration"
    PLANNER = "planner"
    WORKOUT = "workout"
    PROFILE = "profile"
    ADMIN_DASHBOARD = "adminDashboard"
    # static, navigation only
    HISTORY = "trainingHistory"
    BOOKING = "booking"
    PRE_MADE_ROUTINES = "preMadeRoutines"
    CREATE_ROUTINE = "createRoutine"


INFO_SCREENS = (
    ScreenName.HISTORY,
    ScreenName.BOOKING,
    ScreenName.PRE_MADE_ROUTINES,
    ScreenName.CREATE_ROUTINE,
)


@dataclass(frozen=True)
class Screen:
    name: ScreenName
    day: Optional[str] = None  # workout screen only

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name.value, "day": self.day}


LOGIN = Screen(ScreenName.LOGIN)
PLANNER = Screen(ScreenName.PLANNER)


class SessionController:
    """
    Owns the current screen, the logged-in profile, the profile being
    viewed and the active workout. Profile and directory are always
    persisted together.
    """

    def __init__(self, store: KeyValueStore, ticker=None, weekdays: Sequence[str] = planner.DEFAULT_WEEKDAYS):
        self.store = store
        self.ticker = ticker
        self.weekdays = tuple(weekdays)

        self.screen = LOGIN
        self.session_profile: Optional[UserProfile] = None
        self.viewed_profile: Optional[UserProfile] = None
        self.directory: List[UserProfile] = []
        self.weekly_plans: List[WeeklyPlan] = []
        self.week_of = planner.current_week_start()
        self.workout: Optional[WorkoutSession] = None

        self.load()

    # ------------------------------
    # Persistence
    # ------------------------------
    def _read_json(self, key: str):
        raw = self.store.get(key)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("[controller] ignoring unreadable %s", key)
            return None

    def load(self) -> None:
        raw_profile = self._read_json(SESSION_PROFILE_KEY)
        raw_directory = self._read_json(DIRECTORY_KEY) or []

        session_profile = UserProfile.from_dict(raw_profile) if isinstance(raw_profile, dict) else None
        directory = [UserProfile.from_dict(u) for u in raw_directory if isinstance(u, dict)]
        directory = reconcile_on_load(session_profile, directory)

        self.directory = directory
        if session_profile is not None:
            # write back upgraded fields and any restored directory entry
            self._persist(session_profile, directory)
            self.screen = PLANNER
        else:
            self.session_profile = None
            self.screen = LOGIN

    def _persist(self, session_profile: Optional[UserProfile], directory: List[UserProfile]) -> None:
        # serialise both before writing either
        directory_json = json.dumps([u.to_dict() for u in directory])
        profile_json = json.dumps(session_profile.to_dict()) if session_profile else None

        if profile_json is None:
            self.store.remove(SESSION_PROFILE_KEY)
        else:
            self.store.set(SESSION_PROFILE_KEY, profile_json)
        self.store.set(DIRECTORY_KEY, directory_json)

        self.session_profile = session_profile
        self.directory = directory

    def _persist_directory(self, directory: List[UserProfile]) -> None:
        self.store.set(DIRECTORY_KEY, json.dumps([u.to_dict() for u in directory]))
        self.directory = directory

    # ------------------------------
    # Guards
    # ------------------------------
    def _require_login(self) -> UserProfile:
        if self.session_profile is None:
            raise NotLoggedInError()
        return self.session_profile

    def _require_admin(self) -> UserProfile:
        profile = self._require_login()
        if not profile.is_admin:
            raise PermissionDeniedError()
        return profile

    def _require_workout(self) -> WorkoutSession:
        if self.workout is None or not self.workout.is_active:
            raise NoActiveWorkoutError()
        return self.workout

    # ------------------------------
    # Authentication
    # ------------------------------
    def show_registration(self) -> Screen:
        self.screen = Screen(ScreenName.REGISTRATION)
        return self.screen

    def show_login(self) -> Screen:
        self.screen = LOGIN
        return self.screen

    def register(self, name: str, email: str, password: str, role: str = "user") -> UserProfile:
        profile, directory = register_user(self.directory, name, email, password, role)
        self._persist_directory(directory)
        self.screen = LOGIN
        return profile

    def login(self, email: str, password: str) -> UserProfile:
        profile = authenticate_user(self.directory, email, password)
        if self.workout is not None and self.workout.is_active:
            # the running session belongs to whoever started it
            self.abandon_workout()
            profile = find_user(self.directory, profile.email) or profile
        self.workout = None
        self._persist(profile, self.directory)
        self.viewed_profile = None
        self.screen = PLANNER
        return profile

    def logout(self) -> Screen:
        if self.workout is not None and self.workout.is_active:
            self.abandon_workout()
        self._persist(None, self.directory)
        self.viewed_profile = None
        self.workout = None
        self.screen = LOGIN
        return self.screen

    # ------------------------------
    # Navigation
    # ------------------------------
    def go_to(self, name: ScreenName) -> Screen:
        self._require_login()
        if self.workout is not None and self.workout.is_active:
            raise WorkoutInProgressError()
        if name == ScreenName.ADMIN_DASHBOARD:
            self._require_admin()
        elif name not in INFO_SCREENS and name != ScreenName.PLANNER:
            raise InvalidNavigationError()
        self.screen = Screen(name)
        return self.screen

    # ------------------------------
    # Weekly planner
    # ------------------------------
    def current_plan(self) -> WeeklyPlan:
        return planner.plan_for_week(self.weekly_plans, self.week_of, self.weekdays)

    def show_next_week(self) -> WeeklyPlan:
        self.week_of = planner.next_week(self.week_of)
        return self.current_plan()

    def show_previous_week(self) -> WeeklyPlan:
        self.week_of = planner.previous_week(self.week_of)
        return self.current_plan()

    def save_day_workout(self, day_workout: DayWorkout) -> WeeklyPlan:
        self._require_login()
        self.weekly_plans = planner.save_day_workout(self.weekly_plans, self.week_of, day_workout, self.weekdays)
        return self.current_plan()

    # ------------------------------
    # Workout session
    # ------------------------------
    def start_workout(self, day_workout: DayWorkout) -> WorkoutSession:
        profile = self._require_login()
        if self.workout is not None and self.workout.is_active:
            raise WorkoutInProgressError()

        self.workout = WorkoutSession(day_workout, profile.weight, ticker=self.ticker).start()
        self.screen = Screen(ScreenName.WORKOUT, day=day_workout.day)
        return self.workout

    def complete_exercise(self, exercise_id: str) -> WorkoutSession:
        workout = self._require_workout()
        workout.mark_exercise_complete(exercise_id)
        return workout

    def go_to_exercise(self, index: int) -> WorkoutSession:
        workout = self._require_workout()
        workout.navigate_to_exercise(index)
        return workout

    def _end_workout(self, fully_completed: bool) -> WorkoutRecord:
        workout = self._require_workout()
        profile = self._require_login()

        record = workout.finish(fully_completed)
        updated_profile, directory = apply_workout_completion(profile, record, self.directory)
        self._persist(updated_profile, directory)

        self.workout = None
        self.screen = PLANNER
        return record

    def finish_workout(self) -> WorkoutRecord:
        return self._end_workout(fully_completed=True)

    def abandon_workout(self) -> WorkoutRecord:
        return self._end_workout(fully_completed=False)

    # ------------------------------
    # Profiles
    # ------------------------------
    @property
    def profile_on_screen(self) -> UserProfile:
        return self.viewed_profile or self._require_login()

    def view_own_profile(self) -> UserProfile:
        profile = self._require_login()
        self.viewed_profile = None
        self.screen = Screen(ScreenName.PROFILE)
        return profile

    def view_user_profile(self, email: str) -> UserProfile:
        self._require_admin()
        user = find_user(self.directory, email)
        if user is None:
            raise UserNotFoundError()
        self.viewed_profile = user
        self.screen = Screen(ScreenName.PROFILE)
        return user

    def save_profile(
        self,
        edited_profile: UserProfile,
        new_password: Optional[str] = None,
        confirm_password: Optional[str] = None,
    ) -> UserProfile:
        session_profile = self._require_login()
        return_to = ScreenName.ADMIN_DASHBOARD if self.viewed_profile is not None else ScreenName.PLANNER

        result = apply_profile_edit(
            session_profile.role,
            edited_profile,
            self.viewed_profile,
            session_profile,
            self.directory,
            new_password=new_password,
            confirm_password=confirm_password,
        )
        self._persist(result.session_profile, result.directory)
        self.viewed_profile = result.viewed_profile

        self.screen = Screen(return_to)
        return result.viewed_profile or result.session_profile

    # ------------------------------
    # View state
    # ------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "screen": self.screen.to_dict(),
            "user": self.session_profile.to_dict(include_password=False) if self.session_profile else None,
            "viewingProfile": (
                self.viewed_profile.to_dict(include_password=False) if self.viewed_profile else None
            ),
            "weekOf": self.week_of,
            "workout": self.workout.to_dict() if self.workout else None,
        }


def get_controller() -> SessionController:
    """The app's single session controller, created on first use."""
    controller = current_app.extensions.get("fitplanner")
    if controller is None:
        controller = SessionController(
            KeyValueStore(),
            ticker=IntervalTicker(current_app.config["TICK_INTERVAL_SECONDS"]),
            weekdays=current_app.config["PLANNER_WEEKDAYS"],
        )
        current_app.extensions["fitplanner"] = controller
    return controller
