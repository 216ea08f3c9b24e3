# fitplanner/models/profile.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .workout import WorkoutRecord, _safe_float, _safe_int

GENDERS = ("male", "female", "other")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very-active")
ROLES = ("user", "admin")
MEMBERSHIP_TYPES = ("trial", "basic", "premium")

# defaults at registration; also fill fields missing from older stored profiles
DEFAULT_GENDER = "other"
DEFAULT_ACTIVITY_LEVEL = "sedentary"
DEFAULT_ROLE = "user"
DEFAULT_MEMBERSHIP = "trial"
DEFAULT_PASSWORD = ""


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str
    password: str = DEFAULT_PASSWORD  # plaintext, demo only
    age: int = 0
    gender: str = DEFAULT_GENDER
    weight: float = 0  # kg
    height: float = 0  # cm
    activity_level: str = DEFAULT_ACTIVITY_LEVEL
    fitness_goals: List[str] = field(default_factory=list)
    role: str = DEFAULT_ROLE
    membership_type: str = DEFAULT_MEMBERSHIP
    workout_history: List[WorkoutRecord] = field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def same_user(self, other) -> bool:
        return other is not None and other.email == self.email

    def to_dict(self, include_password: bool = True) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "gender": self.gender,
            "weight": self.weight,
            "height": self.height,
            "activityLevel": self.activity_level,
            "fitnessGoals": list(self.fitness_goals),
            "role": self.role,
            "membershipType": self.membership_type,
            "workoutHistory": [r.to_dict() for r in self.workout_history],
        }
        if include_password:
            data["password"] = self.password
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        """
        Build a profile from its stored JSON form.

        Profiles written before role, membershipType, workoutHistory or
        password existed are upgraded with the registration defaults.
        """
        gender = data.get("gender")
        activity_level = data.get("activityLevel")
        role = data.get("role")
        membership = data.get("membershipType")
        goals = data.get("fitnessGoals") or []
        if isinstance(goals, str):
            goals = [g.strip() for g in goals.split(",") if g.strip()]

        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            password=data.get("password") or DEFAULT_PASSWORD,
            age=_safe_int(data.get("age")),
            gender=gender if gender in GENDERS else DEFAULT_GENDER,
            weight=_safe_float(data.get("weight")),
            height=_safe_float(data.get("height")),
            activity_level=(
                activity_level if activity_level in ACTIVITY_LEVELS else DEFAULT_ACTIVITY_LEVEL
            ),
            fitness_goals=list(goals),
            role=role if role in ROLES else DEFAULT_ROLE,
            membership_type=membership if membership in MEMBERSHIP_TYPES else DEFAULT_MEMBERSHIP,
            workout_history=[
                WorkoutRecord.from_dict(r) for r in data.get("workoutHistory") or []
            ],
        )
