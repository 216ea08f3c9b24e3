# fitplanner/calories.py
import math
from typing import Optional

# mL O2 per kg per minute at 1 MET
OXYGEN_PER_MET = 3.5
# mL O2 -> kcal at body weight
KCAL_DIVISOR = 200
SECONDS_PER_REP = 3


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_calories(
    mets_value: Optional[float], body_weight_kg: float, duration_minutes: float
) -> int:
    """
    kcal = METS x weight(kg) x 3.5 / 200 x minutes, rounded half-up.

    Total function: missing or non-positive METS, weight or duration
    give 0 instead of an error (many catalog entries have no METS).
    """
    if not mets_value or mets_value <= 0:
        return 0
    if duration_minutes <= 0 or body_weight_kg <= 0:
        return 0

    calories = mets_value * body_weight_kg * OXYGEN_PER_MET / KCAL_DIVISOR * duration_minutes
    return _round_half_up(calories)


def estimate_duration_minutes(reps: int) -> float:
    """Elapsed minutes for a set, at 3 seconds per repetition."""
    if reps <= 0:
        return 0
    return reps * SECONDS_PER_REP / 60
