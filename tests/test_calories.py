# tests/test_calories.py
import pytest

from fitplanner.calories import estimate_calories, estimate_duration_minutes


@pytest.mark.parametrize(
    "mets, weight, minutes, expected",
    [
        (5, 70, 5, 31),  # 30.625
        (5, 70, 0.5, 3),  # 3.0625
        (8, 70, 10, 98),
        (3.5, 60, 30, 110),  # 110.25
        (6, 85, 25, 223),  # 223.125
    ],
)
def test_estimate_calories(mets, weight, minutes, expected):
    assert estimate_calories(mets, weight, minutes) == expected


def test_estimate_calories_rounds_half_up():
    # 6 x 100 x 3.5 / 200 x 1 == 10.5 exactly
    assert estimate_calories(6, 100, 1) == 11


@pytest.mark.parametrize("mets", [None, 0, -2])
def test_missing_or_non_positive_mets_gives_zero(mets):
    assert estimate_calories(mets, 70, 10) == 0
    assert estimate_calories(mets, 120, 0.5) == 0


@pytest.mark.parametrize("weight, minutes", [(0, 10), (-5, 10), (70, 0), (70, -1)])
def test_non_positive_weight_or_duration_gives_zero(weight, minutes):
    assert estimate_calories(5, weight, minutes) == 0


def test_estimate_duration_minutes():
    assert estimate_duration_minutes(10) == 0.5
    assert estimate_duration_minutes(12) == 0.6
    assert estimate_duration_minutes(0) == 0
    assert estimate_duration_minutes(-3) == 0
