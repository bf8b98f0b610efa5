"""Tests for BMI and calorie calculations."""

import pytest

from diet_planner.domain.profile import (
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MIN_AGE,
    MIN_HEIGHT_CM,
    MIN_WEIGHT_KG,
    Sex,
)
from diet_planner.domain.reports import BmiCategory
from diet_planner.services.meal_plans import generate_meal_plan
from diet_planner.services.metrics import (
    activity_multiplier,
    classify_bmi,
    compute_bmi,
    compute_bmr,
    compute_daily_calories,
)
from tests.conftest import make_profile


def test_compute_bmi_matches_formula(profile) -> None:
    bmi = compute_bmi(profile)

    assert bmi == pytest.approx(80 / (1.8 * 1.8))
    assert round(bmi, 1) == 24.7


@pytest.mark.parametrize(
    ("weight", "height"),
    [(45.0, 150.0), (62.5, 171.0), (130.0, 201.0)],
)
def test_compute_bmi_is_positive(weight: float, height: float) -> None:
    profile = make_profile(weight_kg=weight, height_cm=height)

    bmi = compute_bmi(profile)

    assert bmi > 0
    assert bmi == pytest.approx(weight / (height / 100) ** 2)


def test_compute_bmr_male(profile) -> None:
    assert compute_bmr(profile) == pytest.approx(1853.632)


def test_compute_bmr_female() -> None:
    profile = make_profile(
        sex=Sex.FEMALE, age=25, weight_kg=60.0, height_cm=165.0, activity_level=2
    )

    assert compute_bmr(profile) == pytest.approx(1405.333)


def test_compute_daily_calories_male(profile) -> None:
    assert compute_daily_calories(profile) == 2873


def test_compute_daily_calories_female() -> None:
    profile = make_profile(
        sex=Sex.FEMALE, age=25, weight_kg=60.0, height_cm=165.0, activity_level=2
    )

    assert compute_daily_calories(profile) == 1932


@pytest.mark.parametrize(
    ("level", "multiplier"),
    [(1, 1.2), (2, 1.375), (3, 1.55), (4, 1.725), (5, 1.9)],
)
def test_activity_multiplier_table(level: int, multiplier: float) -> None:
    assert activity_multiplier(level) == multiplier


def test_activity_multiplier_falls_back_to_sedentary() -> None:
    assert activity_multiplier(0) == 1.2
    assert activity_multiplier(7) == 1.2


def test_daily_calories_non_decreasing_in_weight_and_height() -> None:
    by_weight = [
        compute_daily_calories(make_profile(weight_kg=weight))
        for weight in range(45, 140, 5)
    ]
    by_height = [
        compute_daily_calories(make_profile(height_cm=height))
        for height in range(150, 210, 5)
    ]

    assert by_weight == sorted(by_weight)
    assert by_height == sorted(by_height)


def test_daily_calories_non_increasing_in_age() -> None:
    by_age = [compute_daily_calories(make_profile(age=age)) for age in range(18, 90, 3)]

    assert by_age == sorted(by_age, reverse=True)


@pytest.mark.parametrize(
    ("bmi", "category"),
    [
        (15.4, BmiCategory.UNDERWEIGHT),
        (18.5, BmiCategory.NORMAL),
        (24.9, BmiCategory.NORMAL),
        (25.0, BmiCategory.OVERWEIGHT),
        (29.9, BmiCategory.OVERWEIGHT),
        (30.0, BmiCategory.OBESE),
        (41.2, BmiCategory.OBESE),
    ],
)
def test_classify_bmi(bmi: float, category: BmiCategory) -> None:
    assert classify_bmi(bmi) is category


@pytest.mark.parametrize("sex", list(Sex))
@pytest.mark.parametrize("level", [1, 5])
@pytest.mark.parametrize(
    ("age", "weight", "height"),
    [
        (MAX_AGE, MIN_WEIGHT_KG, MIN_HEIGHT_CM),
        (MIN_AGE, MAX_WEIGHT_KG, MAX_HEIGHT_CM),
    ],
)
def test_daily_calories_positive_across_accepted_ranges(
    sex: Sex, level: int, age: int, weight: float, height: float
) -> None:
    profile = make_profile(
        sex=sex, age=age, weight_kg=weight, height_cm=height, activity_level=level
    )

    calories = compute_daily_calories(profile)

    assert calories > 0
    plan = generate_meal_plan(calories)
    assert all(item.calories >= 0 for _, item in plan.items())
