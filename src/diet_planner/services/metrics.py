"""Body metrics: BMI, BMR and daily calorie needs."""

from diet_planner.domain.profile import ACTIVITY_LEVELS, Sex, UserProfile
from diet_planner.domain.reports import BmiCategory

DEFAULT_ACTIVITY_MULTIPLIER = 1.2

UNDERWEIGHT_BMI = 18.5
OVERWEIGHT_BMI = 25.0
OBESE_BMI = 30.0


def compute_bmi(profile: UserProfile) -> float:
    """Return weight in kg divided by the square of height in metres."""
    height_m = profile.height_cm / 100.0
    return profile.weight_kg / (height_m * height_m)


def compute_bmr(profile: UserProfile) -> float:
    """Return the basal metabolic rate (revised Harris-Benedict)."""
    if profile.sex is Sex.MALE:
        return (
            88.362
            + 13.397 * profile.weight_kg
            + 4.799 * profile.height_cm
            - 5.677 * profile.age
        )
    return (
        447.593
        + 9.247 * profile.weight_kg
        + 3.098 * profile.height_cm
        - 4.330 * profile.age
    )


def activity_multiplier(level: int) -> float:
    """Return the BMR multiplier for an activity level."""
    definition = ACTIVITY_LEVELS.get(level)
    if definition is None:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return definition.multiplier


def compute_daily_calories(profile: UserProfile) -> int:
    """Return the estimated daily calorie need in kcal."""
    return round(compute_bmr(profile) * activity_multiplier(profile.activity_level))


def classify_bmi(bmi: float) -> BmiCategory:
    """Map a BMI value to its category."""
    if bmi < UNDERWEIGHT_BMI:
        return BmiCategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_BMI:
        return BmiCategory.NORMAL
    if bmi < OBESE_BMI:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE
