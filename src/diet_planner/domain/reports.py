"""Domain models for computed health reports."""

from dataclasses import dataclass
from enum import Enum

from diet_planner.domain.meals import MealPlan
from diet_planner.domain.profile import UserProfile


class BmiCategory(str, Enum):
    """Coarse BMI bands."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


@dataclass(frozen=True)
class HealthReport:
    """Metrics and meal plan computed for one profile."""

    profile: UserProfile
    bmi: float
    bmi_category: BmiCategory
    daily_calories: int
    tier: int
    meal_plan: MealPlan
