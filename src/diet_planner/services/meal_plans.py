"""Meal plan selection and portion scaling."""

from diet_planner.domain.catalog import (
    LOW_TIER_MAX_CALORIES,
    MEDIUM_TIER_MAX_CALORIES,
    REFERENCE_CALORIES,
    catalog_entry,
)
from diet_planner.domain.meals import FoodItem, MealPlan, MealSlot


def select_tier(daily_calories: int) -> int:
    """Return the catalog tier for a daily calorie target."""
    if daily_calories < LOW_TIER_MAX_CALORIES:
        return 0
    if daily_calories < MEDIUM_TIER_MAX_CALORIES:
        return 1
    return 2


def scale_food_item(item: FoodItem, factor: float) -> FoodItem:
    """Return a copy of the item with calories and macros scaled by factor."""
    return FoodItem(
        name=item.name,
        calories=round(item.calories * factor),
        protein_g=_round_grams(item.protein_g * factor),
        carbs_g=_round_grams(item.carbs_g * factor),
        fat_g=_round_grams(item.fat_g * factor),
    )


def generate_meal_plan(daily_calories: int) -> MealPlan:
    """Pick the tier's foods and scale them to the calorie target."""
    tier = select_tier(daily_calories)
    factor = daily_calories / REFERENCE_CALORIES
    scaled = {
        slot.value: scale_food_item(catalog_entry(slot, tier), factor)
        for slot in MealSlot
    }
    return MealPlan(**scaled)


def _round_grams(value: float) -> float:
    """Round grams to one decimal place."""
    return round(value * 10) / 10
