"""Domain models for food items and meal plans."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class MealSlot(str, Enum):
    """Meal slots of a daily plan, in display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class FoodItem:
    """A food option with its macros."""

    name: str
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MealPlanTotals:
    """Summed nutrition across a meal plan."""

    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MealPlan:
    """One food item per meal slot."""

    breakfast: FoodItem
    lunch: FoodItem
    dinner: FoodItem
    snack: FoodItem

    def items(self) -> Iterator[tuple[MealSlot, FoodItem]]:
        """Yield slot and item pairs in display order."""
        for slot in MealSlot:
            yield slot, getattr(self, slot.value)

    def totals(self) -> MealPlanTotals:
        """Return total calories and macros for the day."""
        foods = [item for _, item in self.items()]
        return MealPlanTotals(
            calories=sum(food.calories for food in foods),
            protein_g=sum(food.protein_g for food in foods),
            carbs_g=sum(food.carbs_g for food in foods),
            fat_g=sum(food.fat_g for food in foods),
        )
