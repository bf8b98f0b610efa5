"""Static food catalog used to build meal plans.

Each slot offers three options indexed by calorie tier: 0 for low, 1 for
medium and 2 for high daily calorie needs.
"""

from diet_planner.domain.meals import FoodItem, MealSlot

LOW_TIER_MAX_CALORIES = 1800
MEDIUM_TIER_MAX_CALORIES = 2200
REFERENCE_CALORIES = 1800.0

TIER_COUNT = 3

FOOD_CATALOG: dict[MealSlot, tuple[FoodItem, FoodItem, FoodItem]] = {
    MealSlot.BREAKFAST: (
        FoodItem("Oatmeal with berries and nuts", 350, 10, 50, 12),
        FoodItem("Greek yogurt with honey and granola", 300, 20, 35, 8),
        FoodItem("Avocado toast with eggs", 400, 15, 35, 20),
    ),
    MealSlot.LUNCH: (
        FoodItem("Grilled chicken salad", 450, 35, 20, 25),
        FoodItem("Quinoa bowl with vegetables", 400, 15, 60, 12),
        FoodItem("Salmon with sweet potato", 500, 30, 45, 20),
    ),
    MealSlot.DINNER: (
        FoodItem("Grilled fish with vegetables", 450, 35, 20, 20),
        FoodItem("Turkey breast with brown rice", 500, 40, 45, 15),
        FoodItem("Tofu stir-fry with quinoa", 400, 20, 50, 12),
    ),
    MealSlot.SNACK: (
        FoodItem("Handful of almonds", 200, 6, 6, 16),
        FoodItem("Apple with peanut butter", 250, 5, 30, 12),
        FoodItem("Protein smoothie", 300, 20, 30, 8),
    ),
}


def catalog_entry(slot: MealSlot, tier: int) -> FoodItem:
    """Return the base catalog item for a slot and tier."""
    return FOOD_CATALOG[slot][tier]
