"""Text rendering for the console session."""

from diet_planner.domain.meals import FoodItem, MealPlan
from diet_planner.domain.profile import ACTIVITY_LEVELS, UserProfile, activity_label
from diet_planner.domain.reports import HealthReport
from diet_planner.services.profile_input import ProfileField

RULE = "=" * 44

WELCOME_TEXT = "\n".join(
    [
        RULE,
        "       HEALTHY DIET PLANNER PROGRAM",
        RULE,
        "This program will help you plan a healthy diet",
        "based on your personal information and activity level.",
        "",
    ]
)

FAREWELL_TEXT = "\nThank you for using the Healthy Diet Planner. Stay healthy!"


def format_activity_menu() -> str:
    """Format the numbered list of activity levels."""
    lines = ["", "Activity Level:"]
    for level, definition in ACTIVITY_LEVELS.items():
        lines.append(f"{level}. {definition.label} ({definition.description})")
    return "\n".join(lines)


def format_food_item(item: FoodItem) -> str:
    """Format a single food item with its macros."""
    return "\n".join(
        [
            item.name,
            f"  Calories: {item.calories} kcal",
            f"  Protein: {item.protein_g:.1f} g",
            f"  Carbs: {item.carbs_g:.1f} g",
            f"  Fats: {item.fat_g:.1f} g",
        ]
    )


def format_meal_plan(plan: MealPlan) -> str:
    """Format all meals followed by the daily totals."""
    lines = ["", "RECOMMENDED MEAL PLAN:", "----------------------"]
    for slot, item in plan.items():
        lines.extend(["", f"{slot.value.upper()}:", format_food_item(item)])
    totals = plan.totals()
    lines.extend(
        [
            "",
            "TOTAL DAILY NUTRITION:",
            f"Calories: {totals.calories} kcal",
            f"Protein: {totals.protein_g:.1f} g",
            f"Carbohydrates: {totals.carbs_g:.1f} g",
            f"Fats: {totals.fat_g:.1f} g",
        ]
    )
    return "\n".join(lines)


def format_report(report: HealthReport) -> str:
    """Format the full health report for a profile."""
    profile = report.profile
    lines = [
        "",
        "",
        RULE,
        f"          HEALTHY DIET PLAN FOR {profile.name}",
        RULE,
        "",
        "YOUR STATS:",
        f"Age: {profile.age} years",
        f"Gender: {profile.sex.label}",
        f"Weight: {profile.weight_kg:.1f} kg",
        f"Height: {profile.height_cm:.1f} cm",
        f"Activity Level: {activity_label(profile.activity_level)}",
        "",
        f"BMI: {report.bmi:.1f} - {report.bmi_category.value}",
        "",
        f"Estimated Daily Calorie Needs: {report.daily_calories} kcal",
        format_meal_plan(report.meal_plan),
    ]
    return "\n".join(lines)


def format_current_profile(profile: UserProfile) -> str:
    """Format the numbered list of current values for the edit menu."""
    lines = ["", "CURRENT INFORMATION:"]
    for entry in ProfileField:
        definition = entry.value
        value = _format_field_value(profile, entry)
        lines.append(f"{definition.number}. {definition.label}: {value}")
    return "\n".join(lines)


def _format_field_value(profile: UserProfile, entry: ProfileField) -> str:
    if entry is ProfileField.SEX:
        return profile.sex.value
    if entry is ProfileField.WEIGHT:
        return f"{profile.weight_kg:.1f} kg"
    if entry is ProfileField.HEIGHT:
        return f"{profile.height_cm:.1f} cm"
    return str(getattr(profile, entry.value.attribute))
