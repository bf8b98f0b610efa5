"""Health report assembly."""

import logging
from dataclasses import dataclass

from diet_planner.domain.profile import UserProfile
from diet_planner.domain.reports import HealthReport
from diet_planner.services.meal_plans import generate_meal_plan, select_tier
from diet_planner.services.metrics import (
    classify_bmi,
    compute_bmi,
    compute_daily_calories,
)

_logger = logging.getLogger(__name__)


@dataclass
class PlannerService:
    """Service computing metrics and a meal plan for a profile."""

    debug: bool = False

    def build_report(self, profile: UserProfile) -> HealthReport:
        """Compute BMI, daily calories and the matching meal plan."""
        bmi = compute_bmi(profile)
        daily_calories = compute_daily_calories(profile)
        tier = select_tier(daily_calories)
        report = HealthReport(
            profile=profile,
            bmi=bmi,
            bmi_category=classify_bmi(bmi),
            daily_calories=daily_calories,
            tier=tier,
            meal_plan=generate_meal_plan(daily_calories),
        )
        if self.debug:
            _logger.info(
                "Report computed: bmi=%.2f calories=%s tier=%s",
                bmi,
                daily_calories,
                tier,
            )
        return report
