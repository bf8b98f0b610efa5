"""Domain models for the user's biometric profile."""

from dataclasses import dataclass, replace
from enum import Enum


class InvalidProfileError(ValueError):
    """Raised when a profile is built from values outside their domain."""


class Sex(str, Enum):
    """Biological sex used to pick the BMR formula."""

    MALE = "M"
    FEMALE = "F"

    @property
    def label(self) -> str:
        return "Male" if self is Sex.MALE else "Female"


@dataclass(frozen=True)
class ActivityLevel:
    """Declarative activity level definition."""

    level: int
    multiplier: float
    label: str
    description: str


ACTIVITY_LEVELS: dict[int, ActivityLevel] = {
    1: ActivityLevel(1, 1.2, "Sedentary", "little or no exercise"),
    2: ActivityLevel(2, 1.375, "Lightly active", "light exercise 1-3 days/week"),
    3: ActivityLevel(
        3, 1.55, "Moderately active", "moderate exercise 3-5 days/week"
    ),
    4: ActivityLevel(4, 1.725, "Very active", "hard exercise 6-7 days/week"),
    5: ActivityLevel(
        5, 1.9, "Extra active", "very hard exercise & physical job"
    ),
}

MIN_ACTIVITY_LEVEL = min(ACTIVITY_LEVELS)
MAX_ACTIVITY_LEVEL = max(ACTIVITY_LEVELS)

# Ranges keep the BMR positive and finite for every sex and activity level.
MIN_AGE, MAX_AGE = 1, 120
MIN_WEIGHT_KG, MAX_WEIGHT_KG = 30.0, 500.0
MIN_HEIGHT_CM, MAX_HEIGHT_CM = 100.0, 250.0


def activity_label(level: int) -> str:
    """Return the display label for an activity level."""
    definition = ACTIVITY_LEVELS.get(level)
    return definition.label if definition else "Unknown"


@dataclass(frozen=True)
class UserProfile:
    """Biometric data for a single user.

    Construction validates every field, so a profile that exists is always
    safe to feed into the metric calculations.
    """

    name: str
    age: int
    sex: Sex
    weight_kg: float
    height_cm: float
    activity_level: int

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise InvalidProfileError("name must not be blank")
        if not MIN_AGE <= self.age <= MAX_AGE:
            raise InvalidProfileError(
                f"age must be between {MIN_AGE} and {MAX_AGE}, got {self.age}"
            )
        if not isinstance(self.sex, Sex):
            raise InvalidProfileError(f"unknown sex: {self.sex!r}")
        if not MIN_WEIGHT_KG <= self.weight_kg <= MAX_WEIGHT_KG:
            raise InvalidProfileError(
                f"weight must be between {MIN_WEIGHT_KG:g} and {MAX_WEIGHT_KG:g}, "
                f"got {self.weight_kg}"
            )
        if not MIN_HEIGHT_CM <= self.height_cm <= MAX_HEIGHT_CM:
            raise InvalidProfileError(
                f"height must be between {MIN_HEIGHT_CM:g} and {MAX_HEIGHT_CM:g}, "
                f"got {self.height_cm}"
            )
        if self.activity_level not in ACTIVITY_LEVELS:
            raise InvalidProfileError(
                f"activity level must be between {MIN_ACTIVITY_LEVEL} and "
                f"{MAX_ACTIVITY_LEVEL}, got {self.activity_level}"
            )

    def with_updates(self, **changes: object) -> "UserProfile":
        """Return a new, re-validated profile with the given fields replaced."""
        return replace(self, **changes)
