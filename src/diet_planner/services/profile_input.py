"""Parsing of raw console input into profile field values."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, TypeVar

from pydantic import Field, StringConstraints, TypeAdapter, ValidationError

from diet_planner.domain.profile import (
    MAX_ACTIVITY_LEVEL,
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    MIN_ACTIVITY_LEVEL,
    MIN_AGE,
    MIN_HEIGHT_CM,
    MIN_WEIGHT_KG,
    Sex,
)

T = TypeVar("T")

_NAME = TypeAdapter(
    Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
)
_AGE = TypeAdapter(Annotated[int, Field(ge=MIN_AGE, le=MAX_AGE)])
_WEIGHT = TypeAdapter(
    Annotated[
        float, Field(ge=MIN_WEIGHT_KG, le=MAX_WEIGHT_KG, allow_inf_nan=False)
    ]
)
_HEIGHT = TypeAdapter(
    Annotated[
        float, Field(ge=MIN_HEIGHT_CM, le=MAX_HEIGHT_CM, allow_inf_nan=False)
    ]
)
_ACTIVITY_LEVEL = TypeAdapter(
    Annotated[int, Field(ge=MIN_ACTIVITY_LEVEL, le=MAX_ACTIVITY_LEVEL)]
)

_SEX_ALIASES = {
    "m": Sex.MALE,
    "male": Sex.MALE,
    "f": Sex.FEMALE,
    "female": Sex.FEMALE,
}


def _validate(adapter: TypeAdapter[T], text: str) -> T | None:
    try:
        return adapter.validate_python(text.strip())
    except ValidationError:
        return None


def parse_name(text: str) -> str | None:
    """Parse a non-blank name."""
    return _validate(_NAME, text)


def parse_age(text: str) -> int | None:
    """Parse a whole number of years between 1 and 120."""
    return _validate(_AGE, text)


def parse_sex(text: str) -> Sex | None:
    """Parse M/F (or male/female), ignoring case."""
    return _SEX_ALIASES.get(text.strip().lower())


def parse_weight(text: str) -> float | None:
    """Parse a weight in kilograms within the supported range."""
    return _validate(_WEIGHT, text)


def parse_height(text: str) -> float | None:
    """Parse a height in centimetres within the supported range."""
    return _validate(_HEIGHT, text)


def parse_activity_level(text: str) -> int | None:
    """Parse an activity level between 1 and 5."""
    return _validate(_ACTIVITY_LEVEL, text)


@dataclass(frozen=True)
class FieldDefinition:
    """Declarative definition of an editable profile field."""

    number: int
    attribute: str
    label: str
    prompt: str
    edit_prompt: str
    retry_prompt: str
    parser: Callable[[str], object | None]


class ProfileField(Enum):
    """Profile fields in collection order (single source of truth)."""

    NAME = FieldDefinition(
        number=1,
        attribute="name",
        label="Name",
        prompt="Name: ",
        edit_prompt="Enter new name: ",
        retry_prompt="Please enter a name: ",
        parser=parse_name,
    )
    AGE = FieldDefinition(
        number=2,
        attribute="age",
        label="Age",
        prompt="Age: ",
        edit_prompt="Enter new age: ",
        retry_prompt="Please enter a valid age (1-120): ",
        parser=parse_age,
    )
    SEX = FieldDefinition(
        number=3,
        attribute="sex",
        label="Gender",
        prompt="Gender (M/F): ",
        edit_prompt="Enter new gender (M/F): ",
        retry_prompt="Please enter M or F: ",
        parser=parse_sex,
    )
    WEIGHT = FieldDefinition(
        number=4,
        attribute="weight_kg",
        label="Weight",
        prompt="Weight (kg): ",
        edit_prompt="Enter new weight (kg): ",
        retry_prompt="Please enter a valid weight (30-500 kg): ",
        parser=parse_weight,
    )
    HEIGHT = FieldDefinition(
        number=5,
        attribute="height_cm",
        label="Height",
        prompt="Height (cm): ",
        edit_prompt="Enter new height (cm): ",
        retry_prompt="Please enter a valid height (100-250 cm): ",
        parser=parse_height,
    )
    ACTIVITY_LEVEL = FieldDefinition(
        number=6,
        attribute="activity_level",
        label="Activity Level",
        prompt="Enter your activity level (1-5): ",
        edit_prompt="Enter new activity level (1-5): ",
        retry_prompt="Please enter a number between 1 and 5: ",
        parser=parse_activity_level,
    )


def field_by_number(number: int) -> ProfileField | None:
    """Return the profile field shown under a menu number."""
    for entry in ProfileField:
        if entry.value.number == number:
            return entry
    return None


_MENU_CHOICE = TypeAdapter(Annotated[int, Field(ge=0, le=len(ProfileField))])


def parse_menu_choice(text: str) -> int | None:
    """Parse an edit menu choice, where 0 means cancel."""
    return _validate(_MENU_CHOICE, text)
