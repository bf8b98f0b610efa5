"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from diet_planner.adapters.console import Console
from diet_planner.config import Settings
from diet_planner.containers import AppContainer, build_container
from diet_planner.domain.profile import Sex, UserProfile

PROFILE_ANSWERS = ["Alex", "30", "M", "80", "180", "3"]


@dataclass
class ScriptedConsole(Console):
    """Fake console that replays answers and records prompts and output."""

    answers: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    writes: list[str] = field(default_factory=list)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.writes.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.writes)


def make_profile(**overrides: object) -> UserProfile:
    values: dict[str, object] = {
        "name": "Alex",
        "age": 30,
        "sex": Sex.MALE,
        "weight_kg": 80.0,
        "height_cm": 180.0,
        "activity_level": 3,
    }
    values.update(overrides)
    return UserProfile(**values)


@pytest.fixture
def profile() -> UserProfile:
    return make_profile()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", debug=False)


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def container(settings: Settings, console: ScriptedConsole) -> AppContainer:
    return build_container(settings, console)
