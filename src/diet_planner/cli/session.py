"""Interactive console session: collect, compute, display, edit."""

from dataclasses import dataclass

from diet_planner.adapters.console import Console
from diet_planner.cli.formatting import (
    FAREWELL_TEXT,
    WELCOME_TEXT,
    format_activity_menu,
    format_current_profile,
    format_report,
)
from diet_planner.domain.profile import UserProfile
from diet_planner.services.planner import PlannerService
from diet_planner.services.profile_input import (
    FieldDefinition,
    ProfileField,
    field_by_number,
    parse_menu_choice,
)

UPDATE_PROMPT = "\nWould you like to update your information and recalculate? (Y/N): "
RESTART_PROMPT = "\nWould you like to start over with a new user? (Y/N): "
YES_NO_RETRY_PROMPT = "Please enter Y or N: "
MENU_PROMPT = (
    "\nEnter the number of the field you want to update (1-6, or 0 to cancel): "
)
MENU_RETRY_PROMPT = "Please enter a number between 0 and 6: "
UPDATED_TEXT = "Information updated successfully!"

_YES = {"y", "yes"}
_NO = {"n", "no"}


@dataclass
class ConsoleSession:
    """Drive the diet planner dialogue over a console."""

    console: Console
    planner_service: PlannerService

    def run(self) -> None:
        """Run sessions until the user declines to start over."""
        while True:
            self.console.write(WELCOME_TEXT)
            profile = self.collect_profile()
            self.show_report(profile)
            if self._ask_yes_no(UPDATE_PROMPT):
                profile = self.update_profile(profile)
                self.show_report(profile)
            if not self._ask_yes_no(RESTART_PROMPT):
                break
        self.console.write(FAREWELL_TEXT)

    def collect_profile(self) -> UserProfile:
        """Prompt for every profile field, re-prompting on invalid input."""
        self.console.write("Please enter your information:")
        values: dict[str, object] = {}
        for entry in ProfileField:
            definition = entry.value
            if entry is ProfileField.ACTIVITY_LEVEL:
                self.console.write(format_activity_menu())
            values[definition.attribute] = self._read_value(
                definition, definition.prompt
            )
        return UserProfile(**values)

    def show_report(self, profile: UserProfile) -> None:
        """Compute and print the report for a profile."""
        report = self.planner_service.build_report(profile)
        self.console.write(format_report(report))

    def update_profile(self, profile: UserProfile) -> UserProfile:
        """Let the user change one field and return the updated profile."""
        self.console.write(format_current_profile(profile))
        choice = parse_menu_choice(self.console.read_line(MENU_PROMPT))
        while choice is None:
            choice = parse_menu_choice(self.console.read_line(MENU_RETRY_PROMPT))
        entry = field_by_number(choice)
        if entry is None:
            return profile

        definition = entry.value
        if entry is ProfileField.ACTIVITY_LEVEL:
            self.console.write(format_activity_menu())
        value = self._read_value(definition, definition.edit_prompt)
        updated = profile.with_updates(**{definition.attribute: value})
        self.console.write(UPDATED_TEXT)
        return updated

    def _read_value(self, definition: FieldDefinition, prompt: str) -> object:
        value = definition.parser(self.console.read_line(prompt))
        while value is None:
            value = definition.parser(self.console.read_line(definition.retry_prompt))
        return value

    def _ask_yes_no(self, prompt: str) -> bool:
        answer = self.console.read_line(prompt).strip().lower()
        while answer not in _YES | _NO:
            answer = self.console.read_line(YES_NO_RETRY_PROMPT).strip().lower()
        return answer in _YES
