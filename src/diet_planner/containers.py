"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_planner.adapters.console import Console, StdConsole
from diet_planner.cli.session import ConsoleSession
from diet_planner.config import Settings
from diet_planner.services.planner import PlannerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    console: Console
    planner_service: PlannerService
    session: ConsoleSession


def build_container(
    settings: Settings | None = None, console: Console | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_console = console or StdConsole()
    planner_service = PlannerService(debug=resolved_settings.debug)
    session = ConsoleSession(
        console=resolved_console,
        planner_service=planner_service,
    )
    return AppContainer(
        settings=resolved_settings,
        console=resolved_console,
        planner_service=planner_service,
        session=session,
    )
